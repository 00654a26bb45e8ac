"""
Google Gemini model driver.

Dependencies: langchain_google_genai, sales_agent.configs
System role: Gemini chat/embedding backend
"""

import logging

from langchain_google_genai import ChatGoogleGenerativeAI, GoogleGenerativeAIEmbeddings

from sales_agent.configs.llm import LLMSettings
from sales_agent.core.exceptions import ProviderConfigError
from sales_agent.core.llm.langchain_driver import LangChainDriver

logger = logging.getLogger(__name__)


class GeminiDriver(LangChainDriver):
    """Chat and embeddings through Google Generative AI."""

    provider_name = "gemini"

    def __init__(self, settings: LLMSettings) -> None:
        """
        Initialize Gemini chat and embedding clients.

        Args:
            settings: LLM settings carrying the API key and model IDs

        Raises:
            ProviderConfigError: If no Google API key is configured
        """
        if not settings.google_api_key:
            raise ProviderConfigError(
                "GOOGLE_API_KEY environment variable is required",
                provider=self.provider_name,
            )

        chat_model = ChatGoogleGenerativeAI(
            model=settings.gemini_model,
            temperature=settings.temperature,
            max_output_tokens=settings.max_tokens,
            google_api_key=settings.google_api_key,
        )
        embeddings = GoogleGenerativeAIEmbeddings(
            model=settings.gemini_embedding_model,
            google_api_key=settings.google_api_key,
        )
        super().__init__(chat_model=chat_model, embeddings=embeddings)
        logger.info(f"Initialized Gemini driver with {settings.gemini_model}")
