"""
AWS Bedrock model driver.

Dependencies: langchain_aws, boto3, sales_agent.configs
System role: Bedrock chat/embedding backend
"""

import logging

import boto3
from langchain_aws import BedrockEmbeddings, ChatBedrockConverse

from sales_agent.configs.llm import LLMSettings
from sales_agent.core.exceptions import ProviderConfigError
from sales_agent.core.llm.langchain_driver import LangChainDriver

logger = logging.getLogger(__name__)


class BedrockDriver(LangChainDriver):
    """Chat (Converse API) and embeddings through AWS Bedrock."""

    provider_name = "bedrock"

    def __init__(self, settings: LLMSettings) -> None:
        """
        Initialize Bedrock chat and embedding clients.

        Args:
            settings: LLM settings carrying region and model IDs

        Raises:
            ProviderConfigError: If no region is configured or boto3 cannot
                resolve AWS credentials
        """
        if not settings.aws_region:
            raise ProviderConfigError(
                "AWS_REGION environment variable is required",
                provider=self.provider_name,
            )

        session = boto3.Session(region_name=settings.aws_region)
        if session.get_credentials() is None:
            raise ProviderConfigError(
                "AWS credentials are required for Bedrock",
                provider=self.provider_name,
            )

        chat_model = ChatBedrockConverse(
            model=settings.bedrock_model,
            region_name=settings.aws_region,
            temperature=settings.temperature,
            max_tokens=settings.max_tokens,
        )
        embeddings = BedrockEmbeddings(
            model_id=settings.bedrock_embedding_model,
            region_name=settings.aws_region,
        )
        super().__init__(chat_model=chat_model, embeddings=embeddings)
        logger.info(f"Initialized Bedrock driver with {settings.bedrock_model}")
