"""
Language model provider settings.

Selects the chat/embedding backend and carries its credentials and
generation parameters.

Dependencies: pydantic, pydantic_settings
System role: LLM driver configuration
"""

from pydantic import AliasChoices, Field
from pydantic_settings import SettingsConfigDict

from sales_agent.configs.base import BaseSettings


class LLMSettings(BaseSettings):
    """Chat model provider configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="LLM_",
        case_sensitive=False,
        extra="ignore",
    )

    provider: str = Field(
        default="gemini",
        description="LLM backend: 'gemini' (Google GenAI) or 'bedrock' (AWS Bedrock)",
    )
    temperature: float = Field(default=0.7, description="Sampling temperature")
    max_tokens: int = Field(default=500, description="Maximum tokens per completion")

    # Google Gemini
    google_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("GOOGLE_API_KEY", "LLM_GOOGLE_API_KEY"),
        description="Google Generative AI API key",
    )
    gemini_model: str = Field(default="gemini-2.5-flash", description="Gemini chat model ID")
    gemini_embedding_model: str = Field(
        default="models/gemini-embedding-001",
        description="Gemini embedding model ID",
    )

    # AWS Bedrock
    aws_region: str | None = Field(
        default=None,
        validation_alias=AliasChoices("LLM_AWS_REGION", "AWS_REGION", "AWS_DEFAULT_REGION"),
        description="AWS region for Bedrock runtime",
    )
    bedrock_model: str = Field(
        default="anthropic.claude-3-5-haiku-20241022-v1:0",
        description="Bedrock chat model ID",
    )
    bedrock_embedding_model: str = Field(
        default="amazon.titan-embed-text-v2:0",
        description="Bedrock embedding model ID",
    )
