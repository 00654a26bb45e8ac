"""
Model driver factory.

Maps the configured provider name to a driver variant. Called once at
process start; the orchestrator only ever sees the LLMDriver interface.

Dependencies: sales_agent.configs, sales_agent.core.llm
System role: Driver selection at the process boundary
"""

import logging

from sales_agent.configs import get_settings
from sales_agent.configs.llm import LLMSettings
from sales_agent.core.llm.base import LLMDriver

logger = logging.getLogger(__name__)

DEFAULT_PROVIDER = "gemini"
SUPPORTED_PROVIDERS = ("gemini", "bedrock")


def get_provider_name(settings: LLMSettings | None = None) -> str:
    """
    Normalized provider name.

    Args:
        settings: LLM settings (defaults to application settings)

    Returns:
        str: Lowercase provider name, "gemini" when unset
    """
    settings = settings or get_settings().llm
    return (settings.provider or DEFAULT_PROVIDER).strip().lower()


def create_llm_driver(settings: LLMSettings | None = None) -> LLMDriver:
    """
    Create the LLM driver selected by the provider setting.

    Unknown providers log a warning and fall back to Gemini.

    Args:
        settings: LLM settings (defaults to application settings)

    Returns:
        LLMDriver: Configured driver

    Raises:
        ProviderConfigError: If the selected provider lacks credentials
    """
    settings = settings or get_settings().llm
    provider = get_provider_name(settings)

    if provider == "bedrock":
        from sales_agent.core.llm.bedrock_driver import BedrockDriver

        return BedrockDriver(settings)

    if provider != DEFAULT_PROVIDER:
        logger.warning(f"Unknown LLM provider: {provider}, falling back to {DEFAULT_PROVIDER}")

    from sales_agent.core.llm.gemini_driver import GeminiDriver

    return GeminiDriver(settings)
