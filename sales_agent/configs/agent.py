"""
Sales agent pipeline settings.

Dependencies: pydantic, pydantic_settings
System role: Turn pipeline tuning knobs
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from sales_agent.configs.base import BaseSettings


class AgentSettings(BaseSettings):
    """Guideline selection and context window sizes."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="AGENT_",
        case_sensitive=False,
        extra="ignore",
    )

    hard_count: int = Field(default=2, ge=0, description="Max hard guidelines per turn")
    soft_count: int = Field(default=2, ge=0, description="Max soft guidelines per turn")
    context_window: int = Field(default=4, gt=0, description="Recent messages read as turn context")
    summary_window: int = Field(default=10, gt=0, description="Recent messages fed to the summarizer")
