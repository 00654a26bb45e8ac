"""
Exception hierarchy for the sales agent application.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class SalesAgentException(Exception):
    """Base exception for all sales agent application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging

        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ContextUnavailable(SalesAgentException):
    """Raised when session summary or recent messages cannot be read."""

    def __init__(
        self,
        message: str = "Failed to gather conversation context",
        session_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if session_id:
            details["session_id"] = session_id
        super().__init__(message, details)


class GuidelineSelectionFailed(SalesAgentException):
    """Raised when the guideline store cannot be queried for a turn."""

    def __init__(
        self,
        message: str = "Failed to get applicable guidelines",
        session_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if session_id:
            details["session_id"] = session_id
        super().__init__(message, details)


class ProviderConfigError(SalesAgentException):
    """Raised at driver construction when provider credentials are missing."""

    def __init__(
        self,
        message: str,
        provider: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if provider:
            details["provider"] = provider
        super().__init__(message, details)


class ProviderCallError(SalesAgentException):
    """Raised when an upstream model call fails or returns no usable content."""

    def __init__(
        self,
        message: str,
        provider: str | None = None,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize provider call error.

        Args:
            message: Upstream error message
            provider: Provider name (gemini, bedrock)
            status_code: Upstream HTTP status when the client exposes one
            details: Additional context
        """
        self.provider = provider
        self.status_code = status_code
        details = details or {}
        if provider:
            details["provider"] = provider
        if status_code is not None:
            details["status_code"] = status_code
        super().__init__(message, details)


class SummaryGenerationFailed(SalesAgentException):
    """Raised inside the summarizer when the model call fails; always recovered."""

    pass


class SalesPipelineError(SalesAgentException):
    """Single wrapped error surfaced by the turn pipeline to its caller."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(f"Sales agent pipeline failed: {message}", details)
