"""
Common response models.

List and detail endpoints wrap their payload in SuccessResponse.

Dependencies: pydantic
System role: Common API response structures
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class SuccessResponse(BaseModel, Generic[T]):
    """Generic success response wrapper."""

    success: bool = True
    data: T
    count: int | None = Field(default=None, description="Number of items for list payloads")
    message: str | None = None

