"""
Common response models.

Defines the uniform result envelope returned by every data access
operation. success implies error is None; failure implies data is None
and error carries a human-readable message.

Dependencies: pydantic
System role: Common result structure across the data access boundary
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Uniform result envelope: callers branch on success before reading data."""

    data: T | None = Field(default=None, description="Operation result; None on failure")
    error: str | None = Field(default=None, description="Human-readable error message")
    success: bool = Field(description="True if the operation completed without error")

    @classmethod
    def ok(cls, data: T | None = None) -> "ApiResponse[T]":
        """Build a success envelope."""
        return cls(data=data, error=None, success=True)

    @classmethod
    def fail(cls, error: str) -> "ApiResponse[T]":
        """Build a failure envelope."""
        return cls(data=None, error=error, success=False)
