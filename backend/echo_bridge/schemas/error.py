"""Uniform error payload returned for every failed request."""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """
    Error envelope shared by validation failures and internal faults.

    Attributes:
        error: Short category, "Validation failed" or "Internal server error"
        message: Human-readable detail, may be null for faults without text
        status: HTTP status code mirrored in the body
        timestamp: Time the error payload was built
    """
    error: str
    message: Optional[str] = None
    status: int
    timestamp: datetime = Field(default_factory=datetime.now)
