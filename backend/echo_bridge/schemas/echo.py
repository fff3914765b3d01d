"""Request and response models for the echo endpoint."""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer

ECHO_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class EchoRequest(BaseModel):
    """
    Inbound echo payload.

    ``message`` is optional at parse time so that absent or null values reach
    the validator and get the same 400 payload as blank ones.
    """
    message: Optional[str] = Field(
        default=None,
        description="Text to echo back, non-blank and within the length limit",
    )


class EchoResponse(BaseModel):
    """Echoed message paired with the time the response was built."""

    model_config = ConfigDict(frozen=True)

    echo: str
    timestamp: datetime

    @field_serializer("timestamp")
    def _format_timestamp(self, value: datetime) -> str:
        return value.strftime(ECHO_TIMESTAMP_FORMAT)
