"""Builds echo responses for already validated messages."""
from datetime import datetime

from ..schemas.echo import EchoResponse

ECHO_PREFIX = "Echo: "


def build_echo_response(message: str) -> EchoResponse:
    # Timestamp is read here, at construction, not at request receipt.
    return EchoResponse(echo=f"{ECHO_PREFIX}{message}", timestamp=datetime.now())
