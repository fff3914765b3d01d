"""Field-level validation for inbound echo requests."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ..schemas.echo import EchoRequest

MAX_MESSAGE_LENGTH = 1000
EMPTY_MESSAGE_REASON = "Message cannot be empty"

# Characters trimmed before the blank check: U+0000 through U+0020.
_TRIM_CHARS = "".join(chr(code) for code in range(0x21))


@dataclass(frozen=True)
class FieldViolation:
    """A single failed constraint on one request field."""

    field: str
    reason: str


@dataclass(frozen=True)
class ValidationResult:
    """Either a validated value or the violations that rejected it."""

    value: Optional[str] = None
    violations: List[FieldViolation] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.violations

    @property
    def errors(self) -> Dict[str, str]:
        """Map each field to its first recorded reason, in detection order."""
        errors: Dict[str, str] = {}
        for violation in self.violations:
            errors.setdefault(violation.field, violation.reason)
        return errors

    @classmethod
    def success(cls, value: str) -> "ValidationResult":
        return cls(value=value)

    @classmethod
    def failure(cls, violations: List[FieldViolation]) -> "ValidationResult":
        return cls(violations=list(violations))


def max_length_reason(max_length: int) -> str:
    return f"Message cannot exceed {max_length} characters"


def is_blank(value: Optional[str]) -> bool:
    """True for None or text made only of characters at or below U+0020."""
    return value is None or not value.strip(_TRIM_CHARS)


def message_length(value: str) -> int:
    """Length in UTF-16 code units, so astral characters count twice."""
    return len(value.encode("utf-16-le")) // 2


def check_message(value: Optional[str], max_length: int = MAX_MESSAGE_LENGTH) -> List[FieldViolation]:
    """
    Apply the message rules independently and collect every violation.

    Args:
        value: Raw message, possibly None
        max_length: Upper bound on UTF-16 length

    Returns:
        List of violations, empty when the message is acceptable
    """
    violations: List[FieldViolation] = []

    if is_blank(value):
        violations.append(FieldViolation("message", EMPTY_MESSAGE_REASON))
    if value is not None and message_length(value) > max_length:
        violations.append(FieldViolation("message", max_length_reason(max_length)))

    return violations


def validate_echo_request(request: EchoRequest, max_length: int = MAX_MESSAGE_LENGTH) -> ValidationResult:
    """Validate an echo request, returning the message unchanged on success."""
    violations = check_message(request.message, max_length=max_length)
    if violations:
        return ValidationResult.failure(violations)
    return ValidationResult.success(request.message)
