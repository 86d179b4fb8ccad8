"""Field validators for ledger inputs."""

from __future__ import annotations

from ledger.errors import ParameterViolation

DESCRIPTION_MAX_BYTES = 100
PRIORITY_MIN = 1
PRIORITY_MAX = 3


def validate_description(text: str, max_bytes: int = DESCRIPTION_MAX_BYTES) -> str:
    """Return ``text`` unchanged if it is a non-empty ASCII string within ``max_bytes``."""
    if not isinstance(text, str):
        raise ParameterViolation("Description must be text.")
    if not text:
        raise ParameterViolation("Description must not be empty.")
    if not text.isascii():
        raise ParameterViolation("Description must be ASCII.")
    if len(text.encode("ascii")) > max_bytes:
        raise ParameterViolation(f"Description exceeds {max_bytes} bytes.")
    return text


def validate_completed(flag: bool) -> bool:
    if not isinstance(flag, bool):
        raise ParameterViolation("Completion flag must be a boolean.")
    return flag


def validate_level(level: int, lowest: int = PRIORITY_MIN, highest: int = PRIORITY_MAX) -> int:
    """Priority levels are integers in the closed range [lowest, highest]."""
    if isinstance(level, bool) or not isinstance(level, int):
        raise ParameterViolation("Priority level must be an integer.")
    if level < lowest or level > highest:
        raise ParameterViolation(f"Priority level must be between {lowest} and {highest}.")
    return level


def validate_offset(offset: int) -> int:
    """Deadline offsets are strictly positive block counts."""
    if isinstance(offset, bool) or not isinstance(offset, int):
        raise ParameterViolation("Deadline offset must be an integer.")
    if offset <= 0:
        raise ParameterViolation("Deadline offset must be greater than zero.")
    return offset
