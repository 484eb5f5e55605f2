"""Timestamp parsing and formatting."""

import logging
import math

from ytclip.errors import InvalidComponentError, InvalidFormatError

logger = logging.getLogger(__name__)

# Field names by field count, most significant first.
_COMPONENTS = {
    1: ("seconds",),
    2: ("minutes", "seconds"),
    3: ("hours", "minutes", "seconds"),
}
_WEIGHTS = {"hours": 3600.0, "minutes": 60.0, "seconds": 1.0}


def _parse_component(name: str, value: str) -> float:
    try:
        number = float(value)
    except ValueError:
        raise InvalidComponentError(name, value) from None
    if not math.isfinite(number):
        raise InvalidComponentError(name, value)
    return number


def parse_time(text: str) -> float:
    """Convert ``SS``, ``MM:SS`` or ``HH:MM:SS`` into seconds.

    Fields may be fractional and are not range-checked, so ``"90"`` and
    ``"75:00"`` are both accepted.

    Raises:
        InvalidFormatError: empty input or more than three fields.
        InvalidComponentError: a field is not a finite number.
    """
    if not text or not text.strip():
        raise InvalidFormatError(f"Invalid time format: {text!r}")

    parts = text.split(":")
    names = _COMPONENTS.get(len(parts))
    if names is None:
        raise InvalidFormatError(f"Invalid time format: {text!r}")

    seconds = sum(
        _parse_component(name, part) * _WEIGHTS[name]
        for name, part in zip(names, parts)
    )
    if seconds < 0:
        logger.warning("Time %r resolves to a negative offset (%ss)", text, seconds)
    return seconds


def format_seconds(seconds: float) -> str:
    """Render seconds as ``H:MM:SS.s`` (or ``M:SS.s`` under an hour)."""
    sign = "-" if seconds < 0 else ""
    seconds = abs(seconds)
    h = int(seconds // 3600)
    m = int((seconds % 3600) // 60)
    s = seconds % 60
    if h:
        return f"{sign}{h}:{m:02d}:{s:04.1f}"
    return f"{sign}{m}:{s:04.1f}"


def format_number(value: float) -> str:
    """Shortest decimal form of ``value``; integral values drop the ``.0``."""
    text = repr(float(value))
    if text.endswith(".0"):
        text = text[:-2]
    return text
