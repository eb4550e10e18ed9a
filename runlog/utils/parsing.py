"""Lenient-about-format, strict-about-content number parsing for chat input."""

import re

DECIMAL_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)")
INTEGER_PATTERN = re.compile(r"[+-]?\d+")


def parse_decimal(text: str) -> float | None:
    """Parse a real number, accepting a comma as the decimal separator.

    Returns None unless the whole (stripped) text is a number, so "5km",
    "nan" and "" are all rejected.
    """
    candidate = text.strip().replace(",", ".", 1)
    if not DECIMAL_PATTERN.fullmatch(candidate):
        return None
    return float(candidate)


def parse_integer(text: str) -> int | None:
    """Parse a whole number; returns None for anything else (including "52.5")."""
    candidate = text.strip()
    if not INTEGER_PATTERN.fullmatch(candidate):
        return None
    return int(candidate)
