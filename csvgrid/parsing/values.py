"""
Typed field parsing with zero-value defaults.

Every field is stored as a string. These helpers convert on demand and never
raise: text that is not a valid number or boolean reads as the type's zero
value (0, 0.0, False). The same zero values are returned by Row and Table for
out-of-range reads, so callers can probe sparse or ragged tables freely.

Boolean rule: after stripping whitespace, "1" and "true" (any letter case)
are True. Everything else, including "yes", "on" and "2", is False.
"""

import math

ZERO_VALUES = {
    "int": 0,
    "float": 0.0,
    "bool": False,
    "string": "",
}

TRUE_TOKENS = frozenset({"1", "true"})


def parse_int(text: str) -> int:
    """
    Parse an integer, falling back to 0.

    Decimal and exponent forms are truncated toward zero ("3.7" -> 3,
    "-2.5" -> -2, "1e3" -> 1000). NaN and infinity read as 0.
    """
    text = text.strip()
    try:
        return int(text)
    except ValueError:
        pass
    try:
        value = float(text)
    except ValueError:
        return 0
    if not math.isfinite(value):
        return 0
    return int(value)


def parse_float(text: str) -> float:
    """Parse a float, falling back to 0.0."""
    try:
        return float(text.strip())
    except ValueError:
        return 0.0


def parse_bool(text: str) -> bool:
    """Parse a boolean: "1" or "true" in any case is True, anything else False."""
    return text.strip().lower() in TRUE_TOKENS


def format_int(value: int) -> str:
    return str(int(value))


def format_float(value: float) -> str:
    # repr gives the shortest text that reads back to the same float
    return repr(float(value))


def format_bool(value: bool) -> str:
    return "1" if value else "0"


def format_string(value) -> str:
    return str(value)
