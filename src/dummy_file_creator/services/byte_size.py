"""
Human-readable byte size parsing and formatting.

Sizes use binary units: 1 KB is 1024 bytes, 1 MB is 1024 KB, and so on
up to PB.
"""

from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_UP, Decimal, localcontext

from dummy_file_creator.core.exceptions import InvalidSizeError

SIZE_SUFFIXES: tuple[str, ...] = ("B", "KB", "MB", "GB", "TB", "PB")

# Number part may carry thousands separators and a decimal point.
_SIZE_PATTERN = re.compile(
    r"(?P<value>[\d,.]+)\s*(?P<unit>B|KB|MB|GB|TB|PB)",
    re.IGNORECASE | re.DOTALL,
)

_NUMBER_PATTERN = re.compile(r"(?:\d[\d,]*)?(?:\.\d*)?")


def _parse_number(text: str) -> float | None:
    """Parse an invariant-culture decimal number, or return None."""
    if not _NUMBER_PATTERN.fullmatch(text) or not any(c.isdigit() for c in text):
        return None
    return float(text.replace(",", ""))


def parse_size(text: str) -> tuple[int, bool]:
    """
    Parse a size string such as ``"10MB"`` or ``"1.5 gb"`` into bytes.

    The result is truncated to a whole number of bytes. Malformed input is
    reported through the flag, never raised.

    Args:
        text: Size text made of a decimal number and a unit suffix

    Returns:
        Tuple of (byte_count, ok). byte_count is 0 when ok is False.
    """
    if not isinstance(text, str):
        return 0, False

    match = _SIZE_PATTERN.search(text)
    if match is None:
        return 0, False

    number = _parse_number(match.group("value"))
    if number is None:
        return 0, False

    unit_index = SIZE_SUFFIXES.index(match.group("unit").upper())
    byte_count = number * 1024**unit_index
    # Numbers too long for a float parse to inf
    if not math.isfinite(byte_count):
        return 0, False
    return int(byte_count), True


def parse_size_or_raise(text: str | int, parameter: str) -> int:
    """
    Resolve a size argument to a byte count.

    Args:
        text: Size text, or an already-parsed byte count
        parameter: Argument name reported when the value is rejected

    Returns:
        Byte count (never negative)

    Raises:
        InvalidSizeError: If the text does not parse or the count is negative
    """
    if isinstance(text, bool):
        raise InvalidSizeError(parameter, text)

    if isinstance(text, int):
        if text < 0:
            raise InvalidSizeError(parameter, text, reason="must not be negative")
        return text

    value, ok = parse_size(text)
    if not ok:
        raise InvalidSizeError(parameter, text)
    return value


def format_size(value: int, decimal_places: int = 1) -> str:
    """
    Format a byte count using the largest unit that keeps it under 1000.

    Examples:
        >>> format_size(102_400)
        '100.0 KB'
        >>> format_size(1_500)
        '1.5 KB'
        >>> format_size(1_048_000)
        '1.0 MB'
        >>> format_size(1_280)
        '1.3 KB'
    """
    if decimal_places < 0:
        raise ValueError(f"decimal_places must not be negative, got {decimal_places}")

    if value < 0:
        return "-" + format_size(-value, decimal_places)
    if value == 0:
        return f"{0:,.{decimal_places}f} {SIZE_SUFFIXES[0]}"

    last = len(SIZE_SUFFIXES) - 1
    magnitude = min((int(value).bit_length() - 1) // 10, last)
    quantum = Decimal(1).scaleb(-decimal_places)

    # Midpoints round away from zero; precision covers values past PB
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, len(str(value)) + decimal_places + 2)
        adjusted = Decimal(value) / (1 << (magnitude * 10))
        rounded = adjusted.quantize(quantum, rounding=ROUND_HALF_UP)

        if rounded >= 1000 and magnitude < last:
            magnitude += 1
            rounded = (adjusted / 1024).quantize(quantum, rounding=ROUND_HALF_UP)

    return f"{rounded:,.{decimal_places}f} {SIZE_SUFFIXES[magnitude]}"
