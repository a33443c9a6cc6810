"""Number rendering shared by size keys, descriptions, locations and exports."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

__all__ = ["format_number", "to_fixed"]

# Below this magnitude labels switch to exponent notation (1e-7).
_EXPONENT_THRESHOLD = 1e-6


def format_number(value: float) -> str:
    """Render a number the way drawing labels show it.

    Whole numbers print without a decimal part (``6``, not ``6.0``); other
    values use the shortest round-tripping digits (``5.5``). Positional
    notation is used down to one millionth, exponent notation below that
    with an unpadded exponent (``1e-7``).

    Examples:
        >>> format_number(6.0)
        '6'
        >>> format_number(5.5)
        '5.5'
        >>> format_number(0.00001)
        '0.00001'
        >>> format_number(1e-7)
        '1e-7'
    """
    value = float(value)
    if value.is_integer():
        return str(int(value))

    text = repr(value)
    if "e" not in text:
        return text
    if abs(value) >= _EXPONENT_THRESHOLD:
        return format(Decimal(text), "f")
    mantissa, exponent = text.split("e")
    return f"{mantissa}e{int(exponent)}"


def to_fixed(value: float, digits: int) -> str:
    """Render ``value`` with exactly ``digits`` decimals, rounding ties up.

    The exact binary value is rounded half away from zero, so quarter-inch
    ties go up (``2.25`` gives ``2.3``) while a value stored just below a
    tie, such as ``1.005``, stays below it.

    Examples:
        >>> to_fixed(2.25, 1)
        '2.3'
        >>> to_fixed(-3.25, 1)
        '-3.3'
        >>> to_fixed(2.5, 2)
        '2.50'
    """
    if digits < 0:
        raise ValueError(f"digits must be non-negative, got {digits}")
    value = float(value)
    if value == 0:
        value = 0.0  # no sign on negative zero
    quantum = Decimal(1).scaleb(-digits)
    rounded = Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP)
    return format(rounded, "f")
