"""Conversions between 32-bit integers and their text forms."""

from __future__ import annotations

_DIGITS = "0123456789ABCDEF"
_SUPPORTED_BASES = (2, 8, 10, 16)
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


def itoa(value: int, base: int = 10) -> str:
    """Render a 32-bit ``value`` in base 2, 8, 10 or 16 (upper-case hex digits).

    Negative numbers get a leading ``-`` followed by the magnitude.
    """
    if base not in _SUPPORTED_BASES:
        raise ValueError(f"unsupported base {base}; use one of {_SUPPORTED_BASES}")
    if not _INT32_MIN <= value <= _INT32_MAX:
        raise OverflowError(f"{value} does not fit in a 32-bit int")
    sign = "-" if value < 0 else ""
    magnitude = abs(value)
    if magnitude == 0:
        return "0"
    digits = []
    while magnitude:
        magnitude, digit = divmod(magnitude, base)
        digits.append(_DIGITS[digit])
    return sign + "".join(reversed(digits))


def atoi(text: str) -> int:
    """Read a decimal number, counting every non-digit character as a 0 digit.

    A leading ``-`` makes the result negative, so ``"abcd3456"`` reads as 3456
    and ``"-001200"`` as -1200.
    """
    num = 0
    for ch in text:
        num = num * 10 + (int(ch) if "0" <= ch <= "9" else 0)
    return -num if text.startswith("-") else num