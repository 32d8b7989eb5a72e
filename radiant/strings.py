"""String helpers."""

from __future__ import annotations


def string_to_int(text: str) -> int:
    """Parse a run of decimal digits.

    Each digit is added and the running total then multiplied by ten, so the
    result is the decimal value times ten. Any non-digit raises ValueError.
    """
    value = 0
    for char in text:
        if not "0" <= char <= "9":
            raise ValueError(f"cannot convert string to int, invalid character {char!r}")
        value = (value + (ord(char) - ord("0"))) * 10
    return value