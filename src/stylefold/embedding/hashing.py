"""32-bit rolling string hash (JavaScript/Java ``hashCode`` semantics)."""

from __future__ import annotations

_MASK = 0xFFFFFFFF
_SIGN_BIT = 0x80000000


def utf16_units(text: str) -> list[int]:
    """Return the UTF-16 code units of *text* (surrogate pairs split)."""
    data = text.encode("utf-16-le", "surrogatepass")
    return [data[i] | (data[i + 1] << 8) for i in range(0, len(data), 2)]


def utf16_length(text: str) -> int:
    return len(text.encode("utf-16-le", "surrogatepass")) // 2


def string_hash(text: str) -> int:
    """Absolute value of the signed 32-bit ``h = h * 31 + unit`` hash.

    Arithmetic wraps at 32 bits as in JavaScript, so
    ``abs`` can return ``2**31`` for the single most-negative value.
    """
    h = 0
    for unit in utf16_units(text):
        h = (h * 31 + unit) & _MASK
    if h & _SIGN_BIT:
        h -= 1 << 32
    return abs(h)
