# core/hashing.py
from typing import Final

HASH_HEX_LENGTH: Final[int] = 64

_INT32_MASK: Final[int] = 0xFFFFFFFF
_INT32_SIGN: Final[int] = 0x80000000


def _to_int32(value: int) -> int:
    value &= _INT32_MASK
    return value - (1 << 32) if value & _INT32_SIGN else value


def _code_units(text: str):
    """Yield UTF-16 code units, so astral characters count as surrogate pairs."""
    data = text.encode("utf-16-le", errors="surrogatepass")
    for i in range(0, len(data), 2):
        yield data[i] | (data[i + 1] << 8)


def rolling_hash(text: str) -> str:
    """
    32-bit polynomial rolling hash (h = h * 31 + c) rendered as 64 hex chars.

    This is a display fingerprint only. It has 2**31 + 1 possible values, so
    distinct questions can and will collide; do not use it for integrity checks.
    """
    h = 0
    for unit in _code_units(text):
        h = _to_int32((h << 5) - h + unit)
    return format(abs(h), "x").zfill(HASH_HEX_LENGTH)
