"""Integer vector helpers."""

import math


def _trunc_div(value: int, divisor: int) -> int:
    quotient = abs(value) // divisor
    return -quotient if value < 0 else quotient


def normalize(x: int, y: int) -> tuple[int, int]:
    """Divide an integer vector by its truncated length, truncating toward zero."""
    length = math.isqrt(x * x + y * y)
    if length > 0:
        return _trunc_div(x, length), _trunc_div(y, length)
    return x, y