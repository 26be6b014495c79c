import math


def clamp(value: int, low: int, high: int) -> int:
    """Limit value to the inclusive range low..high."""

    if value < low:
        return low
    if value > high:
        return high
    return value


def div(a: int, b: int) -> int:
    """Integer division truncating toward zero (`-7 / 10 == 0`)."""

    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        return -quotient
    return quotient


def mod(a: int, b: int) -> int:
    """Remainder paired with `div`, carrying the sign of the dividend."""

    return a - b * div(a, b)


def mult(a: float, b: float) -> float:
    return a * b


def radians(degrees: float) -> float:
    return degrees * (math.pi / 180)
