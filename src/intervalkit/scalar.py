"""
Scalar Helpers

Tolerant comparisons of floats against zero, and the scalar side of
mixed scalar/interval operations.
"""

from typing import Union

from .bounds.interval import Interval
from .sign import Sign

DEFAULT_PRECISION = 1e-12


def is_zero(value: float, precision: float = DEFAULT_PRECISION) -> bool:
    return -precision <= value <= precision


def is_not_zero(value: float, precision: float = DEFAULT_PRECISION) -> bool:
    return not is_zero(value, precision)


def is_less_than_zero(value: float, precision: float = DEFAULT_PRECISION) -> bool:
    return value < -precision


def is_less_than_or_equal_to_zero(value: float, precision: float = DEFAULT_PRECISION) -> bool:
    return value <= precision


def is_greater_than_zero(value: float, precision: float = DEFAULT_PRECISION) -> bool:
    return value > precision


def is_greater_than_or_equal_to_zero(value: float, precision: float = DEFAULT_PRECISION) -> bool:
    return value >= -precision


def hull(value: float, other: Union[Interval, float]) -> Interval:
    """Smallest interval containing value and other (a float or an interval)."""
    return Interval(value).hull(other)


def times_sign(value: float, sign: Sign) -> float:
    """value with the given sign applied; Sign.NONE gives 0.0."""
    return sign * value
