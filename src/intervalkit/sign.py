"""
Sign

Three-valued sign used to flip or collapse quantities without
multiplying by a float.
"""

import numbers
from enum import Enum


class Sign(Enum):
    """Sign of a quantity: -1, 0 or +1."""
    NEGATIVE = -1
    NONE = 0
    POSITIVE = 1

    @classmethod
    def of(cls, value: float) -> 'Sign':
        """Sign of a float; zero and NaN give NONE."""
        if value > 0:
            return cls.POSITIVE
        if value < 0:
            return cls.NEGATIVE
        return cls.NONE

    def negated(self) -> 'Sign':
        return Sign(-self.value)

    def __neg__(self) -> 'Sign':
        return self.negated()

    def times(self, other):
        """
        Apply this sign to another sign, a float or an interval.

        Intervals handle the product themselves via Interval.times.
        """
        return self * other

    def __mul__(self, other):
        if isinstance(other, Sign):
            return Sign(self.value * other.value)
        if isinstance(other, numbers.Real):
            if self is Sign.NONE:
                return 0.0
            return float(other) if self is Sign.POSITIVE else -float(other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, numbers.Real):
            return self.__mul__(other)
        return NotImplemented
