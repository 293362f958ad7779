"""
Interval Arithmetic

Closed intervals [lower, upper] of double-precision reals, used to
propagate numeric uncertainty through geometric computations.

Every operation returns an interval guaranteed to contain all values
obtainable by applying the scalar operation to any points of its
operands (standard double rounding, no directed rounding).

Sentinels share the plain two-bound representation:
- Empty: [inf, -inf]; any interval with lower > upper behaves as empty
- Whole: [-inf, inf]

Numeric edge cases never raise. They degrade to Empty, Whole or NaN:
- Division by zero, or by an interval straddling zero, gives Whole
- sqrt/log/asin/acos clamp their argument to the valid domain; an
  argument entirely outside the domain gives Empty
- Every operation on Empty gives Empty
"""

import logging
import math
import numbers
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple, Union

import numpy as np

from ..core.canonical_json import canonical_hash, decode_float, encode_float
from ..sampling import default_generator
from ..sign import Sign

logger = logging.getLogger(__name__)

INF = float('inf')
HALF_PI = np.pi / 2
TWO_PI = 2 * np.pi

Number = Union[int, float]


def _product(a: float, b: float) -> float:
    """Bound product where 0 * inf is taken as 0."""
    if a == 0.0 or b == 0.0:
        return 0.0
    return a * b


def _hits(lo: float, hi: float, offset: float, period: float) -> bool:
    """True if some offset + k*period lies in [lo, hi]."""
    k = math.ceil((lo - offset) / period)
    return offset + k * period <= hi


@dataclass(frozen=True, eq=False)
class Interval:
    """
    A closed interval [lower_bound, upper_bound].

    Interval(lower, upper) takes the bounds as given (no validation or
    reordering); Interval(value) builds the singleton [value, value].
    Instances are immutable; every operation returns a new interval.
    """
    lower_bound: float
    upper_bound: Optional[float] = None

    def __post_init__(self):
        lower = float(self.lower_bound)
        upper = lower if self.upper_bound is None else float(self.upper_bound)
        object.__setattr__(self, 'lower_bound', lower)
        object.__setattr__(self, 'upper_bound', upper)

    @classmethod
    def singleton(cls, value: float) -> 'Interval':
        """Create a singleton interval [value, value]."""
        return cls(value, value)

    @classmethod
    def empty(cls) -> 'Interval':
        return cls.EMPTY

    @classmethod
    def whole(cls) -> 'Interval':
        return cls.WHOLE

    @classmethod
    def unit(cls) -> 'Interval':
        return cls.UNIT

    @classmethod
    def zero(cls) -> 'Interval':
        return cls.ZERO

    @staticmethod
    def _coerce(value: Any) -> Optional['Interval']:
        if isinstance(value, Interval):
            return value
        if isinstance(value, numbers.Real):
            return Interval(value)
        return None

    def _operand(self, value: Any) -> 'Interval':
        other = self._coerce(value)
        if other is None:
            raise TypeError(f"unsupported operand type for Interval: {type(value).__name__}")
        return other

    # Properties

    @property
    def bounds(self) -> 'Interval':
        """The interval itself, viewed as its own bounding range."""
        return self

    @property
    def is_empty(self) -> bool:
        return self.lower_bound > self.upper_bound

    @property
    def is_whole(self) -> bool:
        return self.lower_bound == -INF and self.upper_bound == INF

    @property
    def is_singleton(self) -> bool:
        return self.lower_bound == self.upper_bound

    @property
    def width(self) -> float:
        """upper - lower; inf for Whole and negative for Empty."""
        return self.upper_bound - self.lower_bound

    @property
    def median(self) -> float:
        """
        Midpoint of the interval.

        Whole has median 0.0, a half-unbounded interval has its infinite
        bound as median, and Empty has a NaN median.
        """
        lo, hi = self.lower_bound, self.upper_bound
        if self.is_empty:
            return float('nan')
        if lo == -INF and hi == INF:
            return 0.0
        if lo == -INF or hi == INF:
            return lo if lo == -INF else hi
        if math.isinf(self.width):
            # Finite bounds whose difference overflows
            return 0.5 * lo + 0.5 * hi
        return self.interpolated(0.5)

    # Sampling and interpolation

    def interpolated(self, t: float) -> float:
        """
        Value at parameter t, lower + t * width.

        t = 0 gives exactly the lower bound and t = 1 exactly the upper
        bound; values of t outside [0, 1] extrapolate linearly.
        """
        if t == 0.0:
            return self.lower_bound
        if t == 1.0:
            return self.upper_bound
        value = self.lower_bound + t * self.width
        if 0.0 < t < 1.0:
            value = min(max(value, self.lower_bound), self.upper_bound)
        return value

    def random_value(self, generator: Optional[np.random.Generator] = None) -> float:
        """
        Value sampled uniformly from the interval.

        Args:
            generator: Source with a random() method returning a float in
                [0, 1); defaults to the calling thread's generator

        Returns:
            A value in [lower, upper], or NaN for Empty and unbounded
            intervals
        """
        if self.is_singleton:
            return self.lower_bound
        if self.is_empty or math.isinf(self.width):
            return float('nan')
        if generator is None:
            generator = default_generator()
        return self.interpolated(float(generator.random()))

    def bisected(self) -> Tuple['Interval', 'Interval']:
        """Split at the median into (lower half, upper half)."""
        if self.is_empty:
            return Interval.EMPTY, Interval.EMPTY
        mid = self.median
        return Interval(self.lower_bound, mid), Interval(mid, self.upper_bound)

    # Set operations

    def hull(self, other: Union['Interval', Number]) -> 'Interval':
        """Smallest interval containing both this interval and other."""
        other = self._operand(other)
        if other.is_empty:
            return Interval.EMPTY if self.is_empty else self
        if self.is_empty:
            return other
        return Interval(
            min(self.lower_bound, other.lower_bound),
            max(self.upper_bound, other.upper_bound)
        )

    def intersection(self, other: 'Interval') -> 'Interval':
        lo = max(self.lower_bound, other.lower_bound)
        hi = min(self.upper_bound, other.upper_bound)
        if lo > hi:
            return Interval.EMPTY
        return Interval(lo, hi)

    def _tolerant_bounds(self, tolerance: float) -> Tuple[float, float]:
        # Positive tolerance loosens, negative tolerance tightens
        return self.lower_bound - tolerance, self.upper_bound + tolerance

    def contains(self, other: Union['Interval', Number], tolerance: float = 0.0) -> bool:
        """
        Tolerant containment of a value or of a whole interval.

        Every interval contains Empty.
        """
        lo, hi = self._tolerant_bounds(tolerance)
        if isinstance(other, Interval):
            if other.is_empty:
                return True
            return lo <= other.lower_bound and other.upper_bound <= hi
        return lo <= other <= hi

    def overlaps(self, other: 'Interval', tolerance: float = 0.0) -> bool:
        if self.is_empty or other.is_empty:
            return False
        lo, hi = self._tolerant_bounds(tolerance)
        return lo <= other.upper_bound and other.lower_bound <= hi

    def __contains__(self, value: Union['Interval', Number]) -> bool:
        return self.contains(value)

    # Arithmetic

    def negated(self) -> 'Interval':
        if self.is_empty:
            return Interval.EMPTY
        return Interval(-self.upper_bound, -self.lower_bound)

    def plus(self, other: Union['Interval', Number]) -> 'Interval':
        other = self._operand(other)
        if self.is_empty or other.is_empty:
            return Interval.EMPTY
        return Interval(
            self.lower_bound + other.lower_bound,
            self.upper_bound + other.upper_bound
        )

    def minus(self, other: Union['Interval', Number]) -> 'Interval':
        other = self._operand(other)
        if self.is_empty or other.is_empty:
            return Interval.EMPTY
        return Interval(
            self.lower_bound - other.upper_bound,
            self.upper_bound - other.lower_bound
        )

    def times(self, other: Union['Interval', Number, Sign]) -> 'Interval':
        """
        Product with a sign, a scalar or another interval.

        Multiplying by Sign.NONE or by 0.0 collapses to Zero.
        """
        if self.is_empty:
            return Interval.EMPTY

        if isinstance(other, Sign):
            if other is Sign.NONE:
                return Interval.ZERO
            return self.negated() if other is Sign.NEGATIVE else self

        if isinstance(other, numbers.Real):
            if other == 0:
                return Interval.ZERO
            if other > 0:
                return Interval(
                    _product(self.lower_bound, other),
                    _product(self.upper_bound, other)
                )
            return Interval(
                _product(self.upper_bound, other),
                _product(self.lower_bound, other)
            )

        other = self._operand(other)
        if other.is_empty:
            return Interval.EMPTY
        products = [
            _product(self.lower_bound, other.lower_bound),
            _product(self.lower_bound, other.upper_bound),
            _product(self.upper_bound, other.lower_bound),
            _product(self.upper_bound, other.upper_bound),
        ]
        return Interval(min(products), max(products))

    def divided_by(self, other: Union['Interval', Number]) -> 'Interval':
        """
        Quotient by a scalar or an interval.

        A zero divisor, or a divisor straddling zero, gives Whole. A divisor
        with a single zero endpoint multiplies by a half-unbounded
        reciprocal.
        """
        if self.is_empty:
            return Interval.EMPTY

        if isinstance(other, numbers.Real):
            if other == 0:
                logger.debug("Division of %s by zero, returning Whole", self)
                return Interval.WHOLE
            return self.times(1.0 / other)

        other = self._operand(other)
        if other.is_empty:
            return Interval.EMPTY
        lo, hi = other.lower_bound, other.upper_bound
        if lo < 0.0 < hi or (lo == 0.0 and hi == 0.0):
            logger.debug("Division of %s by %s containing zero, returning Whole", self, other)
            return Interval.WHOLE
        if lo == 0.0:
            reciprocal = Interval(1.0 / hi, INF)
        elif hi == 0.0:
            reciprocal = Interval(-INF, 1.0 / lo)
        else:
            reciprocal = Interval(1.0 / hi, 1.0 / lo)
        return self.times(reciprocal)

    def abs(self) -> 'Interval':
        """Absolute value."""
        if self.is_empty:
            return Interval.EMPTY
        if self.lower_bound >= 0:
            return self
        if self.upper_bound <= 0:
            return self.negated()
        return Interval(0.0, max(-self.lower_bound, self.upper_bound))

    def squared(self) -> 'Interval':
        lo, hi = self.lower_bound, self.upper_bound
        if self.is_empty:
            return Interval.EMPTY
        if lo >= 0:
            return Interval(lo * lo, hi * hi)
        if hi <= 0:
            return Interval(hi * hi, lo * lo)
        return Interval(0.0, max(lo * lo, hi * hi))

    def __neg__(self) -> 'Interval':
        return self.negated()

    def __abs__(self) -> 'Interval':
        return self.abs()

    def __add__(self, other) -> 'Interval':
        if self._coerce(other) is None:
            return NotImplemented
        return self.plus(other)

    def __radd__(self, other) -> 'Interval':
        return self.__add__(other)

    def __sub__(self, other) -> 'Interval':
        if self._coerce(other) is None:
            return NotImplemented
        return self.minus(other)

    def __rsub__(self, other) -> 'Interval':
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other.minus(self)

    def __mul__(self, other) -> 'Interval':
        if not isinstance(other, (Interval, Sign, numbers.Real)):
            return NotImplemented
        return self.times(other)

    def __rmul__(self, other) -> 'Interval':
        return self.__mul__(other)

    def __truediv__(self, other) -> 'Interval':
        if self._coerce(other) is None:
            return NotImplemented
        return self.divided_by(other)

    def __rtruediv__(self, other) -> 'Interval':
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other.divided_by(self)

    # Elementary functions. Each can be called as Interval.sqrt(x) or x.sqrt().

    def _clamped(self, domain: 'Interval', name: str) -> 'Interval':
        clamped = self.intersection(domain)
        if clamped.is_empty and not self.is_empty:
            logger.debug("%s argument %s outside domain %s", name, self, domain)
        return clamped

    def sqrt(self) -> 'Interval':
        """Square root, with the argument clamped to [0, inf]."""
        x = self._clamped(_NON_NEGATIVE, 'sqrt')
        if x.is_empty:
            return Interval.EMPTY
        return Interval(np.sqrt(x.lower_bound), np.sqrt(x.upper_bound))

    def exp(self) -> 'Interval':
        if self.is_empty:
            return Interval.EMPTY
        with np.errstate(over='ignore'):
            return Interval(np.exp(self.lower_bound), np.exp(self.upper_bound))

    def log(self) -> 'Interval':
        """
        Natural logarithm, with the argument clamped to [0, inf].

        An argument touching zero gives a -inf lower bound. An argument
        whose only non-negative point is zero gives [-inf, -inf], the limit
        of log at zero, rather than Empty.
        """
        x = self._clamped(_NON_NEGATIVE, 'log')
        if x.is_empty:
            return Interval.EMPTY
        with np.errstate(divide='ignore'):
            return Interval(np.log(x.lower_bound), np.log(x.upper_bound))

    def sin(self) -> 'Interval':
        """Sine, including the interior maxima at pi/2 + 2k*pi and minima at -pi/2 + 2k*pi."""
        if self.is_empty:
            return Interval.EMPTY
        if not self._bounded or self.width >= TWO_PI:
            return Interval(-1.0, 1.0)
        return self._periodic_range(np.sin, HALF_PI, -HALF_PI)

    def cos(self) -> 'Interval':
        """Cosine, including the interior maxima at 2k*pi and minima at pi + 2k*pi."""
        if self.is_empty:
            return Interval.EMPTY
        if not self._bounded or self.width >= TWO_PI:
            return Interval(-1.0, 1.0)
        return self._periodic_range(np.cos, 0.0, np.pi)

    @property
    def _bounded(self) -> bool:
        return math.isfinite(self.lower_bound) and math.isfinite(self.upper_bound)

    def _periodic_range(self, fn, max_at: float, min_at: float) -> 'Interval':
        lo, hi = self.lower_bound, self.upper_bound
        values = [fn(lo), fn(hi)]
        lower, upper = min(values), max(values)
        if _hits(lo, hi, max_at, TWO_PI):
            upper = 1.0
        if _hits(lo, hi, min_at, TWO_PI):
            lower = -1.0
        return Interval(lower, upper)

    def tan(self) -> 'Interval':
        """Tangent; Whole if the interval reaches an asymptote at pi/2 + k*pi."""
        lo, hi = self.lower_bound, self.upper_bound
        if self.is_empty:
            return Interval.EMPTY
        if not self._bounded or self.width >= np.pi:
            return Interval.WHOLE
        if _hits(lo, hi, HALF_PI, np.pi):
            return Interval.WHOLE
        lower, upper = np.tan(lo), np.tan(hi)
        if lower > upper:
            # tan increases on each branch, so a drop means an asymptote
            # lies between two bounds a few ulps apart
            return Interval.WHOLE
        return Interval(lower, upper)

    def asin(self) -> 'Interval':
        x = self._clamped(_SYMMETRIC_UNIT, 'asin')
        if x.is_empty:
            return Interval.EMPTY
        return Interval(np.arcsin(x.lower_bound), np.arcsin(x.upper_bound))

    def acos(self) -> 'Interval':
        x = self._clamped(_SYMMETRIC_UNIT, 'acos')
        if x.is_empty:
            return Interval.EMPTY
        return Interval(np.arccos(x.upper_bound), np.arccos(x.lower_bound))

    def atan(self) -> 'Interval':
        if self.is_empty:
            return Interval.EMPTY
        return Interval(np.arctan(self.lower_bound), np.arctan(self.upper_bound))

    def atan2(self, x: 'Interval') -> 'Interval':
        """
        Angle range of all points (x, y) with y in this interval.

        When the region crosses the negative x axis or surrounds the
        origin the angles wrap through +-pi, and the result is [-pi, pi].
        """
        y = self
        if y.is_empty or x.is_empty:
            return Interval.EMPTY
        if x.lower_bound > 0.0:
            return y.divided_by(x).atan()
        if y.lower_bound > 0.0:
            return x.negated().divided_by(y).atan().plus(HALF_PI)
        if y.upper_bound < 0.0:
            return x.negated().divided_by(y).atan().minus(HALF_PI)
        if x.lower_bound >= 0.0:
            # Right half-plane, closed on the y axis
            if y.lower_bound >= 0.0:
                return Interval(0.0, HALF_PI)
            if y.upper_bound <= 0.0:
                return Interval(-HALF_PI, 0.0)
            return Interval(-HALF_PI, HALF_PI)
        if x.upper_bound < 0.0 and y.lower_bound >= 0.0:
            # Second quadrant, closed on the negative x axis
            return y.divided_by(x).atan().plus(np.pi)
        return Interval(-np.pi, np.pi)

    def ulp(self) -> float:
        """
        Spacing between doubles at the interval's largest magnitude.

        Empty gives 0.0 and any unbounded interval gives inf.
        """
        if self.is_empty:
            return 0.0
        magnitude = max(abs(self.lower_bound), abs(self.upper_bound))
        if math.isinf(magnitude):
            return INF
        return float(np.spacing(magnitude))

    # Equality, hashing and serialization

    def __eq__(self, other) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        if self.is_empty and other.is_empty:
            return True
        return (
            self.lower_bound == other.lower_bound
            and self.upper_bound == other.upper_bound
        )

    def __hash__(self) -> int:
        if self.is_empty:
            return hash((INF, -INF))
        return hash((self.lower_bound, self.upper_bound))

    def to_canonical(self) -> Dict[str, Any]:
        if self.is_empty:
            return {"lower": encode_float(INF), "upper": encode_float(-INF)}
        return {
            "lower": encode_float(self.lower_bound),
            "upper": encode_float(self.upper_bound),
        }

    @classmethod
    def from_canonical(cls, data: Dict[str, Any]) -> 'Interval':
        try:
            lower, upper = data["lower"], data["upper"]
        except (KeyError, TypeError) as e:
            raise ValueError(f"Invalid canonical interval: {data!r}") from e
        return cls(decode_float(lower), decode_float(upper))

    def fingerprint(self) -> str:
        """Short deterministic hash of the canonical form."""
        return canonical_hash(self)[:16]

    def __str__(self) -> str:
        if self.is_empty:
            return "Empty"
        if self.is_whole:
            return "Whole"
        return f"[{self.lower_bound:.6g}, {self.upper_bound:.6g}]"

    def __repr__(self) -> str:
        return f"Interval({self.lower_bound!r}, {self.upper_bound!r})"


Interval.EMPTY = Interval(INF, -INF)
Interval.WHOLE = Interval(-INF, INF)
Interval.UNIT = Interval(0.0, 1.0)
Interval.ZERO = Interval(0.0, 0.0)

EMPTY = Interval.EMPTY
WHOLE = Interval.WHOLE
UNIT = Interval.UNIT
ZERO = Interval.ZERO

_NON_NEGATIVE = Interval(0.0, INF)
_SYMMETRIC_UNIT = Interval(-1.0, 1.0)
