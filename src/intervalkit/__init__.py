"""
intervalkit - Interval Arithmetic for Geometric Computation

Closed real intervals that carry numeric uncertainty through vector,
bounding-box and transformation code.

Key Features:
- Immutable Interval values with Empty/Whole/Unit/Zero constants
- Sound interval arithmetic (four-corner products, zero-aware division)
- Elementary functions respecting monotonicity and periodicity
- Tolerant containment and overlap predicates
- Reproducible sampling via explicit or per-thread generators
"""

from .bounds.interval import (
    Interval,
    EMPTY,
    WHOLE,
    UNIT,
    ZERO,
)
from .sign import Sign
from .sampling import (
    make_generator,
    default_generator,
    seed_default_generator,
)
from .scalar import (
    DEFAULT_PRECISION,
    is_zero,
    is_not_zero,
    is_less_than_zero,
    is_less_than_or_equal_to_zero,
    is_greater_than_zero,
    is_greater_than_or_equal_to_zero,
)
from .core.canonical_json import (
    canonical_dumps,
    canonical_hash,
)
from . import units

__version__ = "0.1.0"
__author__ = "intervalkit developers"

__all__ = [
    # Interval
    "Interval",
    "EMPTY",
    "WHOLE",
    "UNIT",
    "ZERO",
    # Sign
    "Sign",
    # Sampling
    "make_generator",
    "default_generator",
    "seed_default_generator",
    # Scalar comparisons
    "DEFAULT_PRECISION",
    "is_zero",
    "is_not_zero",
    "is_less_than_zero",
    "is_less_than_or_equal_to_zero",
    "is_greater_than_zero",
    "is_greater_than_or_equal_to_zero",
    # Serialization
    "canonical_dumps",
    "canonical_hash",
    # Units
    "units",
]
