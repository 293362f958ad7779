"""
Bounds Module - Interval Enclosures

Provides the Interval value type: closed real ranges with sound
arithmetic and elementary functions.
"""

from .interval import (
    Interval,
    EMPTY,
    WHOLE,
    UNIT,
    ZERO,
)

__all__ = [
    'Interval',
    'EMPTY',
    'WHOLE',
    'UNIT',
    'ZERO',
]
