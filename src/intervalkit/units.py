"""
Unit Conversions

Lengths are stored in meters and angles in radians. Each from_* function
converts a quantity in the named unit to meters (or radians); each to_*
function converts back. Floats and Intervals are both accepted.
"""

from typing import Union

import numpy as np

from .bounds.interval import Interval

Quantity = Union[float, Interval]

# Meters per unit (exact by definition)
CENTIMETER = 0.01
MILLIMETER = 0.001
MICRON = 1e-6
KILOMETER = 1000.0
INCH = 0.0254
FOOT = 0.3048
THOU = 2.54e-5
YARD = 0.9144
MILE = 1609.344

# Radians per degree
DEGREE = np.pi / 180.0


def _scaled(value: Quantity, factor: float) -> Quantity:
    if isinstance(value, Interval):
        return value.times(factor)
    return value * factor


def _unscaled(value: Quantity, factor: float) -> Quantity:
    if isinstance(value, Interval):
        return value.divided_by(factor)
    return value / factor


def from_centimeters(value: Quantity) -> Quantity:
    return _scaled(value, CENTIMETER)


def to_centimeters(value: Quantity) -> Quantity:
    return _unscaled(value, CENTIMETER)


def from_millimeters(value: Quantity) -> Quantity:
    return _scaled(value, MILLIMETER)


def to_millimeters(value: Quantity) -> Quantity:
    return _unscaled(value, MILLIMETER)


def from_microns(value: Quantity) -> Quantity:
    return _scaled(value, MICRON)


def to_microns(value: Quantity) -> Quantity:
    return _unscaled(value, MICRON)


def from_kilometers(value: Quantity) -> Quantity:
    return _scaled(value, KILOMETER)


def to_kilometers(value: Quantity) -> Quantity:
    return _unscaled(value, KILOMETER)


def from_inches(value: Quantity) -> Quantity:
    return _scaled(value, INCH)


def to_inches(value: Quantity) -> Quantity:
    return _unscaled(value, INCH)


def from_feet(value: Quantity) -> Quantity:
    return _scaled(value, FOOT)


def to_feet(value: Quantity) -> Quantity:
    return _unscaled(value, FOOT)


def from_thou(value: Quantity) -> Quantity:
    return _scaled(value, THOU)


def to_thou(value: Quantity) -> Quantity:
    return _unscaled(value, THOU)


def from_yards(value: Quantity) -> Quantity:
    return _scaled(value, YARD)


def to_yards(value: Quantity) -> Quantity:
    return _unscaled(value, YARD)


def from_miles(value: Quantity) -> Quantity:
    return _scaled(value, MILE)


def to_miles(value: Quantity) -> Quantity:
    return _unscaled(value, MILE)


def from_degrees(value: Quantity) -> Quantity:
    """Degrees to radians."""
    return _scaled(value, DEGREE)


def to_degrees(value: Quantity) -> Quantity:
    """Radians to degrees."""
    return _unscaled(value, DEGREE)
