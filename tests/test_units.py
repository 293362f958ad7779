"""
Tests for unit conversions
"""

import math

import pytest
from intervalkit import Interval, units


class TestLengths:
    """Test length conversions to and from meters."""

    def test_from_units(self):
        """Test conversions into meters."""
        assert units.from_inches(1.0) == 0.0254
        assert units.from_feet(1.0) == 0.3048
        assert units.from_yards(1.0) == 0.9144
        assert units.from_miles(1.0) == 1609.344
        assert units.from_kilometers(1.0) == 1000.0
        assert units.from_centimeters(1.0) == 0.01
        assert units.from_millimeters(1.0) == 0.001
        assert units.from_microns(1.0) == 1e-6
        assert units.from_thou(1000.0) == pytest.approx(0.0254)

    def test_to_units(self):
        """Test conversions out of meters."""
        assert units.to_centimeters(1.0) == pytest.approx(100.0)
        assert units.to_millimeters(1.0) == pytest.approx(1000.0)
        assert units.to_microns(1.0) == pytest.approx(1e6)
        assert units.to_kilometers(1.0) == 0.001
        assert units.to_inches(0.0254) == 1.0
        assert units.to_feet(0.3048) == 1.0
        assert units.to_thou(0.0254) == pytest.approx(1000.0)
        assert units.to_yards(0.9144) == 1.0
        assert units.to_miles(1609.344) == 1.0

    def test_definitions_agree(self):
        """Test the relations between imperial units."""
        assert units.FOOT == pytest.approx(12 * units.INCH)
        assert units.YARD == pytest.approx(3 * units.FOOT)
        assert units.MILE == pytest.approx(5280 * units.FOOT)
        assert units.THOU == pytest.approx(units.INCH / 1000)

    def test_intervals(self):
        """Test that intervals are converted bound-wise."""
        iv = units.from_millimeters(Interval(1.0, 2.0))
        assert isinstance(iv, Interval)
        assert iv.lower_bound == pytest.approx(0.001)
        assert iv.upper_bound == pytest.approx(0.002)
        iv = units.to_inches(Interval(0.0, 0.0254))
        assert iv.lower_bound == 0.0
        assert iv.upper_bound == pytest.approx(1.0)


class TestAngles:
    """Test angle conversions."""

    def test_degrees(self):
        """Test degrees to and from radians."""
        assert units.from_degrees(180.0) == pytest.approx(math.pi)
        assert units.to_degrees(math.pi / 2) == pytest.approx(90.0)
        iv = units.to_degrees(Interval(0.0, math.pi))
        assert iv.lower_bound == 0.0
        assert iv.upper_bound == pytest.approx(180.0)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
