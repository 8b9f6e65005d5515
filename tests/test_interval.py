"""Tests for Interval.

Tests the interval system including:
- Zero-length rejection at construction
- Exact boundary positions
- Backward intervals and extrapolation
- Round-trip between values and positions
- Structural equality and hashing
"""

import dataclasses
import math

import pytest
from hypothesis import given, strategies as st

from parallaxer import Interval, Point, ZeroLengthIntervalError

bounds = st.floats(min_value=-1e3, max_value=1e3, allow_nan=False, allow_infinity=False)
positions = st.floats(min_value=-10, max_value=10, allow_nan=False, allow_infinity=False)


@st.composite
def intervals(draw, min_length=1.0):
    """Scalar intervals whose boundaries are at least ``min_length`` apart."""
    start = draw(bounds)
    end = draw(bounds.filter(lambda e: abs(e - start) >= min_length))
    return Interval(start, end)


class TestIntervalCreation:
    """Tests for constructing intervals."""

    def test_create_scalar_interval(self):
        """Test basic scalar interval construction."""
        interval = Interval(0, 4)

        assert interval.start == 0
        assert interval.end == 4

    @pytest.mark.parametrize("start,end", [
        (12, 12),
        (12.0, 12),
        (0.0, -0.0),
        (Point(1, 1), Point(1, 1)),
    ])
    def test_zero_length_raises(self, start, end):
        """Test equal boundaries are rejected for every value type."""
        with pytest.raises(ZeroLengthIntervalError, match="must differ"):
            Interval(start, end)

    def test_zero_length_error_is_value_error(self):
        """Test ZeroLengthIntervalError can be caught as ValueError and keeps bounds."""
        with pytest.raises(ValueError) as exc_info:
            Interval(12, 12)

        assert exc_info.value.start == 12
        assert exc_info.value.end == 12

    def test_mismatched_domains_raise(self):
        """Test boundaries from different domains are rejected."""
        with pytest.raises(TypeError, match="share a domain"):
            Interval(0, Point(1, 1))

    def test_interval_is_immutable(self):
        """Test intervals cannot be mutated."""
        interval = Interval(0, 4)

        with pytest.raises(dataclasses.FrozenInstanceError):
            interval.start = 1


class TestIntervalConversion:
    """Tests for value/position conversion."""

    def test_backward_interval(self):
        """Test intervals running from high to low values."""
        interval = Interval(10, 0)

        assert interval.value_at_unit_position(0.5) == 5
        assert interval.value_at_unit_position(0) == 10
        assert interval.value_at_unit_position(1) == 0
        assert interval.unit_position(7.5) == 0.25

    def test_extrapolation_outside_unit_interval(self):
        """Test positions outside [0, 1] extrapolate beyond the boundaries."""
        interval = Interval(-5, 5)

        assert interval.value_at_unit_position(-0.1) == pytest.approx(-6)
        assert interval.value_at_unit_position(1.1) == pytest.approx(6)
        assert interval.unit_position(-6) == pytest.approx(-0.1)
        assert interval.unit_position(6) == pytest.approx(1.1)

    @given(bounds, bounds)
    def test_boundaries_are_exact(self, start, end):
        """Test start maps to exactly 0 and end to exactly 1."""
        if start == end:
            return
        interval = Interval(start, end)

        assert interval.unit_position(start) == 0.0
        assert interval.unit_position(end) == 1.0

    @given(intervals(), positions)
    def test_round_trip(self, interval, position):
        """Test position -> value -> position is the identity."""
        value = interval.value_at_unit_position(position)

        assert interval.unit_position(value) == pytest.approx(position, abs=1e-9)

    def test_nan_propagates(self):
        """Test NaN passes through conversions unreported."""
        interval = Interval(0, 4)

        assert math.isnan(interval.value_at_unit_position(float("nan")))
        assert math.isnan(interval.unit_position(float("nan")))


class TestIntervalEquality:
    """Tests for structural equality and hashing."""

    def test_structural_equality(self):
        """Test intervals compare by boundaries."""
        assert Interval(0, 4) == Interval(0, 4)
        assert Interval(0, 1) == Interval(0.0, 1.0)
        assert Interval(0, 4) != Interval(4, 0)
        assert Interval(Point(0, 0), Point(1, 1)) == Interval(Point(0, 0), Point(1, 1))

    def test_usable_as_mapping_key(self):
        """Test intervals can key lookup tables."""
        table = {Interval(0, 0.5): "first half", Interval(0.5, 1): "second half"}

        assert table[Interval(0.0, 0.5)] == "first half"
        assert table[Interval(0.5, 1.0)] == "second half"

    def test_unit_interval(self):
        """Test unit interval construction and structural detection."""
        assert Interval.unit() == Interval(0, 1)
        assert Interval.unit().is_unit
        assert Interval(0, 1).is_unit
        assert not Interval(1, 0).is_unit
        assert not Interval(0, 2).is_unit
        assert not Interval(Point(0, 0), Point(1, 1)).is_unit

    def test_reversed(self):
        """Test reversing swaps boundaries and mirrors positions."""
        interval = Interval(0, 4)
        flipped = interval.reversed()

        assert flipped == Interval(4, 0)
        assert flipped.unit_position(1) == 1 - interval.unit_position(1)

    def test_repr(self):
        """Test compact representation."""
        assert repr(Interval(0, 4)) == "Interval(0, 4)"
