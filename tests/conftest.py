"""Shared fixtures for parallaxer tests."""

import pytest

from parallaxer import Chain, Curve, Interval, Point


@pytest.fixture
def scroll_interval():
    """Interval a raw scroll offset is bound over."""
    return Interval(0, 4)


@pytest.fixture
def percent_interval():
    """Output interval for percentages."""
    return Interval(0, 100)


@pytest.fixture
def point_interval():
    """Diagonal point interval from (2, 2) to (4, 4)."""
    return Interval(Point(2, 2), Point(4, 4))


@pytest.fixture
def focused_chain(scroll_interval, percent_interval):
    """Refocus on [2, 4] then rescale to [0, 100] (unclamped)."""
    return Chain(scroll_interval, name="focused").refocus(Interval(2, 4)).rescale(percent_interval)


@pytest.fixture
def clamped_chain(scroll_interval, percent_interval):
    """Refocus on [2, 4], clamp, then rescale to [0, 100]."""
    return (
        Chain(scroll_interval, name="clamped")
        .refocus(Interval(2, 4))
        .reshape(Curve.clamp_to_unit_interval())
        .rescale(percent_interval)
    )
