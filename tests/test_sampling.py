"""Tests for chain sampling."""

import numpy as np
import polars as pl
import pytest

from parallaxer import Chain, Interval, Point, sample_chain
from parallaxer.sampling import sample_inputs


class TestSampleInputs:
    """Tests for the input grid."""

    def test_linspace_inclusive(self):
        """Test inputs include both endpoints."""
        np.testing.assert_allclose(sample_inputs(0, 4, 5), [0, 1, 2, 3, 4])

    def test_descending(self):
        """Test grids may run backward."""
        np.testing.assert_allclose(sample_inputs(4, 0, 3), [4, 2, 0])

    def test_too_few_points(self):
        """Test at least two points are required."""
        with pytest.raises(ValueError, match="at least 2"):
            sample_inputs(0, 1, 1)


class TestSampleChain:
    """Tests for tabulating chains."""

    def test_columns(self, clamped_chain):
        """Test one position column per transform plus input and value."""
        table = sample_chain(clamped_chain, 0, 4, 5)

        assert isinstance(table, pl.DataFrame)
        assert table.columns == ["input", "position_0", "position_1", "position_2", "position_3", "value"]
        assert table.height == 5

    def test_values(self, clamped_chain):
        """Test values match direct evaluation."""
        table = sample_chain(clamped_chain, 0, 4, 5)

        assert table["value"].to_list() == pytest.approx([0, 0, 0, 50, 100])
        assert table["position_0"].to_list() == pytest.approx([0, 0.25, 0.5, 0.75, 1])
        assert table["position_1"].to_list() == pytest.approx([-1, -0.5, 0, 0.5, 1])

    def test_sampling_beyond_interval(self, focused_chain):
        """Test inputs outside the initial interval extrapolate."""
        table = sample_chain(focused_chain, 4, 6, 3)

        assert table["value"].to_list() == pytest.approx([100, 150, 200])

    def test_point_output(self, scroll_interval):
        """Test point outputs are split into x and y columns."""
        chain = Chain(scroll_interval).rescale(Interval(Point(0, 10), Point(100, 20)))

        table = sample_chain(chain, 0, 4, 3)

        assert "value" not in table.columns
        assert table["value_x"].to_list() == pytest.approx([0, 50, 100])
        assert table["value_y"].to_list() == pytest.approx([10, 15, 20])

    def test_point_input_rejected(self, point_interval):
        """Test sampling needs a scalar input interval."""
        with pytest.raises(TypeError, match="scalar input interval"):
            sample_chain(Chain(point_interval), 0, 1)
