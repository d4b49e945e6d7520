"""
Tests for curve reporting tables.
"""

import numpy as np
import pandas as pd
import pytest

from fwdcurve import (
    Constant,
    PiecewiseFlat,
    curve_table,
    pillar_table,
)


@pytest.fixture
def sample_curve():
    return PiecewiseFlat([1.0, 2.0, 3.0], [2.0, 3.0, 4.0], extrapolation=5.0)


class TestCurveTable:
    """Tests for curve_table."""

    def test_columns_and_index(self, sample_curve):
        df = curve_table(sample_curve, [0.5, 1.5, 3.5])

        assert isinstance(df, pd.DataFrame)
        assert list(df.columns) == ["forward", "integral", "discount", "spot"]
        assert df.index.name == "time"
        assert df.index.tolist() == [0.5, 1.5, 3.5]

    def test_values(self, sample_curve):
        df = curve_table(sample_curve, [1.5, 3.5])

        assert df.loc[1.5, "forward"] == 3.0
        assert df.loc[1.5, "integral"] == 3.5
        assert df.loc[3.5, "integral"] == 11.5
        assert df.loc[3.5, "discount"] == pytest.approx(np.exp(-11.5))
        assert df.loc[3.5, "spot"] == pytest.approx(11.5 / 3.5)

    def test_undefined_region(self):
        curve = PiecewiseFlat([1.0], [0.02])
        df = curve_table(curve, [0.5, 2.0])

        assert df.loc[0.5, "forward"] == 0.02
        assert np.isnan(df.loc[2.0, "forward"])
        assert np.isnan(df.loc[2.0, "discount"])

    def test_sum_curve(self, sample_curve):
        df = curve_table(sample_curve + Constant(1.0), [1.5])
        assert df.loc[1.5, "forward"] == 4.0

    def test_empty_grid(self, sample_curve):
        df = curve_table(sample_curve, [])
        assert df.empty
        assert list(df.columns) == ["forward", "integral", "discount", "spot"]


class TestPillarTable:
    """Tests for pillar_table."""

    def test_with_extrapolation(self, sample_curve):
        df = pillar_table(sample_curve)

        assert list(df.columns) == ["time", "rate"]
        assert len(df) == 4
        assert df["time"].iloc[-1] == float("inf")
        assert df["rate"].iloc[-1] == 5.0

    def test_without_extrapolation(self, sample_curve):
        df = pillar_table(sample_curve, extrapolation=False)

        assert df["time"].tolist() == [1.0, 2.0, 3.0]
        assert df["rate"].tolist() == [2.0, 3.0, 4.0]
