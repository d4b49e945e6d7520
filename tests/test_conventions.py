"""
Unit tests for conventions module.
"""

import numpy as np
import pytest

from fwdcurve.conventions import (
    BP,
    CompoundingConvention,
    convert_rate,
)


class TestCompoundingConvention:
    """Tests for compounding convention parsing."""

    def test_from_string(self):
        assert CompoundingConvention.from_string("Continuous") == CompoundingConvention.CONTINUOUS
        assert CompoundingConvention.from_string("semi-annual") == CompoundingConvention.SEMI_ANNUAL
        assert CompoundingConvention.from_string("SEMI_ANNUAL") == CompoundingConvention.SEMI_ANNUAL
        assert CompoundingConvention.from_string("quarterly") == CompoundingConvention.QUARTERLY

    def test_unknown(self):
        with pytest.raises(ValueError):
            CompoundingConvention.from_string("monthly")


class TestConvertRate:
    """Tests for rate conversion from continuous compounding."""

    def test_continuous_unchanged(self):
        assert convert_rate(0.05, CompoundingConvention.CONTINUOUS) == 0.05

    def test_annual(self):
        """Annual rate gives the same growth over one year."""
        r = convert_rate(0.05, CompoundingConvention.ANNUAL)
        assert r == pytest.approx(np.exp(0.05) - 1, rel=1e-12)

    def test_semi_annual(self):
        r = convert_rate(0.05, CompoundingConvention.SEMI_ANNUAL)
        assert (1 + r / 2) ** 2 == pytest.approx(np.exp(0.05), rel=1e-12)

    def test_quarterly(self):
        r = convert_rate(0.05, CompoundingConvention.QUARTERLY)
        assert (1 + r / 4) ** 4 == pytest.approx(np.exp(0.05), rel=1e-12)

    def test_simple(self):
        r = convert_rate(0.05, CompoundingConvention.SIMPLE, tenor=0.5)
        assert 1 + r * 0.5 == pytest.approx(np.exp(0.025), rel=1e-12)

    def test_simple_needs_tenor(self):
        with pytest.raises(ValueError):
            convert_rate(0.05, CompoundingConvention.SIMPLE)
        with pytest.raises(ValueError):
            convert_rate(0.05, CompoundingConvention.SIMPLE, tenor=0.0)

    def test_nan_passes_through(self):
        assert np.isnan(convert_rate(float("nan"), CompoundingConvention.ANNUAL))

    def test_basis_point(self):
        assert 25 * BP == pytest.approx(0.0025)
