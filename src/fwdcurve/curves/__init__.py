"""
Curves package - forward curve representations.

Provides:
- Curve: Abstract forward curve (value, integral, discount, spot)
- Constant: Flat forward curve
- PiecewiseFlat: Step forward curve over pillars
- Sum: Lazy sum of two curves or a curve and a spread
- pwflat: Numeric kernel over raw pillar arrays
"""

from . import pwflat
from .curve import (
    Curve,
    Constant,
    Sum,
    CurveError,
    InvalidPillarsError,
    EmptyCurveError,
)
from .piecewise import PiecewiseFlat, create_flat_curve

__all__ = [
    "pwflat",
    "Curve",
    "Constant",
    "Sum",
    "CurveError",
    "InvalidPillarsError",
    "EmptyCurveError",
    "PiecewiseFlat",
    "create_flat_curve",
]
