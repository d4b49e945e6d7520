"""
fwdcurve: Forward Rate Curve Library

A small analytic library for:
- Piecewise flat forward curves with closed form integrals
- Discount factors and spot rates from any curve
- Extrapolation past the last pillar
- Curve algebra (sum of curves, curve plus spread)

Scope: curve evaluation only; no calibration, schedules or pricing models.
"""

import logging

__version__ = "0.1.0"

# Core modules
from .conventions import BP, CompoundingConvention, convert_rate

# Curves
from .curves import (
    pwflat,
    Curve,
    Constant,
    Sum,
    PiecewiseFlat,
    create_flat_curve,
    CurveError,
    InvalidPillarsError,
    EmptyCurveError,
)

# Reporting
from .reporting import curve_table, pillar_table

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Version
    "__version__",
    # Conventions
    "BP",
    "CompoundingConvention",
    "convert_rate",
    # Curves
    "pwflat",
    "Curve",
    "Constant",
    "Sum",
    "PiecewiseFlat",
    "create_flat_curve",
    "CurveError",
    "InvalidPillarsError",
    "EmptyCurveError",
    # Reporting
    "curve_table",
    "pillar_table",
]
