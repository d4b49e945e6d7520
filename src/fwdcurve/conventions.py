"""
Rate quoting conventions.

Curves produce continuously compounded rates. This module converts them
to the other compounding conventions used when quoting.

Supported Compounding:
- Continuous: r
- Annual: exp(r) - 1
- Semi-annual: 2 * (exp(r / 2) - 1)
- Quarterly: 4 * (exp(r / 4) - 1)
- Simple: (exp(r * tenor) - 1) / tenor
"""

from enum import Enum
from typing import Optional

import numpy as np

# One basis point
BP = 1e-4


class CompoundingConvention(Enum):
    """Interest rate compounding convention."""
    CONTINUOUS = "Continuous"
    ANNUAL = "Annual"
    SEMI_ANNUAL = "SemiAnnual"
    QUARTERLY = "Quarterly"
    SIMPLE = "Simple"

    @classmethod
    def from_string(cls, s: str) -> "CompoundingConvention":
        """Parse compounding convention from string representation."""
        mapping = {
            "CONTINUOUS": cls.CONTINUOUS,
            "CONT": cls.CONTINUOUS,
            "ANNUAL": cls.ANNUAL,
            "SEMIANNUAL": cls.SEMI_ANNUAL,
            "SEMI": cls.SEMI_ANNUAL,
            "QUARTERLY": cls.QUARTERLY,
            "SIMPLE": cls.SIMPLE,
        }
        key = s.upper().replace(" ", "").replace("-", "").replace("_", "")
        if key in mapping:
            return mapping[key]
        raise ValueError(f"Unknown compounding convention: {s}")


# Compounding periods per year
_PERIODS = {
    CompoundingConvention.ANNUAL: 1,
    CompoundingConvention.SEMI_ANNUAL: 2,
    CompoundingConvention.QUARTERLY: 4,
}


def convert_rate(
    rate: float,
    compounding: CompoundingConvention,
    tenor: Optional[float] = None
) -> float:
    """
    Convert a continuously compounded rate to another convention.

    Args:
        rate: Continuously compounded rate
        compounding: Target convention
        tenor: Accrual period in years, required for SIMPLE

    Returns:
        Rate in the target convention
    """
    if compounding == CompoundingConvention.CONTINUOUS:
        return float(rate)

    if compounding in _PERIODS:
        m = _PERIODS[compounding]
        return float(m * np.expm1(rate / m))

    if compounding == CompoundingConvention.SIMPLE:
        if tenor is None or tenor <= 0:
            raise ValueError("Simple compounding needs a positive tenor")
        return float(np.expm1(rate * tenor) / tenor)

    raise ValueError(f"Unknown compounding: {compounding}")


__all__ = [
    "BP",
    "CompoundingConvention",
    "convert_rate",
]
