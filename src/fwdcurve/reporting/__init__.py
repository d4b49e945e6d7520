"""
Reporting module for forward curves.

Provides:
- Curve values on a time grid as a DataFrame
- Pillar tables for piecewise flat curves
"""

from .curve_report import curve_table, pillar_table


__all__ = [
    "curve_table",
    "pillar_table",
]
