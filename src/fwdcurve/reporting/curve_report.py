"""
Tabular views of forward curves.

Provides DataFrames for console output and inspection:
- Curve evaluated on a grid of times (forward, integral, discount, spot)
- Pillars of a piecewise flat curve, with the extrapolation tail
"""

from typing import Iterable

import numpy as np
import pandas as pd

from ..curves.curve import Curve, INFINITY
from ..curves.piecewise import PiecewiseFlat


def curve_table(curve: Curve, times: Iterable[float]) -> pd.DataFrame:
    """
    Evaluate a curve on a grid of times.

    Args:
        curve: Any curve
        times: Year fractions to evaluate at

    Returns:
        DataFrame indexed by time with forward, integral, discount and
        spot columns (NaN where the curve is undefined)
    """
    rows = []

    for u in times:
        u = float(u)
        rows.append({
            "time": u,
            "forward": curve.value(u),
            "integral": curve.integral(u),
            "discount": curve.discount(u),
            "spot": curve.spot(u),
        })

    df = pd.DataFrame(rows, columns=["time", "forward", "integral", "discount", "spot"])

    return df.set_index("time")


def pillar_table(curve: PiecewiseFlat, extrapolation: bool = True) -> pd.DataFrame:
    """
    Pillars of a piecewise flat curve.

    Args:
        curve: Piecewise flat curve
        extrapolation: Whether to append the extrapolation row at time inf

    Returns:
        DataFrame with time and rate columns
    """
    df = pd.DataFrame({
        "time": np.asarray(curve.times, dtype=float),
        "rate": np.asarray(curve.rates, dtype=float),
    })

    if extrapolation:
        tail = pd.DataFrame([{
            "time": INFINITY,
            "rate": curve.extrapolate(),
        }])
        df = pd.concat([df, tail], ignore_index=True)

    return df


__all__ = [
    "curve_table",
    "pillar_table",
]
