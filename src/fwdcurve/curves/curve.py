"""
Forward curve interface and its algebraic variants.

The Curve class provides:
- Instantaneous forward rate f(u)
- Integral of the forward int_t^u f(s) ds
- Discount factor D(u, t) = exp(-int_t^u f(s) ds)
- Spot rate r(u, t) with D(u, t) = exp(-r(u, t)(u - t))
- Extrapolation value used past the last pillar

Variants:
- Constant: one flat forward everywhere
- Sum: lazy sum of two curves, or a curve plus a constant spread
- PiecewiseFlat (see piecewise.py): pillar-backed step forward curve

Conventions:
    - Times are year fractions, rates continuously compounded
    - Domain errors (negative time, undefined extrapolation) return NaN
"""

import logging
from abc import ABC, abstractmethod
from numbers import Real
from typing import Optional, Tuple, Union

import numpy as np

from ..conventions import BP, CompoundingConvention, convert_rate
from .pwflat import NaN

logger = logging.getLogger(__name__)

INFINITY = float("inf")


class CurveError(Exception):
    """Base class for structural curve errors."""


class InvalidPillarsError(CurveError, ValueError):
    """Pillar times not strictly increasing or times/rates length mismatch."""


class EmptyCurveError(CurveError, IndexError):
    """Curve has no pillars."""


class Curve(ABC):
    """
    Abstract forward curve.

    Subclasses implement value(), integral(), back() and the two
    extrapolation hooks. Discount, spot and forward are derived here.
    """

    @abstractmethod
    def value(self, u: float) -> float:
        """
        Instantaneous forward rate at time u.

        Args:
            u: Year fraction

        Returns:
            Forward rate, NaN where the curve is undefined
        """
        pass

    @abstractmethod
    def integral(self, u: float, t: float = 0.0) -> float:
        """Integral of the forward rate from t to u."""
        pass

    @abstractmethod
    def back(self) -> Tuple[float, float]:
        """Last (time, rate) point on the curve, ignoring extrapolation."""
        pass

    @abstractmethod
    def get_extrapolation(self) -> float:
        """Current extrapolation value."""
        pass

    @abstractmethod
    def set_extrapolation(self, f: float) -> None:
        """Replace the extrapolation value."""
        pass

    def extrapolate(self, f: Optional[float] = None) -> Union[float, "Curve"]:
        """
        Get or set the extrapolation value.

        extrapolate() returns the current value. extrapolate(f) sets it and
        returns the curve so calls can be chained.
        """
        if f is None:
            return self.get_extrapolation()

        self.set_extrapolation(f)
        return self

    def forward(self, u: float, t: float = 0.0) -> float:
        """
        Forward rate at u + t.

        Note t is an offset added to the query time, not a valuation date.
        """
        return self.value(u + t)

    def discount(self, u: float, t: float = 0.0) -> float:
        """Discount factor D(u, t) = exp(-int_t^u f(s) ds)."""
        return float(np.exp(-self.integral(u, t)))

    def spot(self, u: float, t: float = 0.0) -> float:
        """
        Spot rate over [t, u].

        r(u, t) = -log(D(u, t)) / (u - t). Singular at u == t, where NaN is
        returned.
        """
        with np.errstate(divide="ignore", invalid="ignore"):
            return float(-np.log(self.discount(u, t)) / np.float64(u - t))

    def zero_rate(
        self,
        u: float,
        compounding: CompoundingConvention = CompoundingConvention.CONTINUOUS
    ) -> float:
        """
        Spot rate from 0 to u in the requested compounding convention.

        Args:
            u: Year fraction
            compounding: Output convention

        Returns:
            Zero rate
        """
        return convert_rate(self.spot(u), compounding, tenor=u)

    def bump_parallel(self, bp: float) -> "Sum":
        """
        Curve shifted by a constant spread.

        The result refers to this curve; later changes to it are visible
        through the bumped curve.

        Args:
            bp: Bump size in basis points
        """
        return self + bp * BP

    def __call__(self, u: float) -> float:
        """Convenience method to call value."""
        return self.value(u)

    def __add__(self, other):
        if isinstance(other, (Curve, Real)):
            return Sum(self, other)
        return NotImplemented

    __radd__ = __add__


class Constant(Curve):
    """
    Flat forward curve.

    The forward and the extrapolation value are the same scalar.
    """

    def __init__(self, f: float = NaN):
        self.f = float(f)

    def value(self, u: float) -> float:
        return self.f

    def integral(self, u: float, t: float = 0.0) -> float:
        return self.f * (u - t)

    def back(self) -> Tuple[float, float]:
        return (INFINITY, self.f)

    def get_extrapolation(self) -> float:
        return self.f

    def set_extrapolation(self, f: float) -> None:
        self.f = float(f)

    def __repr__(self) -> str:
        return f"Constant(f={self.f})"


class Sum(Curve):
    """
    Sum of two curves, evaluated lazily.

    Holds references to its operands, not copies: the operands must outlive
    the sum and any change to them shows up in its values. A scalar operand
    becomes a Constant owned by the sum.

    Attributes:
        f: First operand
        g: Second operand
    """

    def __init__(self, f: Curve, g: Union[Curve, float]):
        self.f = f
        self.g = g if isinstance(g, Curve) else Constant(g)

    def value(self, u: float) -> float:
        return self.f.value(u) + self.g.value(u)

    def integral(self, u: float, t: float = 0.0) -> float:
        """
        Sum of the operand integrals from 0 to u.

        The lower bound t is ignored; callers that need int_t^u must
        subtract integral(t) themselves.
        """
        return self.f.integral(u) + self.g.integral(u)

    def back(self) -> Tuple[float, float]:
        """Earliest last point of the operands, with summed rates."""
        fb = self.f.back()
        gb = self.g.back()

        return (min(fb[0], gb[0]), fb[1] + gb[1])

    def get_extrapolation(self) -> float:
        return self.f.get_extrapolation() + self.g.get_extrapolation()

    def set_extrapolation(self, f: float) -> None:
        """No-op: the operands keep their own extrapolation values."""
        logger.debug("Ignoring extrapolation %s set on curve sum", f)

    def __repr__(self) -> str:
        return f"Sum({self.f!r}, {self.g!r})"


__all__ = [
    "Curve",
    "Constant",
    "Sum",
    "CurveError",
    "InvalidPillarsError",
    "EmptyCurveError",
    "INFINITY",
]
