"""
Piecewise flat forward curve.

Owns pillar times and rates and evaluates them with the pwflat kernel.
The integral is the closed form antiderivative of a step function, so
discount factors are exact at and between pillars.
"""

import logging
from typing import Iterable, List, Sequence, Tuple

import numpy as np

from . import pwflat
from .curve import Curve, EmptyCurveError, InvalidPillarsError
from .pwflat import NaN

logger = logging.getLogger(__name__)


class PiecewiseFlat(Curve):
    """
    Forward curve that is constant between pillars.

    The rate f[i] applies on (t[i-1], t[i]] with t[-1] = 0, and the
    extrapolation value applies past t[n-1]. Without pillars the curve is
    flat at the extrapolation value.

    Attributes:
        times: Pillar times (read-only array)
        rates: Pillar forward rates (read-only array)

    Conventions:
        - Pillars are fixed at construction; only extrapolation can change
        - Extrapolation defaults to NaN (undefined past the last pillar)
    """

    def __init__(
        self,
        times: Sequence[float] = (),
        rates: Sequence[float] = (),
        extrapolation: float = NaN
    ):
        """
        Build a curve from pillar arrays.

        Args:
            times: Strictly increasing pillar times
            rates: Forward rate for each pillar
            extrapolation: Rate past the last pillar

        Raises:
            InvalidPillarsError: If times are not strictly increasing or
                the arrays differ in length
        """
        t = np.array(times, dtype=np.float64)
        f = np.array(rates, dtype=np.float64)

        if t.ndim != 1 or f.ndim != 1 or len(t) != len(f) or not pwflat.monotonic(t):
            raise InvalidPillarsError(
                f"invalid pillar sequence: times={t.tolist()}, rates={f.tolist()}"
            )

        t.flags.writeable = False
        f.flags.writeable = False
        self._t = t
        self._f = f
        self._extrapolation = float(extrapolation)

        logger.debug("Built %r", self)

    @classmethod
    def from_pillars(
        cls,
        pillars: Iterable[Tuple[float, float]],
        extrapolation: float = NaN
    ) -> "PiecewiseFlat":
        """Create curve from (time, rate) pairs."""
        pillars = list(pillars)
        times = [p[0] for p in pillars]
        rates = [p[1] for p in pillars]

        return cls(times, rates, extrapolation)

    @property
    def times(self) -> np.ndarray:
        return self._t

    @property
    def rates(self) -> np.ndarray:
        return self._f

    def value(self, u: float) -> float:
        return pwflat.value(u, self._t, self._f, self._extrapolation)

    def integral(self, u: float, t: float = 0.0) -> float:
        """Integral of the forward from t to u, as I(u) - I(t)."""
        return (pwflat.integral(u, self._t, self._f, self._extrapolation)
                - pwflat.integral(t, self._t, self._f, self._extrapolation))

    def spot(self, u: float, t: float = 0.0) -> float:
        """
        Spot rate over [t, u].

        From time 0 the kernel's closed form is used, which is exact (and
        defined at u = 0) on the flat stretch before the first pillar.
        """
        if t == 0:
            return pwflat.spot(u, self._t, self._f, self._extrapolation)

        return super().spot(u, t)

    def back(self) -> Tuple[float, float]:
        """
        Last pillar.

        Raises:
            EmptyCurveError: If the curve has no pillars
        """
        if len(self._t) == 0:
            logger.debug("back() called on curve without pillars")
            raise EmptyCurveError("empty curve")

        return (float(self._t[-1]), float(self._f[-1]))

    def get_extrapolation(self) -> float:
        return self._extrapolation

    def set_extrapolation(self, f: float) -> None:
        logger.debug("Extrapolation changed from %s to %s", self._extrapolation, f)
        self._extrapolation = float(f)

    def get_pillars(self) -> List[Tuple[float, float]]:
        """
        Get all pillars.

        Returns:
            List of (time, rate) tuples
        """
        return [(float(t), float(f)) for t, f in zip(self._t, self._f)]

    def roll(self, u: float) -> "PiecewiseFlat":
        """
        Create a new curve seen from time u.

        Pillar times are shifted by -u and pillars at or before u are
        dropped, so new.value(s) == self.value(s + u) for s > 0.

        Args:
            u: Year fraction to roll forward by

        Returns:
            New rolled curve with the same extrapolation value
        """
        times = self._t.copy()
        with pwflat.translated(u, times) as live:
            rates = self._f[len(self._f) - len(live):]
            return PiecewiseFlat(live, rates, self._extrapolation)

    def __repr__(self) -> str:
        return (f"PiecewiseFlat(pillars={len(self._t)}, "
                f"extrapolation={self._extrapolation})")


def create_flat_curve(rate: float) -> PiecewiseFlat:
    """
    Create a flat forward curve.

    Args:
        rate: Flat continuously compounded forward rate

    Returns:
        Curve without pillars, extrapolating rate everywhere
    """
    return PiecewiseFlat(extrapolation=rate)


__all__ = [
    "PiecewiseFlat",
    "create_flat_curve",
]
