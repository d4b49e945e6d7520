"""
Piecewise flat forward rate kernel.

Free functions over raw pillar arrays. A curve with pillar times t[0..n-1],
rates f[0..n-1] and extrapolation value _f has forward

           { f[i]  if t[i-1] < u <= t[i]   (t[-1] = 0)
    f(u) = { _f    if u > t[n-1]
           { NaN   if u < 0

Conventions:
    - Times are year fractions, pillar times strictly increasing
    - Rates are continuously compounded
    - Inputs are not validated here; call monotonic() before building a curve
    - Domain errors return NaN instead of raising
"""

from contextlib import contextmanager
from typing import Iterator, Sequence

import numpy as np

NaN = float("nan")


def monotonic(seq: Sequence[float]) -> bool:
    """Return True if seq is strictly increasing (empty and singletons are)."""
    return all(a < b for a, b in zip(seq, seq[1:]))


def value(u: float, t: Sequence[float], f: Sequence[float], _f: float = NaN) -> float:
    """
    Forward rate at time u.

    Args:
        u: Query time
        t: Pillar times
        f: Pillar rates
        _f: Extrapolation value past the last pillar

    Returns:
        Rate of the first pillar with t[i] >= u, _f past the end, NaN if u < 0
    """
    if u < 0:
        return NaN
    n = len(t)
    if n == 0:
        return _f

    i = int(np.searchsorted(t, u, side="left"))

    return _f if i == n else float(f[i])


def integral(u: float, t: Sequence[float], f: Sequence[float], _f: float = NaN) -> float:
    """
    Integral of the forward rate from 0 to u.

    Sums the full intervals below u and the partial interval containing u.
    """
    if u < 0:
        return NaN
    if u == 0:
        return 0.0
    n = len(t)
    if n == 0:
        return u * _f

    I = 0.0
    t_ = 0.0
    i = 0
    while i < n and t[i] <= u:
        I += f[i] * (t[i] - t_)
        t_ = t[i]
        i += 1
    if u > t_:
        I += (_f if i == n else f[i]) * (u - t_)

    return float(I)


def discount(u: float, t: Sequence[float], f: Sequence[float], _f: float = NaN) -> float:
    """Discount factor D(u) = exp(-int_0^u f(s) ds)."""
    return float(np.exp(-integral(u, t, f, _f)))


def spot(u: float, t: Sequence[float], f: Sequence[float], _f: float = NaN) -> float:
    """
    Spot rate r(u) = (int_0^u f(s) ds) / u.

    The forward is flat up to the first pillar, so r(u) = f(u) for u <= t[0].
    """
    if len(t) == 0:
        return _f
    if u <= t[0]:
        return value(u, t, f, _f)

    return integral(u, t, f, _f) / u


def translate(u: float, t: np.ndarray) -> np.ndarray:
    """
    Shift pillar times by -u in place.

    Args:
        u: Time to roll forward by
        t: Writeable float array of increasing times

    Returns:
        View of t holding the shifted times that are still > 0
    """
    np.subtract(t, u, out=t)
    m = int(np.searchsorted(t, 0.0, side="right"))

    return t[m:]


@contextmanager
def translated(u: float, t: np.ndarray) -> Iterator[np.ndarray]:
    """
    Scoped translate(): yield the rolled view, then shift t back by +u.

    The original times are restored on every exit path.

    Example:
        >>> times = np.array([1.0, 2.0, 4.0])
        >>> with translated(1.0, times) as live:
        ...     live.tolist()
        [1.0, 3.0]
        >>> times.tolist()
        [1.0, 2.0, 4.0]
    """
    view = translate(u, t)
    try:
        yield view
    finally:
        translate(-u, t)


__all__ = [
    "NaN",
    "monotonic",
    "value",
    "integral",
    "discount",
    "spot",
    "translate",
    "translated",
]
