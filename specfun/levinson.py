"""Levinson-Durbin solution of the linear prediction equations."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

_ERROR_FLOOR = 1.0e-2


@dataclass
class LevinsonResult:
    """Predictor coefficients, prediction errors and reflection coefficients.

    ``a[0]`` is unused and left at zero; the filter's leading 1.0 is implied.
    """

    a: list[float]
    e: list[float]
    refl: list[float]


def levinson(r: Sequence[float], n: int | None = None) -> LevinsonResult:
    """Solve the Toeplitz system for predictor coefficients of order ``n - 1``.

    ``r`` is the autocorrelation with ``r[0]`` the zero lag term. The
    recursion stops early once the prediction error falls below 0.01,
    leaving the remaining entries at zero.
    """
    if n is None:
        n = len(r)
    if n < 2:
        raise ValueError("levinson needs an order of at least 2")
    if len(r) < n:
        raise ValueError("autocorrelation is shorter than the order")

    a = [0.0] * n
    e = [0.0] * n
    refl = [0.0] * n

    r0 = r[0]
    e[0] = r0
    err = r0

    akk = -r[1] / err
    err = (1.0 - akk * akk) * err
    e[1] = err
    a[1] = akk
    refl[1] = akk
    if err < _ERROR_FLOOR:
        return LevinsonResult(a, e, refl)

    for k in range(2, n):
        t = sum(a[j] * r[k - j] for j in range(1, k))
        akk = -(r[k] + t) / err
        refl[k] = akk
        a[1:k] = [a[j] + akk * a[k - j] for j in range(1, k)]
        a[k] = akk
        err1 = (1.0 - akk * akk) * err
        e[k] = err1
        err1 = abs(err1)
        if err1 < _ERROR_FLOOR:
            break
        err = err1

    return LevinsonResult(a, e, refl)