"""Horner evaluation of polynomials with descending coefficients."""

from __future__ import annotations

from collections.abc import Sequence


def polevl(x: float, coef: Sequence[float]) -> float:
    """Evaluate ``coef[0]*x**N + ... + coef[N]`` where ``N = len(coef) - 1``."""
    if not coef:
        raise ValueError("polevl needs at least one coefficient")
    iterator = iter(coef)
    ans = float(next(iterator))
    for c in iterator:
        ans = ans * x + c
    return ans


def p1evl(x: float, coef: Sequence[float]) -> float:
    """Evaluate a monic polynomial whose leading 1.0 is left out of ``coef``."""
    ans = 1.0
    for c in coef:
        ans = ans * x + c
    return ans