"""Kolmogorov and Smirnov goodness-of-fit distributions and their inverses."""

from __future__ import annotations

import math
import operator

from .errors import DomainError, ErrorCode, OverflowRangeError, UnderflowRangeError

_MAXLOG = 7.09782712893383996843e2


def _smirnov(n: int, e: float) -> float:
    """Exact one-sided Smirnov probability, or -1.0 for bad arguments."""
    if n <= 0 or e < 0.0 or e > 1.0:
        return -1.0
    if e == 0.0:
        return 1.0
    nn = math.floor(n * (1.0 - e))
    p = 0.0
    if n < 1013:
        c = 1.0
        for v in range(nn + 1):
            evn = e + v / n
            p += c * math.pow(evn, v - 1) * math.pow(1.0 - evn, n - v)
            c *= (n - v) / (v + 1)
    else:
        lgamnp1 = math.lgamma(n + 1)
        for v in range(nn + 1):
            evn = e + v / n
            omevn = 1.0 - evn
            if omevn > 0.0:
                t = (
                    lgamnp1
                    - math.lgamma(v + 1)
                    - math.lgamma(n - v + 1)
                    + (v - 1) * math.log(evn)
                    + (n - v) * math.log(omevn)
                )
                if t > -_MAXLOG:
                    p += math.exp(t)
    return p * e


def smirnov(n: int, e: float) -> float:
    """Probability that the one-sided deviation D+ of ``n`` samples exceeds ``e``."""
    n = operator.index(n)
    if n <= 0 or not 0.0 <= e <= 1.0:
        raise DomainError("smirnov", ErrorCode.DOMAIN)
    return _smirnov(n, e)


def kolmogorov(y: float) -> float:
    """Limiting probability that ``sqrt(n)`` times the two-sided deviation exceeds ``y``."""
    if y == 0.0:
        return 1.0
    x = -2.0 * y * y
    sign = 1.0
    p = 0.0
    r = 1.0
    while True:
        t = math.exp(x * r * r)
        p += sign * t
        if t == 0.0:
            break
        r += 1.0
        sign = -sign
        if not t / p > 1.1e-16:
            break
    return p + p


def smirnovi(n: int, p: float) -> float:
    """Find ``e`` such that ``smirnov(n, e) == p``."""
    n = operator.index(n)
    if p <= 0.0 or p > 1.0:
        raise DomainError("smirnovi", ErrorCode.DOMAIN)
    # Start from p = exp(-2 n e^2).
    e = math.sqrt(-math.log(p) / (2.0 * n))
    while True:
        t = -2.0 * n * e
        dpde = 2.0 * t * math.exp(t * e)
        if abs(dpde) > 0.0:
            t = (p - _smirnov(n, e)) / dpde
        else:
            raise UnderflowRangeError("smirnovi", ErrorCode.UNDERFLOW)
        e = e + t
        if e >= 1.0 or e <= 0.0:
            raise OverflowRangeError("smirnovi", ErrorCode.OVERFLOW)
        if not abs(t / e) > 1e-10:
            return e


def kolmogi(p: float) -> float:
    """Find ``y`` such that ``kolmogorov(y) == p``."""
    if p <= 0.0 or p > 1.0:
        raise DomainError("kolmogi", ErrorCode.DOMAIN)
    # Start from p = 2 exp(-2 y^2).
    y = math.sqrt(-0.5 * math.log(0.5 * p))
    while True:
        t = -2.0 * y
        dpdy = 4.0 * t * math.exp(t * y)
        if abs(dpdy) > 0.0:
            t = (p - kolmogorov(y)) / dpdy
        else:
            raise UnderflowRangeError("kolmogi", ErrorCode.UNDERFLOW)
        y = y + t
        if not abs(t / y) > 1e-10:
            return y