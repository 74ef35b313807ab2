"""Modified Bessel function of the third kind, integer order."""

from __future__ import annotations

import math
import operator

from .errors import (
    DomainError,
    ErrorCode,
    OverflowRangeError,
    SingularityError,
    UnderflowRangeError,
)

_EUL = 5.772156649015328606065e-1
_MAXFAC = 31
_MACHEP = 1.11022302462515654042e-16
_MAXNUM = 1.79769313486231570815e308
_MAXLOG = 7.09782712893383996843e2


def _overflow() -> OverflowRangeError:
    return OverflowRangeError("kn", ErrorCode.OVERFLOW)


def _asymptotic(n: int, x: float) -> float:
    """Asymptotic expansion, converging to about 1.4e-17 for x > 18.4."""
    if x > _MAXLOG:
        raise UnderflowRangeError("kn", ErrorCode.UNDERFLOW)
    pn = 4.0 * n * n
    pk = 1.0
    z0 = 8.0 * x
    fn = 1.0
    t = 1.0
    s = t
    nkf = _MAXNUM
    i = 0
    while True:
        z = pn - pk * pk
        t = t * z / (fn * z0)
        nk1f = abs(t)
        if i >= n and nk1f > nkf:
            break
        nkf = nk1f
        s += t
        fn += 1.0
        pk += 2.0
        i += 1
        if abs(t / s) <= _MACHEP:
            break
    return math.exp(-x) * math.sqrt(math.pi / (2.0 * x)) * s


def kn(n: int, x: float) -> float:
    """Modified Bessel function of the third kind of order ``n``.

    A power series is used for ``x <= 9.55`` and an asymptotic expansion
    above it.
    """
    n = abs(operator.index(n))
    if n > _MAXFAC:
        raise _overflow()
    if x <= 0.0:
        if x < 0.0:
            raise DomainError("kn", ErrorCode.DOMAIN)
        raise SingularityError("kn", ErrorCode.SING)

    if x > 9.55:
        return _asymptotic(n, x)

    ans = 0.0
    z0 = 0.25 * x * x
    fn = 1.0
    pn = 0.0
    zmn = 1.0
    tox = 2.0 / x

    if n > 0:
        # Factorial of n and psi(n).
        pn = -_EUL
        k = 1.0
        for _ in range(1, n):
            pn += 1.0 / k
            k += 1.0
            fn *= k

        zmn = tox

        if n == 1:
            ans = 1.0 / x
        else:
            nk1f = fn / n
            kf = 1.0
            s = nk1f
            z = -z0
            zn = 1.0
            for i in range(1, n):
                nk1f = nk1f / (n - i)
                kf = kf * i
                zn *= z
                t = nk1f * zn / kf
                s += t
                if (_MAXNUM - abs(t)) < abs(s):
                    raise _overflow()
                if tox > 1.0 and (_MAXNUM / tox) < zmn:
                    raise _overflow()
                zmn *= tox
            s *= 0.5
            t = abs(s)
            if zmn > 1.0 and (_MAXNUM / zmn) < t:
                raise _overflow()
            if t > 1.0 and (_MAXNUM / t) < zmn:
                raise _overflow()
            ans = s * zmn

    tlg = 2.0 * math.log(0.5 * x)
    pk = -_EUL
    if n == 0:
        pn = pk
        t = 1.0
    else:
        pn = pn + 1.0 / n
        t = 1.0 / fn
    s = (pk + pn - tlg) * t
    k = 1.0
    while True:
        t *= z0 / (k * (k + n))
        pk += 1.0 / k
        pn += 1.0 / (k + n)
        s += (pk + pn - tlg) * t
        k += 1.0
        if abs(t / s) <= _MACHEP:
            break

    s = 0.5 * s / zmn
    if n & 1:
        s = -s
    return ans + s