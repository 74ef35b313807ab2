"""Natural, common and base-2 logarithms by rational approximation."""

from __future__ import annotations

import math

from .errors import DomainError, ErrorCode, SingularityError
from .polevl import p1evl, polevl

_SQRTH = 0.70710678118654752440

# log(1+x) = x - x**2/2 + x**3 P(x)/Q(x), 1/sqrt(2) <= 1+x < sqrt(2)
_P = (
    1.01875663804580931796e-4,
    4.97494994976747001425e-1,
    4.70579119878881725854e0,
    1.44989225341610930846e1,
    1.79368678507819816313e1,
    7.70838733755885391666e0,
)
_Q = (
    1.12873587189167450590e1,
    4.52279145837532221105e1,
    8.29875266912776603211e1,
    7.11544750618563894466e1,
    2.31251620126765340583e1,
)

# log(x) = z + z**3 R(z)/S(z), z = 2(x-1)/(x+1)
_R = (
    -7.89580278884799154124e-1,
    1.63866645699558079767e1,
    -6.41409952958715622951e1,
)
_S = (
    -3.56722798256324312549e1,
    3.12093766372244180303e2,
    -7.69691943550460008604e2,
)

# Coefficients used by log10.
_P10 = (
    4.58482948458143443514e-5,
    4.98531067254050724270e-1,
    6.56312093769992875930e0,
    2.97877425097986925891e1,
    6.06127134467767258030e1,
    5.67349287391754285487e1,
    1.98892446572874072159e1,
)
_Q10 = (
    1.50314182634250003249e1,
    8.27410449222435217021e1,
    2.20664384982121929218e2,
    3.07254189979530058263e2,
    2.14955586696422947765e2,
    5.96677339718622216300e1,
)

_LN2_HI = 0.693359375
_LN2_LO = 2.121944400546905827679e-4
_L102A = 3.0078125e-1
_L102B = 2.48745663981195213739e-4
_L10EA = 4.3359375e-1
_L10EB = 7.00731903251827651129e-4
_LOG2EA = 0.44269504088896340735992


def _special(x: float, name: str) -> float | None:
    """Return the result for NaN and +inf, raise for x <= 0, else None."""
    if math.isnan(x):
        return x
    if x == math.inf:
        return x
    if x <= 0.0:
        if x == 0.0:
            raise SingularityError(name, ErrorCode.SING)
        raise DomainError(name, ErrorCode.DOMAIN)
    return None


def _wide_fraction(m: float, e: int) -> tuple[float, float, int]:
    """Reduce for the z = 2(x-1)/(x+1) form; returns (z, z**3 R/S, e)."""
    if m < _SQRTH:
        e -= 1
        z = m - 0.5
        y = 0.5 * z + 0.5
    else:
        z = m - 0.5
        z -= 0.5
        y = 0.5 * m + 0.5
    t = z / y
    zz = t * t
    return t, t * (zz * polevl(zz, _R) / p1evl(zz, _S)), e


def _near_one(m: float, e: int) -> tuple[float, int]:
    """Shift the mantissa so it lies near zero as log(1+x) expects."""
    if m < _SQRTH:
        return math.ldexp(m, 1) - 1.0, e - 1
    return m - 1.0, e


def log(x: float) -> float:
    """Natural logarithm of ``x``."""
    special = _special(x, "log")
    if special is not None:
        return special
    m, e = math.frexp(x)

    if e > 2 or e < -2:
        t, z, e = _wide_fraction(m, e)
        z = z - e * _LN2_LO
        z = z + t
        z = z + e * _LN2_HI
        return z

    t, e = _near_one(m, e)
    z = t * t
    y = t * (z * polevl(t, _P) / p1evl(t, _Q))
    if e:
        y = y - e * _LN2_LO
    y = y - math.ldexp(z, -1)
    z = t + y
    if e:
        z = z + e * _LN2_HI
    return z


def log10(x: float) -> float:
    """Common (base 10) logarithm of ``x``."""
    special = _special(x, "log10")
    if special is not None:
        return special
    m, e = math.frexp(x)
    t, e = _near_one(m, e)

    z = t * t
    y = t * (z * polevl(t, _P10) / p1evl(t, _Q10))
    y = y - math.ldexp(z, -1)

    # Accumulate terms in order of increasing size.
    z = (t + y) * _L10EB
    z += y * _L10EA
    z += t * _L10EA
    z += e * _L102B
    z += e * _L102A
    return z


def log2(x: float) -> float:
    """Base 2 logarithm of ``x``."""
    special = _special(x, "log2")
    if special is not None:
        return special
    m, e = math.frexp(x)

    if e > 2 or e < -2:
        t, y, e = _wide_fraction(m, e)
    else:
        t, e = _near_one(m, e)
        z = t * t
        y = t * (z * polevl(t, _P) / p1evl(t, _Q)) - math.ldexp(z, -1)

    # log of fraction times log2(e), exponent added exactly; order matters.
    z = y * _LOG2EA
    z += t * _LOG2EA
    z += y
    z += t
    z += e
    return z