import math

import pytest

from specfun.errors import DomainError, ErrorCode
from specfun.normal import erf, erfc, ndtr, ndtri

ARGS = [-7.5, -3.0, -1.2, -0.9, -0.3, 0.0, 0.25, 0.8, 1.0, 1.7, 4.0, 9.0, 20.0]


@pytest.mark.parametrize("x", ARGS)
def test_erf_matches_stdlib(x):
    assert erf(x) == pytest.approx(math.erf(x), rel=1e-14, abs=1e-16)


@pytest.mark.parametrize("x", ARGS)
def test_erfc_matches_stdlib(x):
    assert erfc(x) == pytest.approx(math.erfc(x), rel=1e-13, abs=1e-300)


@pytest.mark.parametrize("x", [0.1, 0.7, 1.5, 3.3, 6.0])
def test_erf_is_odd(x):
    assert erf(-x) == -erf(x)


@pytest.mark.parametrize("x", [-2.5, -0.5, 0.4, 1.3, 2.9])
def test_erf_plus_erfc_is_one(x):
    assert erf(x) + erfc(x) == pytest.approx(1.0, abs=1e-15)


def test_erfc_underflow_values():
    assert erfc(50.0) == 0.0
    assert erfc(-50.0) == 2.0


def test_erf_of_zero():
    assert erf(0.0) == 0.0
    assert ndtr(0.0) == 0.5


@pytest.mark.parametrize("x", [-10.0, -3.0, -1.0, -0.2, 0.6, 2.0, 5.0])
def test_ndtr_matches_erfc_relation(x):
    expected = 0.5 * math.erfc(-x / math.sqrt(2.0))
    assert ndtr(x) == pytest.approx(expected, rel=1e-13)


@pytest.mark.parametrize("x", [0.3, 1.1, 2.4, 4.5])
def test_ndtr_symmetry(x):
    assert ndtr(x) + ndtr(-x) == pytest.approx(1.0, abs=1e-15)


def test_ndtr_is_monotone():
    values = [ndtr(x / 4.0) for x in range(-40, 41)]
    assert all(a <= b for a, b in zip(values, values[1:]))


def test_ndtri_of_half_is_zero():
    assert ndtri(0.5) == 0.0


@pytest.mark.parametrize("p", [1e-300, 1e-50, 1e-20, 1e-10, 0.01, 0.1, 0.2, 0.5, 0.7, 0.95])
def test_ndtri_round_trip(p):
    assert ndtr(ndtri(p)) == pytest.approx(p, rel=1e-10)


@pytest.mark.parametrize("p", [1e-8, 0.05, 0.3])
def test_ndtri_antisymmetry(p):
    assert ndtri(1.0 - p) == pytest.approx(-ndtri(p), rel=1e-8)


@pytest.mark.parametrize("p", [1e-5, 0.02, 0.4])
def test_ndtri_sign(p):
    assert ndtri(p) < 0.0 < ndtri(1.0 - p)


@pytest.mark.parametrize("y", [0.0, 1.0, -0.1, 1.5])
def test_ndtri_domain(y):
    with pytest.raises(DomainError) as info:
        ndtri(y)
    assert info.value.code is ErrorCode.DOMAIN
    assert info.value.function == "ndtri"