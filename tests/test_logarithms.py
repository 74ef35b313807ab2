import math

import pytest

from specfun.errors import DomainError, ErrorCode, SingularityError
from specfun.logarithms import log, log10, log2

SAMPLES = [
    5e-324,
    1e-300,
    1e-10,
    0.001,
    0.3,
    0.70710678118654752440,
    0.9,
    1.0,
    1.1,
    1.41421356237309492343,
    2.0,
    3.5,
    7.0,
    10.0,
    1234.5,
    1e100,
    1.7e308,
]


@pytest.mark.parametrize("x", SAMPLES)
def test_log_matches_math(x):
    assert log(x) == pytest.approx(math.log(x), rel=4e-16, abs=1e-300)


@pytest.mark.parametrize("x", SAMPLES)
def test_log10_matches_math(x):
    assert log10(x) == pytest.approx(math.log10(x), rel=4e-16, abs=1e-300)


@pytest.mark.parametrize("x", SAMPLES)
def test_log2_matches_math(x):
    assert log2(x) == pytest.approx(math.log2(x), rel=4e-16, abs=1e-300)


def test_log_of_one_is_zero():
    assert log(1.0) == 0.0
    assert log10(1.0) == 0.0
    assert log2(1.0) == 0.0


@pytest.mark.parametrize("k", [-1074, -1022, -5, -3, -1, 1, 3, 10, 1023])
def test_log2_of_powers_of_two_is_exact(k):
    assert log2(math.ldexp(1.0, k)) == float(k)


@pytest.mark.parametrize("x", [0.25, 3.0, 17.0, 1e50])
def test_log_of_product_is_sum(x):
    assert log(x * 2.0) == pytest.approx(log(x) + log(2.0), rel=1e-15)


@pytest.mark.parametrize("func, name", [(log, "log"), (log10, "log10"), (log2, "log2")])
def test_zero_is_singular(func, name):
    with pytest.raises(SingularityError) as info:
        func(0.0)
    assert info.value.function == name
    assert info.value.code is ErrorCode.SING


@pytest.mark.parametrize("func", [log, log10, log2])
@pytest.mark.parametrize("x", [-1.0, -1e-300, -math.inf])
def test_negative_is_domain_error(func, x):
    with pytest.raises(DomainError) as info:
        func(x)
    assert info.value.code is ErrorCode.DOMAIN


@pytest.mark.parametrize("func", [log, log10, log2])
def test_nan_passes_through(func):
    assert math.isnan(func(math.nan))


@pytest.mark.parametrize("func", [log, log10, log2])
def test_infinity_passes_through(func):
    assert func(math.inf) == math.inf


def test_logs_are_increasing():
    values = [log(x) for x in SAMPLES]
    assert values == sorted(values)
    assert len(set(values)) == len(values)