import pytest

from specfun.polevl import p1evl, polevl


def test_constant_polynomial():
    assert polevl(123.5, [4.25]) == 4.25


def test_value_at_zero_is_constant_term():
    coef = [3.0, -2.0, 7.5, 0.125]
    assert polevl(0.0, coef) == coef[-1]


def test_value_at_one_is_sum_of_integer_coefficients():
    coef = [3.0, -2.0, 7.0, 11.0]
    assert polevl(1.0, coef) == sum(coef)


def test_known_quadratic():
    assert polevl(2.0, [1.0, 2.0, 3.0]) == 11.0


def test_p1evl_matches_polevl_with_explicit_leading_one():
    coef = [0.5, -1.25, 3.0, 2.0]
    for x in (-3.0, -0.5, 0.0, 0.75, 4.0):
        assert p1evl(x, coef) == polevl(x, [1.0, *coef])


def test_p1evl_at_zero_is_last_coefficient():
    assert p1evl(0.0, [5.0, 6.0, -9.5]) == -9.5


def test_p1evl_without_coefficients_is_one():
    assert p1evl(17.0, []) == 1.0


def test_polevl_rejects_empty():
    with pytest.raises(ValueError):
        polevl(1.0, [])


def test_accepts_tuples():
    assert polevl(-1.0, (1.0, 1.0)) == 0.0