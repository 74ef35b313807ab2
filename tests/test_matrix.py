import pytest

from specfun.matrix import transpose


def test_swaps_off_diagonal_elements():
    m = [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0], [7.0, 8.0, 9.0]]
    t = transpose(m)
    for i in range(3):
        for j in range(3):
            assert t[i][j] == m[j][i]


def test_diagonal_kept():
    m = [[1.0, 2.0], [3.0, 4.0]]
    t = transpose(m)
    assert [t[0][0], t[1][1]] == [1.0, 4.0]


def test_double_transpose_is_identity():
    m = [[1.5, -2.0, 0.0, 3.0], [4.0, 5.0, 6.0, 7.0], [8.0, 9.0, 1.0, 2.0], [0.5, 0.25, 0.125, 1.0]]
    assert transpose(transpose(m)) == m


def test_input_left_unchanged():
    m = [[1.0, 2.0], [3.0, 4.0]]
    transpose(m)
    assert m == [[1.0, 2.0], [3.0, 4.0]]


def test_single_element_and_empty():
    assert transpose([[7.0]]) == [[7.0]]
    assert transpose([]) == []


def test_non_square_raises():
    with pytest.raises(ValueError):
        transpose([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])