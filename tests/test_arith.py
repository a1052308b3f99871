import pytest

from barustenberg.arith import add, mult


def test_add():
    assert add(3, 2) == 5


def test_mult():
    assert mult(3, 2) == 6


@pytest.mark.parametrize("a, b", [(0, 0), (7, -7), (100, 99), (-5, 12)])
def test_add_is_commutative(a, b):
    assert add(a, b) == add(b, a)


@pytest.mark.parametrize("a", [0, 1, -3, 42])
def test_mult_by_one_is_identity(a):
    assert mult(a, 1) == a


@pytest.mark.parametrize("a", [0, 1, -3, 42])
def test_add_zero_is_identity(a):
    assert add(a, 0) == a