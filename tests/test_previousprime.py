import pytest

from drills.previousprime import is_prime, prev_prime


def test_prev_prime():
    assert prev_prime(0) == 0
    assert prev_prime(2) == 0
    assert prev_prime(3) == 2
    assert prev_prime(5) == 3
    assert prev_prime(34) == 31
    assert prev_prime(633) == 631
    assert prev_prime(478152) == 478139


def test_prev_prime_of_one():
    assert prev_prime(1) == 0


@pytest.mark.parametrize("n,expected", [(0, False), (1, False), (2, True), (9, False), (31, True)])
def test_is_prime(n, expected):
    assert is_prime(n) is expected


def test_negative_rejected():
    with pytest.raises(ValueError):
        prev_prime(-4)