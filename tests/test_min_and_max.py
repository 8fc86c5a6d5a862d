import pytest

from drills.min_and_max import min_and_max


@pytest.mark.parametrize(
    "args, expected",
    [
        ((0, 0, 0), (0, 0)),
        ((1, 2, 3), (1, 3)),
        ((-1, -2, -3), (-3, -1)),
        ((14, -12, 3), (-12, 14)),
    ],
)
def test_min_and_max(args, expected):
    assert min_and_max(*args) == expected


def test_order_does_not_matter():
    assert min_and_max(9, 2, 4) == min_and_max(4, 9, 2)