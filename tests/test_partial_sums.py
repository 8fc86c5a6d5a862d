import pytest

from drills.partial_sums import parts_sums


def _numbers(text):
    return [int(token) for token in text.split()]


LONG_INPUT = _numbers(
    """
    81 12 20 80 69 77 5 39 94 91
    13 28 84 29 92 64 40 9 68 22
    67 23 48 42 76 96 90 62 72 60
    75 1 51 31 100 18 7 2 49 14
    15 97 95 32 93 4
    """
)

LONG_EXPECTED = _numbers(
    """
    2337 2333 2240 2208 2113 2016 2001 1987 1938 1936
    1929 1911 1811 1780 1729 1728 1653 1593 1521 1459
    1369 1273 1197 1155 1107 1084 1017 995 927 918
    878 814 722 693 609 581 568 477 383 344
    339 262 193 113 93 81 0
    """
)


@pytest.mark.parametrize(
    ("values", "expected"),
    [
        ([1, 2, 3, 4, 5], [15, 10, 6, 3, 1, 0]),
        ([5, 18, 3, 23], [49, 26, 23, 5, 0]),
        ([0] * 5, [0] * 6),
    ],
)
def test_simple(values, expected):
    assert parts_sums(values) == expected


def test_complex_short():
    result = parts_sums([22515, 82, 10190, 563, 2, 39041])
    assert result == [72393, 33352, 33350, 32787, 22597, 22515, 0]


def test_complex_long():
    assert parts_sums(LONG_INPUT) == LONG_EXPECTED


def test_empty():
    assert parts_sums([]) == [0]


def test_shape_invariants():
    values = [7, 3, 9, 1]
    result = parts_sums(values)
    assert len(result) == len(values) + 1
    assert result[0] == sum(values)
    assert result[-1] == 0
    assert result == sorted(result, reverse=True)