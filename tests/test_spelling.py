import pytest

from drills.spelling import spell


@pytest.mark.parametrize(
    "n, expected",
    [
        (0, "zero"),
        (1, "one"),
        (14, "fourteen"),
        (20, "twenty"),
        (22, "twenty-two"),
        (101, "one hundred one"),
        (120, "one hundred twenty"),
        (123, "one hundred twenty-three"),
        (1000, "one thousand"),
        (1055, "one thousand fifty-five"),
        (1234, "one thousand two hundred thirty-four"),
        (10123, "ten thousand one hundred twenty-three"),
        (910112, "nine hundred ten thousand one hundred twelve"),
        (651123, "six hundred fifty-one thousand one hundred twenty-three"),
        (810000, "eight hundred ten thousand"),
        (1000000, "one million"),
    ],
)
def test_one(n, expected):
    assert spell(n) == expected


def test_thousand_with_small_remainder():
    assert spell(1002) == "one thousand two"


@pytest.mark.parametrize("n", [-1, 1000001])
def test_out_of_range(n):
    with pytest.raises(ValueError):
        spell(n)