import pytest

from drills.inv_pyramid import inv_pyramid


def test_empty():
    assert inv_pyramid("#", 0) == []


def test_one():
    assert inv_pyramid("#", 1) == [" #"]


def test_two():
    assert inv_pyramid("a", 2) == [" a", "  aa", " a"]


def test_five():
    assert inv_pyramid(">", 5) == [
        " >",
        "  >>",
        "   >>>",
        "    >>>>",
        "     >>>>>",
        "    >>>>",
        "   >>>",
        "  >>",
        " >",
    ]


def test_eight():
    assert inv_pyramid("&", 8) == [
        " &",
        "  &&",
        "   &&&",
        "    &&&&",
        "     &&&&&",
        "      &&&&&&",
        "       &&&&&&&",
        "        &&&&&&&&",
        "       &&&&&&&",
        "      &&&&&&",
        "     &&&&&",
        "    &&&&",
        "   &&&",
        "  &&",
        " &",
    ]


def test_negative_height():
    with pytest.raises(ValueError):
        inv_pyramid("x", -1)