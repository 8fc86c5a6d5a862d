from drills.smallest import smallest


def test_positive():
    f = {"Cat": 12, "Dog": 333, "Elephant": 334, "Gorilla": 14, "Dolphin": 2}
    assert smallest(f) == 2


def test_negative():
    f = {
        "Daniel": 41758712,
        "Ashley": 54551444,
        "Katie": 575556334,
        "Roberti": 574148,
        "Robert": -4,
    }
    assert smallest(f) == -4


def test_zero():
    f = {"Mars": 1223, "Jupiter": 33343, "Saturn": 12443334, "Neptune": 14, "Venus": 0}
    assert smallest(f) == 0


def test_empty():
    assert smallest({}) == 2147483647