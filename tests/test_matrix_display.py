from drills.matrix_display import Matrix


def _parse(text):
    return [
        [int(x) for x in line[1:-1].split()] for line in text.split("\n")
    ]


def test_example_matrix():
    matrix = Matrix([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
    assert str(matrix) == "(1 2 3)\n(4 5 6)\n(7 8 9)"


def test_one_line_per_row():
    rows = [[1, 2], [3, 4], [5, 6], [7, 8]]
    lines = str(Matrix(rows)).split("\n")
    assert len(lines) == len(rows)
    assert all(line.startswith("(") and line.endswith(")") for line in lines)


def test_round_trip_with_negatives():
    rows = [[-5, 0, 12], [7, -1, 3]]
    assert _parse(str(Matrix(rows))) == rows


def test_rows_are_copied():
    source = [[1, 2], [3, 4]]
    matrix = Matrix(source)
    source[0][0] = 99
    assert matrix.rows == [[1, 2], [3, 4]]


def test_empty_matrix_prints_nothing():
    assert str(Matrix([])) == ""


def test_accepts_tuples():
    assert Matrix(((1, 2), (3, 4))) == Matrix([[1, 2], [3, 4]])