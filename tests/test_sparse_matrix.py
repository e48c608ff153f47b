import pytest

from algolab.sparse_matrix import Triple, TriSparseMatrix, main

TRIS = [
    Triple(0, 0, 15), Triple(0, 3, 22), Triple(0, 5, -5),
    Triple(1, 1, 11), Triple(1, 2, 3), Triple(2, 3, 6),
    Triple(4, 0, 91), Triple(5, 1, 7), Triple(6, 2, 28),
]


@pytest.fixture
def matrix():
    return TriSparseMatrix(7, 6, TRIS)


def test_str_small_matrix():
    m = TriSparseMatrix(2, 2, [Triple(0, 0, 1), Triple(1, 1, 2)])
    assert str(m) == "[  1  0  ]\n[  0  2  ]\n"


def test_str_has_one_line_per_row(matrix):
    lines = str(matrix).splitlines()
    assert len(lines) == matrix.rows
    assert all(line.startswith("[  ") and line.endswith("]") for line in lines)


def test_transposes_agree(matrix):
    assert matrix.simple_transpose() == matrix.fast_transpose()


def test_transpose_swaps_shape(matrix):
    t = matrix.fast_transpose()
    assert (t.rows, t.cols) == (matrix.cols, matrix.rows)
    assert len(t) == len(matrix)


def test_double_transpose_restores(matrix):
    assert matrix.fast_transpose().fast_transpose() == matrix
    assert matrix.simple_transpose().simple_transpose() == matrix


def test_transpose_moves_every_entry(matrix):
    moved = {(t.col, t.row, t.value) for t in matrix.fast_transpose().triples}
    assert moved == {(t.row, t.col, t.value) for t in TRIS}


def test_transpose_is_row_major(matrix):
    keys = [(t.row, t.col) for t in matrix.fast_transpose().triples]
    assert keys == sorted(keys)


def test_tuples_accepted():
    assert TriSparseMatrix(2, 2, [(1, 0, 4)]) == TriSparseMatrix(2, 2, [Triple(1, 0, 4)])


def test_copy_is_equal_and_distinct(matrix):
    clone = matrix.copy()
    assert clone == matrix
    assert clone is not matrix


def test_entry_outside_shape_rejected():
    with pytest.raises(ValueError):
        TriSparseMatrix(2, 2, [Triple(2, 0, 1)])


def test_negative_shape_rejected():
    with pytest.raises(ValueError):
        TriSparseMatrix(-1, 2)


def test_main_prints_matrix_and_transpose(tmp_path, capsys, matrix):
    numbers = [7, 6, len(TRIS)] + [n for t in TRIS for n in (t.row, t.col, t.value)]
    source = tmp_path / "matrix.txt"
    source.write_text(" ".join(map(str, numbers)), encoding="utf-8")
    assert main([str(source)]) == 0
    out = capsys.readouterr().out
    assert out == str(matrix) + "\n" + str(matrix.fast_transpose())


def test_main_rejects_short_input(tmp_path):
    source = tmp_path / "matrix.txt"
    source.write_text("3 3 2 0 0 1", encoding="utf-8")
    with pytest.raises(ValueError):
        main([str(source)])