import math

import pytest

from tableau_simplex.builder import build_tableau
from tableau_simplex.errors import DegeneratePivotError
from tableau_simplex.model import LinearProgram, ProblemOrientation, Tableau
from tableau_simplex.pivot import minimum_ratio_row, pivot, ratio, ratios


def tableau_from(objective_row, rows):
    n_vars = len(objective_row) - len(rows)
    names = [f"c{j}" for j in range(len(objective_row))]
    return Tableau(objective_row, rows, names, ProblemOrientation.PRIMAL, n_vars=n_vars)


@pytest.mark.parametrize("coefficient, rhs, expected", [
    (2.0, 4.0, 2.0),
    (2.0, 0.0, 0.0),
    (2.0, -4.0, None),
    (-2.0, 4.0, None),
    (-2.0, -4.0, 2.0),
    (0.0, 4.0, None),
    (-0.0, 4.0, None),
])
def test_ratio_sign_table(coefficient, rhs, expected):
    assert ratio(coefficient, rhs) == expected


def test_minimum_ratio_example():
    # entering column [2, -1, 3], rhs [4, 5, 9]
    tab = tableau_from([1.0, 0.0, 0.0, 0.0], [[2.0, 1.0, 0.0, 0.0, 4.0],
                                              [-1.0, 0.0, 1.0, 0.0, 5.0],
                                              [3.0, 0.0, 0.0, 1.0, 9.0]])
    assert ratios(tab, 0) == [2.0, None, 3.0]
    assert minimum_ratio_row(tab, 0) == 0


def test_minimum_ratio_ties_go_to_first_row():
    tab = tableau_from([1.0, 0.0, 0.0], [[1.0, 1.0, 0.0, 2.0], [2.0, 0.0, 1.0, 4.0]])
    assert minimum_ratio_row(tab, 0) == 0


def test_minimum_ratio_none_when_column_never_limits():
    tab = tableau_from([1.0, 0.0, 0.0], [[-1.0, 1.0, 0.0, 2.0], [0.0, 0.0, 1.0, 4.0]])
    assert minimum_ratio_row(tab, 0) is None


def test_pivot_is_gauss_jordan_step():
    lp = LinearProgram(objective=[3, 2], constraints=[[-1, -1, -4], [-1, -3, -6]])
    tab = build_tableau(lp, "primal")
    transformed = pivot(tab, 0, 0)

    assert transformed == [-1.0, -1.0, -1.0, -0.0, -4.0]
    assert tab.rows[0] == [1.0, 1.0, 1.0, 0.0, 4.0]
    assert tab.rows[1] == [0.0, 2.0, -1.0, 1.0, 2.0]
    assert tab.objective_row == [0.0, -1.0, -3.0, 0.0]
    assert tab.running_cost == -12.0
    assert tab.basis == [0, 3]


def test_pivot_normalises_pivot_row_and_clears_column():
    tab = tableau_from([4.0, 6.0, 0.0, 0.0], [[1.0, 2.0, 1.0, 0.0, 3.0], [1.0, 1.0, 0.0, 1.0, 2.0]])
    pivot(tab, 0, 1)
    assert tab.rows[0] == [0.5, 1.0, 0.5, 0.0, 1.5]
    assert tab.column(1) == [1.0, 0.0]
    assert tab.objective_row[1] == 0.0
    assert tab.running_cost == pytest.approx(-9.0)


def test_zero_pivot_fails_loudly():
    tab = tableau_from([1.0, 1.0, 0.0], [[0.0, 1.0, 1.0, 2.0]])
    before = [row[:] for row in tab.rows]
    with pytest.raises(DegeneratePivotError):
        pivot(tab, 0, 0)
    assert tab.rows == before
    assert all(not math.isnan(v) for v in tab.rows[0])
