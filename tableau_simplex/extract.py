"""Reads variable values and the optimum out of a terminal tableau."""

from typing import List, Optional

from .model import ProblemOrientation, Tableau


def _clean(x: float) -> float:
    # drop the sign of -0.0
    return x + 0.0


def basic_value(tableau: Tableau, col: int) -> Optional[float]:
    """
    Value of column ``col`` if it is basic, else None.

    A basic column has a zero objective-row entry; its row is the one with
    the largest coefficient in the column, which must be a unit column.
    Non-basic columns can pass both tests on an alternate optimum, so the
    row must also record ``col`` as its basic variable.
    """
    if tableau.objective_row[col] != 0:
        return None
    column = tableau.column(col)
    row_i = max(range(len(column)), key=lambda i: column[i])
    if column[row_i] != 1 or any(v != 0 for i, v in enumerate(column) if i != row_i):
        return None
    if tableau.basis[row_i] != col:
        return None
    return _clean(tableau.rhs(row_i))


def _basic_values(tableau: Tableau, start: int, count: int) -> List[float]:
    values = []
    for j in range(start, start + count):
        v = basic_value(tableau, j)
        values.append(0.0 if v is None else v)
    return values


def _slack_prices(tableau: Tableau, start: int, count: int) -> List[float]:
    return [_clean(-tableau.objective_row[j]) for j in range(start, start + count)]


def extract_solution(tableau: Tableau) -> List[float]:
    """Decision variable values of the original program."""
    if tableau.orientation is ProblemOrientation.PRIMAL:
        return _basic_values(tableau, 0, tableau.n_vars)
    # the transposed program's slacks price the original variables
    return _slack_prices(tableau, tableau.n_vars, tableau.n_slacks)


def dual_solution(tableau: Tableau) -> List[float]:
    """One value per constraint of the original program."""
    if tableau.orientation is ProblemOrientation.PRIMAL:
        return _slack_prices(tableau, tableau.n_vars, tableau.n_slacks)
    return _basic_values(tableau, 0, tableau.n_vars)


def objective_value(tableau: Tableau, minimize: bool = False) -> float:
    # running_cost accumulates the negated objective of whatever sits in the tableau
    if tableau.orientation is ProblemOrientation.PRIMAL:
        value = -tableau.running_cost
    else:
        value = tableau.running_cost
    if minimize:
        value = -value
    return _clean(value)


def alternate_optima(tableau: Tableau) -> List[int]:
    """Non-basic columns whose reduced cost is zero."""
    basis = set(tableau.basis)
    return [j for j in range(tableau.n_cols) if j not in basis and tableau.objective_row[j] == 0]
