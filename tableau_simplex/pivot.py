"""Minimum-ratio test and Gauss-Jordan pivot on a Tableau."""

from typing import List, Optional

from .errors import DegeneratePivotError
from .model import Tableau


def ratio(coefficient: float, rhs: float) -> Optional[float]:
    """
    Bound on the entering variable imposed by one row, or None if the row
    does not limit it.

    Both operands must have the same sign for the row to count; a zero
    coefficient never limits the entering variable.
    """
    if coefficient == 0:
        return None
    if coefficient >= 0:
        if rhs >= 0:
            return rhs / coefficient
        return None
    if rhs >= 0:
        return None
    return rhs / coefficient


def ratios(tableau: Tableau, col: int) -> List[Optional[float]]:
    return [ratio(row[col], row[-1]) for row in tableau.rows]


def minimum_ratio_row(tableau: Tableau, col: int) -> Optional[int]:
    """Row index with the smallest ratio for column ``col``; lowest index wins ties."""
    best_i = None
    best = None
    for i, r in enumerate(ratios(tableau, col)):
        if r is None:
            continue
        if best is None or r < best:
            best, best_i = r, i
    return best_i


def pivot(tableau: Tableau, pivot_row: int, pivot_col: int) -> List[float]:
    """
    Make ``pivot_col`` basic in ``pivot_row``.

    Returns the transformed pivot row: the pivot row divided by the pivot
    element and negated, i.e. the entering variable written in terms of all
    other columns. It is added, scaled by each row's entry in the pivot
    column, to every other row and to the objective row.
    """
    rows = tableau.rows
    piv = rows[pivot_row][pivot_col]
    if piv == 0:
        raise DegeneratePivotError(pivot_row, pivot_col)

    transformed = [v / piv * -1 for v in rows[pivot_row]]

    for j, row in enumerate(rows):
        if j == pivot_row:
            continue
        mult = row[pivot_col]
        for k in range(len(row)):
            row[k] += transformed[k] * mult
        row[pivot_col] = 0.0

    rows[pivot_row] = [v / piv for v in rows[pivot_row]]

    obj = tableau.objective_row
    mult = obj[pivot_col]
    for k in range(len(obj)):
        obj[k] += transformed[k] * mult
    tableau.running_cost += transformed[-1] * mult
    obj[pivot_col] = 0.0

    tableau.basis[pivot_row] = pivot_col
    return transformed
