"""Builds the initial tableau for a LinearProgram.

Slack convention: every slack column carries +1 in its own row. The
constraint set is made to fit that convention beforehand, either by
negating it (PRIMAL) or by transposing the whole program into its dual
(DUAL). The transpose is only a valid substitute when strong duality holds
for the program, which callers choosing DUAL accept.
"""

from typing import List, Tuple, Union

from .errors import InfeasibleStartError, InvalidDimensionsError
from .model import LinearProgram, ProblemOrientation, Tableau

SLACK = 1.0


def augment_with_slacks(objective: List[float], rows: List[List[float]],
                        slack: float = SLACK) -> Tuple[List[float], List[List[float]]]:
    """Append one slack column per row; rows keep their rhs as last entry."""
    n = len(objective)
    m = len(rows)
    for i, row in enumerate(rows):
        if len(row) != n + 1:
            raise InvalidDimensionsError(
                f"Row {i + 1} has {len(row) - 1} coefficients, objective has {n}")

    objective_row = [float(v) for v in objective] + [0.0] * m
    augmented = []
    for i, row in enumerate(rows):
        slacks = [0.0] * m
        slacks[i] = slack
        augmented.append([float(v) for v in row[:-1]] + slacks + [float(row[-1])])
    return objective_row, augmented


def negate_constraints(rows: List[List[float]]) -> List[List[float]]:
    # A x >= b  ->  -A x <= -b
    return [[-v for v in row] for row in rows]


def transpose_to_dual(objective: List[float], rows: List[List[float]]) -> Tuple[List[float], List[List[float]]]:
    """
    Transpose max c.x, A x >= b into max b.y, A^T y <= -c.

    The constraint rows [A | b] and the objective row [c | 0] are stacked
    into one matrix and transposed; the former rhs column becomes the new
    objective and the former objective becomes the new rhs (negated).
    """
    n = len(objective)
    for i, row in enumerate(rows):
        if len(row) != n + 1:
            raise InvalidDimensionsError(
                f"Row {i + 1} has {len(row) - 1} coefficients, objective has {n}")
    matrix = [list(row) for row in rows] + [list(objective) + [0.0]]
    transposed = [list(col) for col in zip(*matrix)]
    dual_objective = transposed[-1][:-1]
    dual_rows = [col[:-1] + [-col[-1]] for col in transposed[:-1]]
    return dual_objective, dual_rows


def _start_is_feasible(rows: List[List[float]]) -> bool:
    return all(row[-1] >= 0 for row in rows)


def choose_orientation(lp: LinearProgram) -> ProblemOrientation:
    """PRIMAL when the origin is feasible, else DUAL when its slack basis is feasible."""
    if all(-b >= 0 for b in lp.b):
        return ProblemOrientation.PRIMAL
    if all(-c >= 0 for c in lp.objective):
        return ProblemOrientation.DUAL
    raise InfeasibleStartError(
        "Neither the program (some rhs > 0) nor its transpose (some objective coefficient > 0 "
        "in max form) has a feasible slack basis; a two-phase start would be required")


def build_tableau(lp: LinearProgram, orientation: Union[ProblemOrientation, str] = "auto") -> Tableau:
    lp.validate()
    if orientation == "auto":
        orientation = choose_orientation(lp)
    orientation = ProblemOrientation(orientation)

    if orientation is ProblemOrientation.PRIMAL:
        objective, rows = lp.objective, negate_constraints(lp.constraints)
        names = lp.var_names + [f"s{i + 1}" for i in range(lp.n_constraints)]
    else:
        objective, rows = transpose_to_dual(lp.objective, lp.constraints)
        names = [f"y{i + 1}" for i in range(lp.n_constraints)] + [f"t_{v}" for v in lp.var_names]

    if not _start_is_feasible(rows):
        raise InfeasibleStartError(
            f"{orientation.value} tableau starts with a negative right-hand side")

    objective_row, augmented = augment_with_slacks(objective, rows)
    return Tableau(objective_row, augmented, names, orientation, n_vars=len(objective))
