from __future__ import annotations

"""
Problem model for the tableau simplex.

- LinearProgram: max c.x subject to A x >= b, x >= 0. A ``min:`` problem is
  stored with its objective negated and ``minimize=True``.
- ProblemOrientation: how the program is laid out in the tableau (as is,
  or transposed into its dual). Threaded through builder, driver and
  extractor so the sign conventions are decided once per solve.
- Tableau: objective row, constraint rows (rhs last), running cost and the
  current basis. Mutated in place by the driver only.
"""

from dataclasses import dataclass, field
from enum import Enum
from fractions import Fraction
from typing import List, Optional
import math

from .errors import InvalidDimensionsError


def fmt_num(x: float) -> str:
    """Format a float as an integer or reduced fraction for display."""
    if math.isnan(x) or math.isinf(x):
        return str(x)
    if abs(x) < 1e-12:
        return "0"
    fr = Fraction.from_float(x).limit_denominator(10**6)
    if fr.denominator == 1:
        return str(fr.numerator)
    sign = '-' if fr.numerator < 0 else ''
    return f"{sign}{abs(fr.numerator)}/{fr.denominator}"


class ProblemOrientation(Enum):
    PRIMAL = "primal"   # rows are the constraints, negated: -A x + s = -b
    DUAL = "dual"       # rows are the transposed program: A^T y + t = -c


@dataclass
class LinearProgram:
    objective: List[float]
    constraints: List[List[float]]  # each row: n coefficients + rhs
    minimize: bool = False
    var_names: List[str] = field(default_factory=list)

    def __post_init__(self):
        self.objective = [float(v) for v in self.objective]
        self.constraints = [[float(v) for v in row] for row in self.constraints]
        if not self.var_names:
            self.var_names = [f"x{j}" for j in range(len(self.objective))]

    @property
    def n_vars(self) -> int:
        return len(self.objective)

    @property
    def n_constraints(self) -> int:
        return len(self.constraints)

    @property
    def A(self) -> List[List[float]]:
        return [row[:-1] for row in self.constraints]

    @property
    def b(self) -> List[float]:
        return [row[-1] for row in self.constraints]

    def validate(self):
        n = self.n_vars
        if n == 0:
            raise InvalidDimensionsError("Objective has no variables")
        if not self.constraints:
            raise InvalidDimensionsError("Program has no constraints")
        if len(self.var_names) != n:
            raise InvalidDimensionsError(
                f"{len(self.var_names)} variable names for {n} objective coefficients")
        for i, row in enumerate(self.constraints):
            if len(row) != n + 1:
                raise InvalidDimensionsError(
                    f"Constraint {i + 1} has {len(row) - 1} coefficients, expected {n}")


class Tableau:
    def __init__(self, objective_row: List[float], rows: List[List[float]], var_names: List[str],
                 orientation: ProblemOrientation, n_vars: int):
        # Row layout: [var_1, ..., var_n, slack_1, ..., slack_m, rhs]
        self.objective_row = [float(v) for v in objective_row]
        self.rows = [[float(v) for v in row] for row in rows]
        self.running_cost = 0.0
        self.orientation = orientation
        self.n_vars = n_vars
        self.m = len(rows)
        self.n_cols = len(objective_row)
        self.var_names = var_names[:]
        # slack columns start out basic
        self.basis = [n_vars + i for i in range(self.m)]
        self.iteration = 0

    @property
    def n_slacks(self) -> int:
        return self.n_cols - self.n_vars

    def rhs(self, i: int) -> float:
        return self.rows[i][-1]

    def column(self, j: int) -> List[float]:
        return [row[j] for row in self.rows]

    def print_tableau(self, header: str = "", enter_j: Optional[int] = None, leave_i: Optional[int] = None,
                      ratios: Optional[List[Optional[float]]] = None):
        title = header or f"Iteration {self.iteration}"
        print(f"\n{title}")
        headers = ["Z"] + self.var_names + ["RHS", "BV", "Ratio"]

        samples = headers[:]
        for row in self.rows:
            samples.extend(fmt_num(v) for v in row)
        samples.extend(fmt_num(v) for v in self.objective_row)
        colw = max(6, max(len(s) for s in samples) + 2)

        print(" ".join(f"{h:>{colw}}" for h in headers))
        print("-" * (len(headers) * (colw + 1)))

        z_cells = ["Z"] + [fmt_num(v) for v in self.objective_row]
        z_cells += [fmt_num(self.running_cost), "Z", ""]
        print(" ".join(f"{c:>{colw}}" for c in z_cells))

        for i, row in enumerate(self.rows):
            cells = [""]
            for j in range(self.n_cols):
                val = fmt_num(row[j])
                if i == leave_i and j == enter_j:
                    val = f"*{val}"
                cells.append(val)
            ratio_cell = ""
            if ratios is not None and ratios[i] is not None:
                ratio_cell = fmt_num(ratios[i])
            cells.extend([fmt_num(row[-1]), self.var_names[self.basis[i]], ratio_cell])
            print(" ".join(f"{c:>{colw}}" for c in cells))
