from __future__ import annotations

"""
Tableau simplex for linear programs with >= constraints.
- Supports max/min; min is negated into max before the tableau is built.
- Orientation "primal" pivots on the constraints as given (origin must be
  feasible), "dual" pivots on the transposed program (objective
  coefficients of a min problem must be non-negative), "auto" picks one.
- Shows each tableau iteration when verbose.
- Detects unbounded and infeasible cases; stops at a fixed iteration cap.

Programmatic API:
- lp: LinearProgram (objective, constraints rows with rhs last, minimize)
- orientation: str in {"auto", "primal", "dual"} or a ProblemOrientation
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

from .builder import build_tableau
from .driver import UNBOUNDED, SimplexDriver
from .extract import alternate_optima, dual_solution, extract_solution, objective_value
from .model import LinearProgram, ProblemOrientation, fmt_num
from .parser import parse_lp_text


@dataclass
class SimplexResult:
    status: str  # optimal | unbounded | infeasible
    optimal_value: Optional[float]
    solution: Optional[List[float]]  # values for the original variables
    iterations: int
    orientation: str
    details: Dict[str, object] = field(default_factory=dict)

    def nonzero_variables(self, var_names: List[str]) -> Dict[str, float]:
        if self.solution is None:
            return {}
        return {name: v for name, v in zip(var_names, self.solution) if v != 0}


def fmt_out(x: Optional[float]) -> str:
    """Pretty-print numbers as integers or reduced fractions for final outputs."""
    if x is None:
        return "-"
    return fmt_num(x)


def solve(lp: LinearProgram, orientation: Union[str, ProblemOrientation] = "auto", verbose=True,
          max_iterations: Optional[int] = None) -> SimplexResult:
    tab = build_tableau(lp, orientation)
    orient = tab.orientation
    if verbose:
        print(f"Orientation: {orient.value}")

    driver = SimplexDriver(tab, max_iterations=max_iterations, verbose=verbose)
    state = driver.run()
    history = [(rec.iteration, tab.var_names[rec.entering], rec.running_cost) for rec in driver.history]

    if state == UNBOUNDED:
        # an unbounded transpose means the original program has no feasible point
        status = "unbounded" if orient is ProblemOrientation.PRIMAL else "infeasible"
        return SimplexResult(status=status, optimal_value=None, solution=None, iterations=tab.iteration,
                             orientation=orient.value, details={"var_names": lp.var_names, "history": history})

    alt_cols = alternate_optima(tab)
    details = {
        "var_names": lp.var_names,
        "dual_solution": dual_solution(tab),
        "alternate_optimal": len(alt_cols) > 0,
        "alt_zero_rc_vars": [tab.var_names[j] for j in alt_cols],
        "history": history,
    }
    return SimplexResult(
        status="optimal",
        optimal_value=objective_value(tab, lp.minimize),
        solution=extract_solution(tab),
        iterations=tab.iteration,
        orientation=orient.value,
        details=details,
    )


def solve_text(text: str, **kwargs) -> SimplexResult:
    return solve(parse_lp_text(text), **kwargs)
