"""Simplex iteration loop."""

from dataclasses import dataclass
from typing import List, Optional

from .errors import MaxIterationsExceededError
from .model import Tableau, fmt_num
from .pivot import minimum_ratio_row, pivot, ratios

ITERATING = "iterating"
OPTIMAL = "optimal"
UNBOUNDED = "unbounded"


@dataclass
class IterationRecord:
    iteration: int
    entering: int
    leaving: int
    running_cost: float


def choose_entering(objective_row: List[float]) -> Optional[int]:
    """
    Column with the largest objective-row entry, or None if no entry is
    positive. Entries equal to zero (either sign) are never eligible.
    """
    best_j = None
    best_val = None
    for j, v in enumerate(objective_row):
        if v == 0:
            continue
        if best_val is None or v > best_val:
            best_val, best_j = v, j
    if best_val is None or best_val <= 0:
        return None
    return best_j


class SimplexDriver:
    """
    Runs pivots on a tableau until no objective-row entry is positive.

    The driver owns ``tableau`` for the duration of ``run``. Iterations are
    capped at the number of objective-row columns unless ``max_iterations``
    says otherwise.
    """

    def __init__(self, tableau: Tableau, max_iterations: Optional[int] = None, verbose: bool = False):
        self.tableau = tableau
        self.max_iterations = tableau.n_cols if max_iterations is None else max_iterations
        self.verbose = verbose
        self.state = ITERATING
        self.history: List[IterationRecord] = []

    def step(self) -> str:
        """One iteration; returns the state after it."""
        tab = self.tableau
        enter_j = choose_entering(tab.objective_row)
        if enter_j is None:
            self.state = OPTIMAL
            return self.state

        leave_i = minimum_ratio_row(tab, enter_j)
        if self.verbose:
            print(f"\nCurrent variable: {tab.var_names[enter_j]}")
        if leave_i is None:
            if self.verbose:
                tab.print_tableau(header="Final tableau (unbounded)", enter_j=enter_j,
                                  ratios=ratios(tab, enter_j))
            self.state = UNBOUNDED
            return self.state

        tab.iteration += 1
        if self.verbose:
            tab.print_tableau(header=f"Iteration {tab.iteration}", enter_j=enter_j, leave_i=leave_i,
                              ratios=ratios(tab, enter_j))
        pivot(tab, leave_i, enter_j)
        self.history.append(IterationRecord(tab.iteration, enter_j, leave_i, tab.running_cost))
        if self.verbose:
            obj = ", ".join(fmt_num(v) for v in tab.objective_row)
            print(f"New objective function: [{obj}] = {fmt_num(tab.running_cost)}")
        return self.state

    def run(self) -> str:
        if self.verbose:
            self.tableau.print_tableau(header="Initial tableau")
        while self.state == ITERATING:
            if self.tableau.iteration >= self.max_iterations:
                # one last look: the cap may land exactly on the optimum
                if choose_entering(self.tableau.objective_row) is None:
                    self.state = OPTIMAL
                    break
                raise MaxIterationsExceededError(self.tableau.iteration)
            self.step()
        if self.verbose:
            if self.state == OPTIMAL:
                self.tableau.print_tableau(header=f"Final tableau (Iteration {self.tableau.iteration})")
            print(f"\nDone after {self.tableau.iteration} iterations")
        return self.state
