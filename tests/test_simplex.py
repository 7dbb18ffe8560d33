from pathlib import Path

import pytest
from scipy.optimize import linprog

from tableau_simplex.errors import InfeasibleStartError, MaxIterationsExceededError
from tableau_simplex.model import LinearProgram
from tableau_simplex.parser import read_lp_file
from tableau_simplex.simplex import fmt_out, solve, solve_text

ROOT = Path(__file__).parent.parent
PROBLEMS = ROOT / "problems"
KI = ROOT / "KI.txt"


def load_problem(name: str) -> LinearProgram:
    # KI.txt lives at the repo root as the CLI default input
    path = KI if name == KI.name else PROBLEMS / name
    return read_lp_file(str(path))


def reference_optimum(lp: LinearProgram) -> float:
    # linprog minimizes c.x subject to A_ub x <= b_ub
    res = linprog([-c for c in lp.objective],
                  A_ub=[[-v for v in row] for row in lp.A],
                  b_ub=[-v for v in lp.b],
                  bounds=[(0, None)] * lp.n_vars,
                  method="highs")
    assert res.status == 0
    best = -res.fun
    return -best if lp.minimize else best


def test_ki_problem_end_to_end():
    res = solve(load_problem("KI.txt"), verbose=False)
    assert res.status == "optimal"
    assert res.orientation == "dual"
    assert res.optimal_value == pytest.approx(10.0)
    assert res.solution == pytest.approx([2.0, 2.0])
    assert res.iterations <= 4
    assert res.details["dual_solution"] == pytest.approx([1.0, 1.0])


def test_production_problem_end_to_end():
    res = solve(load_problem("production.txt"), verbose=False)
    assert res.status == "optimal"
    assert res.orientation == "primal"
    assert res.optimal_value == pytest.approx(12.0)
    assert res.solution == pytest.approx([4.0, 0.0])
    assert res.iterations == 1
    assert res.details["dual_solution"] == pytest.approx([3.0, 0.0])


def test_diet_problem_end_to_end():
    res = solve(load_problem("diet.txt"), verbose=False)
    assert res.optimal_value == pytest.approx(13.0)
    assert res.solution == pytest.approx([2.0, 3.0, 0.0])
    assert res.details["dual_solution"] == pytest.approx([1.4, 0.2])


@pytest.mark.parametrize("name", ["KI.txt", "production.txt", "diet.txt"])
def test_matches_independent_solver(name):
    lp = load_problem(name)
    res = solve(lp, verbose=False)
    assert res.optimal_value == pytest.approx(reference_optimum(lp), abs=1e-9)


@pytest.mark.parametrize("name", ["KI.txt", "production.txt", "diet.txt"])
def test_solution_is_feasible_and_non_negative(name):
    lp = load_problem(name)
    x = solve(lp, verbose=False).solution
    assert all(v >= 0 for v in x)
    for row, rhs in zip(lp.A, lp.b):
        assert sum(a * v for a, v in zip(row, x)) >= rhs - 1e-9


def test_program_and_its_transpose_share_the_optimum():
    primal = solve_text("max: + 3*x0 + 2*x1;\n+ -1*x0 + -1*x1 >= -4;\n+ -1*x0 + -3*x1 >= -6;\n",
                        verbose=False)
    dual = solve_text("min: + 4*y0 + 6*y1;\n+ 1*y0 + 1*y1 >= 3;\n+ 1*y0 + 3*y1 >= 2;\n",
                      verbose=False)
    assert primal.orientation == "primal"
    assert dual.orientation == "dual"
    assert primal.optimal_value == pytest.approx(dual.optimal_value)
    # each side's dual values are the other side's solution
    assert primal.details["dual_solution"] == pytest.approx(dual.solution)
    assert dual.details["dual_solution"] == pytest.approx(primal.solution)


def test_origin_optimal_in_both_orientations():
    lp = LinearProgram(objective=[-1, -2], constraints=[[-1, -1, -5]])
    primal = solve(lp, orientation="primal", verbose=False)
    dual = solve(lp, orientation="dual", verbose=False)
    assert primal.optimal_value == dual.optimal_value == 0.0
    assert primal.solution == dual.solution == [0.0, 0.0]
    assert primal.iterations == dual.iterations == 0


def test_negative_optimum_keeps_its_sign():
    # min x0 - x1 with x1 <= 3
    res = solve_text("min: + 1*x0 + -1*x1;\n+ 0*x0 + -1*x1 >= -3;\n", verbose=False)
    assert res.orientation == "primal"
    assert res.optimal_value == pytest.approx(-3.0)
    assert res.solution == pytest.approx([0.0, 3.0])


def test_unbounded_program():
    res = solve_text("max: + 1*x0 + 1*x1;\n+ -1*x0 + 1*x1 >= -2;\n", verbose=False)
    assert res.status == "unbounded"
    assert res.optimal_value is None
    assert res.solution is None


def test_infeasible_program_detected_through_transpose():
    res = solve_text("min: + 1*x0;\n+ -1*x0 >= 1;\n", verbose=False)
    assert res.orientation == "dual"
    assert res.status == "infeasible"


def test_no_feasible_start():
    with pytest.raises(InfeasibleStartError):
        solve_text("max: + 1*x0;\n+ 1*x0 >= 1;\n", verbose=False)


def test_iteration_cap_is_reported():
    with pytest.raises(MaxIterationsExceededError):
        solve(load_problem("KI.txt"), verbose=False, max_iterations=1)


def test_alternate_optimum_flagged():
    # max x0 + x1 with x0 + x1 <= 2: every point on the edge is optimal
    res = solve_text("max: + 1*x0 + 1*x1;\n+ -1*x0 + -1*x1 >= -2;\n", verbose=False)
    assert res.optimal_value == pytest.approx(2.0)
    assert res.details["alternate_optimal"] is True
    assert res.details["alt_zero_rc_vars"] == ["x1"]


def test_nonzero_variables():
    lp = load_problem("production.txt")
    res = solve(lp, verbose=False)
    assert res.nonzero_variables(lp.var_names) == {"x0": pytest.approx(4.0)}


def test_verbose_output(capsys):
    solve(load_problem("KI.txt"), verbose=True)
    out = capsys.readouterr().out
    assert "Orientation: dual" in out
    assert "New objective function" in out
    assert "Final tableau" in out


@pytest.mark.parametrize("value, text", [
    (10.0, "10"),
    (-0.0, "0"),
    (0.5, "1/2"),
    (-7 / 3, "-7/3"),
    (None, "-"),
])
def test_fmt_out(value, text):
    assert fmt_out(value) == text
