"""Plot of a two-variable program: constraints, feasible region, optimum."""

from itertools import combinations
from typing import List, Tuple

import matplotlib.pyplot as plt
import numpy as np

from .model import LinearProgram

EPS = 1e-9


def _objective_coeffs(lp: LinearProgram) -> Tuple[float, float]:
    # undo the min -> max negation for display
    c1, c2 = lp.objective
    if lp.minimize:
        return -c1, -c2
    return c1, c2


def basic_feasible_points(lp: LinearProgram) -> List[Tuple[float, float]]:
    """Extreme points of {x >= 0, A x >= b} found by intersecting every pair of boundary lines."""
    A, b = lp.A, lp.b
    lines = [(row[0], row[1], bi) for row, bi in zip(A, b)]
    lines.append((1.0, 0.0, 0.0))  # x = 0
    lines.append((0.0, 1.0, 0.0))  # y = 0

    def feasible(x, y):
        if x < -EPS or y < -EPS:
            return False
        return all(row[0]*x + row[1]*y >= bi - EPS for row, bi in zip(A, b))

    uniq = []
    for (a1, a2, bi), (c1, c2, bj) in combinations(lines, 2):
        det = a1*c2 - a2*c1
        if abs(det) < 1e-12:
            continue
        x = (bi*c2 - a2*bj) / det
        y = (a1*bj - bi*c1) / det
        if not feasible(x, y):
            continue
        if not any(abs(x-x2) < 1e-7 and abs(y-y2) < 1e-7 for (x2, y2) in uniq):
            uniq.append((x, y))
    return uniq


def plot_2d(lp: LinearProgram, res=None):
    """Returns a matplotlib Figure, or None when the program is not 2-D or has no feasible vertex."""
    if lp.n_vars != 2:
        return None
    bfs = basic_feasible_points(lp)
    if not bfs:
        return None

    A, b = lp.A, lp.b
    names = lp.var_names
    xs = [p[0] for p in bfs]
    ys = [p[1] for p in bfs]
    # >= regions are often open upwards, leave room past the last vertex
    xmax = max(xs) * 1.5 + 1.0
    ymax = max(ys) * 1.5 + 1.0
    grid_x = np.linspace(0.0, xmax, 400)

    fig, ax = plt.subplots(figsize=(6, 6))

    color_cycle = plt.rcParams.get('axes.prop_cycle', None)
    colors = color_cycle.by_key()['color'] if color_cycle else [f'C{i}' for i in range(10)]
    for i, (row, bi) in enumerate(zip(A, b)):
        a1, a2 = row
        c = colors[i % len(colors)]
        label = f"Constraint {i+1}: {a1:g}{names[0]} + {a2:g}{names[1]} >= {bi:g}"
        if abs(a2) < 1e-12:
            x0 = bi/a1 if abs(a1) > 1e-12 else 0
            ax.axvline(x0, color=c, alpha=0.7, label=label)
        else:
            ax.plot(grid_x, (bi - a1*grid_x)/a2, color=c, alpha=0.7, label=label)

    X, Y = np.meshgrid(np.linspace(0.0, xmax, 200), np.linspace(0.0, ymax, 200))
    mask = np.ones_like(X, dtype=bool)
    for row, bi in zip(A, b):
        mask &= row[0]*X + row[1]*Y >= bi - EPS
    ax.contourf(X, Y, mask, levels=[0.5, 1.5], colors=['#e8f7ff'], alpha=0.5)

    if res is not None and res.status == 'optimal' and res.solution is not None:
        xopt, yopt = res.solution
        zopt = res.optimal_value
        c1, c2 = _objective_coeffs(lp)
        if abs(c2) < 1e-12:
            ax.axvline(zopt / (c1 if abs(c1) > 1e-12 else 1), color='red', linestyle='--', label='iso-objective')
        else:
            ax.plot(grid_x, (zopt - c1*grid_x)/c2, 'r--', label='iso-objective (through optimum)')
        ax.plot([xopt], [yopt], 'ro', label=f"optimal ({xopt:.3g}, {yopt:.3g})")
        ax.annotate(f"Z* = {zopt:.4g}", (xopt, yopt), textcoords="offset points", xytext=(8, 8))

    ax.scatter(xs, ys, s=25, color='#444444', alpha=0.9, label='BFS')

    ax.set_xlim(0.0, xmax)
    ax.set_ylim(0.0, ymax)
    ax.set_xlabel(names[0])
    ax.set_ylabel(names[1])
    ax.set_title('Constraints, Feasible Region, Iso-objective')
    ax.legend(loc='best', fontsize=8)
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    return fig
