"""
Reader for the plain-text LP format:

    // comment
    min: + 3*x0 + 2*x1;
    + 1*x0 + 1*x1 >= 4;
    + 2*x0 + 1*x1 >= 6;

The first line is the objective, every further line a >= constraint.
"""

import math
import re
from typing import Dict, List, Tuple

from .errors import InputNotFoundError, IOFailureError, ParseError
from .model import LinearProgram

NUMBER = r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?"
TERM_RE = re.compile(rf"\+\s*({NUMBER})\s*\*\s*([A-Za-z_]\w*)\s*")
OBJECTIVE_RE = re.compile(r"^(min|max)\s*:(.*)$", re.IGNORECASE)


def _content_lines(text: str) -> List[Tuple[int, str]]:
    lines = []
    for no, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith("//"):
            continue
        lines.append((no, line))
    return lines


def _finite(value: float, text: str, no: int, line: str) -> float:
    # float() also accepts nan, inf and overflowing literals such as 1e400
    if not math.isfinite(value):
        raise ParseError(f"non-finite number {text!r}", no, line)
    return value


def _strip_semicolon(line: str, no: int) -> str:
    if not line.endswith(";"):
        raise ParseError("missing ';' at end of line", no, line)
    return line[:-1].strip()


def parse_terms(body: str, no: int = 0, line: str = "") -> List[Tuple[str, float]]:
    """Split ``+ a*x + b*y`` into [(name, coefficient), ...]."""
    terms = []
    pos = 0
    body = body.strip()
    while pos < len(body):
        m = TERM_RE.match(body, pos)
        if m is None:
            raise ParseError(f"expected '+ coeff*var' at {body[pos:]!r}", no, line or body)
        terms.append((m.group(2), _finite(float(m.group(1)), m.group(1), no, line or body)))
        pos = m.end()
    if not terms:
        raise ParseError("no terms found", no, line or body)
    return terms


def parse_objective(line: str, no: int = 0) -> Tuple[bool, List[str], List[float]]:
    """Returns (minimize, names, coefficients) as written, not yet negated."""
    m = OBJECTIVE_RE.match(_strip_semicolon(line, no))
    if m is None:
        raise ParseError("objective must start with 'min:' or 'max:'", no, line)
    terms = parse_terms(m.group(2), no, line)
    names = [name for name, _ in terms]
    if len(set(names)) != len(names):
        raise ParseError("variable repeated in objective", no, line)
    return m.group(1).lower() == "min", names, [c for _, c in terms]


def parse_constraint(line: str, names: List[str], no: int = 0) -> List[float]:
    """Coefficients in ``names`` order followed by the rhs."""
    body = _strip_semicolon(line, no)
    if ">=" not in body:
        if "<=" in body or "=" in body:
            raise ParseError("only '>=' constraints are supported", no, line)
        raise ParseError("missing '>='", no, line)
    lhs, _, rhs = body.partition(">=")
    if ">=" in rhs:
        raise ParseError("more than one '>='", no, line)
    try:
        rhs_val = float(rhs.strip())
    except ValueError:
        raise ParseError(f"non-numeric right-hand side {rhs.strip()!r}", no, line) from None
    rhs_val = _finite(rhs_val, rhs.strip(), no, line)

    terms = parse_terms(lhs, no, line)
    if len(terms) != len(names):
        raise ParseError(f"{len(terms)} terms, objective has {len(names)}", no, line)
    coeffs: Dict[str, float] = {}
    for name, c in terms:
        if name not in names:
            raise ParseError(f"unknown variable {name!r}", no, line)
        if name in coeffs:
            raise ParseError(f"variable {name!r} repeated", no, line)
        coeffs[name] = c
    return [coeffs[name] for name in names] + [rhs_val]


def parse_lp_text(text: str) -> LinearProgram:
    lines = _content_lines(text)
    if not lines:
        raise ParseError("no objective found")
    no, first = lines[0]
    minimize, names, objective = parse_objective(first, no)
    constraints = [parse_constraint(line, names, no) for no, line in lines[1:]]
    if not constraints:
        raise ParseError("no constraints found", no, first)
    if minimize:
        # min c.x == -max(-c.x)
        objective = [-c for c in objective]
    return LinearProgram(objective=objective, constraints=constraints, minimize=minimize, var_names=names)


def read_lp_file(path: str) -> LinearProgram:
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except FileNotFoundError:
        raise InputNotFoundError(path) from None
    except (OSError, UnicodeDecodeError) as e:
        raise IOFailureError(path, str(e)) from e
    return parse_lp_text(text)
