import argparse
import sys

from .errors import (InputNotFoundError, IOFailureError, MaxIterationsExceededError, ParseError,
                     SimplexError)
from .model import fmt_num
from .parser import read_lp_file
from .simplex import fmt_out, solve

# sample problem shipped at the repo root
DEFAULT_PATH = "KI.txt"


def _matrix(rows) -> str:
    return "[" + ", ".join("[" + ", ".join(fmt_num(v) for v in row) + "]" for row in rows) + "]"


def _wait_for_return():
    # keeps a double-clicked console window open
    if sys.stdin is not None and sys.stdin.isatty():
        try:
            input("\nPress Return to exit...")
        except EOFError:
            pass


def run(path: str) -> int:
    try:
        lp = read_lp_file(path)
    except (InputNotFoundError, IOFailureError, ParseError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("Objective f:", _matrix([lp.objective]))
    print("Constraints:", _matrix(lp.constraints))

    try:
        res = solve(lp, verbose=True)
    except MaxIterationsExceededError as e:
        print(f"\n{e}")
        return 2
    except SimplexError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    print("\n=== Result ===")
    print("Status:", res.status)
    print("Iterations:", res.iterations)
    print("Orientation:", res.orientation)
    if res.status == "optimal":
        print(f"p = {fmt_out(res.optimal_value)}")
        for name, value in res.nonzero_variables(lp.var_names).items():
            print(f"{name} = {fmt_out(value)}")
        if res.details.get("alternate_optimal"):
            print("Note: Infinite many optimal solutions (alternate optimal).")
            print("Zero reduced-cost nonbasic vars:", res.details["alt_zero_rc_vars"])
    return 0


def main(argv=None) -> int:
    p = argparse.ArgumentParser(description="Tableau simplex for linear programs with >= constraints")
    p.add_argument("path", nargs="?", default=DEFAULT_PATH, help=f"LP text file (default: {DEFAULT_PATH})")
    args = p.parse_args(argv)

    code = run(args.path)
    _wait_for_return()
    return code


if __name__ == "__main__":
    sys.exit(main())
