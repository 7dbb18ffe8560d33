"""Error kinds raised while reading, building or solving a linear program.

All of them abort the current solve; callers at the edge (CLI, Streamlit
app) catch ``SimplexError`` and report.
"""


class SimplexError(Exception):
    """Base class for every error raised by this package."""


class InputNotFoundError(SimplexError):
    def __init__(self, path: str):
        super().__init__(f"Input file not found: {path}")
        self.path = path


class IOFailureError(SimplexError):
    def __init__(self, path: str, reason: str):
        super().__init__(f"Could not read {path}: {reason}")
        self.path = path


class ParseError(SimplexError, ValueError):
    def __init__(self, message: str, line_no: int = 0, line: str = ""):
        where = f"line {line_no}: " if line_no else ""
        text = f"{where}{message}"
        if line:
            text += f" -> {line!r}"
        super().__init__(text)
        self.line_no = line_no
        self.line = line


class InvalidDimensionsError(SimplexError, ValueError):
    pass


class InfeasibleStartError(SimplexError, ValueError):
    """The slack basis of the chosen orientation has a negative right-hand side."""


class DegeneratePivotError(SimplexError, RuntimeError):
    def __init__(self, row: int, col: int):
        super().__init__(f"Zero pivot encountered at row {row}, column {col}")
        self.row = row
        self.col = col


class MaxIterationsExceededError(SimplexError):
    def __init__(self, iterations: int):
        super().__init__(f"No optimum found within {iterations} iterations")
        self.iterations = iterations
