class SliceyError(Exception):
    pass


class ParseError(SliceyError):
    """Exception raised when a line of claim input is malformed.

    Parsing stops at the first bad line, so the error always refers to the
    earliest failure in input order.
    """

    def __init__(self, reason: str, line: str | None = None, line_number: int | None = None):
        self.reason = reason
        self.line = line
        self.line_number = line_number
        if line_number is None:
            message = reason
        else:
            message = f"line {line_number}: {reason} ({line!r})"
        super().__init__(message)


class NoResultError(SliceyError):
    """Exception raised when a computation produced no value"""


class AmbiguousResultError(SliceyError):
    """Exception raised when more than one claim overlaps nothing."""

    def __init__(self, ids: list[int]):
        self.ids = ids
        super().__init__(f"expected exactly one non-overlapping claim, found {len(ids)}: {ids}")


class UnknownPuzzleError(SliceyError):
    """Exception raised when no runner is registered for a puzzle identifier"""


class RunnerError(SliceyError):
    """Exception raised by a runner that was asked to abort on failure"""
