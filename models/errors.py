"""
Error types raised while loading, parsing, and checking signed graphs.
"""

from typing import Optional


class BalanceError(Exception):
    """Base class for every error raised by the balance checker."""
    pass


class ResourceNotFoundError(BalanceError):
    """The input source could not be located or opened."""

    def __init__(self, path: str, reason: str = "not found"):
        self.path = path
        self.reason = reason
        super().__init__(f"Input resource {path!r}: {reason}")


class ParseError(BalanceError):
    """
    The edge list is malformed.

    Args:
        message: What is wrong with the input
        line_number: 1-based line number of the offending line, if known
        line: The offending line text, if known
    """

    def __init__(self, message: str, line_number: Optional[int] = None, line: Optional[str] = None):
        self.message = message
        self.line_number = line_number
        self.line = line
        if line_number is not None:
            message = f"line {line_number}: {message}"
        if line is not None:
            message = f"{message} ({line!r})"
        super().__init__(message)


class MissingEdgeError(BalanceError):
    """A balance query hit a node pair with no recorded sign."""

    def __init__(self, node_a: str, node_b: str):
        self.node_a = node_a
        self.node_b = node_b
        super().__init__(f"No relationship recorded between {node_a!r} and {node_b!r}")
