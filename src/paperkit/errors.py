"""
Exception hierarchy for paperkit.

Frame, kind and operand mistakes raise the builtin ``TypeError`` and
pipeline-ordering mistakes raise ``RuntimeError``. The classes below cover
the failures that are specific to this library. Each one also derives from
the builtin exception a caller would naturally expect, so ``except
ValueError`` keeps working around parsing code.
"""


class PaperkitError(Exception):
    """Base class for all paperkit errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ParseError(PaperkitError, ValueError):
    """A measurement or scale string could not be understood."""


class ShapeError(PaperkitError, ValueError):
    """A transformation matrix is not 3x3."""


class LayoutError(PaperkitError, RuntimeError):
    """At least one piece cannot fit on an empty page."""
