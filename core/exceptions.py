# core/exceptions.py
# This file is part of Lineage - A Data Lineage Library
#
# Custom exceptions for function evaluation and designator handling

"""Domain-specific exceptions for lineage computations.

Only violations of a programming contract are reported through exceptions.
A query whose provenance cannot be determined is not an error: it is
represented in the resulting graph by an unknown node.
"""


class LineageError(RuntimeError):
    """Base class of all errors raised by the lineage core."""

    pass


class ArityMismatch(LineageError):
    """Exception raised when a function receives the wrong number of values.

    Attributes:
        expected: The declared input arity of the function
        actual: The number of values actually supplied
    """

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Invalid number of arguments: expected {expected}, got {actual}"
        )


class InvalidDesignatorError(LineageError):
    """Exception raised when a designator is missing or malformed."""

    pass
