# parser/exceptions.py
# This file is part of Lineage - A Data Lineage Library
#
# Custom exceptions for designator parsing

"""Domain-specific exceptions for designator parsing.

Raised when a textual designator, as produced by str() on a designator,
cannot be read back.
"""


class DesignatorParseError(RuntimeError):
    """Exception raised when designator parsing fails due to syntax errors.

    Indicates that the input text is not a chain of atomic designators
    separated by "of", or that one of its atoms is malformed.
    """

    pass
