# functions/__init__.py
# This file is part of Lineage - A Data Lineage Library
#
# Library of explainable atomic functions

"""Explainable atomic functions.

Each function documents how a part of its output maps back onto its
inputs, and whether the contributing inputs combine under an "and" or an
"or" node.

Example:
    >>> from core import ComposedFunction, Argument
    >>> from functions import Addition
    >>> f = ComposedFunction(Addition(), Argument(0), 3)
    >>> f.evaluate([2]).get_value()
    5
"""

from .arithmetic import Addition, Maximum, Minimum, Multiplication, Subtraction
from .boolean import Conjunction, Disjunction, Negation
from .comparison import IsEqualTo, IsGreaterThan, IsLessThan
from .objects import GetAttribute, Substring
from .quantifiers import Every, Exists, QuantifiedValue

__all__ = [
    "Addition",
    "Maximum",
    "Minimum",
    "Multiplication",
    "Subtraction",
    "Conjunction",
    "Disjunction",
    "Negation",
    "IsEqualTo",
    "IsGreaterThan",
    "IsLessThan",
    "GetAttribute",
    "Substring",
    "Every",
    "Exists",
    "QuantifiedValue",
]
