# functions/boolean.py
# This file is part of Lineage - A Data Lineage Library
#
# Boolean connectives and their explanation policies

"""Boolean atomic functions.

The explanation of a Boolean result depends on the result itself:

    Conjunction true   -> "and" of all inputs (each one was needed)
    Conjunction false  -> "or" of the false inputs (any one suffices)
    Disjunction true   -> "or" of the true inputs (any one suffices)
    Disjunction false  -> "and" of all inputs (each one was needed)
    Negation           -> its single input
"""

from __future__ import annotations
from typing import Any, List

from core.designator import All
from core.function import AtomicFunction


class Conjunction(AtomicFunction):
    """Logical "and" of n Boolean values."""

    def __init__(self, arity: int = 2):
        super().__init__(arity)

    def get_value(self, args: List[Any]) -> bool:
        return all(bool(a) for a in args)

    def query_output(self, q, d, root, tracer, value):
        if not self.is_whole(d):
            return self.unknown(root, tracer)

        if value.get_value():
            return self.query_inputs_and(q, range(self.arity), All.instance, root, tracer, value)

        false_inputs = [i for i, v in enumerate(value.get_inputs()) if not v.get_value()]
        return self.query_inputs_or(q, false_inputs, All.instance, root, tracer, value)

    def __str__(self) -> str:
        return "∧"


class Disjunction(AtomicFunction):
    """Logical "or" of n Boolean values."""

    def __init__(self, arity: int = 2):
        super().__init__(arity)

    def get_value(self, args: List[Any]) -> bool:
        return any(bool(a) for a in args)

    def query_output(self, q, d, root, tracer, value):
        if not self.is_whole(d):
            return self.unknown(root, tracer)

        if not value.get_value():
            return self.query_inputs_and(q, range(self.arity), All.instance, root, tracer, value)

        true_inputs = [i for i, v in enumerate(value.get_inputs()) if v.get_value()]
        return self.query_inputs_or(q, true_inputs, All.instance, root, tracer, value)

    def __str__(self) -> str:
        return "∨"


class Negation(AtomicFunction):
    """Logical negation of a Boolean value."""

    def __init__(self):
        super().__init__(1)

    def get_value(self, args: List[Any]) -> bool:
        return not args[0]

    def query_output(self, q, d, root, tracer, value):
        if not self.is_whole(d):
            return self.unknown(root, tracer)
        return self.query_input(q, 0, All.instance, root, tracer, value)

    def __str__(self) -> str:
        return "¬"
