# functions/arithmetic.py
# This file is part of Lineage - A Data Lineage Library
#
# Arithmetic functions and their explanation policies

"""Arithmetic atomic functions.

Combination policies:
    Addition, Multiplication, Subtraction: every operand contributes to the
        result, so the output is explained by the "and" of all inputs.
    Maximum, Minimum: the result is any one of the inputs equal to it, so
        the output is explained by the "or" of those inputs.

Only the output as a whole can be explained; any narrower part of a
number has an unknown provenance.
"""

from __future__ import annotations
import math
from typing import Any, List

from core.designator import All
from core.function import AtomicFunction


class _Combination(AtomicFunction):
    """Function whose output depends jointly on all of its inputs."""

    def query_output(self, q, d, root, tracer, value):
        if not self.is_whole(d):
            return self.unknown(root, tracer)
        return self.query_inputs_and(q, range(self.arity), All.instance, root, tracer, value)


class Addition(_Combination):
    """Sum of n numbers."""

    def __init__(self, arity: int = 2):
        super().__init__(arity)

    def get_value(self, args: List[Any]) -> Any:
        return sum(args)

    def __str__(self) -> str:
        return "+"


class Multiplication(_Combination):
    """Product of n numbers."""

    def __init__(self, arity: int = 2):
        super().__init__(arity)

    def get_value(self, args: List[Any]) -> Any:
        return math.prod(args)

    def __str__(self) -> str:
        return "×"


class Subtraction(_Combination):
    """Difference of two numbers."""

    def __init__(self):
        super().__init__(2)

    def get_value(self, args: List[Any]) -> Any:
        return args[0] - args[1]

    def __str__(self) -> str:
        return "-"


class _Selection(AtomicFunction):
    """Function returning one of its inputs."""

    def __init__(self, arity: int):
        if arity < 1:
            raise ValueError(f"{type(self).__name__} needs at least one input, got arity {arity}")
        super().__init__(arity)

    def query_output(self, q, d, root, tracer, value):
        if not self.is_whole(d):
            return self.unknown(root, tracer)

        output = value.get_value()
        matching = [
            i for i, v in enumerate(value.get_inputs()) if v.get_value() == output
        ]
        return self.query_inputs_or(q, matching, All.instance, root, tracer, value)


class Maximum(_Selection):
    """Largest of n numbers."""

    def __init__(self, arity: int = 2):
        super().__init__(arity)

    def get_value(self, args: List[Any]) -> Any:
        return max(args)

    def __str__(self) -> str:
        return "max"


class Minimum(_Selection):
    """Smallest of n numbers."""

    def __init__(self, arity: int = 2):
        super().__init__(arity)

    def get_value(self, args: List[Any]) -> Any:
        return min(args)

    def __str__(self) -> str:
        return "min"
