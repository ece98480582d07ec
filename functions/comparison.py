# functions/comparison.py
# This file is part of Lineage - A Data Lineage Library
#
# Binary comparisons explained by both of their operands

"""Comparison atomic functions.

Whatever the outcome, a comparison is explained by the "and" of its two
operands: neither of them alone determines the result.
"""

from __future__ import annotations
from typing import Any, List

from core.designator import All
from core.function import AtomicFunction


class _Comparison(AtomicFunction):
    symbol = "?"

    def __init__(self):
        super().__init__(2)

    def query_output(self, q, d, root, tracer, value):
        if not self.is_whole(d):
            return self.unknown(root, tracer)
        return self.query_inputs_and(q, (0, 1), All.instance, root, tracer, value)

    def __str__(self) -> str:
        return self.symbol


class IsEqualTo(_Comparison):
    symbol = "="

    def get_value(self, args: List[Any]) -> bool:
        return args[0] == args[1]


class IsLessThan(_Comparison):
    symbol = "<"

    def get_value(self, args: List[Any]) -> bool:
        return args[0] < args[1]


class IsGreaterThan(_Comparison):
    symbol = ">"

    def get_value(self, args: List[Any]) -> bool:
        return args[0] > args[1]
