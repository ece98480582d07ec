# functions/quantifiers.py
# This file is part of Lineage - A Data Lineage Library
#
# Universal and existential quantification over the elements of a collection

"""Quantifiers applying a condition to every element of a collection.

Each element is handed to the condition as a SourceValue, so its parts
can be designated. The explanation of each element's verdict is produced
inside a tracer context holding the element's index. The same object
reached from two iterations therefore yields two distinct object nodes.

Combination policies:
    Every true   -> "and" of all element verdicts
    Every false  -> "or" of the failing element verdicts
    Exists true  -> "or" of the satisfying element verdicts
    Exists false -> "and" of all element verdicts

On an empty collection the verdict is explained by the collection itself.
"""

from __future__ import annotations
from typing import List, Sequence

from core.designator import All, ReturnValue
from core.function import AbstractFunction, AtomicFunction
from core.nodes import TraceabilityNode
from core.value import AtomicFunctionReturnValue, SourceValue, Value
from utils.logger import get_logger


class QuantifiedValue(AtomicFunctionReturnValue):
    """Return value of a quantifier, remembering the verdict of each element."""

    def __init__(self, function, output_value, input_values, element_values: Sequence[Value]):
        super().__init__(function, output_value, input_values)
        self._element_values = list(element_values)

    def get_element_values(self) -> List[Value]:
        return list(self._element_values)


class _Quantifier(AtomicFunction):
    """Applies a condition of arity 1 to every element of its input.

    Attributes:
        condition: Function evaluated on each element
    """

    def __init__(self, condition: AbstractFunction):
        super().__init__(1)
        self.condition = condition

    def compute(self, values):
        self.check_arity(values)

        elements = list(values[0].get_value())
        element_values = [self.condition.evaluate([SourceValue(e)]) for e in elements]
        verdicts = [bool(v.get_value()) for v in element_values]

        get_logger().debug(f"{self} evaluated on {len(elements)} elements: {verdicts}")
        return QuantifiedValue(self, self.combine(verdicts), values, element_values)

    def combine(self, verdicts: List[bool]) -> bool:
        raise NotImplementedError

    def query_output(self, q, d, root, tracer, value):
        if not self.is_whole(d):
            return self.unknown(root, tracer)

        element_values = value.get_element_values()
        if not element_values:
            return self.query_input(q, 0, All.instance, root, tracer, value)

        holds = bool(value.get_value())
        verdicts = [bool(v.get_value()) for v in element_values]
        if holds == self.conjunctive_when:
            connective = tracer.get_and_node()
            indices = range(len(element_values))
        else:
            connective = tracer.get_or_node()
            indices = [i for i, v in enumerate(verdicts) if v == holds]

        terminals: List[TraceabilityNode] = []
        for i in indices:
            with tracer.in_context(i):
                terminals.extend(
                    element_values[i].query(q, ReturnValue.instance, connective, tracer)
                )
        root.add_child(connective)
        return terminals


class Every(_Quantifier):
    """True if the condition holds on every element."""

    conjunctive_when = True

    def combine(self, verdicts: List[bool]) -> bool:
        return all(verdicts)

    def __str__(self) -> str:
        return f"∀({self.condition})"


class Exists(_Quantifier):
    """True if the condition holds on at least one element."""

    conjunctive_when = False

    def combine(self, verdicts: List[bool]) -> bool:
        return any(verdicts)

    def __str__(self) -> str:
        return f"∃({self.condition})"
