# core/function.py
# This file is part of Lineage - A Data Lineage Library
#
# Functions computing values whose lineage can be queried

"""Functions turning input Values into an output Value.

An atomic function performs a direct computation on its inputs and
decides, through query_output, how a part of its output maps back onto
those inputs. The framework only supplies the node-building helpers;
every concrete function documents its own combination policy.

A composed function wires other functions together. It needs no lineage
logic of its own: the Value it returns already links to the values of
its sub-functions, so a query simply follows that chain.
"""

from __future__ import annotations
from typing import Any, Iterable, List, Sequence

from .designator import All, Designator, Nothing
from .exceptions import ArityMismatch
from .nodes import TraceabilityNode
from .tracer import Tracer
from .value import AtomicFunctionReturnValue, QueryType, Value
from utils.logger import get_logger


class AbstractFunction:
    """Base class of all functions."""

    def get_arity(self) -> int:
        """Gets the input arity of the function."""
        return 0

    def evaluate(self, arguments: Sequence[Any] = ()) -> Value:
        """Compute the return value of the function from raw arguments.

        Each argument is lifted into a Value before being handed to compute.

        Args:
            arguments: Ordered input arguments

        Returns:
            The return value of the function
        """
        values = [Value.lift(a) for a in arguments]
        return self.compute(values)

    def compute(self, values: Sequence[Value]) -> Value:
        """Compute the return value of the function from input values.

        Args:
            values: Ordered input values, whose number must match the arity

        Raises:
            ArityMismatch: If the number of values differs from the arity
        """
        raise NotImplementedError

    def check_arity(self, values: Sequence[Value]) -> None:
        if len(values) != self.get_arity():
            raise ArityMismatch(self.get_arity(), len(values))

    @staticmethod
    def lift(o: Any) -> AbstractFunction:
        """Convert an arbitrary object into a function.

        Args:
            o: The object to convert. A function is returned as is; anything
               else becomes a ConstantFunction returning the Value lifted
               from o.
        """
        if isinstance(o, AbstractFunction):
            return o
        return ConstantFunction(Value.lift(o))

    def __str__(self) -> str:
        return type(self).__name__


class AtomicFunction(AbstractFunction):
    """Function that performs a direct computation on its input arguments.

    Subclasses implement get_value and, to make their output explainable,
    query_output. Without an override, every part of the output has an
    unknown provenance.

    Attributes:
        arity: The input arity of the function
    """

    def __init__(self, arity: int):
        if arity < 0:
            raise ValueError(f"Arity must be >= 0, got {arity}")
        self.arity = arity

    def get_arity(self) -> int:
        return self.arity

    def compute(self, values: Sequence[Value]) -> Value:
        self.check_arity(values)

        args = [v.get_value() for v in values]
        o = self.get_value(args)
        if isinstance(o, Value):
            return o
        return AtomicFunctionReturnValue(self, o, values)

    def get_value(self, args: List[Any]) -> Any:
        """Compute the raw output from the raw input arguments."""
        raise NotImplementedError

    def query_output(
        self,
        q: QueryType,
        d: Designator,
        root: TraceabilityNode,
        tracer: Tracer,
        value: AtomicFunctionReturnValue,
    ) -> List[TraceabilityNode]:
        """Explain a part of one of this function's return values.

        Args:
            q: The type of lineage relationship
            d: Designator of the part of the output; Nothing means all of it
            root: Node to which the explanation is appended
            tracer: Factory producing the traceability nodes
            value: The return value being explained

        Returns:
            The terminal nodes of the explanation
        """
        return self.unknown(root, tracer)

    # Helpers for query_output implementations
    @staticmethod
    def is_whole(d: Designator) -> bool:
        """True if d designates the output as a whole."""
        return isinstance(d, (Nothing, All))

    def unknown(self, root: TraceabilityNode, tracer: Tracer) -> List[TraceabilityNode]:
        """Append an unknown node to root."""
        node = tracer.get_unknown_node()
        root.add_child(node)
        return [node]

    def query_input(
        self,
        q: QueryType,
        index: int,
        d: Designator,
        root: TraceabilityNode,
        tracer: Tracer,
        value: AtomicFunctionReturnValue,
    ) -> List[TraceabilityNode]:
        """Explain the output by part d of a single input."""
        return value.get_inputs()[index].query(q, d, root, tracer)

    def query_inputs_and(self, q, indices: Iterable[int], d, root, tracer, value):
        """Explain the output by the conjunction of part d of several inputs."""
        return self._query_inputs(tracer.get_and_node(), q, indices, d, root, tracer, value)

    def query_inputs_or(self, q, indices: Iterable[int], d, root, tracer, value):
        """Explain the output by the disjunction of part d of several inputs."""
        return self._query_inputs(tracer.get_or_node(), q, indices, d, root, tracer, value)

    def _query_inputs(self, connective, q, indices, d, root, tracer, value):
        indices = list(indices)
        if not indices:
            return self.unknown(root, tracer)
        if len(indices) == 1:
            return self.query_input(q, indices[0], d, root, tracer, value)

        inputs = value.get_inputs()
        terminals: List[TraceabilityNode] = []
        for i in indices:
            terminals.extend(inputs[i].query(q, d, connective, tracer))

        # Attached once filled so that same-kind connectives are spliced
        root.add_child(connective)
        return terminals


class ConstantFunction(AbstractFunction):
    """Function of arity 0 always returning the same value."""

    def __init__(self, value: Value):
        self._value = Value.lift(value)

    def compute(self, values: Sequence[Value]) -> Value:
        self.check_arity(values)
        return self._value

    def __str__(self) -> str:
        return f"Constant({self._value})"


class Argument(AbstractFunction):
    """Placeholder for one of the input arguments of a composed function.

    Argument(i) has arity i + 1 and returns its last input value unchanged,
    which keeps the provenance of that argument intact.
    """

    def __init__(self, index: int):
        if index < 0:
            raise ValueError(f"Argument index must be >= 0, got {index}")
        self.index = index

    def get_arity(self) -> int:
        return self.index + 1

    def compute(self, values: Sequence[Value]) -> Value:
        self.check_arity(values)
        return values[self.index]

    def __str__(self) -> str:
        return f"@{self.index}"


class ComposedFunction(AbstractFunction):
    """Function obtained by applying an operator to the results of operands.

    Every operand receives the first k input values of the composed
    function, where k is the operand's arity. The arity of the composed
    function is the largest operand arity.

    Attributes:
        operator: Function applied to the operand results
        operands: Functions producing the operator's inputs
    """

    def __init__(self, operator: AbstractFunction, *operands: Any):
        if operator.get_arity() != len(operands):
            raise ArityMismatch(operator.get_arity(), len(operands))
        self.operator = operator
        self.operands = [AbstractFunction.lift(o) for o in operands]

    def get_arity(self) -> int:
        return max((op.get_arity() for op in self.operands), default=0)

    def compute(self, values: Sequence[Value]) -> Value:
        self.check_arity(values)

        logger = get_logger()
        logger.debug(f"Computing {self} on {len(values)} values")

        sub_values = [op.compute(values[: op.get_arity()]) for op in self.operands]
        return self.operator.compute(sub_values)

    def __str__(self) -> str:
        operands = ", ".join(str(op) for op in self.operands)
        return f"{self.operator}({operands})"
