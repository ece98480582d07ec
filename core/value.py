# core/value.py
# This file is part of Lineage - A Data Lineage Library
#
# Values whose lineage can be queried

"""Values produced by function calls and constants.

A Value wraps a concrete datum and knows how to answer a provenance query:
given a designator naming a part of the value, it appends to a root node
the traceability nodes explaining that part and returns the terminal
nodes it produced.

Three outcomes are possible for a query:
    - resolvable: object nodes (and connectives) pointing at upstream data
    - irreducible: a constant is its own explanation
    - undeterminable: a single unknown node
"""

from __future__ import annotations
from enum import Enum, auto
from typing import TYPE_CHECKING, Any, List, Optional, Sequence

from .designated_object import content_hash
from .designator import All, ConstantDesignator, Designator, InputArgument, Nothing, ReturnValue
from .exceptions import InvalidDesignatorError
from .nodes import TraceabilityNode
from utils.logger import get_logger

if TYPE_CHECKING:
    from .function import AtomicFunction
    from .tracer import Tracer


class QueryType(Enum):
    """Type of lineage relationship a query asks for."""

    PROVENANCE = auto()

    def __str__(self) -> str:
        return self.name


class Value:
    """Object produced by a function call, and whose lineage can be computed."""

    def get_value(self) -> Any:
        """Get the concrete datum carried by this value."""
        raise NotImplementedError

    def query(
        self,
        q: QueryType,
        d: Designator,
        root: Optional[TraceabilityNode],
        tracer: Tracer,
    ) -> List[TraceabilityNode]:
        """Query the provenance of a part of this value.

        Args:
            q: The type of lineage relationship
            d: Designator of the part of the value that is queried
            root: Node to which the results are appended as children
            tracer: Factory producing the traceability nodes

        Returns:
            The terminal traceability nodes produced by the query; empty
            when root is None
        """
        raise NotImplementedError

    @staticmethod
    def lift(o: Any) -> Value:
        """Convert an arbitrary object into a Value.

        Args:
            o: The object to convert. A Value is returned as is; anything
               else is wrapped into a ConstantValue.

        Returns:
            The converted value
        """
        if isinstance(o, Value):
            return o
        return ConstantValue(o)


class ConstantValue(Value):
    """Value that always stands for the same datum.

    A constant has no further provenance: whatever part of it is queried,
    the explanation is the constant itself, designated as a whole by
    ConstantDesignator. Every query on equal constants in the same
    context therefore ends on the same object node.
    """

    def __init__(self, o: Any):
        self._value = o

    def get_value(self) -> Any:
        return self._value

    def designate_part(self, d: Designator) -> Designator:
        """Designator of the leaf answering a query for part d."""
        return ConstantDesignator.instance

    def query(self, q, d, root, tracer):
        if root is None:
            return []
        if d is None:
            raise InvalidDesignatorError("Query on a constant requires a designator")

        get_logger().query_started(str(self), str(d), str(tracer.get_context()))
        node = tracer.get_object_node(tracer.designate(self.designate_part(d), self._value))
        root.add_child(node)
        return [node]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConstantValue):
            return NotImplemented
        return type(self) is type(other) and bool(self._value == other._value)

    def __hash__(self) -> int:
        return hash((type(self).__name__, content_hash(self._value)))

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"


class SourceValue(ConstantValue):
    """Constant standing for source data whose parts can be designated.

    The objects a condition is evaluated on (a page, its elements) are
    such values: a query for part d of the datum ends on the object node
    of d, e.g. "width of body[1]/div[2]", instead of the datum as a whole.
    """

    def designate_part(self, d: Designator) -> Designator:
        return d


class AtomicFunctionReturnValue(Value):
    """Value obtained as the output of an atomic function call.

    The value remembers the function that produced it and the input values
    it was computed from, so that queries can be forwarded upstream.

    Decomposition of a queried designator d:
        - head ! or All: the function maps the tail of d onto its inputs
        - head @i: the tail of d is queried on input i
        - head Nothing: nothing is designated, the result is unknown
        - any other head names a part of the output itself, and the whole
          designator is handed to the function
    """

    def __init__(self, function: AtomicFunction, output_value: Any, input_values: Sequence[Value]):
        self._function = function
        self._output_value = output_value
        self._input_values = list(input_values)

    def get_value(self) -> Any:
        return self._output_value

    def get_function(self) -> AtomicFunction:
        return self._function

    def get_inputs(self) -> List[Value]:
        return list(self._input_values)

    def query(self, q, d, root, tracer):
        if root is None:
            return []
        if d is None:
            raise InvalidDesignatorError("Query on a return value requires a designator")

        logger = get_logger()
        logger.query_started(str(self), str(d), str(tracer.get_context()))

        head = d.head()
        rest = d.tail()

        if isinstance(head, (ReturnValue, All)):
            return self._function.query_output(q, rest, root, tracer, self)

        if isinstance(head, InputArgument):
            if head.index < len(self._input_values):
                return self._input_values[head.index].query(q, rest, root, tracer)
            logger.debug(f"    Input {head.index} out of range for {self._function}")
        elif not isinstance(head, Nothing):
            return self._function.query_output(q, d, root, tracer, self)

        logger.unresolved(str(self), str(d))
        unknown = tracer.get_unknown_node()
        root.add_child(unknown)
        return [unknown]

    def __str__(self) -> str:
        return str(self._output_value)

    def __repr__(self) -> str:
        return f"AtomicFunctionReturnValue({self._output_value!r}, {self._function})"
