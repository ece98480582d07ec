# tests/core_tests/test_values.py
# This file is part of Lineage - A Data Lineage Library
#
# Test suite for provenance queries on values

"""Test suite for Value and its variants.

A query on a value either resolves to object nodes, ends on the value
itself (constants), or is undeterminable (a single unknown node). The
tests cover:

- Lifting raw objects into values
- Constants, explained by themselves whatever part is queried
- Source values, whose designated parts are explained
- Head/tail dispatch on function return values
"""

import pytest
from core.designator import (
    All,
    Attribute,
    CompoundDesignator,
    ConstantDesignator,
    InputArgument,
    Nothing,
    ReturnValue,
)
from core.exceptions import InvalidDesignatorError
from core.function import AtomicFunction
from core.nodes import AndNode, ObjectNode, OrNode, UnknownNode
from core.value import AtomicFunctionReturnValue, ConstantValue, QueryType, SourceValue, Value

Q = QueryType.PROVENANCE

QUERIED_PARTS = [
    All.instance,
    Nothing.instance,
    ReturnValue.instance,
    ConstantDesignator.instance,
    InputArgument(4),
    CompoundDesignator(Attribute("width"), ReturnValue.instance),
]


class Opaque(AtomicFunction):
    """Function without any explanation policy."""

    def __init__(self):
        super().__init__(2)

    def get_value(self, args):
        return (args[0], args[1])


class TestLift:
    def test_lift_wraps_raw_objects(self):
        v = Value.lift(3)
        assert isinstance(v, ConstantValue)
        assert not isinstance(v, SourceValue)
        assert v.get_value() == 3

    def test_lift_keeps_values(self):
        v = SourceValue("x")
        assert Value.lift(v) is v


class TestConstantValue:
    """A constant is its own explanation."""

    @pytest.mark.parametrize("d", QUERIED_PARTS)
    def test_constant_is_its_own_explanation(self, tracer, d):
        root = AndNode()
        result = ConstantValue(100).query(Q, d, root, tracer)

        assert len(result) == 1
        node = result[0]
        assert isinstance(node, ObjectNode)
        assert node.get_designated_object().get_object() == 100
        assert node.get_designated_object().get_designator() == ConstantDesignator.instance
        assert str(node.get_designated_object()) == "Value of 100"
        assert root.get_children() == [node]

    def test_any_designator_ends_on_one_node(self, tracer):
        """Whatever part is queried, equal constants share one leaf."""
        nodes = [ConstantValue(100).query(Q, d, OrNode(), tracer)[0] for d in QUERIED_PARTS]
        assert all(n is nodes[0] for n in nodes)

    def test_null_root_does_nothing(self, tracer):
        assert ConstantValue(1).query(Q, All.instance, None, tracer) == []
        assert tracer.get_object_nodes() == []

    def test_null_designator_rejected(self, tracer):
        with pytest.raises(InvalidDesignatorError):
            ConstantValue(1).query(Q, None, AndNode(), tracer)

    def test_query_records_tracer_context(self, tracer):
        with tracer.in_context(2):
            node = ConstantValue(5).query(Q, All.instance, OrNode(), tracer)[0]
        assert node.get_designated_object().get_context() == (2,)

    def test_equality(self):
        assert ConstantValue(3) == ConstantValue(3)
        assert ConstantValue(3) != ConstantValue(4)
        assert ConstantValue([1]) == ConstantValue([1])
        assert hash(ConstantValue("a")) == hash(ConstantValue("a"))
        assert ConstantValue(3) != SourceValue(3)


class TestSourceValue:
    """Source data is explained by the designated part of itself."""

    def test_queried_part_is_designated(self, div, tracer):
        root = OrNode()
        (node,) = SourceValue(div).query(Q, Attribute("width"), root, tracer)

        dob = node.get_designated_object()
        assert dob.get_object() is div
        assert dob.get_designator() == Attribute("width")
        assert root.get_children() == [node]

    def test_different_parts_get_distinct_nodes(self, div, tracer):
        width = SourceValue(div).query(Q, Attribute("width"), OrNode(), tracer)[0]
        text = SourceValue(div).query(Q, Attribute("text"), OrNode(), tracer)[0]
        again = SourceValue(div).query(Q, Attribute("width"), OrNode(), tracer)[0]
        assert width is not text
        assert width is again

    def test_null_root_does_nothing(self, div, tracer):
        assert SourceValue(div).query(Q, All.instance, None, tracer) == []


class TestAtomicFunctionReturnValue:
    """Dispatch on the head of the queried designator."""

    def _value(self):
        return Opaque().evaluate([1, SourceValue("b")])

    def test_compute_wraps_output(self):
        v = self._value()
        assert isinstance(v, AtomicFunctionReturnValue)
        assert v.get_value() == (1, "b")
        assert [i.get_value() for i in v.get_inputs()] == [1, "b"]
        assert isinstance(v.get_function(), Opaque)

    def test_input_argument_delegates_to_input(self, tracer):
        root = OrNode()
        result = self._value().query(Q, InputArgument(1), root, tracer)
        assert len(result) == 1
        assert result[0].get_designated_object().get_object() == "b"
        assert root.get_children() == result

    def test_compound_input_designator_passes_rest(self, tracer):
        """Designator "length of @1" asks input 1 for its length."""
        d = CompoundDesignator(Attribute("length"), InputArgument(1))
        result = self._value().query(Q, d, OrNode(), tracer)
        assert result[0].get_designated_object().get_designator() == Attribute("length")

    def test_input_out_of_range_is_unknown(self, tracer):
        root = OrNode()
        result = self._value().query(Q, InputArgument(5), root, tracer)
        assert len(result) == 1
        assert isinstance(result[0], UnknownNode)
        assert root.get_children() == result

    def test_function_without_policy_is_unknown(self, tracer):
        root = OrNode()
        result = self._value().query(Q, ReturnValue.instance, root, tracer)
        assert isinstance(result[0], UnknownNode)

    def test_nothing_is_unknown(self, tracer):
        result = self._value().query(Q, Nothing.instance, OrNode(), tracer)
        assert isinstance(result[0], UnknownNode)

    def test_null_root_does_nothing(self, tracer):
        assert self._value().query(Q, ReturnValue.instance, None, tracer) == []
