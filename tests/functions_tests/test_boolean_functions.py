# tests/functions_tests/test_boolean_functions.py
# This file is part of Lineage - A Data Lineage Library
#
# Test suite for Boolean connectives and comparisons

"""Test suite for Boolean connectives and comparisons.

A true conjunction needs every input, a false one any false input;
disjunction is the dual. Comparisons always depend on both operands.
"""

import pytest
from core.designator import ReturnValue
from core.nodes import AndNode, ObjectNode, OrNode
from core.value import QueryType
from functions import (
    Conjunction,
    Disjunction,
    IsEqualTo,
    IsGreaterThan,
    IsLessThan,
    Negation,
)

Q = QueryType.PROVENANCE


def _explain(value, tracer):
    root = AndNode()
    terminals = value.query(Q, ReturnValue.instance, root, tracer)
    return root, [t.get_designated_object().get_object() for t in terminals]


@pytest.mark.parametrize(
    "function, args, expected",
    [
        (IsEqualTo(), [1, 1], True),
        (IsLessThan(), [1, 2], True),
        (IsGreaterThan(), [1, 2], False),
        (Conjunction(3), [True, True, False], False),
        (Disjunction(), [False, True], True),
        (Negation(), [True], False),
    ],
)
def test_values(function, args, expected):
    assert function.evaluate(args).get_value() is expected


def test_comparison_is_explained_by_both_operands(tracer):
    """120 < 100 is false because of both 120 and 100."""
    root, objects = _explain(IsLessThan().evaluate([120, 100]), tracer)
    assert objects == [120, 100]
    # Comparison "and" spliced into the "and" root
    assert len(root.get_children()) == 2


def test_true_conjunction_needs_every_input(tracer):
    root, objects = _explain(Conjunction(3).evaluate([1, "a", 2.5]), tracer)
    assert objects == [1, "a", 2.5]


def test_false_conjunction_any_false_input_suffices(tracer):
    """Either falsy input alone makes the conjunction false."""
    root, objects = _explain(Conjunction(3).evaluate([0, 1, ""]), tracer)
    assert objects == [0, ""]
    (disj,) = root.get_children()
    assert isinstance(disj, OrNode)
    assert len(disj.get_children()) == 2


def test_false_conjunction_single_false_input(tracer):
    root, objects = _explain(Conjunction().evaluate([True, False]), tracer)
    assert objects == [False]
    assert isinstance(root.get_children()[0], ObjectNode)


def test_true_disjunction_any_true_input_suffices(tracer):
    root, objects = _explain(Disjunction(3).evaluate([1, 0, 2]), tracer)
    assert objects == [1, 2]
    assert isinstance(root.get_children()[0], OrNode)


def test_false_disjunction_needs_every_input(tracer):
    root, objects = _explain(Disjunction().evaluate([0, None]), tracer)
    assert objects == [0, None]


def test_negation_is_explained_by_its_input(tracer):
    root, objects = _explain(Negation().evaluate([True]), tracer)
    assert objects == [True]
