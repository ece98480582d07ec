# core/evaluation.py
# This file is part of Lineage - A Data Lineage Library
#
# Entry points evaluating conditions on a document and explaining violations

from __future__ import annotations
from typing import Any, Callable, List, Optional, Sequence, Union

from .designator import ReturnValue
from .function import AbstractFunction
from .nodes import TraceabilityNode
from .tracer import Tracer
from .value import QueryType, SourceValue
from utils.logger import get_logger

Condition = Union[AbstractFunction, Callable[[Any], Any]]


def evaluate_dom(root: Any, conditions: Sequence[Condition] = ()) -> List[TraceabilityNode]:
    """Evaluate a set of conditions on a DOM tree.

    Args:
        root: Object corresponding to the root of the page
        conditions: Boolean conditions to evaluate on the page, in order

    Returns:
        One explanation graph per condition that evaluates to false, in
        the order of the conditions
    """
    logger = get_logger()
    logger.debug(f"Evaluating {len(conditions)} conditions")

    verdicts = []
    for i, condition in enumerate(conditions):
        verdict = get_verdict(root, condition)
        if root is not None:
            logger.verdict(i, verdict is None)
        if verdict is not None:
            verdicts.append(verdict)
    return verdicts


def get_verdict(root: Any, condition: Condition) -> Optional[TraceabilityNode]:
    """Evaluate a single condition on a DOM tree.

    A condition given as an AbstractFunction of arity 1 is evaluated on the
    root, wrapped as a SourceValue so that its parts can be designated,
    and the provenance of its return value is queried under a fresh
    tracer. Any other callable is opaque: a violation can be reported but
    its provenance is unknown.

    Args:
        root: Object corresponding to the root of the page
        condition: Boolean condition to evaluate on the page

    Returns:
        An "or" node explaining the violation if the condition evaluates to
        false, and None if it is fulfilled or the root is None
    """
    if root is None:
        return None

    tracer = Tracer()

    if isinstance(condition, AbstractFunction):
        value = condition.evaluate([SourceValue(root)])
        if value.get_value():
            return None
        graph = tracer.get_or_node()
        value.query(QueryType.PROVENANCE, ReturnValue.instance, graph, tracer)
        return graph

    if condition(root):
        return None
    graph = tracer.get_or_node()
    graph.add_child(tracer.get_unknown_node())
    return graph
