# report/builder.py
# This file is part of Lineage - A Data Lineage Library
#
# Conversion of traceability graphs into data-tree reports

"""Materialization of explanation graphs as data-tree reports.

Each traceability node becomes one record:

    {"type": "AND"} / {"type": "OR"} / {"type": "unknown"}
    {"type": "object", "part": [...], "subject": "..."}

The part lists the designator segments in rendering order, e.g.
["characters 2-10", "text"]. The subject locates the designated object:
objects exposing a ``path`` attribute (such as "body[1]/div[2]") are
reported by that path, anything else as "constant <value>".

A node shared by several parents in the graph is copied under each of
them, since a report is a tree.
"""

from __future__ import annotations
from typing import Any, Callable, Dict, Optional

from core.nodes import AndNode, ObjectNode, OrNode, TraceabilityNode, UnknownNode
from utils.logger import get_logger
from .data_tree import DataTree

SubjectRenderer = Callable[[Any], str]


def describe_subject(o: Any) -> str:
    """Default rendering of the subject of an object node."""
    path = getattr(o, "path", None)
    if path is not None:
        return str(path)
    return f"constant {o}"


def node_record(node: TraceabilityNode, describe: SubjectRenderer = describe_subject) -> Dict[str, Any]:
    """Build the report record of a single node.

    Raises:
        TypeError: If the node is of an unsupported kind
    """
    if isinstance(node, AndNode):
        return {"type": "AND"}
    if isinstance(node, OrNode):
        return {"type": "OR"}
    if isinstance(node, UnknownNode):
        return {"type": "unknown"}
    if isinstance(node, ObjectNode):
        dob = node.get_designated_object()
        return {
            "type": "object",
            "part": [str(s) for s in dob.get_designator().segments()],
            "subject": describe(dob.get_object()),
        }
    raise TypeError(f"Unsupported traceability node: {type(node).__name__}")


def build_report(
    graph: TraceabilityNode,
    describe: SubjectRenderer = describe_subject,
    tree: Optional[DataTree] = None,
) -> DataTree:
    """Materialize an explanation graph as a data tree.

    Args:
        graph: Root of the explanation graph
        describe: Rendering of the subject of object nodes
        tree: Tree to fill; a new one is created when omitted

    Returns:
        The filled data tree
    """
    logger = get_logger()
    if tree is None:
        tree = DataTree.create()

    root_id = tree.insert(node_record(graph, describe))
    stack = [(graph, root_id)]
    while stack:
        node, node_id = stack.pop()
        for child in node.get_children():
            child_id = tree.insert_to_node(node_id, node_record(child, describe))
            stack.append((child, child_id))

    logger.debug(f"Report built with {tree.size()} records")
    return tree
