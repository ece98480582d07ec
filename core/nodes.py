# core/nodes.py
# This file is part of Lineage - A Data Lineage Library
#
# Nodes of and-or traceability graphs

"""Traceability nodes forming and-or explanation graphs.

An explanation graph is a DAG: object nodes handed out by a Tracer are
shared between every parent that references the same designated object,
while connective nodes are distinct per use site.

Node Types:
    AndNode: all children are jointly needed to explain the parent
    OrNode: any one child suffices to explain the parent
    UnknownNode: terminal marker for undeterminable provenance
    ObjectNode: terminal pointing at a designated object
"""

from __future__ import annotations
import itertools
from typing import Iterator, List, Optional

from .designated_object import DesignatedObject


class NodeIdSequence:
    """Allocator of strictly increasing node identifiers.

    A Tracer owns one sequence per explanation run, so identifiers are
    deterministic for a given run.
    """

    def __init__(self, start: int = 0):
        self._counter = itertools.count(start)

    def next_id(self) -> int:
        return next(self._counter)


# Used by nodes created outside of a tracer
_default_sequence = NodeIdSequence()


class TraceabilityNode:
    """Generic node in an and-or lineage graph.

    Attributes:
        symbol: Marker printed in front of the node when rendered
    """

    symbol = ""

    def __init__(self, node_id: Optional[int] = None):
        self._id = node_id if node_id is not None else _default_sequence.next_id()
        self._children: List[TraceabilityNode] = []

    def get_id(self) -> int:
        """Get the node's unique identifier."""
        return self._id

    def get_children(self) -> List[TraceabilityNode]:
        """Get a copy of the node's children, in insertion order."""
        return list(self._children)

    def add_child(self, n: TraceabilityNode) -> None:
        """Add a child to the node.

        Args:
            n: The node to add
        """
        self._children.append(n)

    def is_leaf(self) -> bool:
        return not self._children

    def walk(self) -> Iterator[TraceabilityNode]:
        """Iterate over the graph in pre-order, visiting shared nodes once."""
        seen = set()
        stack = [self]
        while stack:
            node = stack.pop()
            if id(node) in seen:
                continue
            seen.add(id(node))
            yield node
            stack.extend(reversed(node._children))

    def label(self) -> str:
        return self.symbol

    def to_string(self, indent: str = "") -> str:
        """Render the graph below this node, one node per line.

        Args:
            indent: Prefix of this node's line; children get one more space

        Returns:
            Multi-line diagnostic rendering
        """
        s = f"{indent}{self.label()}\n"
        for child in self._children:
            s += child.to_string(indent + " ")
        return s

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self._id}, children={len(self._children)})"


class _Connective(TraceabilityNode):
    """Node combining its children as a set.

    Adding a connective of the same kind splices its children, and a node
    already among the children (by identity) is not added twice.
    """

    def add_child(self, n: TraceabilityNode) -> None:
        spliced = n.get_children() if isinstance(n, type(self)) else [n]
        for child in spliced:
            if not any(child is c for c in self._children):
                self._children.append(child)


class AndNode(_Connective):
    """An "and" node: all children are jointly needed."""

    symbol = "^"


class OrNode(_Connective):
    """An "or" node: any one child suffices."""

    symbol = "v"


class UnknownNode(TraceabilityNode):
    """An "unknown" node. It is terminal and ignores added children."""

    symbol = "?"

    def add_child(self, n: TraceabilityNode) -> None:
        pass


class ObjectNode(TraceabilityNode):
    """Terminal node pointing at a designated object.

    Attributes:
        designated_object: The part of an object this node stands for
    """

    def __init__(self, designated_object: DesignatedObject, node_id: Optional[int] = None):
        super().__init__(node_id)
        self.designated_object = designated_object

    def get_designated_object(self) -> DesignatedObject:
        return self.designated_object

    def label(self) -> str:
        return str(self.designated_object)

    def __repr__(self) -> str:
        return f"ObjectNode(id={self._id}, {self.designated_object})"
