# core/tracer.py
# This file is part of Lineage - A Data Lineage Library
#
# Factory and cache for the nodes of an explanation graph

from __future__ import annotations
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple

from .designated_object import DesignatedObject
from .designator import Designator
from .nodes import AndNode, NodeIdSequence, ObjectNode, OrNode, UnknownNode
from utils.logger import get_logger


class Tracer:
    """Manages the nodes of a designation and-or graph.

    A tracer is the only place where nodes are created. It hands out at
    most one object node per distinct designated object, compared by
    value, while "and", "or" and "unknown" nodes are always fresh.

    The tracer also carries a context stack. Designated objects built
    through it record the current context, so that the same object seen
    under two contexts (e.g. two iteration indices) gets two nodes.

    A tracer is meant for a single explanation request and is not safe
    for concurrent use.

    Attributes:
        nodes: Object nodes already created, keyed by designated object
    """

    def __init__(
        self,
        context: Optional[Sequence[Any]] = None,
        nodes: Optional[Dict[DesignatedObject, ObjectNode]] = None,
        ids: Optional[NodeIdSequence] = None,
    ):
        self.nodes: Dict[DesignatedObject, ObjectNode] = nodes if nodes is not None else {}
        self._context: List[Any] = list(context) if context is not None else []
        self._ids = ids if ids is not None else NodeIdSequence()

    # Context management
    def get_context(self) -> Tuple[Any, ...]:
        """Snapshot of the current context stack, bottom first."""
        return tuple(self._context)

    def push_context(self, marker: Any) -> None:
        self._context.append(marker)

    def pop_context(self) -> Any:
        """Remove and return the innermost context marker.

        Raises:
            IndexError: If the context stack is empty
        """
        return self._context.pop()

    @contextmanager
    def in_context(self, marker: Any) -> Iterator[Tracer]:
        """Run a block with an extra marker pushed on the context stack."""
        self.push_context(marker)
        try:
            yield self
        finally:
            self.pop_context()

    def get_sub_tracer(self, marker: Any) -> Tracer:
        """Create a tracer whose context extends this one by a marker.

        The sub-tracer shares this tracer's node cache and identifier
        sequence, so nodes created through either one belong to the same
        graph.
        """
        return Tracer(self._context + [marker], nodes=self.nodes, ids=self._ids)

    def designate(self, designator: Designator, obj: Any) -> DesignatedObject:
        """Build a designated object in the current context."""
        return DesignatedObject(designator, obj, self.get_context())

    # Node factory
    def get_object_node(self, dob: DesignatedObject) -> ObjectNode:
        """Get the object node of a designated object.

        Args:
            dob: The designated object that will be contained inside the node

        Returns:
            The object node already created for an equal designated object,
            or a new one otherwise
        """
        logger = get_logger()

        existing = self.nodes.get(dob)
        if existing is not None:
            logger.node_cached(existing.get_id(), str(dob))
            return existing

        node = ObjectNode(dob, self._ids.next_id())
        self.nodes[dob] = node
        logger.node_created("Object", node.get_id(), str(dob))
        return node

    def get_and_node(self) -> AndNode:
        node = AndNode(self._ids.next_id())
        get_logger().node_created("And", node.get_id())
        return node

    def get_or_node(self) -> OrNode:
        node = OrNode(self._ids.next_id())
        get_logger().node_created("Or", node.get_id())
        return node

    def get_unknown_node(self) -> UnknownNode:
        node = UnknownNode(self._ids.next_id())
        get_logger().node_created("Unknown", node.get_id())
        return node

    def get_object_nodes(self) -> List[ObjectNode]:
        """List the object nodes created so far, in creation order."""
        return list(self.nodes.values())
