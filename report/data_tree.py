# report/data_tree.py
# This file is part of Lineage - A Data Lineage Library
#
# Generic tree storage used to materialize explanation reports

from __future__ import annotations
import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class DataTreeNode:
    """Node of a DataTree.

    Attributes:
        node_id: Identifier of the node within its tree
        data: Arbitrary payload
        parent_id: Identifier of the parent, None for the root
        children: Identifiers of the children, in insertion order
    """

    node_id: int
    data: Any
    parent_id: Optional[int] = None
    children: List[int] = field(default_factory=list)


class DataTree:
    """Tree of arbitrary data records addressed by integer identifiers.

    The first inserted record becomes the root; later calls to insert add
    children to the root, and insert_to_node adds children anywhere.
    """

    def __init__(self):
        self._nodes: Dict[int, DataTreeNode] = {}
        self._root_id: Optional[int] = None

    @classmethod
    def create(cls) -> DataTree:
        """Create an empty tree."""
        return cls()

    def insert(self, data: Any) -> int:
        """Insert a record at the root, or below the root if there is one.

        Returns:
            Identifier of the new node
        """
        if self._root_id is None:
            node = self._new_node(data, None)
            self._root_id = node.node_id
            return node.node_id
        return self.insert_to_node(self._root_id, data)

    def insert_to_node(self, parent_id: int, data: Any) -> int:
        """Insert a record as the last child of an existing node.

        Raises:
            KeyError: If parent_id does not designate a node of this tree
        """
        if parent_id not in self._nodes:
            raise KeyError(f"No node with id {parent_id}")
        node = self._new_node(data, parent_id)
        self._nodes[parent_id].children.append(node.node_id)
        return node.node_id

    def _new_node(self, data: Any, parent_id: Optional[int]) -> DataTreeNode:
        node = DataTreeNode(len(self._nodes), data, parent_id)
        self._nodes[node.node_id] = node
        return node

    def root_id(self) -> Optional[int]:
        return self._root_id

    def get_data(self, node_id: int) -> Any:
        return self._nodes[node_id].data

    def get_children(self, node_id: int) -> List[int]:
        return list(self._nodes[node_id].children)

    def size(self) -> int:
        return len(self._nodes)

    def to_dict(self, node_id: Optional[int] = None) -> Optional[Dict[str, Any]]:
        """Nested dictionary view of the tree (or of a subtree)."""
        if node_id is None:
            node_id = self._root_id
        if node_id is None:
            return None
        node = self._nodes[node_id]
        return {
            "data": node.data,
            "children": [self.to_dict(c) for c in node.children],
        }

    def to_json(self, indent: Optional[int] = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False, default=str)
