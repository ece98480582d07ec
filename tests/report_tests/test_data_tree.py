# tests/report_tests/test_data_tree.py
# This file is part of Lineage - A Data Lineage Library
#
# Test suite for the generic data tree

"""Test suite for DataTree.

The first inserted record becomes the root; later records are attached
below the root or below a given node, in insertion order.
"""

import json

import pytest
from report import DataTree


def test_first_insert_becomes_root():
    tree = DataTree.create()
    root = tree.insert({"type": "OR"})
    assert tree.root_id() == root
    assert tree.get_data(root) == {"type": "OR"}


def test_later_inserts_go_below_root():
    """insert() attaches to the root once one exists."""
    tree = DataTree.create()
    root = tree.insert({"type": "OR"})
    child = tree.insert({"type": "AND"})
    assert tree.get_children(root) == [child]


def test_insert_to_node_keeps_order():
    tree = DataTree.create()
    n1 = tree.insert({"type": "OR"})
    n2 = tree.insert_to_node(n1, {"type": "object", "part": ["width"], "subject": "body[1]"})
    n3 = tree.insert_to_node(n1, {"type": "AND"})
    n4 = tree.insert_to_node(n3, "OR")
    assert tree.get_children(n1) == [n2, n3]
    assert tree.get_children(n3) == [n4]
    assert tree.size() == 4


def test_insert_to_unknown_node():
    tree = DataTree.create()
    with pytest.raises(KeyError):
        tree.insert_to_node(3, {"type": "AND"})


def test_nested_views():
    tree = DataTree.create()
    assert tree.to_dict() is None

    n1 = tree.insert({"type": "AND"})
    tree.insert_to_node(n1, {"type": "unknown"})
    expected = {
        "data": {"type": "AND"},
        "children": [{"data": {"type": "unknown"}, "children": []}],
    }
    assert tree.to_dict() == expected
    assert json.loads(tree.to_json()) == expected
