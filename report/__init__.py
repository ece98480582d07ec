# report/__init__.py
# This file is part of Lineage - A Data Lineage Library
#
# Report materialization exports

"""Textual and serialized reports of explanation graphs.

Primary Components:
    DataTree: Generic tree of data records (create / insert / insert_to_node)
    build_report: Converts a traceability graph into a DataTree
"""

from .builder import build_report, describe_subject, node_record
from .data_tree import DataTree, DataTreeNode

__all__ = ["DataTree", "DataTreeNode", "build_report", "describe_subject", "node_record"]
