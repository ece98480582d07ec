# core/__init__.py
# This file is part of Lineage - A Data Lineage Library
#
# Core module public API for lineage computations

"""Core components for data lineage and provenance queries.

This module provides the designator algebra naming parts of objects, the
Value and Function abstractions that can explain which part of their inputs
produced a part of their output, and the machinery assembling those
explanations into and-or traceability graphs.

Primary Components:
    Designator: Names a part of an object (All, Nothing, ReturnValue, ...)
    CompoundDesignator: Chain of atomic designators
    DesignatedObject: Designator, object and context triple
    Value, AbstractFunction: Provenance query protocol
    Tracer: Per-request node factory and object node cache
    evaluate_dom: Explains every violated condition on a page

Example:
    >>> from core import CompoundDesignator, All
    >>> d = CompoundDesignator(All.instance, All.instance)
    >>> d.size()
    2
"""

from .designator import (
    All,
    Attribute,
    CharacterRange,
    CompoundDesignator,
    ConstantDesignator,
    Designator,
    InputArgument,
    Nothing,
    ReturnValue,
    compose,
)
from .designated_object import DesignatedObject
from .evaluation import evaluate_dom, get_verdict
from .exceptions import ArityMismatch, InvalidDesignatorError, LineageError
from .function import (
    AbstractFunction,
    Argument,
    AtomicFunction,
    ComposedFunction,
    ConstantFunction,
)
from .nodes import (
    AndNode,
    NodeIdSequence,
    ObjectNode,
    OrNode,
    TraceabilityNode,
    UnknownNode,
)
from .tracer import Tracer
from .value import AtomicFunctionReturnValue, ConstantValue, QueryType, SourceValue, Value

__all__ = [
    "evaluate_dom",
    "get_verdict",
    "All",
    "Attribute",
    "CharacterRange",
    "CompoundDesignator",
    "ConstantDesignator",
    "Designator",
    "InputArgument",
    "Nothing",
    "ReturnValue",
    "compose",
    "DesignatedObject",
    "ArityMismatch",
    "InvalidDesignatorError",
    "LineageError",
    "AbstractFunction",
    "Argument",
    "AtomicFunction",
    "ComposedFunction",
    "ConstantFunction",
    "AndNode",
    "NodeIdSequence",
    "ObjectNode",
    "OrNode",
    "TraceabilityNode",
    "UnknownNode",
    "Tracer",
    "AtomicFunctionReturnValue",
    "ConstantValue",
    "SourceValue",
    "QueryType",
    "Value",
]

__version__ = "1.0.0"
__description__ = "Core components for data lineage queries"
