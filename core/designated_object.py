# core/designated_object.py
# This file is part of Lineage - A Data Lineage Library
#
# Association between a designator, an object and a context

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Sequence, Tuple

from .designator import CompoundDesignator, Designator
from .exceptions import InvalidDesignatorError

# Hash shared by every object of an unhashable type
_UNHASHABLE = 0x5EED


def content_hash(o: Any) -> int:
    """Hash of an arbitrary object, consistent with ==.

    Objects of an unhashable type (lists, dicts, mutable DOM-like nodes)
    all share one hash value and are told apart by == alone. Equal objects
    are assumed to be either both hashable or both unhashable.
    """
    try:
        return hash(o)
    except TypeError:
        return _UNHASHABLE


@dataclass(frozen=True, eq=False)
class DesignatedObject:
    """Immutable triple made of a designator, an object and a context.

    Designated objects are the keys under which a Tracer caches object
    nodes. Two designated objects are equal when both carry no object, or
    when their objects are equal, their designators are equal and their
    contexts are equal position by position. Objects and context markers of an
    unhashable type are compared with == like any other; they only weaken
    the hash, so a Tracer holding many of them scans longer buckets.

    Attributes:
        designator: The part of the object that is designated
        object: The object that is designated
        context: Markers of the context the object was observed in
    """

    designator: Designator
    object: Any
    context: Tuple[Any, ...] = ()

    def __init__(self, designator: Designator, obj: Any, context: Sequence[Any] = ()):
        if not isinstance(designator, Designator):
            raise InvalidDesignatorError(
                f"A designated object requires a designator, got {designator!r}"
            )
        if isinstance(designator, CompoundDesignator):
            designator = designator.copy()
        object.__setattr__(self, "designator", designator)
        object.__setattr__(self, "object", obj)
        object.__setattr__(self, "context", tuple(context))

    def get_designator(self) -> Designator:
        return self.designator

    def get_object(self) -> Any:
        return self.object

    def get_context(self) -> Tuple[Any, ...]:
        return self.context

    def same_context(self, other: DesignatedObject) -> bool:
        """Check if two designated objects have the same context.

        Args:
            other: The other designated object

        Returns:
            True if both contexts have the same length and equal markers
        """
        if len(self.context) != len(other.context):
            return False
        return all(a == b for a, b in zip(self.context, other.context))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DesignatedObject):
            return NotImplemented
        if self.object is None or other.object is None:
            return self.object is None and other.object is None
        return (
            self.designator == other.designator
            and self.same_context(other)
            and bool(self.object == other.object)
        )

    def __hash__(self) -> int:
        if self.object is None:
            return hash(None)
        return hash(
            (
                content_hash(self.object),
                self.designator,
                tuple(content_hash(c) for c in self.context),
            )
        )

    def __str__(self) -> str:
        return f"{self.designator} of {self.object}"
