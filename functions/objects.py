# functions/objects.py
# This file is part of Lineage - A Data Lineage Library
#
# Functions extracting parts of structured objects and strings

"""Atomic functions reading a part of their input.

These functions do not combine inputs: their output *is* a part of their
single input, and the explanation is that part of the input, named by a
designator. Designators accumulate along a chain of such functions, e.g.
"characters 2-10 of text" for a substring of an element's text.
"""

from __future__ import annotations
from collections.abc import Mapping
from typing import Any, List

from core.designator import Attribute, CharacterRange, compose
from core.function import AtomicFunction


class GetAttribute(AtomicFunction):
    """Reads a named attribute (or mapping key) of an object.

    Attributes:
        name: Name of the attribute to read
    """

    def __init__(self, name: str):
        super().__init__(1)
        self.name = name

    def get_value(self, args: List[Any]) -> Any:
        o = args[0]
        if isinstance(o, Mapping):
            return o[self.name]
        return getattr(o, self.name)

    def query_output(self, q, d, root, tracer, value):
        return self.query_input(q, 0, compose(d, Attribute(self.name)), root, tracer, value)

    def __str__(self) -> str:
        return f"get {self.name}"


class Substring(AtomicFunction):
    """Extracts the characters start to end (inclusive) of a string."""

    def __init__(self, start: int, end: int):
        super().__init__(1)
        self.range = CharacterRange(start, end)

    def get_value(self, args: List[Any]) -> str:
        return args[0][self.range.start : self.range.end + 1]

    def query_output(self, q, d, root, tracer, value):
        if self.is_whole(d):
            part = self.range
        elif isinstance(d, CharacterRange):
            # Sub-range of the substring, shifted back into the input
            part = CharacterRange(self.range.start + d.start, self.range.start + d.end)
        else:
            return self.unknown(root, tracer)
        return self.query_input(q, 0, part, root, tracer, value)

    def __str__(self) -> str:
        return f"substring {self.range.start}-{self.range.end}"
