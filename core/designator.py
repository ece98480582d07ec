# core/designator.py
# This file is part of Lineage - A Data Lineage Library
#
# Designators: names for the parts of an object

"""Designator classes naming "a part of an object".

A designator is a function that extracts a part of an object: the whole
object, the return value of a function, one of its input arguments, a
named attribute, and so on. Atomic designators can be chained into a
CompoundDesignator to express nested access paths such as "input 2 of the
return value".

Decomposition follows a head/tail scheme. The head of a compound is its
last added (outermost) element and the tail is the compound made of the
remaining elements. Repeatedly taking the tail eventually reaches
Nothing, whose tail is Nothing again.

Designator Types:
    Nothing, All: special designators for "no part" and "the whole object"
    ReturnValue, InputArgument: parts of a function call
    ConstantDesignator: the value of a constant
    Attribute, CharacterRange: parts of a structured or textual object
    CompoundDesignator: composition of atomic designators
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Tuple

from .exceptions import InvalidDesignatorError


class Designator:
    """Base class for all functions that extract parts of an object.

    Atomic designators inherit the default decomposition: the head is the
    designator itself and the tail is Nothing.
    """

    __slots__ = ()

    def head(self) -> Designator:
        """Extract the designator at the head of a composition.

        Returns:
            The designator itself for atomic designators
        """
        return self

    def tail(self) -> Designator:
        """Extract the designator made of the tail of a composition.

        Returns:
            Nothing for atomic designators
        """
        return Nothing.instance

    def segments(self) -> Tuple[Designator, ...]:
        """Return the atomic designators in rendering order."""
        return (self,)


@dataclass(frozen=True, slots=True)
class Nothing(Designator):
    """Special designator that designates nothing."""

    def __str__(self) -> str:
        return "Nothing"


@dataclass(frozen=True, slots=True)
class All(Designator):
    """Special designator that designates all of an object."""

    def __str__(self) -> str:
        return "All"


@dataclass(frozen=True, slots=True)
class ReturnValue(Designator):
    """Atomic designator representing the return value of a function."""

    def __str__(self) -> str:
        return "!"


@dataclass(frozen=True, slots=True)
class InputArgument(Designator):
    """Atomic designator representing one of the input arguments of a function.

    Attributes:
        index: Position of the input argument, starting at 0
    """

    index: int

    def __post_init__(self):
        if isinstance(self.index, bool) or not isinstance(self.index, int) or self.index < 0:
            raise ValueError(f"Input argument index must be an int >= 0, got {self.index!r}")

    def __str__(self) -> str:
        return f"@{self.index}"


@dataclass(frozen=True, slots=True)
class ConstantDesignator(Designator):
    """Atomic designator that points to the value of a constant."""

    def __str__(self) -> str:
        return "Value"


@dataclass(frozen=True, slots=True)
class Attribute(Designator):
    """Atomic designator for a named part of an object (e.g. its width).

    Attributes:
        name: Name of the designated attribute
    """

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class CharacterRange(Designator):
    """Atomic designator for a range of characters in a string.

    Attributes:
        start: Index of the first character
        end: Index of the last character
    """

    start: int
    end: int

    def __post_init__(self):
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"Invalid character range {self.start}-{self.end}")

    def __str__(self) -> str:
        return f"characters {self.start}-{self.end}"


Nothing.instance = Nothing()
All.instance = All()
ReturnValue.instance = ReturnValue()
ConstantDesignator.instance = ConstantDesignator()


class CompoundDesignator(Designator):
    """Designator expressed as the composition of atomic designators.

    Elements are kept in insertion order. Adding a compound designator
    appends each of its elements individually, so a compound never holds
    another compound.

    A compound compares and hashes by its elements; it must not be mutated
    while used as a dictionary key.
    """

    __slots__ = ("_elements",)

    def __init__(self, *designators: Designator):
        self._elements: List[Designator] = []
        for d in designators:
            self.add(d)

    def add(self, d: Designator) -> None:
        """Add a designator to the composition.

        Args:
            d: The designator to add. If it is compound, each of its elements
               is added individually.

        Raises:
            InvalidDesignatorError: If d is not a designator
        """
        if not isinstance(d, Designator):
            raise InvalidDesignatorError(f"Cannot compose with {d!r}")

        if isinstance(d, CompoundDesignator):
            self._elements.extend(d._elements)
        else:
            self._elements.append(d)

    def size(self) -> int:
        """Get the number of atomic designators in this composition."""
        return len(self._elements)

    def elements(self) -> Tuple[Designator, ...]:
        """Return the atomic designators, first added first."""
        return tuple(self._elements)

    def segments(self) -> Tuple[Designator, ...]:
        return self.elements()

    def copy(self) -> CompoundDesignator:
        """Return an independent compound with the same elements."""
        return CompoundDesignator(*self._elements)

    def head(self) -> Designator:
        if not self._elements:
            return Nothing.instance
        return self._elements[-1]

    def tail(self) -> Designator:
        if len(self._elements) <= 1:
            return Nothing.instance
        if len(self._elements) == 2:
            return self._elements[0]
        return CompoundDesignator(*self._elements[:-1])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CompoundDesignator):
            return NotImplemented
        return self._elements == other._elements

    def __hash__(self) -> int:
        return hash(("compound", tuple(self._elements)))

    def __str__(self) -> str:
        return " of ".join(str(e) for e in self._elements)

    def __repr__(self) -> str:
        inner = ", ".join(repr(e) for e in self._elements)
        return f"CompoundDesignator({inner})"


def compose(*designators: Designator) -> Designator:
    """Build the simplest designator chaining the given ones.

    Occurrences of Nothing are dropped. The result is Nothing when nothing
    remains, the sole atomic designator when one remains, and a flat
    CompoundDesignator otherwise.

    Args:
        designators: Designators in rendering order (innermost part first)

    Returns:
        The composed designator
    """
    compound = CompoundDesignator()
    for d in designators:
        if isinstance(d, Nothing):
            continue
        compound.add(d)

    if compound.size() == 0:
        return Nothing.instance
    if compound.size() == 1:
        return compound.head()
    return compound
