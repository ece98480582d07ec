# tests/parser_tests/test_designator_parser.py
# This file is part of Lineage - A Data Lineage Library
#
# Test suite for parsing designators from their textual rendering

"""Test suite for the designator parser.

Verifies that every rendering produced by str() on a designator is read
back into an equal designator, and that malformed text is rejected.
"""

import pytest
from core.designator import (
    All,
    Attribute,
    CharacterRange,
    CompoundDesignator,
    ConstantDesignator,
    InputArgument,
    Nothing,
    ReturnValue,
)
from parser import DesignatorParseError, parse_designator


class TestDesignatorParser:
    ATOM_CASES = [
        ("!", ReturnValue.instance),
        ("@3", InputArgument(3)),
        ("All", All.instance),
        ("Nothing", Nothing.instance),
        ("Value", ConstantDesignator.instance),
        ("width", Attribute("width")),
        ("characters 2-10", CharacterRange(2, 10)),
    ]

    @pytest.mark.parametrize("text, expected", ATOM_CASES)
    def test_single_atom(self, text, expected):
        d = parse_designator(text)
        assert d == expected
        assert not isinstance(d, CompoundDesignator)

    def test_compound_keeps_rendering_order(self):
        d = parse_designator("characters 2-10 of text of @0 of !")
        assert isinstance(d, CompoundDesignator)
        assert d.elements() == (
            CharacterRange(2, 10),
            Attribute("text"),
            InputArgument(0),
            ReturnValue.instance,
        )
        assert d.head() == ReturnValue.instance

    ROUND_TRIP_DESIGNATORS = [
        CompoundDesignator(InputArgument(2), ReturnValue.instance),
        CompoundDesignator(Attribute("width"), All.instance, Nothing.instance),
        CompoundDesignator(ConstantDesignator.instance, InputArgument(0)),
    ]

    @pytest.mark.parametrize("d", ROUND_TRIP_DESIGNATORS)
    def test_rendering_is_read_back(self, d):
        assert parse_designator(str(d)) == d

    @pytest.mark.parametrize(
        "text",
        ["", "   ", "of", "! of", "of !", "! !", "characters", "characters 5-2", "@"],
    )
    def test_malformed_designators(self, text):
        with pytest.raises(DesignatorParseError):
            parse_designator(text)
