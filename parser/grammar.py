# parser/grammar.py
# This file is part of Lineage - A Data Lineage Library
#
# LALR(1) grammar and parser for textual designators using SLY

"""Designator grammar implementation using SLY parser generator.

A textual designator is a chain of atoms separated by "of", exactly as
rendered by str() on a designator. The chain is read left to right into
the elements of a CompoundDesignator; a single atom yields the atomic
designator itself.

Grammar:
    start : path
    path  : path OF atom | atom
    atom  : RETURN | INPUT | ALL | NOTHING | VALUE | CHARACTERS RANGE | NAME
"""

from sly import Parser
from .lexer import DesignatorLexer
from .exceptions import DesignatorParseError
from core.designator import (
    All,
    Attribute,
    CharacterRange,
    CompoundDesignator,
    ConstantDesignator,
    Designator,
    InputArgument,
    Nothing,
    ReturnValue,
)
from utils.logger import get_logger


class _DesignatorParser(Parser):
    """SLY-based LALR(1) parser for textual designators.

    Attributes:
        tokens: Token types from DesignatorLexer
    """

    tokens = DesignatorLexer.tokens

    @_("path")
    def start(self, p) -> Designator:
        """Start rule: a path of one atom is the atom itself."""
        if len(p.path) == 1:
            return p.path[0]
        return CompoundDesignator(*p.path)

    @_("path OF atom")
    def path(self, p) -> list:
        return p.path + [p.atom]

    @_("atom")
    def path(self, p) -> list:
        return [p.atom]

    @_("RETURN")
    def atom(self, p) -> Designator:
        return ReturnValue.instance

    @_("INPUT")
    def atom(self, p) -> Designator:
        return InputArgument(p.INPUT)

    @_("ALL")
    def atom(self, p) -> Designator:
        return All.instance

    @_("NOTHING")
    def atom(self, p) -> Designator:
        return Nothing.instance

    @_("VALUE")
    def atom(self, p) -> Designator:
        return ConstantDesignator.instance

    @_("CHARACTERS RANGE")
    def atom(self, p) -> Designator:
        start, end = (int(bound) for bound in p.RANGE.split("-"))
        return CharacterRange(start, end)

    @_("NAME")
    def atom(self, p) -> Designator:
        return Attribute(p.NAME)

    def parse(self, text: str) -> Designator:
        """Parse a textual designator.

        Args:
            text: Designator string to parse

        Returns:
            The designator described by the text

        Raises:
            DesignatorParseError: If the text is empty or malformed
        """
        logger = get_logger()
        logger.debug(f"Parsing designator: {text}")

        if text.strip() == "":
            raise DesignatorParseError("Input designator is empty.")

        try:
            result = super().parse(DesignatorLexer().tokenize(text))

            if result is None:
                raise DesignatorParseError("Failed to parse designator (syntax error).")

            logger.debug(f"Successfully parsed designator into {type(result).__name__}")
            return result

        except DesignatorParseError:
            logger.debug("Parse error encountered")
            raise
        except Exception as e:
            logger.debug(f"Unexpected parsing error: {e}")
            raise DesignatorParseError(f"Parse failed: {e}") from e

    def error(self, token):
        """Handle syntax errors during parsing.

        Args:
            token: Problematic token or None for end of input

        Raises:
            DesignatorParseError: Always raises with detailed error information
        """
        if token:
            error_msg = (
                f"Syntax error near '{token.value}' "
                f"(type: {token.type}) at position {token.index}"
            )
        else:
            error_msg = "Syntax error: Unexpected end of designator"

        raise DesignatorParseError(error_msg)
