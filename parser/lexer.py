# parser/lexer.py
# This file is part of Lineage - A Data Lineage Library
#
# Lexical analyzer for designator strings using SLY

"""Lexical analyzer for textual designators.

Supported Tokens:
- Separator: of
- Atoms: ! (return value), @<n> (input argument), All, Nothing, Value
- Character ranges: characters <a>-<b>
- Names: any other identifier, read as an attribute name
- Whitespace: ignored during tokenization
"""

from sly import Lexer
from utils.logger import get_logger


class DesignatorLexer(Lexer):
    """SLY-based lexer for designator tokenization.

    Attributes:
        tokens: Set of valid token types
        ignore: Characters to skip during tokenization
        NAME: Identifier pattern with keyword mapping
    """

    tokens = {
        "OF",
        "RETURN",
        "INPUT",
        "RANGE",
        "ALL",
        "NOTHING",
        "VALUE",
        "CHARACTERS",
        "NAME",
    }

    ignore = " \t\r\n"

    RETURN = r"!"

    @_(r"@\d+")
    def INPUT(self, t):
        t.value = int(t.value[1:])
        return t

    RANGE = r"\d+-\d+"

    # Names start with a letter/underscore and may contain hyphens (e.g. font-size)
    NAME = r"[a-zA-Z_][a-zA-Z0-9_\-]*"

    # Keyword mapping: reassign token types for reserved words
    NAME["of"] = "OF"
    NAME["All"] = "ALL"
    NAME["Nothing"] = "NOTHING"
    NAME["Value"] = "VALUE"
    NAME["characters"] = "CHARACTERS"

    def error(self, t):
        """Reject a character that starts no designator token.

        Raises:
            ValueError: With the offending character and its position
        """
        position = self.index
        get_logger().debug(f"Unexpected character '{t.value[0]}' at position {position}")
        raise ValueError(f"Unexpected character '{t.value[0]}' in designator at position {position}")
