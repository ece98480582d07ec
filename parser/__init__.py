# parser/__init__.py
# This file is part of Lineage - A Data Lineage Library
#
# Parsing of textual designators

"""Reading designators back from their textual rendering.

Designators render as chains of atoms separated by "of", such as
"characters 2-10 of text" or "@1 of !". This module turns such strings
back into Designator objects, which lets reports, command-line arguments
and test fixtures name parts of objects as plain text.

Core Functions:
    parse_designator: Converts a designator string into a Designator

Example:
    >>> from parser import parse_designator
    >>> d = parse_designator("width of !")
    >>> d.size()
    2
"""

from .exceptions import DesignatorParseError
from .grammar import _DesignatorParser
from utils.logger import get_logger


def parse_designator(source: str):
    """Parse a designator string.

    Uses a fresh parser instance for each invocation.

    Args:
        source: Designator string, as produced by str() on a designator

    Returns:
        The parsed designator: the atom itself for a single atom, a
        CompoundDesignator otherwise

    Raises:
        DesignatorParseError: The string is empty or malformed
    """
    logger = get_logger()
    logger.debug(f"Parsing designator: {source}")

    parser = _DesignatorParser()

    try:
        return parser.parse(source)

    except DesignatorParseError:
        logger.debug("DesignatorParseError encountered during parsing")
        raise

    except Exception as exc:
        logger.debug(f"Unexpected parsing error: {type(exc).__name__}: {exc}")
        raise DesignatorParseError(str(exc)) from exc


__all__ = ["parse_designator", "DesignatorParseError"]

__version__ = "1.0.0"
__description__ = "Designator parsing components"
