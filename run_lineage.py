#!/usr/bin/env python3
# run_lineage.py
# This file is part of Lineage - A Data Lineage Library
#
# Command-line interface for designator inspection and explanation demos

import sys
import argparse
from dataclasses import dataclass

from core import ComposedFunction, Argument, evaluate_dom
from core.designator import Designator, Nothing
from functions import Conjunction, GetAttribute, IsLessThan, IsEqualTo, Substring
from parser import DesignatorParseError, parse_designator
from report import build_report
from utils import configure_logging, get_logger


@dataclass(frozen=True)
class PageElement:
    """Minimal located element used by the demonstration."""

    path: str
    width: int
    text: str

    def __str__(self) -> str:
        return self.path


def describe_designator(d: Designator, steps: bool = True) -> None:
    """Print a designator and its head/tail decomposition.

    Args:
        d: Designator to describe
        steps: Print every head/tail step, not only the summary
    """
    logger = get_logger()

    logger.info(f"Designator: {d}")
    logger.info(f"Atomic parts: {len(d.segments())}")
    if not steps:
        return

    step = 0
    current = d
    while not isinstance(current, Nothing):
        logger.info(f"  {step}: head={current.head()}  tail={current.tail()}")
        current = current.tail()
        step += 1


def run_demo(as_json: bool) -> int:
    """Explain why a sample condition fails on a sample element.

    Returns:
        Number of violated conditions
    """
    logger = get_logger()

    element = PageElement("body[1]/section[2]/div[1]", 120, "Welcome to Lineage")

    narrow = ComposedFunction(IsLessThan(), ComposedFunction(GetAttribute("width"), Argument(0)), 100)
    greets = ComposedFunction(
        IsEqualTo(),
        ComposedFunction(Substring(0, 6), ComposedFunction(GetAttribute("text"), Argument(0))),
        "Hello, ",
    )
    condition = ComposedFunction(Conjunction(), narrow, greets)

    verdicts = evaluate_dom(element, [condition])
    for graph in verdicts:
        logger.info("\nExplanation graph:")
        logger.info(graph.to_string().rstrip())
        if as_json:
            logger.info("\nReport:")
            logger.info(build_report(graph).to_json())

    return len(verdicts)


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Lineage designator inspection and explanation demo",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_lineage.py "width of !"
  python run_lineage.py "characters 2-10 of text of @0 of !" --debug
  python run_lineage.py --demo --json
        """,
    )

    parser.add_argument(
        "designator", nargs="?", help="Designator to decompose, e.g. '@1 of !'"
    )

    parser.add_argument(
        "--demo", action="store_true", help="Explain a sample violated condition"
    )

    parser.add_argument(
        "--json", action="store_true", help="Print the demo report as JSON"
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Print every head/tail step of the designator"
    )

    parser.add_argument(
        "--debug", action="store_true", help="Log every query step and created node"
    )

    return parser


def main() -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args()

    if args.designator is None and not args.demo:
        parser.print_usage()
        return 1

    # Command output is logged at INFO level
    configure_logging(verbose=True, debug=args.debug)
    logger = get_logger()

    try:
        if args.designator is not None:
            describe_designator(parse_designator(args.designator), steps=args.verbose or args.debug)

        if args.demo:
            run_demo(args.json)

        return 0

    except DesignatorParseError as e:
        logger.error(f"Designator parsing error: {e}")
        return 2

    except KeyboardInterrupt:
        logger.error("Interrupted by user")
        return 4

    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        import traceback

        traceback.print_exc()
        return 5


if __name__ == "__main__":
    sys.exit(main())
