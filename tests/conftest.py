# tests/conftest.py
# This file is part of Lineage - A Data Lineage Library
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for Lineage tests.

The configuration handles:
- Python path setup for module imports
- Test environment verification
- Common fixtures: a fresh tracer and located page elements
"""

import sys
from dataclasses import dataclass
from pathlib import Path

import pytest

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Verify that the project packages can be imported.

    Raises:
        pytest.skip: If required modules cannot be imported
    """
    try:
        import core
        import functions
        import parser
        import report
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    yield


@dataclass(frozen=True)
class Element:
    """Located element standing in for a DOM node in tests."""

    path: str
    width: int = 0
    text: str = ""

    def __str__(self) -> str:
        return self.path


@pytest.fixture
def tracer():
    """Provide a fresh tracer for a single explanation."""
    from core import Tracer

    return Tracer()


@pytest.fixture
def div():
    """Provide a sample element with a width and a text."""
    return Element("body[1]/section[2]/div[1]", width=120, text="Hello world")


@pytest.fixture
def paragraphs():
    """Provide a list of sample elements of various widths."""
    return [
        Element("body[1]/p[1]", width=80, text="first"),
        Element("body[1]/p[2]", width=150, text="second"),
        Element("body[1]/p[3]", width=90, text="third"),
    ]
