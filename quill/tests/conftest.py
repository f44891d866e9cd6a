"""
Pytest configuration for Quill tests.
"""
from pathlib import Path
import sys

import pytest


# Ensure the project root is on the Python path for all tests
PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from quill.interpreter import Interpreter  # noqa: E402


@pytest.fixture
def interpreter() -> Interpreter:
    """
    A fresh interpreter with only the built-in constants defined.
    """
    return Interpreter('<test>')
