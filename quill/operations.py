"""Shared definitions for AST operation identifiers.

The parser labels binary expression nodes with these names and the
interpreter dispatches on them, so both sides agree on a single set.


File: operations.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from enum import Enum


class Op(str, Enum):
    """
    Enumeration of supported arithmetic operations.
    """

    ADD = "add"
    SUB = "sub"
    MUL = "mul"
    DIV = "div"

    def __str__(self) -> str:  # pragma: no cover - trivial
        """
        Return the underlying string value for nicer debug output.
        """
        return self.value


__all__ = ["Op"]
