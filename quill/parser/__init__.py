"""Parser package for Quill.

This package splits the parser functionality into multiple modules to
keep the code organized. The :class:`Parser` class and the
:func:`parse_line` helper are exposed at the package level for
convenience.


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from quill.lexer import tokenize

from .parser import Parser


def parse_line(source: str, line: int = 1, file: str = "<stdin>") -> tuple:
    """
    Tokenize and parse one line of source into a statement node.
    """
    return Parser(tokenize(source, line), source, file).parse()


__all__ = ["Parser", "parse_line"]
