"""Line sources.

A :class:`LineSource` is where the interpreter reads the lines of a block
from. The REPL wraps ``input()`` so a false branch or loop body typed after
its header is read interactively; a block that is being executed wraps its
own buffered lines.


File: source.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import Callable, Iterable, Optional


class LineSource:
    """
    Pull-based stream of source lines with line numbering.
    """
    def __init__(self, read: Callable[[], Optional[str]], first_line: int = 1, require_end: bool = True):
        """
        Parameters:
            read: Returns the next line, or None once the input is exhausted.
            first_line: Number given to the first line read.
            require_end: Whether a block must be closed by 'end'. When False,
                running out of lines closes the block instead.
        """
        self._read = read
        self.line = first_line - 1
        self.require_end = require_end

    @classmethod
    def from_lines(cls, lines: Iterable[str], first_line: int = 1) -> 'LineSource':
        """
        Build a source over an in-memory sequence of lines.
        """
        it = iter(lines)
        return cls(lambda: next(it, None), first_line)

    @classmethod
    def empty(cls) -> 'LineSource':
        """
        Source with no lines, for running a function body. The body is a
        single line, so any block it opens ends with it.
        """
        return cls(lambda: None, require_end=False)

    def next_line(self) -> Optional[str]:
        """
        Return the next line without its trailing newline, or None at the end.
        """
        text = self._read()
        if text is None:
            return None
        self.line += 1
        return text.rstrip('\n')

    def read_block(self) -> Optional[list[str]]:
        """
        Read lines up to a line equal to 'end' and return them.

        The 'end' line itself is consumed but not returned. Returns None if
        the input ran out before 'end' was seen and `require_end` is set.
        """
        lines = []
        while True:
            text = self.next_line()
            if text is None:
                return None if self.require_end else lines
            if text.strip() == 'end':
                return lines
            lines.append(text)
