"""Environment.

The environment is everything a Quill session remembers between lines:

    - `vars`: one flat mapping from variable name to float, shared by the
      whole session and seeded with the built-in constants.
    - `functions`: the function table, name to :class:`FunctionDef`.
    - `frames`: the call-frame stack. The top frame is the active function,
      the one a `return` statement writes to.

Calls use flat dynamic scope. A call snapshots `vars`, then binds each
parameter straight into it as its argument is evaluated (shadowing any
global of the same name). Leaving the call puts the snapshot back. A
callee can read every caller variable, but whatever it writes is
discarded when it returns.


File: environment.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from dataclasses import dataclass, field

from quill.exceptions import (
    DuplicateDeclarationException,
    DuplicateFunctionException,
    ReturnOutsideFunctionException,
)


BUILTINS = {
    'pi': 3.14159265358979323846,
    'e': 2.71828182845904523536,
}


@dataclass
class FunctionDef:
    """A user-defined function: parameter names and its parsed one-line body."""
    name: str
    params: list[str]
    body: tuple
    source: str


@dataclass
class Frame:
    """Bookkeeping for one function call in progress."""
    function: str
    saved_vars: dict[str, float]
    return_value: float = 0.0
    reentrant: bool = False


@dataclass
class Environment:
    """Variables, functions and call frames of one interpreter session."""
    vars: dict[str, float] = field(default_factory=lambda: dict(BUILTINS))
    functions: dict[str, FunctionDef] = field(default_factory=dict)
    frames: list[Frame] = field(default_factory=list)

    def declare(self, name: str, value: float, line=None, file=None, rebind=False) -> None:
        """
        Create a variable. Fails if it exists, unless `rebind` is set.
        """
        if name in self.vars and not rebind:
            raise DuplicateDeclarationException(name, line, file)
        self.vars[name] = value

    def define_function(self, func: FunctionDef, line=None, file=None) -> None:
        if func.name in self.functions:
            raise DuplicateFunctionException(func.name, line, file)
        self.functions[func.name] = func

    @property
    def active_function(self) -> str | None:
        return self.frames[-1].function if self.frames else None

    def is_active(self, name: str) -> bool:
        """
        True if `name` is anywhere on the call stack, directly or indirectly.
        """
        return any(frame.function == name for frame in self.frames)

    def push_frame(self, name: str, saved_vars: dict[str, float]) -> Frame:
        """
        Enter a call. `saved_vars` is the caller's variables as they were
        before the parameters were bound, put back by :meth:`pop_frame`.

        A function that is already on the stack gets a re-entrant frame whose
        return value is never used.
        """
        frame = Frame(name, saved_vars, reentrant=self.is_active(name))
        self.frames.append(frame)
        return frame

    def pop_frame(self) -> float:
        """
        Leave the current call, restoring the caller's variables.

        Returns:
            float: The call's result, 0.0 for a re-entrant frame.
        """
        frame = self.frames.pop()
        self.vars = frame.saved_vars
        return 0.0 if frame.reentrant else frame.return_value

    def set_return(self, value: float, line=None, file=None) -> None:
        if not self.frames:
            raise ReturnOutsideFunctionException(line, file)
        self.frames[-1].return_value = value
