"""Quill Language Interpreter

This is the main entry point for the Quill interpreter.

Workflow:
1. Lines are read interactively, one statement per line.
2. A line reading exactly `quit` ends the session.
3. Every other line is handed to the Interpreter, which tokenizes, parses
   and executes it. Blocks opened by the line (`if` false branches, `for`
   bodies) keep reading from the same input, with a `...` prompt, up to
   their `end`.
4. A failing statement prints one error message; the session carries on.

Lines starting with ':' are REPL commands rather than Quill statements:
`:vars` lists the variables and `:funcs` lists the defined functions.


File: repl.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import argparse
import sys

from quill import __version__
from quill.interpreter import Interpreter
from quill.source import LineSource


PROMPT = ">>> "
CONTINUATION_PROMPT = "... "
SENTINEL = "quit"


def print_vars(interpreter: Interpreter):
    """
    Print every variable and its value, sorted by name.
    """
    for name in sorted(interpreter.vars):
        print(f"{name} = {interpreter.vars[name]!r}")


def print_funcs(interpreter: Interpreter):
    """
    Print every defined function with its parameters and body.
    """
    for name in sorted(interpreter.functions):
        func = interpreter.functions[name]
        params = " ".join(func.params)
        signature = f"{name} {params}" if params else name
        print(f"func {signature} {{ {func.source}")


REPL_COMMANDS = {
    ":vars": print_vars,
    ":funcs": print_funcs,
}


class _InputReader:
    """
    Reads lines with input(), switching to the continuation prompt once a
    statement has started.
    """
    def __init__(self, read_line):
        self.read_line = read_line
        self.prompt = PROMPT

    def __call__(self):
        try:
            text = self.read_line(self.prompt)
        except EOFError:
            return None
        self.prompt = CONTINUATION_PROMPT
        return text


def run_repl(interpreter: Interpreter | None = None, read_line=None, banner: bool = True) -> Interpreter:
    """
    Run the interactive REPL until `quit` or end of input.

    Parameters:
        interpreter (Interpreter): The interpreter to feed. A fresh one is
            created when omitted.
        read_line (callable): Prompt-taking line reader, `input` by default.
        banner (bool): Print the greeting first.

    Returns:
        Interpreter: The interpreter, with the session's final state.
    """
    if interpreter is None:
        interpreter = Interpreter("<stdin>")
    if banner:
        print("Quill Language Interpreter - REPL")
        print(f"Type `{SENTINEL}` to leave.")

    reader = _InputReader(read_line or input)
    source = LineSource(reader)
    while True:
        reader.prompt = PROMPT
        try:
            text = source.next_line()
            if text is None:
                print()
                break
            if text == SENTINEL:
                break
            command = REPL_COMMANDS.get(text.strip())
            if command is not None:
                command(interpreter)
                continue
            try:
                interpreter.execute_line(text, source)
            except Exception as e:
                print(f"{type(e).__name__}: {e}")
        except KeyboardInterrupt:
            print("\nInterrupted.")
            break
    return interpreter


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="quill",
        description="Interactive interpreter for the Quill expression language.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="print the tokens and AST of every line before executing it",
    )
    parser.add_argument(
        "--no-banner",
        action="store_true",
        help="do not print the greeting on start-up",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str]) -> int:
    """
    Entry point for the CLI.

    Parameters:
        argv (list[str]): Full argument vector, program name first.

    Returns:
        int: Process exit status.
    """
    args = build_arg_parser().parse_args(argv[1:])
    interpreter = Interpreter("<stdin>", debug=args.debug)
    run_repl(interpreter, banner=not args.no_banner)
    return 0


def cli() -> None:
    sys.exit(main(sys.argv))
