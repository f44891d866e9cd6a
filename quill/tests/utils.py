"""
Utility functions shared across Quill tests.
"""
from quill.interpreter import Interpreter
from quill.parser import parse_line


def parse_source(source: str) -> tuple:
    """
    Parse a single line of source and return its statement node.
    """
    return parse_line(source, 1, '<test>')


def run_source(source: str, interpreter: Interpreter | None = None) -> Interpreter:
    """
    Run multi-line source as one block and return the interpreter afterwards.
    """
    if interpreter is None:
        interpreter = Interpreter('<test>')
    interpreter.run_block(source.splitlines())
    return interpreter


def evaluate(expression: str) -> float:
    """
    Evaluate an expression by declaring it into a fresh interpreter.
    """
    return run_source(f"var result = {expression}").vars['result']
