"""Interpreter.

This is a line-at-a-time interpreter for Quill. Each line is tokenized,
parsed into a single statement node and executed at once, so the effects of
one line are visible to the next.

1. Execution Model
Statements are executed via `execute()`, expressions are evaluated via
`eval_expr()`. Both dispatch on the tag in the first slot of the tuple nodes
produced by the parser. Every value is a float.

2. Blocks
The false branch of an `if` and the body of a `for` span several lines and
end at a line reading `end`. They are pulled at run time from the
`LineSource` the current line came from: the REPL's input for top-level
statements, or the buffered lines of the enclosing block. A false branch is
read only when the guard is zero; a true branch is the rest of the `if`
line, parsed only when taken, and reads nothing. A loop body is read once
and re-run while its guard, parsed once, stays non-zero; a header line
ending in `end` carries the whole body itself.

3. Environment
Variables, the function table and the call-frame stack live in an
`Environment`. Function calls snapshot the variables, bind parameters over
them, run the body and restore the snapshot. A function that calls itself
while already running, directly or through another function, still runs its
body but the inner call evaluates to 0.0.

4. Error Handling
Errors are typed `QuillException`s carrying line numbers and file context.
An error aborts the current statement; assignments already made by that
statement are kept.


File: interpreter.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from quill.environment import Environment, FunctionDef
from quill.exceptions import (
    ArgumentCountException,
    DivisionByZeroException,
    ExpectedOpenParenException,
    InvalidExpressionException,
    InvalidStatementException,
    InvalidSyntaxException,
    UndefinedVariableException,
    UnexpectedEndOfInputException,
)
from quill.lexer import tokenize
from quill.operations import Op
from quill.parser import Parser
from quill.source import LineSource


class Interpreter:
    """Line-oriented interpreter for Quill."""

    def __init__(self, file: str = "<stdin>", debug: bool = False):
        """
        Initialize the interpreter.

        Parameters:
            file (str): Name of the input, used in error messages.
            debug (bool): Print the tokens and AST of every executed line.
        """
        self.env = Environment()
        self.file = file
        self.debug = debug
        self.loop_depth = 0

    @property
    def vars(self) -> dict[str, float]:
        return self.env.vars

    @property
    def functions(self) -> dict[str, FunctionDef]:
        return self.env.functions

    def debug_print_tokens_ast(self, tokens, ast):
        """
        Print tokenized source and AST
        """
        print("\nTokens:\n")
        print(tokens)
        print("\nAST:\n")
        print(ast)
        print(" ")

    def execute_line(self, text: str, source: LineSource | None = None, line: int | None = None):
        """
        Parse and execute one line of source.

        Parameters:
            text (str): The line to run.
            source (LineSource): Where a block opened on this line reads its
                following lines from. Defaults to a source with no lines,
                so a block opened here fails for lack of its 'end'.
            line (int): Line number for error messages. Defaults to the
                source's current line.
        """
        if source is None:
            source = LineSource.from_lines([])
        if line is None:
            line = max(source.line, 1)

        tokens = tokenize(text, line)
        ast = Parser(tokens, text, self.file).parse()
        if self.debug:
            self.debug_print_tokens_ast(tokens, ast)
        self.execute(ast, source)

    def run_block(self, lines: list[str], first_line: int = 1):
        """
        Execute a block: the given lines, in order, as consecutive statements.
        """
        source = LineSource.from_lines(lines, first_line)
        while True:
            text = source.next_line()
            if text is None:
                break
            self.execute_line(text, source)

    def _read_block(self, source: LineSource, construct: str, line: int) -> tuple[list[str], int]:
        """
        Read the lines of a block from `source` up to its 'end'.

        Returns:
            tuple: The block's lines and the line number of the first one.
        """
        lines = source.read_block()
        if lines is None:
            raise UnexpectedEndOfInputException(construct, line, self.file)
        return lines, source.line - len(lines)

    def eval_expr(self, node) -> float:
        """
        Recursively evaluate an expression node and return its value.

        Parameters:
            node (tuple): An expression node; the first element is its tag
                (e.g. 'number', 'ident', Op.ADD) and the last its line number.

        Returns:
            float: The evaluated result of the expression.

        Raises:
            UndefinedVariableException: If a variable is referenced that has not been defined.
            ExpectedOpenParenException: If a function name is used without '('.
            DivisionByZeroException: If the divisor is exactly 0.0.
        """
        op = node[0]
        line = node[-1]

        if op == 'number':
            return node[1]

        if op == 'ident':
            name = node[1]
            if name in self.env.vars:
                return self.env.vars[name]
            if name in self.env.functions:
                raise ExpectedOpenParenException(name, line, self.file)
            raise UndefinedVariableException(name, line, self.file)

        if op == 'call':
            _, name, arg_nodes, _ = node
            return self.call_function(name, arg_nodes, line)

        lhs = self.eval_expr(node[1])
        rhs = self.eval_expr(node[2])
        match op:
            case Op.ADD:
                return lhs + rhs
            case Op.SUB:
                return lhs - rhs
            case Op.MUL:
                return lhs * rhs
            case Op.DIV:
                if rhs == 0.0:
                    raise DivisionByZeroException(line, self.file)
                return lhs / rhs
        raise RuntimeError(f"Invalid expression node: {node}")

    def call_function(self, name: str, arg_nodes: list, line: int) -> float:
        """
        Call a user-defined function.

        Each parameter, in declared order, is bound as soon as its argument
        is evaluated, so later arguments see the earlier bindings. The
        caller's variables are restored afterwards, also when an argument
        or the body fails.

        Returns:
            float: The value of the last 'return' the body executed, 0.0 if
            it executed none or if the function was already running.
        """
        func = self.env.functions.get(name)
        if func is None:
            raise InvalidExpressionException(name, line, self.file)
        if len(arg_nodes) != len(func.params):
            raise ArgumentCountException(name, len(func.params), len(arg_nodes), line, self.file)

        saved_vars = dict(self.env.vars)
        try:
            for param, arg_node in zip(func.params, arg_nodes):
                self.env.vars[param] = self.eval_expr(arg_node)
        except Exception:
            self.env.vars = saved_vars
            raise

        saved_depth = self.loop_depth
        self.loop_depth = 0
        self.env.push_frame(name, saved_vars)
        try:
            self.execute(func.body, LineSource.empty())
        finally:
            result = self.env.pop_frame()
            self.loop_depth = saved_depth
        return result

    def execute(self, stmt: tuple, source: LineSource):
        """
        Execute one statement node.

        Parameters:
            stmt (tuple): A ('nop' | 'decl' | 'assign' | 'bad_assign' | 'if' |
                'for' | 'func_def' | 'return', ...) tuple.
            source (LineSource): Where 'if' and 'for' read their blocks from.

        Raises:
            InvalidStatementException: For assignments to unknown names.
        """
        kind = stmt[0]
        line = stmt[-1]

        if kind == 'nop':
            return

        elif kind == 'decl':
            _, var_name, expr_node, _ = stmt
            value = self.eval_expr(expr_node) if expr_node is not None else 0.0
            self.env.declare(var_name, value, line, self.file, rebind=self.loop_depth > 0)

        elif kind == 'assign':
            _, var_name, expr_node, text, _ = stmt
            if var_name not in self.env.vars:
                raise InvalidStatementException(text, line, self.file)
            value = self.eval_expr(expr_node)
            self.env.vars[var_name] = value

        elif kind == 'bad_assign':
            _, var_name, text, _ = stmt
            if var_name in self.env.vars:
                raise InvalidSyntaxException(
                    f"Invalid assignment syntax, expected '=' after '{var_name}'",
                    line,
                    self.file,
                )
            raise InvalidStatementException(text, line, self.file)

        elif kind == 'if':
            _, cond_node, then_text, _ = stmt
            if self.eval_expr(cond_node) != 0.0:
                self.execute_line(then_text, source, line)
            else:
                lines, first = self._read_block(source, 'if', line)
                self.run_block(lines, first)

        elif kind == 'for':
            _, init_stmt, cond_node, first_body_line, closed, _ = stmt
            self.execute(init_stmt, source)
            if closed:
                lines, first = [], line
            else:
                lines, first = self._read_block(source, 'for', line)
            if first_body_line is not None:
                lines = [first_body_line] + lines
                first = line
            self.loop_depth += 1
            try:
                while self.eval_expr(cond_node) != 0.0:
                    self.run_block(lines, first)
            finally:
                self.loop_depth -= 1

        elif kind == 'func_def':
            _, name, params, body, body_text, _ = stmt
            self.env.define_function(FunctionDef(name, params, body, body_text), line, self.file)

        elif kind == 'return':
            _, expr_node, _ = stmt
            value = self.eval_expr(expr_node)
            self.env.set_return(value, line, self.file)

        else:
            raise TypeError(f"Unknown statement type: {kind} on line {line} in {self.file}")
