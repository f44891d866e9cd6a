"""Errors.

Every failure the interpreter can report is a :class:`QuillException`. None of
them is fatal: the REPL prints the error and moves on to the next line.


File: exceptions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""


def _locate(message: str, line=None, file=None) -> str:
    if line is not None:
        message += f" on line {line}"
    if file is not None:
        message += f" in {file}"
    return message


class QuillException(Exception):
    """
    Base class for interpreter errors.
    """
    def __init__(self, message, line=None, file=None):
        self.line = line
        self.file = file
        super().__init__(_locate(message, line, file))


class InvalidStatementException(QuillException):
    """
    Error for lines that do not start a known statement.
    """
    def __init__(self, statement, line=None, file=None):
        self.statement = statement
        super().__init__(f"Invalid statement: {statement}", line, file)


class DuplicateDeclarationException(QuillException):
    """
    Error for declaring a variable that already exists.
    """
    def __init__(self, varname, line=None, file=None):
        self.varname = varname
        super().__init__(f"Variable already declared: {varname}", line, file)


class InvalidSyntaxException(QuillException):
    """
    Error for malformed statements.
    """


class ExpectedThenException(InvalidSyntaxException):
    """
    Error for a conditional whose guard is not followed by 'then'.
    """
    def __init__(self, found=None, line=None, file=None):
        self.found = found
        message = "Expected 'then' after condition"
        if found is not None:
            message += f", got '{found}'"
        super().__init__(message, line, file)


class ExpectedDoException(InvalidSyntaxException):
    """
    Error for a loop whose guard is not followed by 'do'.
    """
    def __init__(self, found=None, line=None, file=None):
        self.found = found
        message = "Expected 'do' after condition"
        if found is not None:
            message += f", got '{found}'"
        super().__init__(message, line, file)


class UnexpectedEndOfInputException(InvalidSyntaxException):
    """
    Error for a block that ran out of lines before its closing 'end'.
    """
    def __init__(self, construct, line=None, file=None):
        self.construct = construct
        super().__init__(f"Unexpected end of input, '{construct}' block is missing 'end'", line, file)


class DivisionByZeroException(QuillException):
    """
    Error for division by exactly zero.
    """
    def __init__(self, line=None, file=None):
        super().__init__("Division by zero", line, file)


class UnmatchedParenthesisException(QuillException):
    """
    Error for a '(' without its closing ')'.
    """
    def __init__(self, found=None, line=None, file=None):
        self.found = found
        message = "Expected ')'"
        if found is not None:
            message += f", got '{found}'"
        super().__init__(message, line, file)


class InvalidExpressionException(QuillException):
    """
    Error for tokens that cannot start or continue an expression.
    """
    def __init__(self, token, line=None, file=None):
        self.token = token
        super().__init__(f"Invalid expression: {token}", line, file)


class UndefinedVariableException(InvalidExpressionException):
    """
    Error for undefined variables.
    """
    def __init__(self, varname, line=None, file=None):
        self.varname = varname
        QuillException.__init__(self, f"Undefined variable '{varname}'", line, file)


class ArgumentCountException(InvalidExpressionException):
    """
    Error for calling a function with the wrong number of arguments.
    """
    def __init__(self, func_name, expected, got, line=None, file=None):
        self.func_name = func_name
        self.expected = expected
        self.got = got
        QuillException.__init__(
            self,
            f"Function '{func_name}' expects {expected} arguments, got {got}",
            line,
            file,
        )


class DuplicateFunctionException(QuillException):
    """
    Error for defining a function name twice.
    """
    def __init__(self, func_name, line=None, file=None):
        self.func_name = func_name
        super().__init__(f"Function already defined: {func_name}", line, file)


class ExpectedOpenParenException(QuillException):
    """
    Error for a function name used without an argument list.
    """
    def __init__(self, func_name, line=None, file=None):
        self.func_name = func_name
        super().__init__(f"Expected '(' after function name '{func_name}'", line, file)


class ReturnOutsideFunctionException(QuillException):
    """
    Error for 'return' with no active function.
    """
    def __init__(self, line=None, file=None):
        super().__init__("'return' statement outside of a function", line, file)
