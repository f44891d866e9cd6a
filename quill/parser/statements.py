"""Statement parsing utilities for Quill.

These functions operate on a `quill.parser.parser.Parser` instance and
handle the statement forms of the language: declarations, assignments,
conditionals, loops, function definitions and returns.

Each statement occupies one line. The `if` and `for` forms only parse their
header here; the lines of a false branch or loop body are read later by the
interpreter.


File: statements.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from quill.exceptions import (
    ExpectedDoException,
    ExpectedThenException,
    InvalidStatementException,
    InvalidSyntaxException,
)
from quill.lexer import describe

if TYPE_CHECKING:
    from quill.parser import Parser


def parse_statement(parser: 'Parser') -> tuple:
    """
    Parse a single statement, classified by its leading token.

    Args:
        parser: The parser instance.

    Returns:
        tuple: representing the AST node. An empty line parses to ('nop', line).

    Raises:
        InvalidStatementException: If the leading token starts no statement.
    """
    tok = parser.curr_token
    if tok.type == 'EOF':
        return ('nop', tok.line)
    elif tok.type == 'VAR':
        return parser.parse_declaration()
    elif tok.type == 'IF':
        return parser.parse_if()
    elif tok.type == 'FOR':
        return parser.parse_loop()
    elif tok.type == 'FUNC':
        return parser.parse_func_def()
    elif tok.type == 'RETURN':
        return parser.parse_return()
    elif tok.type == 'ID':
        return parser.parse_assignment()
    else:
        raise InvalidStatementException(parser.remaining_text(), tok.line, parser.source_file)


def parse_declaration(parser: 'Parser') -> tuple:
    """
    Parse a `var` declaration. The initializer is optional.

    Syntax:
        var <identifier> [= <expression>]

    Args:
        parser: The parser instance.

    Returns:
        tuple: ('decl', name, expr_or_None, line)
    """
    tok = parser.eat('VAR')
    id_tok = parser.curr_token
    if id_tok.type != 'ID':
        raise InvalidSyntaxException(
            f"Expected identifier after 'var' but got '{describe(id_tok)}'",
            id_tok.line,
            parser.source_file,
        )
    parser.eat('ID')
    expr_node = None
    if parser.curr_token.type == 'ASSIGN':
        parser.eat('ASSIGN')
        expr_node = parser.expr()
    return ('decl', id_tok.value, expr_node, tok.line)


def parse_assignment(parser: 'Parser') -> tuple:
    """
    Parse a statement led by an identifier.

    Whether the identifier names a variable is only known at run time, so a
    leader not followed by '=' still parses, to a 'bad_assign' node that the
    interpreter reports as invalid syntax or an invalid statement.

    Syntax:
        <identifier> = <expression>

    Args:
        parser: The parser instance.

    Returns:
        tuple: ('assign', name, expr, text, line) or ('bad_assign', name, text, line)
    """
    text = parser.remaining_text()
    id_tok = parser.eat('ID')
    if parser.curr_token.type != 'ASSIGN':
        parser.skip_to_end()
        return ('bad_assign', id_tok.value, text, id_tok.line)
    parser.eat('ASSIGN')
    expr_node = parser.expr()
    return ('assign', id_tok.value, expr_node, text, id_tok.line)


def parse_if(parser: 'Parser') -> tuple:
    """
    Parse a conditional header.

    The true branch is the rest of the line, kept as text and only parsed
    when the guard is non-zero. The false branch is the run of following
    lines up to 'end', read by the interpreter only when the guard is zero.

    Syntax:
        if <condition> then <statement>

    Args:
        parser: The parser instance.

    Returns:
        tuple: ('if', condition, then_text, line)
    """
    tok = parser.eat('IF')
    condition = parser.expr()
    if parser.curr_token.type != 'THEN':
        found = parser.curr_token
        raise ExpectedThenException(describe(found), found.line, parser.source_file)
    parser.eat('THEN')
    then_text = parser.remaining_text()
    parser.skip_to_end()
    return ('if', condition, then_text, tok.line)


def parse_loop(parser: 'Parser') -> tuple:
    """
    Parse a loop header.

    The initializer is everything before the first '{'. Anything after 'do'
    on the header line is the first line of the body; when that text ends
    with 'end' the whole body sits on the header line and no further lines
    are read.

    Syntax:
        for <statement> { <condition> do [<statement>] [end]

    Args:
        parser: The parser instance.

    Returns:
        tuple: ('for', init_statement, condition, first_body_line_or_None, closed, line)
    """
    tok = parser.eat('FOR')
    init_parser = parser.split_at('LBRACE')
    if init_parser is None:
        raise InvalidSyntaxException(
            "Expected '{' after loop initializer",
            tok.line,
            parser.source_file,
        )
    init_stmt = init_parser.parse()
    parser.eat('LBRACE')
    condition = parser.expr()
    if parser.curr_token.type != 'DO':
        found = parser.curr_token
        raise ExpectedDoException(describe(found), found.line, parser.source_file)
    parser.eat('DO')

    tokens = parser.stream.tokens
    last = tokens[-2]
    closed = len(tokens) - 2 >= parser.stream.position and last.type == 'END'
    if closed:
        first_line = parser.source[parser.curr_token.column:last.column].strip() or None
    else:
        first_line = parser.remaining_text() or None
    parser.skip_to_end()
    return ('for', init_stmt, condition, first_line, closed, tok.line)


def parse_func_def(parser: 'Parser') -> tuple:
    """
    Parse a function definition. The body is the rest of the line after '{'.

    Syntax:
        func <name> [<param> [,] ...] { <statement>

    Args:
        parser: The parser instance.

    Returns:
        tuple: ('func_def', name, params, body_statement, body_text, line)
    """
    start_tok = parser.eat('FUNC')
    name_tok = parser.curr_token
    if name_tok.type != 'ID':
        raise InvalidSyntaxException(
            f"Expected function name after 'func' but got '{describe(name_tok)}'",
            name_tok.line,
            parser.source_file,
        )
    parser.eat('ID')

    params = []
    while parser.curr_token.type != 'LBRACE':
        param_tok = parser.curr_token
        if param_tok.type == 'COMMA':
            parser.eat('COMMA')
            continue
        if param_tok.type == 'EOF':
            raise InvalidSyntaxException(
                f"Expected '{{' after parameters of '{name_tok.value}'",
                param_tok.line,
                parser.source_file,
            )
        if param_tok.type != 'ID':
            raise InvalidSyntaxException(
                f"Invalid parameter name '{describe(param_tok)}'",
                param_tok.line,
                parser.source_file,
            )
        if param_tok.value in params:
            raise InvalidSyntaxException(
                f"Duplicate parameter '{param_tok.value}' in '{name_tok.value}'",
                param_tok.line,
                parser.source_file,
            )
        parser.eat('ID')
        params.append(param_tok.value)
    parser.eat('LBRACE')

    body_text = parser.remaining_text()
    body = parser.statement()
    return ('func_def', name_tok.value, params, body, body_text, start_tok.line)


def parse_return(parser: 'Parser') -> tuple:
    """
    Parse a 'return' statement.

    Syntax:
        return <expression>

    Args:
        parser: The parser instance.

    Returns:
        tuple: ('return', expression_node, line)
    """
    tok = parser.eat('RETURN')
    expr_node = parser.expr()
    return ('return', expr_node, tok.line)
