"""Expression parsing utilities for Quill.

These functions operate on a `quill.parser.parser.Parser` instance and
implement the three-level recursive descent for arithmetic:

    expression := term (('+' | '-') term)*
    term       := factor (('*' | '/') factor)*
    factor     := number | '-' number | '(' expression ')'
                | identifier | identifier '(' args ')'

Both binary levels are left associative. An operator slot holding anything
other than the level's operators is pushed back onto the token stream, so
whoever called into the expression can consume it (``then``, ``do``, ``,``
and so on).


File: expressions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from quill.exceptions import InvalidExpressionException, UnmatchedParenthesisException
from quill.lexer import describe
from quill.operations import Op

if TYPE_CHECKING:
    from quill.parser import Parser


def parse_args(parser: 'Parser') -> list:
    """
    Parse call arguments up to and including the closing ')'.

    Arguments are separated by optional commas.
    """
    args = []
    while parser.curr_token.type != 'RPAREN':
        if parser.curr_token.type == 'EOF':
            raise UnmatchedParenthesisException(
                describe(parser.curr_token), parser.curr_token.line, parser.source_file
            )
        args.append(parser.expr())
        if parser.curr_token.type == 'COMMA':
            parser.stream.next()
    parser.stream.next()
    return args


def parse_factor(parser: 'Parser') -> tuple:
    """Parse a number, variable, call or parenthesized expression."""
    tok = parser.stream.next()

    if tok.type == 'NUMBER':
        return ('number', tok.value, tok.line)

    if tok.type == 'MINUS' and parser.curr_token.type == 'NUMBER':
        num = parser.stream.next()
        return ('number', -num.value, tok.line)

    if tok.type == 'LPAREN':
        node = parser.expr()
        closing = parser.stream.next()
        if closing.type != 'RPAREN':
            raise UnmatchedParenthesisException(describe(closing), closing.line, parser.source_file)
        return node

    if tok.type == 'ID':
        if parser.curr_token.type == 'LPAREN':
            parser.stream.next()
            args = parse_args(parser)
            return ('call', tok.value, args, tok.line)
        return ('ident', tok.value, tok.line)

    raise InvalidExpressionException(describe(tok), tok.line, parser.source_file)


def parse_term(parser: 'Parser') -> tuple:
    """Parse multiplication and division expressions."""
    op_map = {
        'MUL': Op.MUL,
        'DIV': Op.DIV,
    }
    result = parser.factor()
    while True:
        op_tok = parser.stream.next()
        if op_tok.type not in op_map:
            parser.stream.push_back(op_tok)
            return result
        result = (op_map[op_tok.type], result, parser.factor(), op_tok.line)


def parse_expr(parser: 'Parser') -> tuple:
    """Parse addition and subtraction expressions."""
    op_map = {
        'PLUS': Op.ADD,
        'MINUS': Op.SUB,
    }
    result = parser.term()
    while True:
        op_tok = parser.stream.next()
        if op_tok.type not in op_map:
            parser.stream.push_back(op_tok)
            return result
        result = (op_map[op_tok.type], result, parser.term(), op_tok.line)
