"""Lexer for Quill.

The lexer performs a single pass over one line of source code using a
combined regular expression of named groups. Each match yields a
:class:`Token` containing its type, value, line number and the column it
starts at, so the parser can recover the raw text of a statement.

Tokens cover numeric literals, keywords (``var``, ``if``, ``for`` …),
identifiers, the four arithmetic operators and the few delimiters the
grammar needs. Whitespace is insignificant, so ``add(2,3)`` and
``add ( 2 , 3 )`` lex identically.

:class:`TokenStream` wraps the token list for the parser. It supports
peeking at the next token and pushing any number of whole tokens back.


File: lexer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import re

from quill.exceptions import InvalidSyntaxException


KEYWORDS = {
    'var': 'VAR',
    'if': 'IF',
    'then': 'THEN',
    'for': 'FOR',
    'do': 'DO',
    'end': 'END',
    'func': 'FUNC',
    'return': 'RETURN',
}


token_specification: list[tuple[str, str]] = [
    # Literals
    ('NUMBER',    r'\d+(?:\.\d*)?(?:[eE][+-]?\d+)?'),

    # Identifiers and keywords
    ('ID',        r'[A-Za-z_][A-Za-z0-9_]*'),

    # Assignment
    ('ASSIGN',    r'='),

    # Delimiters
    ('LBRACE',    r'\{'),
    ('LPAREN',    r'\('),
    ('RPAREN',    r'\)'),
    ('COMMA',     r','),

    # Arithmetic operators
    ('PLUS',      r'\+'),
    ('MINUS',     r'-'),
    ('MUL',       r'\*'),
    ('DIV',       r'/'),

    # Miscellaneous
    ('SKIP',      r'[ \t\r]+'),
    ('MISMATCH',  r'.'),
]

tok_regex = re.compile('|'.join(f'(?P<{name}>{pattern})' for name, pattern in token_specification))


class Token:
    """
    Represents a lexical token with a type and value.
    """
    def __init__(self, type_, value, line, column=0):
        """
        Initialize a new token.

        Parameters:
            type_ (str): The token type.
            value (Any): The token value.
            line (int): The source line the token was read from.
            column (int): Offset of the token's first character in the line.
        """
        self.type = type_
        self.value = value
        self.line = line
        self.column = column

    def __repr__(self) -> str:
        """
        Return a string representation of the token.
        """
        return f"Token({self.type}, {self.value}, line={self.line})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return (self.type, self.value) == (other.type, other.value)


def tokenize(code: str, line: int = 1) -> list[Token]:
    """
    Convert one line of source code into a list of tokens.

    Parameters:
        code (str): The source line to tokenize.
        line (int): Line number recorded on every token.

    Returns:
        list[Token]: Token instances, always terminated by an EOF token.

    Raises:
        InvalidSyntaxException: If an unexpected character is encountered.
    """
    tokens = []
    for match_obj in tok_regex.finditer(code):
        kind = match_obj.lastgroup
        value = match_obj.group()
        column = match_obj.start()

        if kind == 'SKIP':
            continue
        if kind == 'MISMATCH':
            raise InvalidSyntaxException(f"Unexpected character '{value}'", line)

        if kind == 'NUMBER':
            tokens.append(Token('NUMBER', float(value), line, column))
        elif kind == 'ID':
            tokens.append(Token(KEYWORDS.get(value, 'ID'), value, line, column))
        else:
            tokens.append(Token(kind, value, line, column))

    tokens.append(Token('EOF', None, line, len(code)))
    return tokens


def describe(tok: Token) -> str:
    """
    Render a token the way it appeared in the source, for error messages.
    """
    if tok.type == 'EOF':
        return 'end of line'
    if tok.type == 'NUMBER':
        return f"{tok.value:g}"
    return str(tok.value)


class TokenStream:
    """
    Cursor over a token list with whole-token pushback.

    Tokens handed back through :meth:`push_back` are returned again, most
    recent first, before the stream advances any further.
    """
    def __init__(self, tokens: list[Token]):
        self.tokens = tokens
        self.position = 0
        self._pushed: list[Token] = []

    def peek(self) -> Token:
        """
        Return the next token without consuming it.
        """
        if self._pushed:
            return self._pushed[-1]
        return self.tokens[self.position]

    def next(self) -> Token:
        """
        Consume and return the next token. EOF is never consumed.
        """
        if self._pushed:
            return self._pushed.pop()
        tok = self.tokens[self.position]
        if tok.type != 'EOF':
            self.position += 1
        return tok

    def push_back(self, token: Token) -> None:
        """
        Return a consumed token to the front of the stream.
        """
        self._pushed.append(token)

    def at_end(self) -> bool:
        return self.peek().type == 'EOF'
