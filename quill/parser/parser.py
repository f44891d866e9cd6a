"""Main parser entry point for Quill.

This module defines the `Parser` class, which coordinates the recursive
descent parsing of a single source line. The actual parsing routines are
split across `quill.parser.expressions` and `quill.parser.statements`.

Quill is line oriented: every statement lives on one line, and the parser
never looks past it. Constructs that span lines (the false branch of an
`if`, a loop body) are collected at run time by the interpreter, which pulls
the extra lines from its line source.


File: parser.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from quill.exceptions import InvalidSyntaxException
from quill.lexer import Token, TokenStream, describe

from . import expressions as _expr
from . import statements as _stmt


TOKEN_LITERALS = {
    'ASSIGN': '=',
    'LBRACE': '{',
    'LPAREN': '(',
    'RPAREN': ')',
    'COMMA': ',',
    'THEN': 'then',
    'DO': 'do',
    'ID': 'identifier',
    'EOF': 'end of line',
}


class Parser:
    """Quill single-line parser."""

    def __init__(self, tokens: list, source: str, file: str):
        """
        Initialize the parser with a list of tokens.

        Parameters:
            tokens (list): Token instances for one line, ending with EOF.
            source (str): The raw line the tokens were read from.
            file (str): The name of the input, e.g. ``<stdin>``.
        """
        self.stream = TokenStream(tokens)
        self.source = source
        self.source_file = file

    @property
    def curr_token(self) -> Token:
        return self.stream.peek()

    def eat(self, token_type: str) -> Token:
        """
        Consume the current token if it matches the expected type.

        Parameters:
            token_type (str): The expected token type.

        Returns:
            Token: The consumed token.

        Raises:
            InvalidSyntaxException: If the token does not match the expected type.
        """
        tok = self.curr_token
        if tok.type != token_type:
            expected = TOKEN_LITERALS.get(token_type, token_type.lower())
            raise InvalidSyntaxException(
                f"Expected '{expected}' but got '{describe(tok)}'",
                tok.line,
                self.source_file,
            )
        return self.stream.next()

    def remaining_text(self) -> str:
        """
        Return the raw source from the current token to the end of the tokens.
        """
        end = self.stream.tokens[-1].column
        return self.source[self.curr_token.column:end].strip()

    def skip_to_end(self) -> None:
        """
        Discard every token left on the line.
        """
        while not self.stream.at_end():
            self.stream.next()

    def split_at(self, token_type: str) -> 'Parser | None':
        """
        Hand the tokens before the next `token_type` token to a new parser.

        This parser resumes at the matching token. Returns None, consuming
        nothing, if no such token is left on the line.

        Parameters:
            token_type (str): The token type to split at, e.g. 'LBRACE'.

        Returns:
            Parser: A parser over the leading tokens, closed by an EOF token.
        """
        tokens = self.stream.tokens
        start = self.stream.position
        for index in range(start, len(tokens)):
            tok = tokens[index]
            if tok.type == token_type:
                head = tokens[start:index] + [Token('EOF', None, tok.line, tok.column)]
                self.stream.position = index
                return Parser(head, self.source, self.source_file)
        return None

    # Expression wrappers
    def factor(self) -> tuple:
        """
        Parse a factor: a number, parenthesized group, variable or call.
        """
        return _expr.parse_factor(self)

    def term(self) -> tuple:
        """
        Parse a term in an expression, involving multiplication or division.
        """
        return _expr.parse_term(self)

    def expr(self) -> tuple:
        """
        Parse a full expression, involving addition or subtraction.
        """
        return _expr.parse_expr(self)

    # Statement wrappers
    def statement(self) -> tuple:
        """
        Parse a single statement.
        """
        return _stmt.parse_statement(self)

    def parse_declaration(self) -> tuple:
        """
        Parse a 'var' declaration.
        """
        return _stmt.parse_declaration(self)

    def parse_assignment(self) -> tuple:
        """
        Parse an assignment to an existing variable.
        """
        return _stmt.parse_assignment(self)

    def parse_if(self) -> tuple:
        """
        Parse an 'if' conditional statement.
        """
        return _stmt.parse_if(self)

    def parse_loop(self) -> tuple:
        """
        Parse a 'for' loop header.
        """
        return _stmt.parse_loop(self)

    def parse_func_def(self) -> tuple:
        """
        Parse a function definition statement.
        """
        return _stmt.parse_func_def(self)

    def parse_return(self) -> tuple:
        """
        Parse a 'return' statement from within a function.
        """
        return _stmt.parse_return(self)

    def parse(self) -> tuple:
        """
        Parse the whole line into one statement node.

        Raises:
            InvalidSyntaxException: If tokens are left over after the statement.
        """
        node = self.statement()
        if not self.stream.at_end():
            tok = self.curr_token
            raise InvalidSyntaxException(
                f"Unexpected '{describe(tok)}' after statement",
                tok.line,
                self.source_file,
            )
        return node
