"""
sexpc Parser - Builds the source AST from a token list.

Literals are read by a single `walk` production; calls are tracked on an
explicit stack of calls still waiting for their ')' instead of the Python call
stack. The read position is kept in a _Cursor owned by one parse()
call, so parsing never shares state.
"""

from typing import List

from sexpc.errors import ErrorCode, ParseError
from sexpc.lexer import Token
from sexpc.source_ast import CallExpression, NumberLiteral, Program, StringLiteral


class _Cursor:
    """Read position over a token list."""

    def __init__(self, tokens):
        self.tokens = tokens
        self.index = 0

    def at_end(self):
        return self.index >= len(self.tokens)

    def current(self):
        if self.at_end():
            raise ParseError(ErrorCode.UNEXPECTED_END_OF_INPUT, offset=self._end_offset())
        return self.tokens[self.index]

    def advance(self):
        token = self.current()
        self.index += 1
        return token

    def _end_offset(self):
        if not self.tokens:
            return None
        last = self.tokens[-1]
        # Tokens only record their start; string quotes add two characters
        return last.offset + len(last.text) + (2 if last.kind == "string" else 0)


class Parser:
    """
    Parses tokens into a source Program.

    Args:
        allow_any_callee: Take the text of whatever token follows '(' as the
            callee instead of requiring a name token.
    """

    def __init__(self, allow_any_callee=False):
        self.allow_any_callee = allow_any_callee

    def parse(self, tokens: List[Token]) -> Program:
        cursor = _Cursor(tokens)
        body = []
        # (callee, params) of each call whose ')' has not been read yet
        open_calls = []

        while open_calls or not cursor.at_end():
            token = cursor.current()

            if open_calls and _is_close_paren(token):
                cursor.advance()
                name, params = open_calls.pop()
                node = CallExpression(name=name, params=params)
            elif token.kind == "paren" and token.text == "(":
                open_calls.append(self.open_call(cursor))
                continue
            else:
                node = self.walk(cursor)

            if open_calls:
                open_calls[-1][1].append(node)
            else:
                body.append(node)

        return Program(body=body)

    def walk(self, cursor):
        token = cursor.current()

        if token.kind == "number":
            cursor.advance()
            return NumberLiteral(value=token.text)

        if token.kind == "string":
            cursor.advance()
            return StringLiteral(value=token.text)

        raise ParseError(ErrorCode.UNEXPECTED_TOKEN, offset=token.offset, kind=token.kind, text=token.text)

    def open_call(self, cursor):
        """Consume '(' and the callee; the params are filled in by parse()."""
        cursor.advance()  # '('
        callee = cursor.advance()
        if not self._is_valid_callee(callee):
            raise ParseError(ErrorCode.INVALID_CALLEE, offset=callee.offset, kind=callee.kind, text=callee.text)
        return callee.text, []

    def _is_valid_callee(self, token):
        if token.kind == "name":
            return True
        # A call always needs a callee, even in permissive mode
        return self.allow_any_callee and not _is_close_paren(token)


def _is_close_paren(token):
    return token.kind == "paren" and token.text == ")"


def parse(tokens, allow_any_callee=False) -> Program:
    """Parse a token list into a source Program."""
    return Parser(allow_any_callee=allow_any_callee).parse(tokens)
