"""
sexpc Lexer - Converts source text into a flat list of tokens.

The token rules live in sexpc.grammar and are scanned with Lark's basic
lexer, which already performs a single left-to-right pass without
backtracking.
"""

from typing import List, Literal

from lark import Lark
from lark.exceptions import UnexpectedCharacters
from pydantic import BaseModel, ConfigDict

from sexpc.errors import ErrorCode, LexError
from sexpc.grammar import QUOTES, TERMINAL_KINDS, sexp_grammar


class Token(BaseModel):
    """A minimal lexical unit: its kind, its literal text and where it starts."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["paren", "number", "string", "name"]
    text: str
    offset: int = 0


_LEXER = Lark(sexp_grammar, parser='lalr', lexer='basic')


def tokenize(text) -> List[Token]:
    """
    Split source text into tokens.

    Args:
        text: Program source in the parenthesized-call syntax

    Returns:
        Tokens in source order

    Raises:
        LexError: On a character outside the grammar, or a string with no closing quote
    """
    tokens = []
    try:
        for lark_token in _LEXER.lex(text):
            tokens.append(_convert(lark_token))
    except UnexpectedCharacters as e:
        if e.char in QUOTES:
            raise LexError(ErrorCode.UNTERMINATED_STRING, offset=e.pos_in_stream, quote=e.char) from None
        raise LexError(ErrorCode.UNEXPECTED_CHARACTER, offset=e.pos_in_stream, char=e.char) from None
    return tokens


def _convert(lark_token):
    kind = TERMINAL_KINDS[lark_token.type]
    value = str(lark_token)
    if kind == "string":
        # Strip the surrounding quote pair
        value = value[1:-1]
    return Token(kind=kind, text=value, offset=lark_token.start_pos)
