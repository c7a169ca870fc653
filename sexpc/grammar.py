"""
sexpc lexical grammar.

This module contains the Lark terminals for the parenthesized-call surface
syntax. Only the lexer is used; the call structure is parsed by hand in
sexpc.parser. The start/token rules are placeholders Lark needs to build the
grammar; they do not describe call structure.
"""

sexp_grammar = r"""
    start: token*
    token: LPAR | RPAR | NUMBER | STRING | NAME

    // --- Terminals ---
    LPAR: "("
    RPAR: ")"
    NUMBER: /[0-9]+/
    STRING: /"[^"]*"/ | /'[^']*'/
    NAME: /[A-Za-z]+/

    WS: /\s+/
    %ignore WS
"""

# Lark terminal name -> token kind
TERMINAL_KINDS = {
    "LPAR": "paren",
    "RPAR": "paren",
    "NUMBER": "number",
    "STRING": "string",
    "NAME": "name",
}

QUOTES = ('"', "'")
