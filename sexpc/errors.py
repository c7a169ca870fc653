"""
Error handling utilities for the sexpc compiler.
"""
from enum import Enum


class ErrorCode(Enum):

    # --- Lexer ---
    UNEXPECTED_CHARACTER = "Unexpected character {char!r}"
    UNTERMINATED_STRING = "Unterminated string literal starting with {quote}"

    # --- Parser ---
    UNEXPECTED_TOKEN = "Unexpected {kind} token {text!r}"
    UNEXPECTED_END_OF_INPUT = "Unexpected end of input: a call is missing its closing ')'"
    INVALID_CALLEE = "Invalid callee: expected a name after '(' but found {kind} token {text!r}"

    # --- Transformer / code generator ---
    UNHANDLED_NODE_KIND = "Unhandled node kind '{kind}'"


class CompileError(Exception):
    """Base exception for sexpc compilation errors, with optional context and hints."""
    def __init__(self, code, offset=None, context=None, suggestion=None, **details):
        self.code = code
        self.details = details
        self.message = code.value.format(**details)
        self.offset = offset
        self.context = context  # The offending source line
        self.suggestion = suggestion  # How to fix it
        super().__init__(self._format_error())

    def _format_error(self):
        """Format the error message with context and suggestion."""
        lines = [f"{self.stage} error"]
        if self.offset is not None:
            lines.append(f" at offset {self.offset}")
        lines.append(f": {self.message}")

        if self.context:
            lines.append(f"\n   > {self.context}")

        if self.suggestion:
            lines.append(f"\n   hint: {self.suggestion}")

        return "".join(lines)

    @property
    def stage(self):
        return "Compilation"

    def with_hints(self, context=None, suggestion=None):
        """Return a copy of this error carrying source context and a suggestion."""
        return type(self)(
            self.code,
            offset=self.offset,
            context=context if context is not None else self.context,
            suggestion=suggestion if suggestion is not None else self.suggestion,
            **self.details,
        )


class LexError(CompileError):
    @property
    def stage(self):
        return "Lex"


class ParseError(CompileError):
    @property
    def stage(self):
        return "Parse"


class TransformError(CompileError):
    @property
    def stage(self):
        return "Transform"


class CodeGenError(CompileError):
    @property
    def stage(self):
        return "Code generation"


def get_line_context(source_code, offset):
    """Extract the source line containing the given character offset."""
    if not source_code or offset is None:
        return None
    offset = min(offset, len(source_code))
    start = source_code.rfind('\n', 0, offset) + 1
    end = source_code.find('\n', offset)
    if end == -1:
        end = len(source_code)
    return source_code[start:end].strip() or None


def detect_common_error_patterns(source_code, error):
    """Detect common mistakes and return a helpful suggestion, or None."""
    code = error.code

    if code is ErrorCode.UNEXPECTED_END_OF_INPUT or code is ErrorCode.UNEXPECTED_TOKEN:
        open_parens = source_code.count('(')
        close_parens = source_code.count(')')
        if open_parens != close_parens:
            return f"Unmatched parentheses: found {open_parens} '(' but {close_parens} ')'"
        if error.details.get('text') == ')':
            return "A ')' appears outside of any call"

    if code is ErrorCode.INVALID_CALLEE:
        if error.details.get('text') == ')':
            return "Empty calls are not allowed: write '(name args...)'"
        return "Calls start with a function name, e.g. '(add 1 2)'"

    if code is ErrorCode.UNTERMINATED_STRING:
        return f"Close the string with a matching {error.details.get('quote')}"

    if code is ErrorCode.UNEXPECTED_CHARACTER:
        char = error.details.get('char')
        if char == '-' or char == '.':
            return "Only non-negative whole numbers are supported"
        if char == '_':
            return "Names may only contain letters"
        if char is not None and char.isdigit():
            return "Numbers may only use the digits 0-9"
        return "Only parentheses, numbers, quoted strings and letter names are allowed"

    return None
