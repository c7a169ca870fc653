# sexpc - Core Compiler Components
"""
Core modules for the sexpc compiler:
- errors: Error taxonomy and diagnostic helpers
- config: Per-call compiler options
- grammar: Lark terminals for the parenthesized-call syntax
- lexer: Source text to tokens
- parser: Tokens to the source AST
- transformer: Source AST to the target AST
- codegen: Target AST to C-like call syntax
"""

from .errors import CompileError, LexError, ParseError, TransformError, CodeGenError, ErrorCode
from .config import CompilerOptions
from .lexer import Token, tokenize
from .parser import parse
from .transformer import Transformer, transform
from .codegen import generate

__all__ = [
    'CompileError',
    'LexError',
    'ParseError',
    'TransformError',
    'CodeGenError',
    'ErrorCode',
    'CompilerOptions',
    'Token',
    'tokenize',
    'parse',
    'Transformer',
    'transform',
    'generate',
]
