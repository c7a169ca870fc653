import sys
from typing import List

from pydantic import BaseModel

from sexpc.codegen import generate
from sexpc.config import resolve_options
from sexpc.errors import (
    LexError,
    ParseError,
    detect_common_error_patterns,
    get_line_context,
)
from sexpc.lexer import Token, tokenize
from sexpc.parser import parse
from sexpc.source_ast import Program as SourceProgram
from sexpc.target_ast import Program as TargetProgram
from sexpc.transformer import transform


def debug_log(message, verbose=False):
    """Log a debug message to stderr if verbose mode is enabled."""
    if verbose:
        print(f"\033[94mDEBUG:\033[0m {message}", file=sys.stderr)


class CompilationResult(BaseModel):
    """Every artifact produced by one run of the pipeline."""

    tokens: List[Token]
    source_ast: SourceProgram
    target_ast: TargetProgram
    output: str


def compile_stages(source_code, options=None):
    """
    Run the full pipeline and keep each stage's artifact.

    Args:
        source_code: Program text in the parenthesized-call syntax
        options: Optional CompilerOptions

    Returns:
        CompilationResult with tokens, both ASTs and the generated code

    Raises:
        LexError, ParseError: On malformed input, with source context and a hint
        TransformError, CodeGenError: If an AST holds a node kind the stage cannot handle
    """
    options = resolve_options(options)
    verbose = options.verbose

    # STEP 1: TOKENIZE
    # STEP 2: PARSE
    try:
        tokens = tokenize(source_code)
        debug_log(f"Lexed {len(tokens)} tokens", verbose)

        program = parse(tokens, allow_any_callee=options.allow_any_callee)
        debug_log(f"Parsed {len(program.body)} top-level expressions", verbose)
    except (LexError, ParseError) as e:
        raise e.with_hints(
            context=get_line_context(source_code, e.offset),
            suggestion=detect_common_error_patterns(source_code, e),
        ) from e

    # STEP 3: TRANSFORM
    def trace(node, parent):
        parent_kind = parent.type if parent is not None else "-"
        debug_log(f"Transforming {node.type} (parent: {parent_kind})", verbose)

    new_program = transform(program, on_enter=trace if verbose else None)

    # STEP 4: GENERATE
    output = generate(new_program)
    debug_log(f"Generated {len(output)} characters", verbose)

    return CompilationResult(tokens=tokens, source_ast=program, target_ast=new_program, output=output)


def compile(source_code, options=None):
    """Compile parenthesized-call source into C-like call syntax."""
    return compile_stages(source_code, options).output
