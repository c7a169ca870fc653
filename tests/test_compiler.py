"""
End-to-end tests for compiler.py - compile() and compile_stages().
"""
import re

import pytest

from compiler import CompilationResult, compile, compile_stages
from sexpc.config import CompilerOptions
from sexpc.errors import CompileError, ErrorCode, LexError, ParseError


class TestCompileScenarios:
    """Source to output scenarios."""

    @pytest.mark.parametrize("source,expected", [
        ("(add 2 3)", "add(2, 3);"),
        ("(add 2 (subtract 4 2))", "add(2, subtract(4, 2));"),
        ('(concat "foo" "bar")', 'concat("foo", "bar");'),
        ("(a 1) (b 2)", "a(1);\nb(2);"),
        ("(concat 'single' \"double\")", 'concat("single", "double");'),
        ("(now)", "now();"),
        ("(add 2 (mul 3 (sub 4 1)) 5)", "add(2, mul(3, sub(4, 1)), 5);"),
    ])
    def test_compile(self, source, expected):
        assert compile(source) == expected

    def test_multiline_source(self):
        """Whitespace and newlines in the source do not matter."""
        source = """
        (print
            (add 1
                 2))
        (exit 0)
        """
        assert compile(source) == "print(add(1, 2));\nexit(0);"

    def test_empty_source(self):
        assert compile("") == ""


class TestCompileProperties:
    """Structural properties of the generated code."""

    SOURCES = [
        "(a 1)",
        "(a 1) (b 2) (c 3)",
        '(f "x" (g 1 2) (h (i)))',
        "(x 1 2 3 4 5 6 7 8 9 10)",
    ]

    @pytest.mark.parametrize("source", SOURCES)
    def test_one_line_per_top_level_expression(self, source):
        result = compile_stages(source)
        lines = result.output.split("\n")
        assert len(lines) == len(result.source_ast.body)
        assert all(line.endswith(";") for line in lines)

    @pytest.mark.parametrize("source", SOURCES)
    def test_only_statements_get_semicolons(self, source):
        """Nested calls render inline, so each line holds exactly one ';'."""
        for line in compile(source).split("\n"):
            assert line.count(";") == 1

    def test_call_arity_preserved(self):
        """Each generated call has as many arguments as its source call."""
        output = compile("(x 1 2 3 4 5 6 7 8 9 10)")
        assert output.count(", ") == 9

    @pytest.mark.parametrize("digits", ["0", "007", "12345678901234567890123"])
    def test_literal_digits_preserved(self, digits):
        """Number text is copied exactly, with no normalization or overflow."""
        assert compile(f"(n {digits})") == f"n({digits});"

    def test_strings_always_double_quoted(self):
        output = compile("(s 'a' \"b\")")
        assert re.fullmatch(r's\("a", "b"\);', output)


class TestCompileStages:
    """Tests for the intermediate artifacts."""

    def test_artifacts(self):
        result = compile_stages("(add 2 3)")
        assert isinstance(result, CompilationResult)
        assert [t.text for t in result.tokens] == ["(", "add", "2", "3", ")"]
        assert result.source_ast.body[0].name == "add"
        assert result.target_ast.body[0].type == "ExpressionStatement"
        assert result.output == "add(2, 3);"

    def test_artifacts_dump_to_json_data(self):
        """Artifacts can be dumped as plain data."""
        data = compile_stages("(a 'x')").model_dump(mode="json")
        assert data["source_ast"] == {
            "type": "Program",
            "body": [{
                "type": "CallExpression",
                "name": "a",
                "params": [{"type": "StringLiteral", "value": "x"}],
            }],
        }
        assert data["target_ast"]["body"][0]["expression"]["callee"] == {"type": "Identifier", "name": "a"}


class TestCompileOptions:
    """Tests for CompilerOptions."""

    def test_permissive_callee(self):
        """allow_any_callee takes the token text as the callee."""
        assert compile("(2 3)", CompilerOptions(allow_any_callee=True)) == "2(3);"

    def test_strict_callee_by_default(self):
        with pytest.raises(ParseError) as exc_info:
            compile("(2 3)")
        assert exc_info.value.code is ErrorCode.INVALID_CALLEE

    def test_verbose_logs_to_stderr(self, capsys):
        """Verbose mode writes a debug trace to stderr and nothing to stdout."""
        output = compile("(a (b 1))", CompilerOptions(verbose=True))
        captured = capsys.readouterr()
        assert output == "a(b(1));"
        assert captured.out == ""
        assert "Lexed 7 tokens" in captured.err
        assert "Parsed 1 top-level expressions" in captured.err
        assert "Transforming CallExpression (parent: Program)" in captured.err
        assert "Transforming NumberLiteral (parent: CallExpression)" in captured.err

    def test_quiet_by_default(self, capsys):
        compile("(a 1)")
        assert capsys.readouterr().err == ""

    def test_options_are_immutable(self):
        options = CompilerOptions()
        with pytest.raises(Exception):
            options.verbose = True


class TestCompileErrors:
    """Errors propagate out of compile() with context and hints."""

    def test_unbalanced(self):
        with pytest.raises(ParseError) as exc_info:
            compile("(add 2")
        error = exc_info.value
        assert error.code is ErrorCode.UNEXPECTED_END_OF_INPUT
        assert error.context == "(add 2"
        assert "Unmatched parentheses" in error.suggestion

    def test_unexpected_character(self):
        with pytest.raises(LexError) as exc_info:
            compile("(add 1 #)")
        error = exc_info.value
        assert error.code is ErrorCode.UNEXPECTED_CHARACTER
        assert error.context == "(add 1 #)"
        assert "> (add 1 #)" in str(error)

    def test_context_is_offending_line(self):
        with pytest.raises(LexError) as exc_info:
            compile("(a 1)\n(b #)\n(c 3)")
        assert exc_info.value.context == "(b #)"

    def test_unterminated_string(self):
        with pytest.raises(LexError) as exc_info:
            compile('(say "hello)')
        assert exc_info.value.code is ErrorCode.UNTERMINATED_STRING
        assert "matching" in exc_info.value.suggestion

    def test_all_errors_share_base(self):
        for source in ["#", "(a", ")", "(1)"]:
            with pytest.raises(CompileError):
                compile(source)


class TestDeepNesting:
    """Nesting depth is not limited by the Python call stack."""

    @pytest.mark.parametrize("depth", [1000, 5000])
    def test_deeply_nested_call(self, depth):
        source = "(f " * depth + "1" + ")" * depth
        assert compile(source) == "f(" * depth + "1" + ")" * depth + ";"

    def test_deeply_nested_unbalanced(self):
        """A deep unclosed call still fails with a ParseError."""
        with pytest.raises(ParseError) as exc_info:
            compile("(f " * 2000 + "1")
        assert exc_info.value.code is ErrorCode.UNEXPECTED_END_OF_INPUT
