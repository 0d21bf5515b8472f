"""Tests for the top-level luthor API."""

import pytest

import luthor
from luthor import (
    KEYWORDS,
    LexFailedError,
    SourceSpan,
    Token,
    TokenType,
    lex,
)


class TestLex:
    """Test the lex() convenience function."""

    def test_returns_tokens(self) -> None:
        tokens = lex("set x to y")

        assert [t.type for t in tokens] == [
            TokenType.SET,
            TokenType.IDENTIFIER,
            TokenType.TO,
            TokenType.IDENTIFIER,
            TokenType.EOF,
        ]

    def test_empty_source(self) -> None:
        assert lex("") == [Token(TokenType.EOF, "")]

    def test_whole_program(self) -> None:
        source = (
            "program {\n"
            "  define variable counter is natural\n"
            "  define variable done is boolean\n"
            "  set done to false\n"
            "  loop while not done do {\n"
            "    set counter to counter + 1_\n"
            "  }\n"
            "}\n"
        )
        with pytest.raises(LexFailedError) as exc_info:
            lex(source)

        # "1_" starts with a digit: one unexpected character, then "_" alone is fine
        (error,) = exc_info.value.errors
        assert error.message == "unexpected character 1"
        assert error.span == SourceSpan(6, 30)

    def test_whole_program_valid(self) -> None:
        source = (
            "program {\n"
            "  define variable limit is real\n"
            "  get limit\n"
            "  execute step(limit, true)\n"
            "  put [limit] to out\n"
            "  loop while limit >= zero & not (limit != limit) do { set limit to limit % two }\n"
            "}\n"
        )
        tokens = lex(source)

        assert tokens[0].type == TokenType.PROGRAM
        assert tokens[-1].type == TokenType.EOF
        keyword_values = {t.value for t in tokens if t.is_keyword}
        assert keyword_values <= set(KEYWORDS)
        assert {"program", "define", "variable", "is", "real", "get", "execute", "true"} <= (
            keyword_values
        )

    def test_source_file_in_errors(self) -> None:
        with pytest.raises(LexFailedError) as exc_info:
            lex("?", source_file="main.lx")

        (error,) = exc_info.value.errors
        assert error.source_file == "main.lx"
        assert str(error) == "main.lx:1:1 unexpected character ?"

    def test_identifier_shape_enforced(self) -> None:
        with pytest.raises(LexFailedError) as exc_info:
            lex("x2")

        (error,) = exc_info.value.errors
        assert str(error) == "1:2 x2 is not a valid identifier, 2 must be followed by a letter"

    def test_rejects_unknown_keyword_arguments(self) -> None:
        with pytest.raises(TypeError):
            lex("x2", config=None)  # type: ignore[call-arg]


class TestPublicSurface:
    """Exports are importable from the package root."""

    def test_all_exports_exist(self) -> None:
        for name in luthor.__all__:
            assert hasattr(luthor, name), name

    def test_lexer_exported(self) -> None:
        from luthor.lexer import Lexer

        assert luthor.Lexer is Lexer
