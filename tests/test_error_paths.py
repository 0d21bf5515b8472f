"""Error construction and formatting tests."""

import pytest

from luthor.errors import (
    InvalidIdentifierError,
    LexError,
    LexFailedError,
    LuthorError,
    UnexpectedCharacterError,
)
from luthor.location import SourceSpan

# =========================================================================
# LexError construction and formatting
# =========================================================================


class TestLexErrorFormatting:
    """Verify LexError produces well-formatted messages."""

    def test_position_prefix(self) -> None:
        err = LexError("something odd", SourceSpan(3, 7))
        assert str(err) == "3:7 something odd"
        assert err.line == 3
        assert err.column == 7

    def test_with_source_file(self) -> None:
        err = LexError("something odd", SourceSpan(1, 1), source_file="main.lx")
        assert str(err) == "main.lx:1:1 something odd"

    def test_is_luthor_error(self) -> None:
        assert isinstance(LexError("x", SourceSpan(1, 1)), LuthorError)


class TestDiagnosticKinds:
    """Verify the two diagnostic kinds."""

    def test_unexpected_character(self) -> None:
        err = UnexpectedCharacterError("?", SourceSpan(1, 9))

        assert err.message == "unexpected character ?"
        assert err.character == "?"
        assert isinstance(err, LexError)

    def test_invalid_identifier(self) -> None:
        err = InvalidIdentifierError("x__", "_", SourceSpan(1, 3))

        assert err.message == "x__ is not a valid identifier, _ must be followed by a letter"
        assert err.text == "x__"
        assert err.character == "_"
        assert isinstance(err, LexError)


# =========================================================================
# LexFailedError
# =========================================================================


class TestLexFailedError:
    """Verify the aggregate error raised by Lexer.lex."""

    def test_summary_and_lines(self) -> None:
        errors = [
            UnexpectedCharacterError("?", SourceSpan(1, 1)),
            UnexpectedCharacterError("@", SourceSpan(2, 4)),
        ]
        err = LexFailedError(errors)

        assert str(err).splitlines() == [
            "2 lexical errors",
            "  1:1 unexpected character ?",
            "  2:4 unexpected character @",
        ]
        assert err.errors == errors

    def test_singular_summary(self) -> None:
        err = LexFailedError([UnexpectedCharacterError("?", SourceSpan(1, 1))])
        assert str(err).startswith("1 lexical error\n")

    def test_requires_diagnostics(self) -> None:
        with pytest.raises(ValueError, match="at least one"):
            LexFailedError([])

    def test_is_luthor_error(self) -> None:
        err = LexFailedError([LexError("x", SourceSpan(1, 1))])
        assert isinstance(err, LuthorError)
