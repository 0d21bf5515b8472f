"""Tests for diagnostic rendering with source excerpts."""

import pytest

from luthor import LexFailedError, format_diagnostic, format_diagnostics, lex
from luthor.errors import UnexpectedCharacterError
from luthor.location import SourceSpan


def _errors(source: str, source_file: str | None = None) -> list:  # type: ignore[type-arg]
    with pytest.raises(LexFailedError) as exc_info:
        lex(source, source_file=source_file)
    return exc_info.value.errors


class TestFormatDiagnostic:
    """Test single-diagnostic rendering."""

    def test_caret_under_column(self) -> None:
        source = "program {\n  set x to ?\n}"
        (error,) = _errors(source, source_file="main.lx")

        assert format_diagnostic(error, source).splitlines() == [
            "main.lx:2:12 unexpected character ?",
            "   2 |   set x to ?",
            "     |            ^",
        ]

    def test_crlf_line_is_trimmed(self) -> None:
        source = "?\r\n"
        (error,) = _errors(source)

        assert format_diagnostic(error, source).splitlines()[1] == "   1 | ?"

    def test_line_out_of_range_falls_back_to_header(self) -> None:
        error = UnexpectedCharacterError("?", SourceSpan(9, 1))
        assert format_diagnostic(error, "x") == "9:1 unexpected character ?"


class TestFormatDiagnostics:
    """Test batch rendering."""

    def test_blank_line_between_diagnostics(self) -> None:
        source = "? @"
        text = format_diagnostics(_errors(source), source)

        blocks = text.split("\n\n")
        assert len(blocks) == 2
        assert blocks[0].startswith("1:1 unexpected character ?")
        assert blocks[1].startswith("1:3 unexpected character @")
