"""Exception classes for Luthor.

Provides standardized exceptions for error handling throughout Luthor.
"""

from __future__ import annotations

from collections.abc import Sequence

from luthor.location import SourceSpan


class LuthorError(Exception):
    """Base exception for all Luthor errors.

    Subclass this for specific error categories.
    """

    pass


class LexError(LuthorError):
    """A single lexical diagnostic with a source position.

    Raised by ``Lexer.next_token`` and collected by ``Lexer.lex``; callers
    receive these inside a LexFailedError rather than one at a time.
    """

    def __init__(
        self,
        message: str,
        span: SourceSpan,
        source_file: str | None = None,
    ) -> None:
        """Initialize lex error with its location.

        Args:
            message: Error description
            span: Position the error is reported at
            source_file: Path to source file (optional)
        """
        self.message = message
        self.span = span
        self.source_file = source_file

        location = f"{source_file}:" if source_file else ""
        location += f"{span.line}:{span.column}"

        super().__init__(f"{location} {message}")

    @property
    def line(self) -> int:
        return self.span.line

    @property
    def column(self) -> int:
        return self.span.column


class UnexpectedCharacterError(LexError):
    """A character that starts no valid token.

    The span is the offending character itself, so ``?x`` reports 1:1. Like
    every token span, it points at a character that was read, never past
    it, which keeps the column positive even when a newline follows.
    """

    def __init__(
        self,
        character: str,
        span: SourceSpan,
        source_file: str | None = None,
    ) -> None:
        self.character = character
        super().__init__(f"unexpected character {character}", span, source_file)


class InvalidIdentifierError(LexError):
    """An identifier run whose digit or underscore is not followed by a letter."""

    def __init__(
        self,
        text: str,
        character: str,
        span: SourceSpan,
        source_file: str | None = None,
    ) -> None:
        """Initialize invalid identifier error.

        Args:
            text: The whole identifier-or-keyword run
            character: The first offending digit or underscore
            span: Position of the run's last character
            source_file: Path to source file (optional)
        """
        self.text = text
        self.character = character
        super().__init__(
            f"{text} is not a valid identifier, {character} must be followed by a letter",
            span,
            source_file,
        )


class LexFailedError(LuthorError):
    """Raised when lexing produced one or more diagnostics.

    Carries every diagnostic found in the pass, in source order. No tokens
    are returned alongside it.
    """

    def __init__(self, errors: Sequence[LexError]) -> None:
        """Initialize with the collected diagnostics.

        Args:
            errors: Diagnostics in source order (must not be empty)
        """
        if not errors:
            msg = "LexFailedError requires at least one diagnostic"
            raise ValueError(msg)

        self.errors: list[LexError] = list(errors)

        total = len(self.errors)
        noun = "error" if total == 1 else "errors"
        lines = [f"{total} lexical {noun}"]
        lines.extend(f"  {error}" for error in self.errors)

        super().__init__("\n".join(lines))
