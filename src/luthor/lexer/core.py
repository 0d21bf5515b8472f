"""Single-pass lexer with one character of lookahead.

Scans the whole source once, collecting every diagnostic instead of
stopping at the first. The result is all-or-nothing: a complete token
list ending in EOF, or a LexFailedError carrying every diagnostic.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from luthor.charsets import WHITESPACE, is_identifier_start
from luthor.errors import LexError, LexFailedError, LuthorError, UnexpectedCharacterError
from luthor.lexer.classifiers import IdentifierClassifierMixin
from luthor.lexer.scanners import OperatorScannerMixin, WordScannerMixin
from luthor.location import SourceSpan
from luthor.tokens import Token, TokenType
from luthor.utils.logger import get_logger

logger = get_logger(__name__)


class Lexer(
    # Classifiers (pure logic, no position mutation)
    IdentifierClassifierMixin,
    # Scanners (consume characters)
    OperatorScannerMixin,
    WordScannerMixin,
):
    """Character-stream lexer for the English-like teaching language.

    Cursor model:
    - ``_char`` is the character most recently read ("" once input is
      exhausted); it is the next character to be tokenized.
    - ``_column`` counts characters read on the current line, so a token's
      span is taken on its last character.
    - ``_pos`` counts ``_advance()`` calls and may run one past the end,
      which gives the driver a final attempt that observes end of input.

    Usage:
            >>> Lexer("set x to y").lex()
        [Token(SET, 'set', 1:3), Token(IDENTIFIER, 'x', 1:5), Token(TO, 'to', 1:8),
         Token(IDENTIFIER, 'y', 1:10), Token(EOF)]

    Thread Safety:
        Lexer instances are single-use. Create one per source string.
        All state is instance-local; no shared mutable state.

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source) to avoid repeated calls
        "_pos",
        "_line",
        "_column",
        "_char",
        "_source_file",
        "_consumed",
    )

    def __init__(self, source: str, source_file: str | None = None) -> None:
        """Initialize lexer with source text.

        Args:
            source: Program source text
            source_file: Optional source file path for error messages
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._line = 1
        self._column = 0
        self._char = ""
        self._source_file = source_file
        self._consumed = False

        self._advance()

    def lex(self) -> list[Token]:
        """Lex the whole source.

        Returns:
            Tokens in source order, terminated by exactly one EOF token.

        Raises:
            LexFailedError: If any lexical error was found. Carries every
                diagnostic from the pass; no tokens are returned.
            LuthorError: If this lexer has already been used.

        Complexity: O(n) where n = len(source)
        """
        if self._consumed:
            msg = "Lexer instances are single-use; create a new Lexer per source"
            raise LuthorError(msg)
        self._consumed = True

        tokens: list[Token] = []
        errors: list[LexError] = []

        while self._has_more():
            try:
                token = self.next_token()
            except LexError as error:
                errors.append(error)
                continue
            if token is not None:
                tokens.append(token)

        if errors:
            logger.debug(
                "Lexing %s failed with %d errors (%d chars)",
                self._source_file or "<source>",
                len(errors),
                self._source_len,
            )
            raise LexFailedError(errors)

        tokens.append(Token(TokenType.EOF, ""))
        logger.debug(
            "Lexed %s into %d tokens (%d chars)",
            self._source_file or "<source>",
            len(tokens),
            self._source_len,
        )
        return tokens

    def next_token(self) -> Token | None:
        """Scan one token after skipping whitespace.

        Returns:
            The next token, or None when only whitespace remained.

        Raises:
            UnexpectedCharacterError: If the current character starts no token.
                The character is consumed, so the next call continues after it.
            InvalidIdentifierError: If an identifier run is malformed. The run
                is consumed.
        """
        self._skip_whitespace()

        char = self._char
        if not char:
            return None

        token = self._scan_operator(char)
        if token is not None:
            return token

        if is_identifier_start(char):
            return self._scan_word()

        span = self._span()
        self._advance()
        raise UnexpectedCharacterError(char, span, self._source_file)

    # =========================================================================
    # Character navigation helpers
    # =========================================================================

    def _advance(self) -> None:
        """Read the character at ``_pos`` into ``_char``.

        Past the end, ``_char`` becomes "" and the column is left alone.
        A newline moves to the next line with column 0, so the first
        character of that line lands on column 1.
        """
        if self._pos < self._source_len:
            char = self._source[self._pos]
            self._char = char
            self._column += 1
            if char == "\n":
                self._line += 1
                self._column = 0
        else:
            self._char = ""

        self._pos += 1

    def _has_more(self) -> bool:
        """True until the cursor has moved past the end of input.

        ``<=`` rather than ``<``: one extra attempt runs after the last real
        character so trailing whitespace reaches the end-of-input sentinel.
        """
        return self._pos <= self._source_len

    def _peek_next(self) -> str:
        """Peek at the character after ``_char`` without advancing.

        Returns:
            Next character or empty string at end of input.
        """
        if self._pos >= self._source_len:
            return ""
        return self._source[self._pos]

    def _skip_whitespace(self) -> None:
        while self._char in WHITESPACE:
            self._advance()

    def _span(self) -> SourceSpan:
        return SourceSpan(line=self._line, column=self._column)
