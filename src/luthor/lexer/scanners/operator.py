"""Operator and delimiter scanner mixin."""

from __future__ import annotations

from luthor.charsets import LOOKAHEAD_TOKENS, SINGLE_CHAR_TOKENS
from luthor.location import SourceSpan
from luthor.tokens import Token


class OperatorScannerMixin:
    """Mixin providing operator and delimiter scanning.

    Dispatch is a flat table lookup on the current character, with one
    character of lookahead for ``**``, ``%%``, ``<=``, ``>=`` and ``!=``.

    """

    # These will be set by the Lexer class
    _char: str

    def _advance(self) -> None:
        """Read the next character. Implemented by Lexer."""
        raise NotImplementedError

    def _peek_next(self) -> str:
        """Character after the current one. Implemented by Lexer."""
        raise NotImplementedError

    def _span(self) -> SourceSpan:
        """Span of the current character. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_operator(self, char: str) -> Token | None:
        """Scan an operator or delimiter starting at the current character.

        The span is taken on the token's last character, then the cursor
        moves past it.

        Args:
            char: The current character

        Returns:
            Token, or None if char starts no operator (cursor unchanged).
        """
        token_type = SINGLE_CHAR_TOKENS.get(char)
        value = char

        if token_type is None:
            entry = LOOKAHEAD_TOKENS.get(char)
            if entry is None:
                return None

            follow, double_type, single_type = entry
            if self._peek_next() == follow:
                self._advance()
                token_type = double_type
                value = char + follow
            else:
                token_type = single_type

        token = Token(token_type, value, self._span())
        self._advance()
        return token
