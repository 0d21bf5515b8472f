"""Identifier and keyword scanner mixin."""

from __future__ import annotations

from luthor.charsets import is_identifier_char
from luthor.location import SourceSpan
from luthor.tokens import Token


class WordScannerMixin:
    """Mixin consuming a maximal identifier-or-keyword run."""

    _source: str
    _pos: int

    def _advance(self) -> None:
        raise NotImplementedError

    def _peek_next(self) -> str:
        raise NotImplementedError

    def _span(self) -> SourceSpan:
        raise NotImplementedError

    def _classify_word(self, text: str, span: SourceSpan) -> Token:
        """Classify the run. Implemented by IdentifierClassifierMixin."""
        raise NotImplementedError

    def _scan_word(self) -> Token:
        """Scan a run of letters, ASCII digits and underscores.

        The current character must be a letter or underscore. The run is
        consumed in full, even when it turns out to be invalid, so scanning
        resumes on the character after it.

        Returns:
            Keyword or IDENTIFIER token spanning the run's last character.

        Raises:
            InvalidIdentifierError: If the run fails the identifier-shape rule.
        """
        # _pos is one past the current character
        start = self._pos - 1
        while is_identifier_char(self._peek_next()):
            self._advance()

        text = self._source[start : self._pos]
        span = self._span()
        self._advance()
        return self._classify_word(text, span)
