"""Identifier and keyword classifier mixin."""

from luthor.charsets import DIGITS
from luthor.errors import InvalidIdentifierError
from luthor.location import SourceSpan
from luthor.tokens import KEYWORDS, Token, TokenType


class IdentifierClassifierMixin:
    """Mixin providing identifier validation and keyword classification.

    Pure logic over an already-consumed run; never moves the cursor.
    """

    _source_file: str | None

    def _classify_word(self, text: str, span: SourceSpan) -> Token:
        """Classify a maximal identifier-or-keyword run.

        Args:
            text: The run, letters, ASCII digits and underscores only
            span: Position of the run's last character

        Returns:
            Keyword token on an exact (case-sensitive) match, IDENTIFIER otherwise.

        Raises:
            InvalidIdentifierError: If the run fails the identifier-shape rule.
        """
        self._check_identifier_shape(text, span)

        token_type = KEYWORDS.get(text, TokenType.IDENTIFIER)
        return Token(token_type, text, span)

    def _check_identifier_shape(self, text: str, span: SourceSpan) -> None:
        """Reject runs where a digit or underscore is not followed by a letter.

        Single-character runs (``_``, ``x``) are always valid. Only the
        first violation is reported.
        """
        if len(text) == 1:
            return

        last = len(text) - 1
        for index, char in enumerate(text):
            if char != "_" and char not in DIGITS:
                continue
            if index == last or not text[index + 1].isalpha():
                raise InvalidIdentifierError(text, char, span, self._source_file)
