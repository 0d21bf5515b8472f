"""Source positions for tokens and diagnostics.

Provides the SourceSpan dataclass attached to every token and lexical error.

Thread Safety:
SourceSpan is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Position of the last character consumed for a token or error.

    Both fields are 1-indexed. A two-character operator such as ``<=``
    points at the ``=``, a keyword points at its final letter.

    Attributes:
        line: Line number (1-indexed)
        column: Column number (1-indexed)

    Examples:
            >>> span = SourceSpan(line=1, column=2)
            >>> str(span)
            '1:2'

    """

    line: int
    column: int

    def __str__(self) -> str:
        """Format span for error messages.

        Returns:
            Formatted string like "10:5"
        """
        return f"{self.line}:{self.column}"

    @classmethod
    def unknown(cls) -> SourceSpan:
        """Create an unknown/placeholder span.

        Use for tokens created synthetically, outside a lexer run.
        """
        return cls(line=0, column=0)
