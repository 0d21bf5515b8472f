"""
Luthor: lexer for a small English-like teaching language

Turns program source into position-tagged tokens for a parser. Every
lexical error in the input is reported in one pass.

Quick Start:
    >>> from luthor import lex
    >>> lex("define variable x is natural")
    [Token(DEFINE, 'define', 1:6), Token(VARIABLE, 'variable', 1:15),
     Token(IDENTIFIER, 'x', 1:17), Token(IS, 'is', 1:20),
     Token(NATURAL, 'natural', 1:28), Token(EOF)]

    >>> # Errors arrive as one batch
    >>> from luthor import LexFailedError
    >>> try:
    ...     lex("set x2 to ?")
    ... except LexFailedError as exc:
    ...     for error in exc.errors:
    ...         print(error)
    1:6 x2 is not a valid identifier, 2 must be followed by a letter
    1:11 unexpected character ?

Installation:
    pip install luthor              # Zero runtime dependencies
"""

from luthor.diagnostics import format_diagnostic, format_diagnostics
from luthor.errors import (
    InvalidIdentifierError,
    LexError,
    LexFailedError,
    LuthorError,
    UnexpectedCharacterError,
)
from luthor.lexer import Lexer
from luthor.location import SourceSpan
from luthor.serialization import from_dict, from_json, to_dict, to_json
from luthor.tokens import KEYWORDS, Token, TokenType

__version__ = "0.1.0"


def lex(
    source: str,
    *,
    source_file: str | None = None,
) -> list[Token]:
    """Lex program source into tokens.

    Args:
        source: Program source text
        source_file: Optional source file path for error messages

    Returns:
        Tokens in source order, ending with exactly one EOF token

    Raises:
        LexFailedError: With every diagnostic, if the source has lexical errors

    Example:
        >>> [t.type.name for t in lex("x != y")]
        ['IDENTIFIER', 'NOT_EQUAL', 'IDENTIFIER', 'EOF']
    """
    return Lexer(source, source_file=source_file).lex()


__all__ = [  # noqa: RUF022 - grouped by category
    # Version
    "__version__",
    # Core API
    "lex",
    "Lexer",
    # Tokens
    "KEYWORDS",
    "Token",
    "TokenType",
    # Location
    "SourceSpan",
    # Errors
    "LuthorError",
    "LexError",
    "LexFailedError",
    "UnexpectedCharacterError",
    "InvalidIdentifierError",
    # Diagnostics
    "format_diagnostic",
    "format_diagnostics",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
]
