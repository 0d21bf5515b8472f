"""Token and TokenType definitions for the Luthor lexer.

The lexer produces a list of Token objects that the parser consumes.
Each Token has a type, the source text it was read from, and a span.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from luthor.location import SourceSpan


class TokenType(Enum):
    """Token types produced by the lexer.

    Organized by category:
    - Structural delimiters
    - Arithmetic, comparison and logical operators
    - Identifiers and reserved keywords
    - End of input

    """

    # Structural
    LEFT_BRACE = auto()  # {
    RIGHT_BRACE = auto()  # }
    LEFT_BRACKET = auto()  # [
    RIGHT_BRACKET = auto()  # ]
    LEFT_PAREN = auto()  # (
    RIGHT_PAREN = auto()  # )
    COMMA = auto()  # ,

    # Arithmetic
    PLUS = auto()  # +
    MINUS = auto()  # -
    STAR = auto()  # *
    STAR_STAR = auto()  # **
    SLASH = auto()  # /
    PERCENT = auto()  # %
    PERCENT_PERCENT = auto()  # %%

    # Comparison
    EQUAL = auto()  # =
    NOT_EQUAL = auto()  # !=
    LESS_THAN = auto()  # <
    LESS_THAN_OR_EQUAL = auto()  # <=
    GREATER_THAN = auto()  # >
    GREATER_THAN_OR_EQUAL = auto()  # >=

    # Logical
    AMPERSAND = auto()  # &
    PIPE = auto()  # |
    NOT = auto()  # ! or the keyword "not"

    IDENTIFIER = auto()

    # Keywords
    PROGRAM = auto()
    DEFINE = auto()
    VARIABLE = auto()
    IS = auto()
    NATURAL = auto()
    REAL = auto()
    CHAR = auto()
    BOOLEAN = auto()
    EXECUTE = auto()
    SET = auto()
    GET = auto()
    TO = auto()
    PUT = auto()
    LOOP = auto()
    WHILE = auto()
    DO = auto()
    TRUE = auto()
    FALSE = auto()

    EOF = auto()


# Reserved words, matched case-sensitively against a whole identifier run
KEYWORDS: dict[str, TokenType] = {
    "program": TokenType.PROGRAM,
    "define": TokenType.DEFINE,
    "not": TokenType.NOT,
    "variable": TokenType.VARIABLE,
    "is": TokenType.IS,
    "natural": TokenType.NATURAL,
    "real": TokenType.REAL,
    "char": TokenType.CHAR,
    "boolean": TokenType.BOOLEAN,
    "execute": TokenType.EXECUTE,
    "set": TokenType.SET,
    "get": TokenType.GET,
    "to": TokenType.TO,
    "put": TokenType.PUT,
    "loop": TokenType.LOOP,
    "while": TokenType.WHILE,
    "do": TokenType.DO,
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
}

_KEYWORD_TYPES: frozenset[TokenType] = frozenset(KEYWORDS.values())


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        type: The token type (from TokenType enum)
        value: The source text of the token ("" for EOF)
        span: Position of the token's last character; None for EOF

    Thread Safety:
        Frozen dataclass ensures immutability for safe sharing.

    """

    type: TokenType
    value: str
    span: SourceSpan | None = None

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        if self.span is None:
            return f"Token({self.type.name})"
        return f"Token({self.type.name}, {self.value!r}, {self.span})"

    @property
    def line(self) -> int | None:
        """Line number (convenience accessor)."""
        return self.span.line if self.span is not None else None

    @property
    def column(self) -> int | None:
        """Column number (convenience accessor)."""
        return self.span.column if self.span is not None else None

    @property
    def is_keyword(self) -> bool:
        """True for reserved words, including ``not`` but not a bare ``!``."""
        return self.type in _KEYWORD_TYPES and self.value in KEYWORDS
