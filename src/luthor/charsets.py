"""Character sets and dispatch tables for O(1) classification.

All sets are frozensets for:
- O(1) membership testing (vs O(n) for strings)
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Usage:
    from luthor.charsets import WHITESPACE

    if char in WHITESPACE:  # O(1) lookup
        ...
"""

from luthor.tokens import TokenType

# ASCII whitespace skipped between tokens
WHITESPACE: frozenset[str] = frozenset(" \t\n\r\f")

# Only ASCII digits may appear inside identifiers; other Unicode digits
# are unexpected characters
DIGITS: frozenset[str] = frozenset("0123456789")

# Characters that are always a complete token on their own
SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    "[": TokenType.LEFT_BRACKET,
    "]": TokenType.RIGHT_BRACKET,
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    ",": TokenType.COMMA,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "/": TokenType.SLASH,
    "=": TokenType.EQUAL,
    "&": TokenType.AMPERSAND,
    "|": TokenType.PIPE,
}

# first char -> (second char, two-char type, one-char type)
LOOKAHEAD_TOKENS: dict[str, tuple[str, TokenType, TokenType]] = {
    "*": ("*", TokenType.STAR_STAR, TokenType.STAR),
    "%": ("%", TokenType.PERCENT_PERCENT, TokenType.PERCENT),
    "<": ("=", TokenType.LESS_THAN_OR_EQUAL, TokenType.LESS_THAN),
    ">": ("=", TokenType.GREATER_THAN_OR_EQUAL, TokenType.GREATER_THAN),
    "!": ("=", TokenType.NOT_EQUAL, TokenType.NOT),
}


def is_identifier_start(char: str) -> bool:
    """Check if char can begin an identifier or keyword (letter or underscore)."""
    return char == "_" or char.isalpha()


def is_identifier_char(char: str) -> bool:
    """Check if char can continue an identifier run.

    The empty string (end of input) is never part of a run.

    """
    return char == "_" or char in DIGITS or char.isalpha()
