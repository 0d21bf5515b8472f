"""Single-pass lexer for the Luthor language.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer
├── core.py              # Lexer class (cursor, mixin composition, driver)
├── classifiers/         # Pure classification over consumed text
│   └── identifier.py    # Identifier-shape rule + keyword lookup
└── scanners/            # Cursor-moving token scanners
    ├── operator.py      # Delimiters and one/two-character operators
    └── word.py          # Identifier/keyword runs

Usage:
    >>> from luthor.lexer import Lexer
    >>> Lexer("loop while x <= y").lex()
    [Token(LOOP, 'loop', 1:4), Token(WHILE, 'while', 1:10), Token(IDENTIFIER, 'x', 1:12),
     Token(LESS_THAN_OR_EQUAL, '<=', 1:15), Token(IDENTIFIER, 'y', 1:17), Token(EOF)]

"""

from luthor.lexer.core import Lexer

__all__ = ["Lexer"]
