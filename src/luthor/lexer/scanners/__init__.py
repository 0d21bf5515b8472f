"""Token scanning mixins.

Scanners move the cursor: each consumes exactly the characters of one
token and leaves the cursor on the character after it.
"""

from luthor.lexer.scanners.operator import OperatorScannerMixin
from luthor.lexer.scanners.word import WordScannerMixin

__all__ = ["OperatorScannerMixin", "WordScannerMixin"]
