"""Token classification mixins.

Classifiers are pure logic: they inspect text the scanner has already
consumed and never move the cursor.
"""

from luthor.lexer.classifiers.identifier import IdentifierClassifierMixin

__all__ = ["IdentifierClassifierMixin"]
