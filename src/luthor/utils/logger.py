"""Logger lookup for Luthor modules.

Every logger lives under the ``luthor`` namespace, so one call configures
the whole package:

    >>> import logging
    >>> logging.getLogger("luthor").setLevel(logging.DEBUG)

The library installs no handlers and logs only at DEBUG. ``Lexer.lex``
emits one summary per run:

    Lexed main.lx into 5 tokens (10 chars)
    Lexing <source> failed with 2 errors (3 chars)
"""

from __future__ import annotations

import logging

NAMESPACE = "luthor"


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` inside the ``luthor`` namespace.

    Module names from this package (``__name__``) are used as they are;
    anything else is nested under ``luthor.``.

    Example:
        >>> get_logger("luthor.lexer.core").name
        'luthor.lexer.core'
        >>> get_logger("plugin").name
        'luthor.plugin'
    """
    if name != NAMESPACE and not name.startswith(f"{NAMESPACE}."):
        name = f"{NAMESPACE}.{name}"
    return logging.getLogger(name)
