"""Human-readable rendering of lexical diagnostics.

Formats a LexError together with the source line it points into, with a
caret marker under the reported column:

    program.lx:3:10 unexpected character ?
       3 | set x to ?
         |          ^

"""

from __future__ import annotations

from collections.abc import Iterable

from luthor.errors import LexError


def format_diagnostic(error: LexError, source: str) -> str:
    """Format a diagnostic with a source excerpt.

    Args:
        error: Diagnostic to render
        source: The source text the diagnostic was produced from

    Returns:
        Multi-line string; just ``str(error)`` if the line is out of range.
    """
    header = str(error)
    lines = source.split("\n")
    line = error.span.line
    if line < 1 or line > len(lines):
        return header

    text = lines[line - 1].rstrip("\r")
    prefix = f"{line:4d} | "
    gutter = " " * (len(prefix) - 2) + "| "
    marker = " " * max(error.span.column - 1, 0) + "^"
    return f"{header}\n{prefix}{text}\n{gutter}{marker}"


def format_diagnostics(errors: Iterable[LexError], source: str) -> str:
    """Format several diagnostics, separated by blank lines."""
    return "\n\n".join(format_diagnostic(error, source) for error in errors)
