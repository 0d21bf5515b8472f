"""Lex a small program and print its tokens, or its diagnostics."""

from luthor import LexFailedError, format_diagnostics, lex

SOURCE = """\
program {
  define variable counter is natural
  loop while counter < limit do { set counter to counter + step }
}
"""

try:
    for token in lex(SOURCE, source_file="counter.lx"):
        print(token)
except LexFailedError as exc:
    print(format_diagnostics(exc.errors, SOURCE))
