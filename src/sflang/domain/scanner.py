"""Statement scanner — split SF source text into statement substrings.

A statement is ``tag "data" options;``.  It ends at the first ``;`` that
follows a *complete* double-quoted literal, so semicolons and escaped
quotes inside the literal never terminate it.

Pure functions, no side effects.  :func:`scan_statements` is a generator:
calling it again restarts the scan from the beginning of the source.
"""

from __future__ import annotations

import re
from collections.abc import Iterator

# Prefix (tag) may not cross a bare newline but tolerates ``\`` + newline
# continuations.  The literal admits any escaped character.  Options run up
# to the terminating semicolon and may span lines.
_STATEMENT_PATTERN = re.compile(
    r'(?:[^\n]|\\\n)*?"(?:[^"\\]|\\.)*"[^;]*;',
    re.DOTALL,
)


def scan_statements(source: str) -> Iterator[str]:
    """Yield each statement substring of *source* in order.

    Trailing text with no further complete quoted literal (or no closing
    semicolon) is silently dropped.
    """
    for match in _STATEMENT_PATTERN.finditer(source):
        yield match.group(0)
