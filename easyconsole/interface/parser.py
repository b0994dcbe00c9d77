#!/usr/bin/env python3
# easyconsole/interface/parser.py
from __future__ import annotations

"""
Tokenizer for console input.

Rules:
- Whitespace outside quotes separates tokens; runs of whitespace collapse.
- A single or double quote opens a span that keeps whitespace verbatim until
  the same quote character closes it. The quotes themselves are dropped.
- A quote met in the middle of a bare token ends that token first, so
  `a"b c"` splits into `a` and `b c`.
- An unterminated span is emitted as-is at end of input (no error).
"""

_QUOTES = frozenset("\"'")


def tokenize(command_line: str) -> list[str]:
    """Split a raw console line into argument tokens."""
    tokens: list[str] = []
    current: list[str] = []
    quote_char: str | None = None

    for ch in command_line:
        if quote_char is not None:
            if ch == quote_char:
                # Closing quote: the span is a token even when empty.
                tokens.append("".join(current))
                current.clear()
                quote_char = None
            else:
                current.append(ch)
        elif ch in _QUOTES:
            if current:
                tokens.append("".join(current))
                current.clear()
            quote_char = ch
        elif ch.isspace():
            if current:
                tokens.append("".join(current))
                current.clear()
        else:
            current.append(ch)

    if current:
        tokens.append("".join(current))
    return tokens
