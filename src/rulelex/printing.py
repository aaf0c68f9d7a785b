"""Plain-text token listings for debugging.

Each token is rendered as its content repr followed by its sorted tags:

    'ab': a; b; c;
    'x': x;
    '':

"""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from rulelex.tokens import Token


def format_token(token: Token) -> str:
    """Render one token as ``'content': tag; tag;``."""
    return str(token).rstrip()


def format_tokens(tokens: Iterable[Token]) -> str:
    """Render tokens one per line."""
    return "\n".join(format_token(tok) for tok in tokens)


def print_tokens(tokens: Iterable[Token], file: TextIO | None = None) -> None:
    """Write format_tokens() output followed by a newline to ``file`` (stdout)."""
    out = file if file is not None else sys.stdout
    out.write(format_tokens(tokens))
    out.write("\n")
