"""Stock rules and pipelines.

Small building blocks for character-level lexers built on
str_to_tokens(). Tagging rules always decide on a one-token window;
merging rules grow the window while the run continues and decide once
the first token past the run is in view. That trailing token is emitted
unchanged, so a run at the very end of the input needs the sentinel
produced by str_to_tokens() to be closed.

Example:
    >>> from rulelex import lex
    >>> from rulelex.rules import int_rules
    >>> [t.content() for t in lex("12 7", int_rules())]
    ['12', '7']

"""

from __future__ import annotations

import string

from rulelex.protocols import Rule
from rulelex.structure import Multiple, Single, classify
from rulelex.tokens import Token, wrap

WHITESPACE = "ws"
LETTER = "letter"
DIGIT = "digit"
NONZERO = "nonzero"
WORD = "word"
INT = "int"
POS_INT = "posInt"


def whitespace_rule(window: list[Token]) -> list[Token]:
    """Tag whitespace characters and the empty end sentinel with ``ws``."""
    tok = window[0]
    ch = tok.single_char()
    if (ch is not None and ch.isspace()) or tok.start == tok.end:
        window[0] = tok.with_tags(WHITESPACE)
    return window


def letter_rule(window: list[Token]) -> list[Token]:
    """Tag alphabetic characters with ``letter``."""
    ch = window[0].single_char()
    if ch is not None and ch.isalpha():
        window[0] = window[0].with_tags(LETTER)
    return window


def digit_rule(window: list[Token]) -> list[Token]:
    """Tag ASCII digits with ``digit``, and 1-9 also with ``nonzero``."""
    match classify(window):
        case Single(token=tok):
            ch = tok.single_char()
            if ch is not None and ch in string.digits:
                if ch == "0":
                    window[0] = tok.with_tags(DIGIT)
                else:
                    window[0] = tok.with_tags(DIGIT, NONZERO)
    return window


def word_rule(window: list[Token]) -> list[Token] | None:
    """Merge runs of ``letter`` tokens into one ``word`` token."""
    if window[-1].has_tag(LETTER):
        return None
    if len(window) == 1:
        return window
    return [wrap(window[:-1], (WORD,)), window[-1]]


def int_rule(window: list[Token]) -> list[Token] | None:
    """Merge runs of ``digit`` tokens into one ``int``/``posInt`` token.

    A leading zero is an integer on its own, so "040" lexes as 0 and 40.
    """
    match classify(window):
        case Single(token=tok):
            if tok.content() == "0":
                return [wrap(window, (INT, POS_INT))]
            if tok.has_tag(DIGIT):
                return None
            return window
        case Multiple():
            if window[-1].has_tag(DIGIT):
                return None
            return [wrap(window[:-1], (INT, POS_INT)), window[-1]]


def remove_whitespace_rule(window: list[Token]) -> list[Token]:
    """Drop tokens tagged ``ws``."""
    if window[0].has_tag(WHITESPACE):
        return []
    return window


def ab_rule(window: list[Token]) -> list[Token] | None:
    """Merge a token tagged ``a`` followed by one tagged ``b`` into ``c``.

    The window keeps growing across a run of ``a`` tokens, so in "aab"
    only the last ``a`` is paired with the ``b``.
    """
    match classify(window):
        case Single(token=tok):
            if tok.has_tag("a"):
                return None
            return window
        case Multiple():
            last = window[-1]
            if last.has_tag("a"):
                return None
            if last.has_tag("b") and window[-2].has_tag("a"):
                return window[:-2] + [wrap(window[-2:], ("c",))]
            return window


def word_rules() -> list[Rule]:
    """Pipeline producing ``word`` tokens with whitespace removed."""
    return [whitespace_rule, letter_rule, word_rule, remove_whitespace_rule]


def int_rules() -> list[Rule]:
    """Pipeline producing ``int`` tokens with whitespace removed."""
    return [whitespace_rule, digit_rule, int_rule, remove_whitespace_rule]
