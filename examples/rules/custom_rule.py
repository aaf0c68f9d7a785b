"""Write a rule that merges identifiers made of letters, digits and '_'.

Identifiers must start with a letter or '_'. The rule grows its window
while the run continues and decides as soon as a token outside the run
is in view.
"""

import logging

from rulelex import EngineConfig, Multiple, Single, classify, lex, print_tokens, wrap
from rulelex.profiling import profiled_rules
from rulelex.rules import remove_whitespace_rule, whitespace_rule


def is_ident_char(tok, first):
    ch = tok.single_char()
    if ch is None:
        return False
    if ch == "_" or ch.isalpha():
        return True
    return not first and ch.isdigit()


def ident_rule(window):
    match classify(window):
        case Single(token=tok):
            return None if is_ident_char(tok, first=True) else window
        case Multiple():
            if is_ident_char(window[-1], first=False):
                return None
            return [wrap(window[:-1], ["ident"]), window[-1]]


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG, format="%(name)s %(message)s")

    with profiled_rules() as metrics:
        tokens = lex(
            "x1 = _tmp + 2y",
            [whitespace_rule, ident_rule, remove_whitespace_rule],
            config=EngineConfig(trace_replacements=True),
        )

    print_tokens(tokens)
    print(metrics.summary())
