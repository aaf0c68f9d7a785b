"""Window-growing rule engine.

A pass walks the token sequence left to right with a window that starts
at one token. The rule either decides (its replacement is emitted and the
window moves past the tokens it covered) or returns None, in which case
the window grows by one token and the rule is asked again.

If the window already covers every remaining token and the rule still
returns None, the window is emitted unchanged. A pass therefore always
terminates, and makes exactly one rule call per input token.

Emitted tokens are never offered back to the same rule; a pass cannot
revise earlier decisions. Passes are chained with process_rules().

Thread Safety:
All pass state is local to the call. Configuration and profiling are
read from ContextVars.

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

from rulelex.config import get_engine_config
from rulelex.errors import ContractViolation
from rulelex.profiling import get_rule_accumulator
from rulelex.protocols import Rule
from rulelex.tokens import Token
from rulelex.utils.logger import get_logger

logger = get_logger(__name__)


def _rule_name(rule: Rule) -> str:
    return getattr(rule, "__qualname__", None) or repr(rule)


def iter_rule(rule: Rule, tokens: Sequence[Token]) -> Iterator[Token]:
    """Apply ``rule`` across ``tokens`` in one pass, yielding the output.

    Args:
        rule: Callable taking a window (list of tokens) and returning
            None (grow the window) or a list/tuple of replacement tokens
        tokens: Input sequence; it is only read, never modified

    Yields:
        Output tokens in order

    Raises:
        ContractViolation: If the rule returns something other than None,
            a list or a tuple, or (with ``strict_contracts``) a sequence
            containing non-Token items.

    Complexity: one rule call per input token; each call copies its window.
    """
    config = get_engine_config()
    trace = config.trace_replacements
    strict = config.strict_contracts
    name = _rule_name(rule)

    total = len(tokens)
    cursor = 0
    window_len = 1
    calls = 0
    forced = 0
    emitted = 0

    while cursor < total:
        available = total - cursor
        width = min(window_len, available)
        calls += 1
        result = rule(list(tokens[cursor : cursor + width]))

        if result is None:
            if width < available:
                window_len += 1
                continue
            # Undecided at end of input: the window stands as it was.
            forced += 1
            logger.debug(
                "%s: %d-token window at %d reached end of input undecided",
                name,
                width,
                cursor,
            )
            result = tokens[cursor : cursor + width]
        elif not isinstance(result, (list, tuple)):
            raise ContractViolation(
                "process_rule",
                f"rule {name} returned {type(result).__name__}, expected a token list or None",
            )
        elif strict:
            _check_tokens(name, result)

        if trace:
            logger.debug(
                "%s: replacing %r with %r", name, list(tokens[cursor : cursor + width]), list(result)
            )

        yield from result
        emitted += len(result)
        cursor += width
        window_len = 1

    logger.debug(
        "%s: pass done, %d token(s) in, %d out, %d rule call(s)", name, total, emitted, calls
    )
    acc = get_rule_accumulator()
    if acc is not None:
        acc.record_pass(
            tokens_in=total, tokens_out=emitted, rule_calls=calls, forced_resolutions=forced
        )


def _check_tokens(name: str, result: Sequence[object]) -> None:
    for index, item in enumerate(result):
        if not isinstance(item, Token):
            raise ContractViolation(
                "process_rule",
                f"rule {name} returned {type(item).__name__} at position {index}, expected Token",
            )


def process_rule(rule: Rule, tokens: Sequence[Token]) -> list[Token]:
    """Apply ``rule`` across ``tokens`` and return the new token list.

    See iter_rule() for the scanning algorithm. An empty input returns an
    empty list without calling the rule.

    Example:
        >>> from rulelex.rules import ab_rule
        >>> from rulelex.tokens import str_to_tokens
        >>> [t.content() for t in process_rule(ab_rule, str_to_tokens("xab"))]
        ['x', 'ab', '']
    """
    return list(iter_rule(rule, tokens))


def process_rules(rules: Iterable[Rule], tokens: Sequence[Token]) -> list[Token]:
    """Run ``rules`` in order, each pass consuming the previous pass's output.

    Later rules only see what earlier rules produced, so the order matters.
    With no rules the input tokens are returned unchanged (as a new list).
    """
    body = list(tokens)
    for rule in rules:
        body = process_rule(rule, body)
    return body
