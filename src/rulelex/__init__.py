"""
rulelex: rule-driven token rewriting for building lexers.

Text is split into one token per character; rules then rewrite the token
stream pass by pass, merging, splitting, tagging or dropping tokens. Each
rule sees a small window of tokens that grows until the rule decides.

Quick Start:
    >>> from rulelex import lex, str_to_tokens, process_rule
    >>> from rulelex.rules import ab_rule, word_rules
    >>> [t.content() for t in lex("hi there", word_rules())]
    ['hi', 'there']

    >>> tokens = process_rule(ab_rule, str_to_tokens("abab"))
    >>> [(t.content(), t.has_tag("c")) for t in tokens]
    [('ab', True), ('ab', True), ('', False)]

Writing Rules:
    >>> from rulelex import Multiple, Single, classify, wrap
    >>>
    >>> def xy_rule(window):
    ...     match classify(window):
    ...         case Single(token=tok):
    ...             return None if tok.has_tag("x") else window
    ...         case Multiple():
    ...             if window[1].has_tag("y"):
    ...                 return [wrap(window, ["xy"])]
    ...             return window
"""

from collections.abc import Iterable

from rulelex.config import (
    EngineConfig,
    engine_config_context,
    get_engine_config,
    reset_engine_config,
    set_engine_config,
)
from rulelex.engine import iter_rule, process_rule, process_rules
from rulelex.errors import ContractViolation, RulelexError
from rulelex.location import SourceLocation
from rulelex.printing import format_token, format_tokens, print_tokens
from rulelex.profiling import RuleAccumulator, get_rule_accumulator, profiled_rules
from rulelex.protocols import Rule
from rulelex.structure import Multiple, Single, TokenStructure, classify
from rulelex.tokens import Token, empty_token, str_to_tokens, token_from_string, wrap

__version__ = "0.1.0"


def lex(
    source: str,
    rules: Iterable[Rule],
    *,
    config: EngineConfig | None = None,
) -> list[Token]:
    """Tokenize ``source`` and run ``rules`` over it as a pipeline.

    Args:
        source: Text to lex; all resulting tokens reference it
        rules: Rules applied in order, see process_rules()
        config: Engine configuration for the duration of this call
            (the current context's config if None)

    Returns:
        The final token list

    Example:
        >>> from rulelex.rules import int_rules
        >>> [t.content() for t in lex("123 040", int_rules())]
        ['123', '0', '40']
    """
    tokens = str_to_tokens(source)
    if config is None:
        return process_rules(rules, tokens)
    with engine_config_context(config):
        return process_rules(rules, tokens)


__all__ = [
    # Main API
    "lex",
    "str_to_tokens",
    "process_rule",
    "process_rules",
    "iter_rule",
    "wrap",
    "classify",
    # Tokens
    "Token",
    "empty_token",
    "token_from_string",
    "SourceLocation",
    # Window structure
    "TokenStructure",
    "Single",
    "Multiple",
    # Rules
    "Rule",
    # Printing
    "format_token",
    "format_tokens",
    "print_tokens",
    # Configuration
    "EngineConfig",
    "get_engine_config",
    "set_engine_config",
    "reset_engine_config",
    "engine_config_context",
    # Profiling
    "RuleAccumulator",
    "get_rule_accumulator",
    "profiled_rules",
    # Errors
    "RulelexError",
    "ContractViolation",
]
