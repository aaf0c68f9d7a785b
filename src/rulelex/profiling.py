"""RuleAccumulator: opt-in profiling for rule passes.

This module provides accumulated metrics while rules run:
- Rule invocations (one per window offered to a rule)
- Passes, tokens in and tokens out
- Forced resolutions (windows that reached end of input undecided)

Zero overhead when disabled (get_rule_accumulator() returns None).

Example:
    from rulelex import lex
    from rulelex.profiling import profiled_rules
    from rulelex.rules import word_rules

    with profiled_rules() as metrics:
        tokens = lex("hello world", word_rules())

    print(metrics.summary())
    # {"total_ms": 0.3, "passes": 4, "rule_calls": 40, ...}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class RuleAccumulator:
    """Accumulated metrics across rule passes.

    Attributes:
        start_time: Profiling start timestamp.
        passes: Number of process_rule() passes recorded.
        rule_calls: Total number of rule invocations.
        tokens_in: Total tokens fed into passes.
        tokens_out: Total tokens produced by passes.
        forced_resolutions: Windows emitted unchanged because the rule never
            decided before running out of input.

    """

    start_time: float = field(default_factory=perf_counter)
    passes: int = 0
    rule_calls: int = 0
    tokens_in: int = 0
    tokens_out: int = 0
    forced_resolutions: int = 0

    def record_pass(
        self,
        tokens_in: int,
        tokens_out: int,
        rule_calls: int,
        forced_resolutions: int,
    ) -> None:
        """Record one completed pass."""
        self.passes += 1
        self.tokens_in += tokens_in
        self.tokens_out += tokens_out
        self.rule_calls += rule_calls
        self.forced_resolutions += forced_resolutions

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of pass metrics.

        Returns:
            Dict with total_ms, passes, rule_calls, tokens_in, tokens_out,
            forced_resolutions.

        """
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "passes": self.passes,
            "rule_calls": self.rule_calls,
            "tokens_in": self.tokens_in,
            "tokens_out": self.tokens_out,
            "forced_resolutions": self.forced_resolutions,
        }


_accumulator: ContextVar[RuleAccumulator | None] = ContextVar(
    "rule_accumulator",
    default=None,
)


def get_rule_accumulator() -> RuleAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_rules() -> Iterator[RuleAccumulator]:
    """Context manager for profiled rule passes.

    Creates a RuleAccumulator and makes it available via
    get_rule_accumulator() for the duration of the with block.

    Yields:
        RuleAccumulator that will be populated by every pass.

    """
    acc = RuleAccumulator()
    token: Token[RuleAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)
