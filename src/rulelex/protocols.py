"""Protocols for rulelex.

Defines the contract every rule fulfils. Plain functions, lambdas and
callable objects all satisfy it; nothing needs to subclass anything.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from rulelex.tokens import Token


class Rule(Protocol):
    """Protocol for rules driven by process_rule().

    Thread Safety:
        Implementations should be pure. The window is a fresh list owned
        by the rule; the tokens inside it are immutable.

    """

    def __call__(self, window: list[Token]) -> Sequence[Token] | None:
        """Decide what replaces the current window.

        Args:
            window: The contiguous tokens currently under consideration

        Returns:
            None to ask for one more token, or the replacement tokens.
            The replacement may be empty (drop the window), the window
            itself (no change), or longer than the window (split).
        """
        ...
