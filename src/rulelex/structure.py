"""Window shape classification for rule bodies.

Rules usually branch on whether they were handed a single token or a
longer window. classify() turns a window into one of two variants that
can be matched exhaustively:

    match classify(window):
        case Single(token=tok):
            ...
        case Multiple():
            ...

"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from rulelex.errors import ContractViolation
from rulelex.tokens import Token


@dataclass(frozen=True, slots=True)
class Single:
    """A window holding exactly one token."""

    token: Token


@dataclass(frozen=True, slots=True)
class Multiple:
    """A window holding two or more tokens."""


TokenStructure = Single | Multiple


def classify(window: Sequence[Token]) -> TokenStructure:
    """Classify a non-empty window by its length.

    Raises:
        ContractViolation: If the window is empty.
    """
    if len(window) == 1:
        return Single(window[0])
    if window:
        return Multiple()
    raise ContractViolation("classify", "cannot classify an empty window")
