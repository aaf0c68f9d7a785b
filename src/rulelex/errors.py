"""Exception classes for rulelex.

Provides standardized exceptions for error handling throughout rulelex.
Exceptions raised by user rules are never wrapped; they propagate unchanged.
"""

from __future__ import annotations


class RulelexError(Exception):
    """Base exception for all rulelex errors.

    Subclass this for specific error categories.
    """

    pass


class ContractViolation(RulelexError):
    """A precondition of an engine operation was broken.

    These are programming errors in a rule (wrapping a non-contiguous run,
    classifying an empty window, returning something that is not a token
    sequence), not recoverable runtime conditions.
    """

    def __init__(self, operation: str, message: str) -> None:
        """Initialize contract violation.

        Args:
            operation: Name of the operation whose precondition failed
                (e.g., "wrap", "classify")
            message: Description of the violation
        """
        self.operation = operation
        self.message = message
        super().__init__(f"{operation}: {message}")
