"""Source location tracking for tokens.

Provides SourceLocation dataclass for mapping a token span back to a
line and column in its source buffer. Used for diagnostics and printing.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Source location of a token span.

    Line and column are 1-indexed; offsets are 0-indexed positions
    in the source buffer.

    Attributes:
        lineno: Line number of the span start (1-indexed)
        col_offset: Column of the span start (1-indexed)
        offset: Absolute start offset in the source buffer
        end_offset: Absolute end offset in the source buffer

    Examples:
            >>> SourceLocation.from_offsets("ab\\ncd", 3, 5)
        SourceLocation(lineno=2, col_offset=1, offset=3, end_offset=5)

    """

    lineno: int
    col_offset: int
    offset: int = 0
    end_offset: int = 0

    def __str__(self) -> str:
        """Format location as "line:col"."""
        return f"{self.lineno}:{self.col_offset}"

    @classmethod
    def from_offsets(cls, body: str, start: int, end: int) -> SourceLocation:
        """Compute the location of ``body[start:end]``.

        Args:
            body: Source buffer
            start: Start offset (inclusive)
            end: End offset (exclusive)

        Returns:
            SourceLocation for the span start
        """
        line_start = body.rfind("\n", 0, start) + 1
        return cls(
            lineno=body.count("\n", 0, start) + 1,
            col_offset=start - line_start + 1,
            offset=start,
            end_offset=end,
        )
