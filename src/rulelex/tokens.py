"""Token definitions and constructors for rulelex.

A Token is a span over a shared source buffer plus a set of string tags.
Rules never edit tokens in place; they build new ones with wrap() or
Token.with_tags().

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
The source buffer is an immutable str shared by reference.

Performance Note:
Token stores raw offsets and lazily creates SourceLocation on demand,
since most tokens never have their location read.

"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from rulelex.errors import ContractViolation
from rulelex.location import SourceLocation


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the engine.

    Attributes:
        body: The source buffer this token points into (never copied)
        start: Start offset in body (inclusive)
        end: End offset in body (exclusive)
        tags: Set of user-defined tag strings. Any iterable passed in is
            normalized to a frozenset.

    Raises:
        ContractViolation: If the span does not satisfy
            ``0 <= start <= end <= len(body)``.

    """

    body: str
    start: int
    end: int
    tags: frozenset[str] = frozenset()
    # Cache field - excluded from repr and comparison
    _location_cache: SourceLocation | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    def __post_init__(self) -> None:
        if not 0 <= self.start <= self.end <= len(self.body):
            raise ContractViolation(
                "Token",
                f"span {self.start}..{self.end} out of range for body of length {len(self.body)}",
            )
        if not isinstance(self.tags, frozenset):
            _check_tags("Token", self.tags)
            object.__setattr__(self, "tags", frozenset(self.tags))

    def content(self) -> str:
        """Substring of the source buffer covered by this token."""
        return self.body[self.start : self.end]

    def has_tag(self, tag: str) -> bool:
        """Whether the tag set contains ``tag``."""
        return tag in self.tags

    def single_char(self) -> str | None:
        """Return the character if this token is exactly one character long."""
        if self.end - self.start == 1:
            return self.body[self.start]
        return None

    def with_tags(self, *tags: str) -> Token:
        """Return a copy of this token with ``tags`` added to its tag set."""
        return Token(self.body, self.start, self.end, self.tags.union(tags))

    @property
    def location(self) -> SourceLocation:
        """Get source location (lazily created and cached)."""
        if self._location_cache is not None:
            return self._location_cache
        loc = SourceLocation.from_offsets(self.body, self.start, self.end)
        # Safe mutation of frozen dataclass cache field (idempotent write)
        object.__setattr__(self, "_location_cache", loc)
        return loc

    def __str__(self) -> str:
        """Content followed by sorted tags, e.g. ``'ab': a; b; c; ``."""
        return f"{self.content()!r}: " + "".join(f"{tag}; " for tag in sorted(self.tags))

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.content()
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({val!r}, {self.start}..{self.end}, {sorted(self.tags)})"


def _check_tags(operation: str, tags: Iterable[str]) -> None:
    # A bare str would be split into one tag per character.
    if isinstance(tags, str):
        raise ContractViolation(
            operation, f"tags must be an iterable of strings, got the string {tags!r}"
        )


def empty_token() -> Token:
    """A token with no content and no tags over the empty string."""
    return Token("", 0, 0)


def token_from_string(content: str, tags: Iterable[str] = ()) -> Token:
    """Build a token covering all of ``content``.

    Mostly used for debugging and tests; the token owns its own buffer,
    so it cannot be wrapped together with tokens from another source.
    """
    _check_tags("token_from_string", tags)
    return Token(content, 0, len(content), frozenset(tags))


def str_to_tokens(text: str) -> list[Token]:
    """Chop ``text`` into one token per character, plus an end sentinel.

    Each character token is tagged with the character itself. The trailing
    sentinel is a zero-length token at ``len(text)`` with no tags, which lets
    rules detect end of input by looking for empty content.

    Args:
        text: Source text; every token references it

    Returns:
        ``len(text) + 1`` tokens

    Example:
        >>> [t.content() for t in str_to_tokens("ab")]
        ['a', 'b', '']
    """
    tokens = [Token(text, i, i + 1, frozenset((ch,))) for i, ch in enumerate(text)]
    tokens.append(Token(text, len(text), len(text)))
    return tokens


def wrap(tokens: Sequence[Token], tags: Iterable[str] = ()) -> Token:
    """Merge a contiguous run of tokens into one token.

    The result spans from the first token's start to the last token's end,
    and carries the union of every input token's tags plus ``tags``.

    Args:
        tokens: Non-empty run of tokens sharing one source buffer object
            (the same ``str``, not merely an equal one), where each token
            ends exactly where the next begins
        tags: Extra tags to add to the merged token (not a bare str)

    Returns:
        The merged token

    Raises:
        ContractViolation: If the run is empty, mixes source buffers,
            has gaps or overlaps, or ``tags`` is a str.
    """
    if not tokens:
        raise ContractViolation("wrap", "cannot wrap an empty token run")
    _check_tags("wrap", tags)

    first = tokens[0]
    body = first.body
    merged: set[str] = set(first.tags)
    prev_end = first.end
    for index, tok in enumerate(tokens[1:], start=1):
        if tok.body is not body:
            raise ContractViolation(
                "wrap", f"token {index} comes from a different source buffer"
            )
        if tok.start != prev_end:
            raise ContractViolation(
                "wrap",
                f"token {index} starts at {tok.start} but previous token ends at {prev_end}",
            )
        merged.update(tok.tags)
        prev_end = tok.end
    merged.update(tags)
    return Token(body, first.start, prev_end, frozenset(merged))
