"""Benchmark fixtures and configuration."""

from __future__ import annotations

import pytest


@pytest.fixture
def paragraph() -> str:
    """A short prose paragraph."""
    return """The donkey than rams him.
Oh my goodness, but the kangaroo jumps over.
And it looks like the seagulls are going for it again!
They're just hitting the tank!
(To the penguins, attacking a T-Rex)
Hit him with your penguin beaks!
What are you doing out there?
Looks like I gotta do everything myself...
Come on, now I'm playing.
Get over here, T-Rex. I'll beat you up.
Now watch out for my spin attack..."""


@pytest.fixture
def large_document(paragraph: str) -> str:
    """Roughly 40KB of prose with numbers mixed in."""
    sections = [f"Section {i}: {paragraph} {i * 37} {i * 1009}" for i in range(100)]
    return "\n\n".join(sections)
