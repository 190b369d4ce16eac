"""
Base protocol and types for challenge handlers.
"""

from dataclasses import dataclass
from typing import Any, Protocol

from feedcheck.content.models import Lesson, Post


@dataclass(frozen=True)
class Choice:
    """One selectable answer."""
    key: str  # what the learner types
    label: str
    value: Any


class ChallengeHandler(Protocol):
    """Protocol for challenge mode handlers."""

    def validate(self, post: Post) -> bool:
        """Check if the post carries a label for this mode."""
        ...

    def choices(self) -> list[Choice]:
        """Answers offered to the learner, in display order."""
        ...

    def parse(self, raw: str) -> Any:
        """Map raw input to an answer value. Returns None if not recognised."""
        ...

    def correct_answer(self, post: Post) -> Any:
        """Ground-truth answer value for the post."""
        ...

    def prompt(self, post: Post, lesson: Lesson) -> str:
        """Question shown under the post."""
        ...

    def hint_text(self, post: Post, lesson: Lesson) -> str:
        """Hint revealed on request."""
        ...

    def describe(self, value: Any) -> str:
        """Human-readable form of an answer value."""
        ...
