"""
Yes/No challenge handler.

Asks whether a post is an example of the lesson's concept.
"""

from typing import Any

from feedcheck.content.models import Lesson, Post

from . import ChallengeMode, register
from .base import Choice

YES_INPUTS = {"y", "yes", "t", "true"}
NO_INPUTS = {"n", "no", "f", "false"}


@register(ChallengeMode.BINARY)
class BinaryHandler:
    """Handler for yes/no questions."""

    def validate(self, post: Post) -> bool:
        return post.is_example is not None

    def choices(self) -> list[Choice]:
        return [Choice("y", "Yes", True), Choice("n", "No", False)]

    def parse(self, raw: str) -> bool | None:
        response = raw.strip().lower()
        if response in YES_INPUTS:
            return True
        if response in NO_INPUTS:
            return False
        return None

    def correct_answer(self, post: Post) -> bool | None:
        return post.is_example

    def prompt(self, post: Post, lesson: Lesson) -> str:
        return f"Does this post demonstrate the technique: {lesson.title}?"

    def hint_text(self, post: Post, lesson: Lesson) -> str:
        return "Does this post clearly fit the definition discussed in the lesson?"

    def describe(self, value: Any) -> str:
        return "Yes" if value else "No"
