"""
Technique identification handler.

Presents the manipulation techniques as numbered options. The learner can
type the number, the tag or the label.
"""

from typing import Any

from feedcheck.content.models import Lesson, Post, Technique

from . import ChallengeMode, register
from .base import Choice


@register(ChallengeMode.TECHNIQUE)
class TechniqueHandler:
    """Handler for multiple-choice technique questions."""

    def validate(self, post: Post) -> bool:
        return post.technique is not None

    def choices(self) -> list[Choice]:
        return [
            Choice(str(i), technique.label, technique)
            for i, technique in enumerate(Technique, 1)
        ]

    def parse(self, raw: str) -> Technique | None:
        response = raw.strip().lower()
        if not response:
            return None
        for choice in self.choices():
            technique = choice.value
            if response in (choice.key, technique.value, choice.label.lower()):
                return technique
        return None

    def correct_answer(self, post: Post) -> Technique | None:
        return post.technique

    def prompt(self, post: Post, lesson: Lesson) -> str:
        return "Which technique does this post use?"

    def hint_text(self, post: Post, lesson: Lesson) -> str:
        return "Look carefully at the media and its relationship to the claim."

    def describe(self, value: Any) -> str:
        return value.label if isinstance(value, Technique) else str(value)
