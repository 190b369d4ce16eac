"""
Lesson round: the play flow over one lesson's posts.

Wires the evaluator to the GameStore. For each answer the evaluator sees
the streak and hint state from before the answer, then the store is
updated: score (correct only), streak, completion.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from loguru import logger

from feedcheck.content.models import Lesson, Post
from feedcheck.errors import PostAlreadyCompletedError

from .challenges import ChallengeMode, WrongAnswerPolicy, get_handler
from .challenges.base import ChallengeHandler
from .scoring import DEFAULT_RULES, Evaluation, ScoringRules, evaluate
from .state import SessionState
from .store import GameStore


@dataclass(frozen=True)
class AnswerOutcome:
    """Result of answering one post."""

    post_id: str
    evaluation: Evaluation
    submitted: Any
    correct_answer: Any
    completed: bool  # post is now closed
    state: SessionState

    @property
    def is_correct(self) -> bool:
        return self.evaluation.is_correct

    @property
    def points(self) -> int:
        return self.evaluation.points_awarded


@dataclass(frozen=True)
class RoundSummary:
    """End-of-lesson summary."""

    lesson_title: str
    score: int
    highest_streak: int
    hints_used: int
    completed: int
    total: int


class LessonRound:
    """
    One learner's pass through a lesson's posts.

    The store must already be loaded for the lesson.
    """

    def __init__(
        self,
        lesson: Lesson,
        posts: list[Post],
        store: GameStore,
        mode: ChallengeMode | str = ChallengeMode.BINARY,
        on_wrong: WrongAnswerPolicy | str = WrongAnswerPolicy.RETRY,
        rules: ScoringRules = DEFAULT_RULES,
    ):
        self.lesson = lesson
        self.store = store
        self.mode = ChallengeMode(mode)
        self.on_wrong = WrongAnswerPolicy(on_wrong)
        self.rules = rules
        self.handler: ChallengeHandler = get_handler(self.mode)

        self.posts = [p for p in posts if self.handler.validate(p)]
        dropped = len(posts) - len(self.posts)
        if dropped:
            logger.warning(
                f"{dropped} posts in {lesson.id} have no {self.mode.value} label and were left out"
            )

    # =========================================================================
    # Progress
    # =========================================================================

    @property
    def state(self) -> SessionState:
        return self.store.state

    def open_posts(self) -> list[Post]:
        """Posts not yet completed, in feed order."""
        return [p for p in self.posts if not self.store.is_completed(p.id)]

    def progress(self) -> tuple[int, int]:
        """(completed, total) counting only posts in this round."""
        completed = sum(1 for p in self.posts if self.store.is_completed(p.id))
        return completed, len(self.posts)

    @property
    def is_finished(self) -> bool:
        return bool(self.posts) and not self.open_posts()

    def get_post(self, post_id: str) -> Post | None:
        return next((p for p in self.posts if p.id == post_id), None)

    # =========================================================================
    # Actions
    # =========================================================================

    def answer(self, post: Post, submitted: Any) -> AnswerOutcome:
        """
        Score an answer and update the store.

        Raises:
            PostAlreadyCompletedError: The post was already closed
        """
        if self.store.is_completed(post.id):
            raise PostAlreadyCompletedError(post.id)

        correct_answer = self.handler.correct_answer(post)
        evaluation = evaluate(
            submitted,
            correct_answer,
            current_streak=self.state.current_streak,
            hint_used=self.store.has_used_hint(post.id),
            rules=self.rules,
        )

        if evaluation.is_correct:
            self.store.update_score(evaluation.points_awarded)
        self.store.update_streak(evaluation.is_correct)

        completed = evaluation.is_correct or self.on_wrong == WrongAnswerPolicy.COMPLETE
        if completed:
            self.store.mark_post_complete(post.id)

        logger.info(
            f"{self.lesson.id}/{post.id}: correct={evaluation.is_correct} "
            f"points={evaluation.points_awarded} streak={self.state.current_streak}"
        )
        return AnswerOutcome(
            post_id=post.id,
            evaluation=evaluation,
            submitted=submitted,
            correct_answer=correct_answer,
            completed=completed,
            state=self.state,
        )

    def request_hint(self, post: Post) -> str | None:
        """
        Reveal the hint for a post.

        Returns:
            Hint text, or None if a hint was already used for this post
        """
        if self.store.has_used_hint(post.id):
            return None
        self.store.add_hint(post.id)
        return self.handler.hint_text(post, self.lesson)

    def potential_points(self, post: Post) -> int:
        """Points a correct answer on this post would earn right now."""
        return evaluate(
            True,
            True,
            current_streak=self.state.current_streak,
            hint_used=self.store.has_used_hint(post.id),
            rules=self.rules,
        ).points_awarded

    def summary(self) -> RoundSummary:
        completed, total = self.progress()
        return RoundSummary(
            lesson_title=self.lesson.title,
            score=self.state.score,
            highest_streak=self.state.highest_streak,
            hints_used=len(self.state.hints_used),
            completed=completed,
            total=total,
        )

    def restart(self) -> SessionState:
        """Play again from a clean state."""
        return self.store.reset()
