"""
Challenge evaluator.

Pure scoring: given an answer, the correct answer, the streak before this
answer and whether a hint was revealed for the post, compute correctness
and the points awarded. The caller feeds the result into the GameStore.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

BASE_POINTS = 100
STREAK_STEP = 0.5
MAX_MULTIPLIER = 3.0
HINT_PENALTY = 0.5


@dataclass(frozen=True)
class ScoringRules:
    """Scoring constants."""

    base_points: int = BASE_POINTS
    streak_step: float = STREAK_STEP  # multiplier gained per streak step
    max_multiplier: float = MAX_MULTIPLIER
    hint_penalty: float = HINT_PENALTY  # multiplier when a hint was used

    def streak_multiplier(self, current_streak: int) -> float:
        return min(self.max_multiplier, 1.0 + current_streak * self.streak_step)

    def penalty(self, hint_used: bool) -> float:
        return self.hint_penalty if hint_used else 1.0


DEFAULT_RULES = ScoringRules()


@dataclass(frozen=True)
class Evaluation:
    """Outcome of one answer."""

    is_correct: bool
    points_awarded: int


def evaluate(
    submitted_answer: Any,
    correct_answer: Any,
    current_streak: int,
    hint_used: bool,
    rules: ScoringRules = DEFAULT_RULES,
) -> Evaluation:
    """
    Score one answer.

    The multiplier and penalty use the streak and hint state before this
    answer is applied, so a correct answer's bonus reflects the run it is
    extending, not the extended run.

    Args:
        submitted_answer: What the learner picked
        correct_answer: Ground-truth label of the post
        current_streak: Streak before this answer
        hint_used: Whether a hint was revealed for this post
        rules: Scoring constants

    Returns:
        Evaluation with is_correct and points_awarded (0 when wrong)
    """
    is_correct = submitted_answer == correct_answer
    if not is_correct:
        return Evaluation(is_correct=False, points_awarded=0)

    points = math.floor(
        rules.base_points * rules.streak_multiplier(current_streak) * rules.penalty(hint_used)
    )
    return Evaluation(is_correct=True, points_awarded=points)
