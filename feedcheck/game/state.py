"""
Session state for one lesson play-through.

SessionState is an immutable value. Every change goes through one of the
transition functions below, which return a new state and leave the old one
untouched. GameStore (store.py) holds the current value and persists it.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from loguru import logger

# Serialized field names, shared with the persisted JSON layout
FIELD_SCORE = "score"
FIELD_CURRENT_STREAK = "currentStreak"
FIELD_HIGHEST_STREAK = "highestStreak"
FIELD_POSTS_COMPLETED = "postsCompleted"
FIELD_HINTS_USED = "hintsUsed"


@dataclass(frozen=True)
class SessionState:
    """Score, streak and per-post progress for one lesson session."""

    score: int = 0
    current_streak: int = 0
    highest_streak: int = 0
    posts_completed: tuple[str, ...] = field(default_factory=tuple)
    hints_used: tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_default(self) -> bool:
        return self == DEFAULT_STATE

    @property
    def completed_count(self) -> int:
        return len(self.posts_completed)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            FIELD_SCORE: self.score,
            FIELD_CURRENT_STREAK: self.current_streak,
            FIELD_HIGHEST_STREAK: self.highest_streak,
            FIELD_POSTS_COMPLETED: list(self.posts_completed),
            FIELD_HINTS_USED: list(self.hints_used),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SessionState:
        """
        Create from a deserialized dictionary.

        Missing fields take their defaults and unknown fields are ignored.

        Raises:
            TypeError: a field has the wrong type
            ValueError: a counter is negative or highestStreak < currentStreak
        """
        if not isinstance(data, dict):
            raise TypeError(f"Expected an object, got {type(data).__name__}")

        state = cls(
            score=_read_count(data, FIELD_SCORE),
            current_streak=_read_count(data, FIELD_CURRENT_STREAK),
            highest_streak=_read_count(data, FIELD_HIGHEST_STREAK),
            posts_completed=_read_ids(data, FIELD_POSTS_COMPLETED),
            hints_used=_read_ids(data, FIELD_HINTS_USED),
        )
        if state.highest_streak < state.current_streak:
            raise ValueError(
                f"{FIELD_HIGHEST_STREAK} ({state.highest_streak}) is below "
                f"{FIELD_CURRENT_STREAK} ({state.current_streak})"
            )
        return state


DEFAULT_STATE = SessionState()


def _read_count(data: dict[str, Any], key: str) -> int:
    value = data.get(key, 0)
    # bool is an int subclass; a stored true/false is not a counter
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{key} must be an integer, got {value!r}")
    if value < 0:
        raise ValueError(f"{key} must be non-negative, got {value}")
    return value


def _read_ids(data: dict[str, Any], key: str) -> tuple[str, ...]:
    value = data.get(key, [])
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise TypeError(f"{key} must be a list of strings")
    return tuple(value)


# =============================================================================
# Transitions
# =============================================================================


def add_points(state: SessionState, points: int) -> SessionState:
    """score += points"""
    return replace(state, score=state.score + points)


def record_streak(state: SessionState, correct: bool) -> SessionState:
    """Extend the streak on a correct answer, zero it otherwise."""
    current = state.current_streak + 1 if correct else 0
    return replace(
        state,
        current_streak=current,
        highest_streak=max(state.highest_streak, current),
    )


def complete_post(state: SessionState, post_id: str) -> SessionState:
    """Append post_id to posts_completed unless it is already there."""
    if post_id in state.posts_completed:
        logger.debug(f"Post {post_id} already completed, not appending again")
        return state
    return replace(state, posts_completed=state.posts_completed + (post_id,))


def use_hint(state: SessionState, post_id: str) -> SessionState:
    """Append post_id to hints_used. Callers check membership first."""
    return replace(state, hints_used=state.hints_used + (post_id,))
