"""
Exception types for Feedcheck.
"""

from __future__ import annotations


class FeedcheckError(Exception):
    """Base class for recoverable Feedcheck errors."""


class LessonNotFoundError(FeedcheckError):
    """Raised when a lesson id is not in the catalog."""

    def __init__(self, lesson_id: str):
        super().__init__(f"Lesson '{lesson_id}' not found")
        self.lesson_id = lesson_id


class PostAlreadyCompletedError(FeedcheckError):
    """Raised when answering a post that is already marked complete."""

    def __init__(self, post_id: str):
        super().__init__(f"Post '{post_id}' is already completed")
        self.post_id = post_id


class SessionNotLoadedError(RuntimeError):
    """
    Raised when a GameStore is used before load().

    This is a programming error, not a runtime condition: callers must
    bind a session key before reading or mutating state.
    """
