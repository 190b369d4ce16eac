"""
Session state store.

GameStore owns the SessionState of one lesson session. It loads the saved
state on start, applies every change through the pure transitions in
state.py and writes the result back through GameStatePersistence.

Write policy: after a change the state is saved if an entry already exists
for the key or the new state differs from the default. A lesson that was
opened but never played leaves no entry behind.
"""

from __future__ import annotations

from collections.abc import Callable

from loguru import logger

from feedcheck.errors import SessionNotLoadedError

from . import state as transitions
from .persistence import DEFAULT_KEY_PREFIX, GameStatePersistence, storage_key
from .state import DEFAULT_STATE, SessionState


class GameStore:
    """
    Holds and persists the state of one lesson session.

    Usage:
        store = GameStore(GameStatePersistence(FileStorage(path)))
        store.load_lesson("bias")
        store.update_score(100)
        store.update_streak(True)
        store.mark_post_complete("post-1")
    """

    def __init__(
        self,
        persistence: GameStatePersistence,
        key_prefix: str = DEFAULT_KEY_PREFIX,
    ):
        self.persistence = persistence
        self.key_prefix = key_prefix
        self._session_key: str | None = None
        self._state: SessionState = DEFAULT_STATE

    # =========================================================================
    # Session binding
    # =========================================================================

    @property
    def session_key(self) -> str:
        if self._session_key is None:
            raise SessionNotLoadedError("GameStore used before load()")
        return self._session_key

    @property
    def state(self) -> SessionState:
        """Read-only snapshot of the current state."""
        if self._session_key is None:
            raise SessionNotLoadedError("GameStore used before load()")
        return self._state

    def load(self, session_key: str) -> SessionState:
        """
        Bind to session_key and load its saved state.

        Absent or corrupt entries give the default state. Loading never writes.
        """
        saved = self.persistence.read(session_key)
        self._session_key = session_key
        self._state = saved if saved is not None else DEFAULT_STATE
        logger.debug(
            f"Loaded {session_key}: score={self._state.score}, "
            f"completed={self._state.completed_count}, saved={saved is not None}"
        )
        return self._state

    def load_lesson(self, lesson_id: str) -> SessionState:
        """Load the session for a lesson, deriving the key from its id."""
        return self.load(storage_key(lesson_id, self.key_prefix))

    # =========================================================================
    # Mutations
    # =========================================================================

    def update_score(self, points: int) -> SessionState:
        return self._apply(lambda s: transitions.add_points(s, points))

    def update_streak(self, correct: bool) -> SessionState:
        return self._apply(lambda s: transitions.record_streak(s, correct))

    def mark_post_complete(self, post_id: str) -> SessionState:
        return self._apply(lambda s: transitions.complete_post(s, post_id))

    def add_hint(self, post_id: str) -> SessionState:
        """Record a hint for post_id. Check has_used_hint() first."""
        return self._apply(lambda s: transitions.use_hint(s, post_id))

    def reset(self, session_key: str | None = None, clear_storage: bool = False) -> SessionState:
        """
        Restore the default state.

        Args:
            session_key: Rebind to this key first (defaults to the current one)
            clear_storage: Delete the saved entry instead of overwriting it
                with the default state
        """
        if session_key is not None:
            self._session_key = session_key
        key = self.session_key

        self._state = DEFAULT_STATE
        if clear_storage:
            self.persistence.delete(key)
            logger.info(f"Reset {key} and cleared saved state")
        else:
            self._persist()
            logger.info(f"Reset {key}")
        return self._state

    # =========================================================================
    # Queries
    # =========================================================================

    def is_completed(self, post_id: str) -> bool:
        return post_id in self.state.posts_completed

    def has_used_hint(self, post_id: str) -> bool:
        return post_id in self.state.hints_used

    # =========================================================================
    # Internals
    # =========================================================================

    def _apply(self, transition: Callable[[SessionState], SessionState]) -> SessionState:
        new_state = transition(self.state)
        if new_state != self._state:
            self._state = new_state
            self._persist()
        return self._state

    def _persist(self) -> None:
        key = self.session_key
        if self.persistence.exists(key) or not self._state.is_default:
            self.persistence.save(key, self._state)
