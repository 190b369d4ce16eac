"""
Game state persistence.

Serializes SessionState to JSON and stores it in a KeyValueStorage under a
per-lesson key ("gameState-<lesson_id>"). Reading never raises for bad
content: a missing, unparseable or invalid entry reads as "not found".
"""

from __future__ import annotations

import json

from loguru import logger

from feedcheck.game.state import SessionState

from feedcheck.storage import KeyValueStorage

DEFAULT_KEY_PREFIX = "gameState-"


def storage_key(lesson_id: str, prefix: str = DEFAULT_KEY_PREFIX) -> str:
    """Derive the storage key for a lesson."""
    return f"{prefix}{lesson_id}"


class GameStatePersistence:
    """Reads and writes SessionState blobs through an injected storage backend."""

    def __init__(self, storage: KeyValueStorage):
        self.storage = storage

    def save(self, key: str, state: SessionState) -> None:
        """Serialize state and write it under key."""
        self.storage.set(key, json.dumps(state.to_dict()))

    def read(self, key: str) -> SessionState | None:
        """
        Read the state stored under key.

        Returns:
            SessionState, or None if absent or corrupt
        """
        raw = self.storage.get(key)
        if raw is None:
            return None

        try:
            data = json.loads(raw)
            return SessionState.from_dict(data)
        except (json.JSONDecodeError, TypeError, ValueError, RecursionError) as e:
            logger.warning(f"Ignoring corrupt game state under {key}: {e}")
            return None

    def exists(self, key: str) -> bool:
        return self.storage.get(key) is not None

    def delete(self, key: str) -> bool:
        return self.storage.delete(key)
