"""
Local key-value storage backends.

The persistence layer only needs a string-to-string store. Two backends:
- FileStorage: one file per key under a directory (default ~/.feedcheck/storage)
- MemoryStorage: dict-backed, for tests and throwaway sessions
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Protocol
from urllib.parse import quote, unquote

from loguru import logger


class KeyValueStorage(Protocol):
    """Protocol for a local string key-value store."""

    def get(self, key: str) -> str | None:
        """Return the stored value or None if the key is absent."""
        ...

    def set(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""
        ...

    def delete(self, key: str) -> bool:
        """Remove key. Returns True if something was removed."""
        ...

    def keys(self) -> list[str]:
        """List stored keys."""
        ...


class MemoryStorage:
    """In-memory storage. Nothing survives the process."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> bool:
        return self._data.pop(key, None) is not None

    def keys(self) -> list[str]:
        return sorted(self._data)

    def __contains__(self, key: str) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)


class FileStorage:
    """
    Directory-backed storage.

    Each key is stored as {quoted key}.json. Keys are percent-encoded so any
    string is a valid key and keys() can recover the original. Writes go
    through a temporary file and os.replace so a crash never leaves a
    half-written value behind.
    """

    SUFFIX = ".json"

    def __init__(self, root: Path):
        self.root = Path(root)
        self.root.mkdir(parents=True, exist_ok=True)

    def _path(self, key: str) -> Path:
        return self.root / f"{quote(key, safe='')}{self.SUFFIX}"

    def get(self, key: str) -> str | None:
        path = self._path(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not read storage entry {path}: {e}")
            return None

    def set(self, key: str, value: str) -> None:
        path = self._path(key)
        fd, tmp_name = tempfile.mkstemp(dir=self.root, prefix=".tmp-", suffix=self.SUFFIX)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(value)
            os.replace(tmp_name, path)
        except OSError:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise
        logger.debug(f"Wrote storage entry {key} -> {path}")

    def delete(self, key: str) -> bool:
        path = self._path(key)
        if path.exists():
            path.unlink()
            return True
        return False

    def keys(self) -> list[str]:
        return sorted(
            unquote(p.name[: -len(self.SUFFIX)])
            for p in self.root.glob(f"*{self.SUFFIX}")
            if not p.name.startswith(".tmp-")
        )
