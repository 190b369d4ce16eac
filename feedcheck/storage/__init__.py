"""
Local key-value storage for Feedcheck.

A string-to-string store with two backends: FileStorage persists one file
per key, MemoryStorage keeps everything in a dict.
"""

from .kv import FileStorage, KeyValueStorage, MemoryStorage

__all__ = [
    "KeyValueStorage",
    "FileStorage",
    "MemoryStorage",
]
