"""
Pytest Configuration and Fixtures.

This file configures pytest and provides shared fixtures for all tests.
"""
import json
import sys
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from feedcheck.content import Lesson, Post  # noqa: E402
from feedcheck.game import GameStatePersistence, GameStore  # noqa: E402
from feedcheck.storage import MemoryStorage  # noqa: E402


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "smoke: Smoke tests for CLI commands")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "smoke" in str(item.fspath):
            item.add_marker(pytest.mark.smoke)


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def memory_storage():
    """Empty in-memory key-value store."""
    return MemoryStorage()


@pytest.fixture
def persistence(memory_storage):
    return GameStatePersistence(memory_storage)


@pytest.fixture
def store(persistence):
    """GameStore bound to the 'test-lesson' session."""
    game_store = GameStore(persistence)
    game_store.load_lesson("test-lesson")
    return game_store


@pytest.fixture
def sample_lesson_data():
    return {
        "id": "test-lesson",
        "title": "Misleading Context",
        "description": "Real content, wrong framing.",
        "youtubeUrl": "https://www.youtube.com/watch?v=abc123",
    }


@pytest.fixture
def sample_posts_data():
    return [
        {
            "id": "p1",
            "author": "@news",
            "content": "Flooded streets downtown!",
            "timestamp": "2024-03-03T08:15:00Z",
            "media": {"type": "image", "url": "https://example.org/flood.jpg"},
            "isExample": True,
            "technique": "misleading_context",
            "metrics": {"likes": 12400, "retweets": 5300, "comments": 871},
        },
        {
            "id": "p2",
            "author": "@weather",
            "content": "Heavy rain expected through Thursday.",
            "timestamp": "2024-03-03T09:40:00Z",
            "isExample": False,
            "technique": "none",
            "metrics": {"likes": 842, "retweets": 211, "comments": 37},
        },
        {
            "id": "p3",
            "author": "@buzz",
            "content": "Actor SPOTTED at secret meeting.",
            "timestamp": "2024-03-02T21:45:00Z",
            "isExample": True,
            "technique": "false_connection",
            "metrics": {"likes": 1520000, "retweets": 230000, "comments": 48000},
        },
    ]


@pytest.fixture
def sample_lesson(sample_lesson_data):
    return Lesson.from_dict(sample_lesson_data)


@pytest.fixture
def sample_posts(sample_posts_data):
    return [Post.from_dict(p) for p in sample_posts_data]


@pytest.fixture
def data_dir(tmp_path, sample_lesson_data, sample_posts_data):
    """Dataset directory with one playable lesson and one lesson without posts."""
    root = tmp_path / "data"
    (root / "posts").mkdir(parents=True)
    lessons = [
        sample_lesson_data,
        {"id": "empty-lesson", "title": "Fabricated Content", "description": "No posts yet."},
    ]
    (root / "lessons.json").write_text(json.dumps(lessons), encoding="utf-8")
    (root / "posts" / "test-lesson.json").write_text(
        json.dumps({"posts": sample_posts_data}), encoding="utf-8"
    )
    return root
