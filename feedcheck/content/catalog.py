"""
Lesson Catalog: loads lessons and their posts from JSON.

Layout under the data directory:
    lessons.json             [{"id", "title", "description", "youtubeUrl"?}, ...]
    posts/<lesson_id>.json   {"posts": [...]} or a bare list of posts

Lessons that cannot be found raise LessonNotFoundError. Posts that cannot
be loaded are reported as a message next to an empty list, so a session
can still render.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path

from loguru import logger

from feedcheck.errors import LessonNotFoundError

from .models import Lesson, Post


@dataclass
class PostLoad:
    """Posts for one lesson, with a user-facing error when loading failed."""

    posts: list[Post] = field(default_factory=list)
    error: str | None = None
    skipped: int = 0

    @property
    def ok(self) -> bool:
        return self.error is None


class LessonCatalog:
    """
    Read-only access to the lesson and post datasets.

    Lessons are read once and cached; posts are read per call.
    """

    LESSONS_FILE = "lessons.json"
    POSTS_DIR = "posts"

    def __init__(self, data_dir: Path):
        self.data_dir = Path(data_dir)
        self._lessons: dict[str, Lesson] | None = None

    def lessons(self) -> list[Lesson]:
        """All lessons in file order."""
        return list(self._load_lessons().values())

    def get_lesson(self, lesson_id: str) -> Lesson:
        """
        Look up a lesson by id.

        Raises:
            LessonNotFoundError: No lesson with that id
        """
        lesson = self._load_lessons().get(lesson_id)
        if lesson is None:
            raise LessonNotFoundError(lesson_id)
        return lesson

    def load_posts(self, lesson: Lesson) -> PostLoad:
        """Load the posts for a lesson. Never raises for missing or bad data."""
        path = self.data_dir / self.POSTS_DIR / f"{lesson.id}.json"
        failed = PostLoad(error=f'Posts for lesson "{lesson.title}" could not be loaded.')

        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            logger.info(f"No posts file for lesson {lesson.id} at {path}")
            return failed
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Failed to load posts for lesson {lesson.id}: {e}")
            return failed

        entries = data.get("posts") if isinstance(data, dict) else data
        if not isinstance(entries, list):
            logger.error(f"No post list in {path}")
            return failed

        result = PostLoad()
        seen: set[str] = set()
        for entry in entries:
            try:
                post = Post.from_dict(entry)
            except (KeyError, TypeError, ValueError, AttributeError) as e:
                logger.warning(f"Invalid post in {path.name}: {e}")
                result.skipped += 1
                continue
            if post.id in seen:
                logger.warning(f"Duplicate post id {post.id} in {path.name}, skipping")
                result.skipped += 1
                continue
            seen.add(post.id)
            result.posts.append(post)

        logger.debug(f"Loaded {len(result.posts)} posts for {lesson.id} ({result.skipped} skipped)")
        return result

    def _load_lessons(self) -> dict[str, Lesson]:
        if self._lessons is not None:
            return self._lessons

        path = self.data_dir / self.LESSONS_FILE
        self._lessons = {}
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Failed to load {path}: {e}")
            return self._lessons

        entries = data.get("lessons", []) if isinstance(data, dict) else data
        if not isinstance(entries, list):
            logger.error(f"No lesson list in {path}")
            return self._lessons

        for entry in entries:
            try:
                lesson = Lesson.from_dict(entry)
            except (KeyError, TypeError, AttributeError) as e:
                logger.warning(f"Invalid lesson in {path.name}: {e}")
                continue
            self._lessons[lesson.id] = lesson

        logger.info(f"LessonCatalog loaded {len(self._lessons)} lessons from {path}")
        return self._lessons
