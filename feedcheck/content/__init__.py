"""
Lesson and post content.

Components:
- models: Lesson, Post, Media, Metrics and the Technique tags
- catalog: LessonCatalog JSON loader
"""

from .catalog import LessonCatalog, PostLoad
from .models import TECHNIQUE_LABELS, Lesson, Media, Metrics, Post, Technique

__all__ = [
    "LessonCatalog",
    "PostLoad",
    "Lesson",
    "Post",
    "Media",
    "Metrics",
    "Technique",
    "TECHNIQUE_LABELS",
]
