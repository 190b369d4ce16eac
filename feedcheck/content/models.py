"""
Lesson and post models.

Loaded from the static JSON datasets. Field names in the JSON follow the
dataset layout (youtubeUrl, isExample); the Python attributes are snake_case.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Technique(str, Enum):
    """Manipulation techniques a post can be labelled with."""

    MISLEADING_CONTEXT = "misleading_context"
    MANIPULATED_MEDIA = "manipulated_media"
    FALSE_CONNECTION = "false_connection"
    FABRICATED_CONTENT = "fabricated_content"
    NONE = "none"

    @property
    def label(self) -> str:
        return TECHNIQUE_LABELS[self]


TECHNIQUE_LABELS = {
    Technique.MISLEADING_CONTEXT: "Misleading Context",
    Technique.MANIPULATED_MEDIA: "Manipulated Media",
    Technique.FALSE_CONNECTION: "False Connection",
    Technique.FABRICATED_CONTENT: "Fabricated Content",
    Technique.NONE: "None",
}


@dataclass(frozen=True)
class Media:
    """Image or video attached to a post."""

    type: str  # "image" | "video"
    url: str

    @classmethod
    def from_dict(cls, data: dict) -> Media:
        media_type = data["type"]
        if media_type not in ("image", "video"):
            raise ValueError(f"Unknown media type: {media_type!r}")
        return cls(type=media_type, url=data["url"])


@dataclass(frozen=True)
class Metrics:
    """Engagement counts. Display only, never used in scoring."""

    likes: int = 0
    retweets: int = 0
    comments: int = 0

    @classmethod
    def from_dict(cls, data: dict) -> Metrics:
        return cls(
            likes=int(data.get("likes", 0)),
            retweets=int(data.get("retweets", 0)),
            comments=int(data.get("comments", 0)),
        )


@dataclass(frozen=True)
class Post:
    """
    A simulated social-media post to classify.

    A post carries the label for at least one challenge mode: is_example
    for yes/no questions, technique for technique identification.
    """

    id: str
    author: str
    content: str
    timestamp: str  # ISO-8601
    is_example: bool | None = None
    technique: Technique | None = None
    media: Media | None = None
    metrics: Metrics = field(default_factory=Metrics)

    @classmethod
    def from_dict(cls, data: dict) -> Post:
        """
        Create a Post from a dataset entry.

        Raises:
            KeyError: a required field is missing
            TypeError: isExample is present but not a boolean
            ValueError: media type or technique tag is unknown
        """
        is_example = data.get("isExample", data.get("is_example"))
        if is_example is not None and not isinstance(is_example, bool):
            raise TypeError(f"isExample must be true or false, got {is_example!r}")
        technique = data.get("technique")
        media = data.get("media")

        return cls(
            id=str(data["id"]),
            author=data["author"],
            content=data["content"],
            timestamp=data["timestamp"],
            is_example=is_example,
            technique=Technique(technique) if technique else None,
            media=Media.from_dict(media) if media else None,
            metrics=Metrics.from_dict(data.get("metrics") or {}),
        )


@dataclass(frozen=True)
class Lesson:
    """A lesson: concept title, description and optional intro video."""

    id: str
    title: str
    description: str
    youtube_url: str | None = None

    @property
    def has_video(self) -> bool:
        return bool(self.youtube_url)

    @classmethod
    def from_dict(cls, data: dict) -> Lesson:
        return cls(
            id=str(data["id"]),
            title=data["title"],
            description=data.get("description", ""),
            youtube_url=data.get("youtubeUrl") or data.get("youtube_url") or None,
        )
