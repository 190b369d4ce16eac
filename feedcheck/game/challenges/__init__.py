"""
Challenge modes for Feedcheck lessons.

Each mode (yes/no, technique identification) has its own module with:
- choices(): The answers the learner can pick from
- parse(): Turn raw input into an answer value
- correct_answer(): The post's ground-truth label for this mode
- prompt() / hint_text(): Question and hint wording
"""

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .base import ChallengeHandler


class ChallengeMode(str, Enum):
    """Supported challenge modes."""
    BINARY = "binary"
    TECHNIQUE = "technique"


class WrongAnswerPolicy(str, Enum):
    """What happens to a post after a wrong answer."""
    RETRY = "retry"  # stays open
    COMPLETE = "complete"  # closed with 0 points


# Handler registry - populated by @register decorator
HANDLERS: dict[ChallengeMode, "ChallengeHandler"] = {}


def register(mode: ChallengeMode):
    """Decorator to register a challenge handler."""
    def decorator(cls):
        HANDLERS[mode] = cls()
        return cls
    return decorator


def get_handler(mode: "str | ChallengeMode") -> "ChallengeHandler":
    """
    Get the handler for a challenge mode.

    Raises:
        ValueError: Unknown mode
    """
    if isinstance(mode, str):
        mode = ChallengeMode(mode.lower())
    return HANDLERS[mode]


# Import handlers to trigger registration
from . import binary  # noqa: E402
from . import technique  # noqa: E402

__all__ = [
    "ChallengeMode",
    "WrongAnswerPolicy",
    "HANDLERS",
    "get_handler",
    "register",
]
