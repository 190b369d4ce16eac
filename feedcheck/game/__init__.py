"""
Feedcheck game core.

Components:
- state: Immutable SessionState and its transitions
- scoring: Pure challenge evaluator
- persistence: JSON codec over a key-value store, keyed per lesson
- store: GameStore, the per-lesson session state store
- challenges: Yes/no and technique challenge modes
- round: LessonRound play flow
"""

from .scoring import DEFAULT_RULES, Evaluation, ScoringRules, evaluate
from .state import DEFAULT_STATE, SessionState
from .persistence import GameStatePersistence, storage_key
from .store import GameStore
from .challenges import ChallengeMode, WrongAnswerPolicy, get_handler
from .round import AnswerOutcome, LessonRound, RoundSummary

__all__ = [
    "SessionState",
    "DEFAULT_STATE",
    "ScoringRules",
    "DEFAULT_RULES",
    "Evaluation",
    "evaluate",
    "GameStatePersistence",
    "storage_key",
    "GameStore",
    "ChallengeMode",
    "WrongAnswerPolicy",
    "get_handler",
    "LessonRound",
    "AnswerOutcome",
    "RoundSummary",
]
