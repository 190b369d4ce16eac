"""
Unit tests for SessionState and its transitions.

Run: pytest tests/unit/test_session_state.py -v
"""

import random

import pytest

from feedcheck.game.state import (
    DEFAULT_STATE,
    SessionState,
    add_points,
    complete_post,
    record_streak,
    use_hint,
)


class TestTransitions:
    """Transitions return new values and leave the input untouched."""

    def test_add_points(self):
        state = add_points(DEFAULT_STATE, 150)
        assert state.score == 150
        assert DEFAULT_STATE.score == 0

    def test_record_streak_correct_extends(self):
        state = record_streak(record_streak(DEFAULT_STATE, True), True)
        assert state.current_streak == 2
        assert state.highest_streak == 2

    def test_record_streak_wrong_resets_but_keeps_highest(self):
        state = SessionState(current_streak=4, highest_streak=4)
        state = record_streak(state, False)
        assert state.current_streak == 0
        assert state.highest_streak == 4

    def test_highest_streak_tracks_longest_run(self):
        rng = random.Random(7)
        state = DEFAULT_STATE
        run = longest = 0
        for _ in range(200):
            correct = rng.random() < 0.6
            run = run + 1 if correct else 0
            longest = max(longest, run)
            state = record_streak(state, correct)
            assert state.current_streak == run
            assert state.highest_streak == longest
            assert state.highest_streak >= state.current_streak

    def test_complete_post_appends(self):
        state = complete_post(complete_post(DEFAULT_STATE, "p1"), "p2")
        assert state.posts_completed == ("p1", "p2")

    def test_complete_post_ignores_duplicate(self):
        state = complete_post(DEFAULT_STATE, "p1")
        assert complete_post(state, "p1") is state

    def test_use_hint_appends(self):
        state = use_hint(DEFAULT_STATE, "p1")
        assert state.hints_used == ("p1",)
        assert DEFAULT_STATE.hints_used == ()


class TestSerialization:
    """Test to_dict / from_dict."""

    def test_to_dict_uses_stored_field_names(self):
        state = SessionState(3, 1, 2, ("a",), ("b",))
        assert state.to_dict() == {
            "score": 3,
            "currentStreak": 1,
            "highestStreak": 2,
            "postsCompleted": ["a"],
            "hintsUsed": ["b"],
        }

    def test_round_trip(self):
        state = SessionState(450, 2, 5, ("p1", "p2"), ("p2",))
        assert SessionState.from_dict(state.to_dict()) == state

    def test_missing_fields_default(self):
        assert SessionState.from_dict({"score": 10}) == SessionState(score=10)

    def test_unknown_fields_ignored(self):
        assert SessionState.from_dict({"score": 1, "theme": "dark"}).score == 1

    @pytest.mark.parametrize(
        "data",
        [
            {"score": "100"},
            {"score": True},
            {"score": -5},
            {"currentStreak": 1.5},
            {"postsCompleted": "p1"},
            {"hintsUsed": [1, 2]},
            {"currentStreak": 3, "highestStreak": 1},
        ],
    )
    def test_invalid_data_raises(self, data):
        with pytest.raises((TypeError, ValueError)):
            SessionState.from_dict(data)

    def test_non_object_raises(self):
        with pytest.raises(TypeError):
            SessionState.from_dict(["not", "a", "dict"])

    def test_default_state(self):
        assert SessionState().is_default
        assert not SessionState(score=1).is_default
