"""
Unit tests for the challenge mode handlers.

Run: pytest tests/unit/test_challenges.py -v
"""

import pytest

from feedcheck.content import Technique
from feedcheck.game.challenges import HANDLERS, ChallengeMode, get_handler


class TestRegistry:

    def test_all_modes_registered(self):
        assert set(HANDLERS) == set(ChallengeMode)

    def test_lookup_by_string(self):
        assert get_handler("BINARY") is HANDLERS[ChallengeMode.BINARY]

    def test_unknown_mode(self):
        with pytest.raises(ValueError):
            get_handler("essay")


class TestBinaryHandler:

    @pytest.fixture
    def handler(self):
        return get_handler(ChallengeMode.BINARY)

    @pytest.mark.parametrize("raw,expected", [
        ("y", True), ("YES", True), (" t ", True), ("true", True),
        ("n", False), ("No", False), ("f", False), ("false", False),
        ("maybe", None), ("", None),
    ])
    def test_parse(self, handler, raw, expected):
        assert handler.parse(raw) is expected

    def test_correct_answer_and_validate(self, handler, sample_posts):
        assert handler.correct_answer(sample_posts[0]) is True
        assert handler.correct_answer(sample_posts[1]) is False
        assert all(handler.validate(p) for p in sample_posts)

    def test_prompt_mentions_lesson(self, handler, sample_posts, sample_lesson):
        assert "Misleading Context" in handler.prompt(sample_posts[0], sample_lesson)

    def test_describe(self, handler):
        assert handler.describe(True) == "Yes"
        assert handler.describe(False) == "No"


class TestTechniqueHandler:

    @pytest.fixture
    def handler(self):
        return get_handler(ChallengeMode.TECHNIQUE)

    def test_choices_cover_all_techniques(self, handler):
        choices = handler.choices()
        assert [c.key for c in choices] == ["1", "2", "3", "4", "5"]
        assert [c.value for c in choices] == list(Technique)

    @pytest.mark.parametrize("raw,expected", [
        ("1", Technique.MISLEADING_CONTEXT),
        ("manipulated_media", Technique.MANIPULATED_MEDIA),
        ("False Connection", Technique.FALSE_CONNECTION),
        ("4", Technique.FABRICATED_CONTENT),
        ("none", Technique.NONE),
        ("9", None),
        ("", None),
    ])
    def test_parse(self, handler, raw, expected):
        assert handler.parse(raw) is expected

    def test_correct_answer(self, handler, sample_posts):
        assert handler.correct_answer(sample_posts[2]) is Technique.FALSE_CONNECTION

    def test_describe(self, handler):
        assert handler.describe(Technique.MANIPULATED_MEDIA) == "Manipulated Media"
