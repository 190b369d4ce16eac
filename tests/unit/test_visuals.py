"""
Unit tests for the feed formatting helpers and renderables.

Run: pytest tests/unit/test_visuals.py -v
"""

from datetime import datetime, timezone

import pytest
from rich.console import Console

from feedcheck.delivery import visuals as ui
from feedcheck.game import LessonRound
from feedcheck.game.state import SessionState


def render(renderable) -> str:
    console = Console(width=100, record=True, color_system=None)
    console.print(renderable)
    return console.export_text()


class TestFormatNumber:

    @pytest.mark.parametrize("num,expected", [
        (0, "0"),
        (999, "999"),
        (1000, "1.0K"),
        (12400, "12.4K"),
        (999_999, "1000.0K"),
        (1_000_000, "1.0M"),
        (1_520_000, "1.5M"),
    ])
    def test_format_number(self, num, expected):
        assert ui.format_number(num) == expected


class TestFormatTimestamp:

    NOW = datetime(2024, 3, 3, 12, 0, tzinfo=timezone.utc)

    def test_hours_within_a_day(self):
        assert ui.format_timestamp("2024-03-03T08:15:00Z", now=self.NOW) == "3h"

    def test_just_now(self):
        assert ui.format_timestamp("2024-03-03T11:59:00Z", now=self.NOW) == "0h"

    def test_future_clamped(self):
        assert ui.format_timestamp("2024-03-03T18:00:00Z", now=self.NOW) == "0h"

    def test_older_shows_date(self):
        assert ui.format_timestamp("2024-02-26T21:45:00Z", now=self.NOW) == "Feb 26"

    def test_naive_timestamp(self):
        assert ui.format_timestamp("2024-03-03T10:00:00", now=datetime(2024, 3, 3, 12, 0)) == "2h"

    def test_unparseable_returned_unchanged(self):
        assert ui.format_timestamp("yesterday") == "yesterday"


class TestRenderables:

    def test_post_panel(self, sample_posts):
        text = render(ui.render_post_panel(sample_posts[0], 1, 3))
        assert "@news" in text
        assert "Flooded streets downtown!" in text
        assert "Post 1/3" in text
        assert "12.4K" in text
        assert "https://example.org/flood.jpg" in text

    def test_scoreboard(self):
        text = render(ui.render_scoreboard(SessionState(score=250, current_streak=2), 2, 5))
        assert "Score: 250" in text
        assert "Streak: 2" in text
        assert "2 of 5 completed" in text

    def test_question_shows_points_on_offer(self, sample_lesson, sample_posts, store):
        round_ = LessonRound(sample_lesson, sample_posts, store)
        round_.request_hint(sample_posts[0])
        text = render(
            ui.render_question(
                round_.handler.prompt(sample_posts[0], sample_lesson),
                round_.handler.choices(),
                hint_available=False,
                points=round_.potential_points(sample_posts[0]),
            )
        )
        assert "worth 50 points" in text
        assert "[y]" in text
        assert "[h]" not in text

    def test_result_panels(self, sample_lesson, sample_posts, store):
        round_ = LessonRound(sample_lesson, sample_posts, store, on_wrong="complete")
        correct = round_.answer(sample_posts[0], True)
        wrong = round_.answer(sample_posts[1], True)
        assert "+100 points" in render(ui.render_result_panel(correct, round_.handler, retry=False))
        assert "The answer was No" in render(ui.render_result_panel(wrong, round_.handler, retry=False))

    def test_summary_panel(self, sample_lesson, sample_posts, store):
        round_ = LessonRound(sample_lesson, sample_posts, store)
        for post in sample_posts:
            round_.answer(post, post.is_example)
        text = render(ui.render_summary_panel(round_.summary()))
        assert "Lesson Complete!" in text
        assert "Final Score" in text
        assert "450" in text
