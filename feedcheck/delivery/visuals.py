"""
Feedcheck Visual Components.

Rich renderables for the feed, the challenge prompt, feedback and the
lesson summary. Functions build and return renderables; the CLI prints them.
"""

from __future__ import annotations

from datetime import datetime, timezone

from rich import box
from rich.console import Group
from rich.panel import Panel
from rich.style import Style
from rich.table import Table
from rich.text import Text

from feedcheck.content.models import Lesson, Post
from feedcheck.game.challenges.base import ChallengeHandler, Choice
from feedcheck.game.round import AnswerOutcome, RoundSummary
from feedcheck.game.state import SessionState

# =============================================================================
# COLOR THEME
# =============================================================================

FEED_THEME = {
    "primary": "#1DA1F2",  # feed blue
    "success": "#17BF63",
    "warning": "#FFAD1F",
    "error": "#E0245E",
    "dim": "#8899A6",
}

STYLES = {
    "primary": Style(color=FEED_THEME["primary"], bold=True),
    "success": Style(color=FEED_THEME["success"], bold=True),
    "warning": Style(color=FEED_THEME["warning"], bold=True),
    "error": Style(color=FEED_THEME["error"], bold=True),
    "dim": Style(color=FEED_THEME["dim"]),
}


# =============================================================================
# Formatting
# =============================================================================


def format_number(num: int) -> str:
    """Compact engagement count: 950, 1.2K, 3.4M."""
    if num >= 1_000_000:
        return f"{num / 1_000_000:.1f}M"
    if num >= 1_000:
        return f"{num / 1_000:.1f}K"
    return str(num)


def format_timestamp(timestamp: str, now: datetime | None = None) -> str:
    """
    Feed-style relative time.

    Less than a day old renders as hours ("5h"), older as "Mar 3".
    Unparseable timestamps are returned unchanged.
    """
    try:
        posted = datetime.fromisoformat(timestamp.replace("Z", "+00:00"))
    except ValueError:
        return timestamp

    if now is None:
        now = datetime.now(timezone.utc) if posted.tzinfo else datetime.now()
    elif (now.tzinfo is None) != (posted.tzinfo is None):
        now = now.replace(tzinfo=posted.tzinfo)

    hours = int((now - posted).total_seconds() // 3600)
    if hours < 24:
        return f"{max(0, hours)}h"
    return f"{posted:%b} {posted.day}"


# =============================================================================
# Feed
# =============================================================================


def render_post_panel(post: Post, index: int, total: int, completed: bool = False) -> Panel:
    """Render a post the way a feed card looks."""
    header = Text()
    header.append(post.author, style="bold")
    header.append(f" · {format_timestamp(post.timestamp)}", style=STYLES["dim"])

    body = Text(post.content)

    parts: list = [header, Text(), body]
    if post.media:
        icon = "🖼" if post.media.type == "image" else "🎞"
        parts.append(Text(f"\n{icon}  {post.media.type}: {post.media.url}", style=STYLES["dim"]))

    metrics = post.metrics
    parts.append(
        Text(
            f"\n💬 {format_number(metrics.comments)}   "
            f"🔁 {format_number(metrics.retweets)}   "
            f"♥ {format_number(metrics.likes)}",
            style=STYLES["dim"],
        )
    )

    title = f"Post {index}/{total}"
    if completed:
        title += "  [green]✓ completed[/green]"

    return Panel(
        Group(*parts),
        title=title,
        title_align="left",
        border_style=FEED_THEME["dim"] if completed else FEED_THEME["primary"],
        box=box.ROUNDED,
        padding=(1, 2),
    )


def render_scoreboard(state: SessionState, completed: int, total: int) -> Text:
    """Sticky header line: score, streak, progress."""
    text = Text()
    text.append(f"Score: {state.score}", style="bold")
    text.append("   Streak: ", style="bold")
    text.append(str(state.current_streak), style=STYLES["dim"])
    text.append(f"   {completed} of {total} completed", style=STYLES["dim"])
    return text


def render_question(
    prompt: str,
    choices: list[Choice],
    hint_available: bool,
    points: int | None = None,
) -> Text:
    """Question line plus the accepted inputs."""
    text = Text()
    text.append(prompt, style="bold")
    if points is not None:
        text.append(f"  (worth {points} points)", style=STYLES["dim"])
    text.append("\n")
    for choice in choices:
        text.append(f"  [{choice.key}] ", style=STYLES["primary"])
        text.append(f"{choice.label}\n")
    if hint_available:
        text.append("  [h] ", style=STYLES["primary"])
        text.append("Need a hint? (-50% points)\n", style=STYLES["dim"])
    text.append("  [s] skip   [q] save and quit", style=STYLES["dim"])
    return text


def render_hint_panel(hint: str) -> Panel:
    """Render a revealed hint."""
    return Panel(
        Text(f"💡 Hint: {hint}", style=Style(color=FEED_THEME["warning"], italic=True)),
        border_style=Style(color=FEED_THEME["warning"]),
        box=box.ROUNDED,
        padding=(0, 1),
    )


def render_result_panel(outcome: AnswerOutcome, handler: ChallengeHandler, retry: bool) -> Panel:
    """Feedback after an answer."""
    if outcome.is_correct:
        text = Text(f"✓ Correct! +{outcome.points} points", style=STYLES["success"])
        border = FEED_THEME["success"]
    else:
        text = Text("✗ Incorrect.", style=STYLES["error"])
        if retry:
            text.append(" Try again!", style=STYLES["dim"])
        else:
            text.append(f" The answer was {handler.describe(outcome.correct_answer)}.", style=STYLES["dim"])
        border = FEED_THEME["error"]

    return Panel(text, border_style=border, box=box.ROUNDED, padding=(0, 1))


def render_lesson_header(lesson: Lesson) -> Panel:
    return Panel(
        Text(lesson.description, style=STYLES["dim"]),
        title=f"[bold]{lesson.title}[/bold]",
        border_style=FEED_THEME["primary"],
        box=box.HEAVY,
        padding=(1, 2),
    )


def render_video_panel(lesson: Lesson) -> Panel:
    """Video phase: link to the lesson video."""
    text = Text()
    text.append("Please watch the video below to continue.\n\n", style="bold")
    text.append(lesson.youtube_url or "", style=Style(color=FEED_THEME["primary"], underline=True))
    return Panel(text, title="Lesson video", border_style="white", box=box.ROUNDED, padding=(1, 2))


def render_error_panel(message: str) -> Panel:
    return Panel(
        Text(message, style=STYLES["error"]),
        title="[bold]Error[/bold]",
        border_style=FEED_THEME["error"],
        box=box.ROUNDED,
    )


def render_summary_panel(summary: RoundSummary) -> Panel:
    """Render end-of-lesson summary."""
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Metric", style="dim")
    table.add_column("Value", style="bold", justify="right")
    table.add_row("Final Score", str(summary.score))
    table.add_row("Highest Streak", str(summary.highest_streak))
    table.add_row("Hints Used", str(summary.hints_used))
    table.add_row("Posts", f"{summary.completed} of {summary.total}")

    return Panel(
        Group(Text(f"Summary for: {summary.lesson_title}\n", style="bold"), table),
        title="[bold]Lesson Complete![/bold]",
        border_style=Style(color=FEED_THEME["success"]),
        box=box.HEAVY,
        padding=(1, 2),
    )


def render_state_table(lesson: Lesson, state: SessionState, total: int | None = None) -> Table:
    """Saved progress of one lesson."""
    table = Table(title=lesson.title, show_header=False)
    table.add_column("Metric", style="dim")
    table.add_column("Value", style="bold")
    table.add_row("Score", str(state.score))
    table.add_row("Current streak", str(state.current_streak))
    table.add_row("Highest streak", str(state.highest_streak))
    completed = str(state.completed_count) if total is None else f"{state.completed_count} of {total}"
    table.add_row("Completed", completed)
    table.add_row("Hints used", str(len(state.hints_used)))
    return table
