"""
Feedcheck: Main CLI.

A Rich terminal interface for the media-literacy trainer.

Commands:
- feedcheck lessons   - List lessons and saved progress
- feedcheck play      - Play a lesson
- feedcheck status    - Show saved progress of a lesson
- feedcheck reset     - Reset saved progress of a lesson
"""
from __future__ import annotations

import sys
import time
from pathlib import Path
from typing import Optional

import typer
from loguru import logger
from rich.console import Console
from rich.prompt import Confirm, Prompt
from rich.table import Table

from feedcheck.config import Settings, get_settings
from feedcheck.content import Lesson, LessonCatalog, Post
from feedcheck.errors import LessonNotFoundError
from feedcheck.game import (
    ChallengeMode,
    GameStatePersistence,
    GameStore,
    LessonRound,
    WrongAnswerPolicy,
)
from feedcheck.storage import FileStorage

from . import visuals as ui

# =============================================================================
# CLI Setup
# =============================================================================

app = typer.Typer(
    name="feedcheck",
    help="Feedcheck: spot manipulation in social-media posts",
    no_args_is_help=True,
)
console = Console()


def _open_store(settings: Settings) -> GameStore:
    persistence = GameStatePersistence(FileStorage(settings.storage_dir))
    return GameStore(persistence, key_prefix=settings.storage_key_prefix)


def _get_lesson(catalog: LessonCatalog, lesson_id: str) -> Lesson:
    try:
        return catalog.get_lesson(lesson_id)
    except LessonNotFoundError as e:
        console.print(f"[red]{e}[/red]")
        console.print("Run [bold]feedcheck lessons[/bold] to see what is available.")
        raise typer.Exit(1) from e


def _next_open_post(round_: LessonRound, after: Post | None) -> Post | None:
    """First open post after `after` in feed order, wrapping around."""
    open_posts = round_.open_posts()
    if not open_posts:
        return None
    if after is None:
        return open_posts[0]
    order = [p.id for p in round_.posts]
    start = order.index(after.id) + 1 if after.id in order else 0
    for post_id in order[start:] + order[:start]:
        post = round_.get_post(post_id)
        if post is not None and not round_.store.is_completed(post_id):
            return post
    return None


# =============================================================================
# Commands
# =============================================================================


@app.command()
def lessons(
    data_dir: Optional[Path] = typer.Option(
        None,
        "--dir", "-d",
        help="Directory with lessons.json and posts/",
    ),
) -> None:
    """List lessons and saved progress."""
    settings = get_settings()
    catalog = LessonCatalog(data_dir or settings.data_dir)
    store = _open_store(settings)

    all_lessons = catalog.lessons()
    if not all_lessons:
        console.print(f"[yellow]No lessons found in {catalog.data_dir}[/yellow]")
        raise typer.Exit(1)

    table = Table(title="Lessons")
    table.add_column("ID", style="cyan")
    table.add_column("Title", style="bold")
    table.add_column("Video")
    table.add_column("Score", justify="right")
    table.add_column("Progress", justify="right")

    for lesson in all_lessons:
        state = store.load_lesson(lesson.id)
        total = len(catalog.load_posts(lesson).posts)
        table.add_row(
            lesson.id,
            lesson.title,
            "yes" if lesson.has_video else "",
            str(state.score),
            f"{state.completed_count}/{total}",
        )

    console.print(table)


@app.command()
def play(
    lesson_id: str = typer.Argument(..., help="Lesson to play"),
    mode: Optional[ChallengeMode] = typer.Option(
        None,
        "--mode", "-m",
        help="binary (yes/no) or technique (multiple choice)",
    ),
    on_wrong: Optional[WrongAnswerPolicy] = typer.Option(
        None,
        "--on-wrong",
        help="retry: try again after a miss; complete: a miss closes the post",
    ),
    skip_video: bool = typer.Option(
        False,
        "--skip-video",
        help="Go straight to the challenge",
    ),
    data_dir: Optional[Path] = typer.Option(
        None,
        "--dir", "-d",
        help="Directory with lessons.json and posts/",
    ),
) -> None:
    """
    Play a lesson.

    Progress is saved after every answer, so quitting and running the same
    command again resumes where you left off.
    """
    settings = get_settings()
    catalog = LessonCatalog(data_dir or settings.data_dir)
    lesson = _get_lesson(catalog, lesson_id)

    console.print(ui.render_lesson_header(lesson))

    # Phase 1: video
    if lesson.has_video and not skip_video:
        console.print(ui.render_video_panel(lesson))
        if not Confirm.ask("Finished watching? Continue to the challenge", default=True):
            raise typer.Exit(0)

    # Phase 2: challenge
    loaded = catalog.load_posts(lesson)
    if loaded.error:
        console.print(ui.render_error_panel(loaded.error))

    store = _open_store(settings)
    store.load_lesson(lesson.id)
    round_ = LessonRound(
        lesson,
        loaded.posts,
        store,
        mode=mode or settings.challenge_mode,
        on_wrong=on_wrong or settings.on_wrong,
        rules=settings.get_scoring_rules(),
    )

    if not round_.posts:
        console.print("[yellow]No posts to classify in this lesson.[/yellow]")
        raise typer.Exit(0)

    _run_round(round_, settings.advance_delay)


def _run_round(round_: LessonRound, advance_delay: float) -> None:
    """Interactive loop until the learner quits or declines to play again."""
    handler = round_.handler
    post = _next_open_post(round_, None)

    while True:
        if round_.is_finished:
            console.print(ui.render_summary_panel(round_.summary()))
            if not Confirm.ask("Play again?", default=False):
                return
            round_.restart()
            post = _next_open_post(round_, None)
            continue

        if post is None:
            post = _next_open_post(round_, None)
            continue

        completed, total = round_.progress()
        console.print()
        console.print(ui.render_scoreboard(round_.state, completed, total))
        console.print(ui.render_post_panel(post, round_.posts.index(post) + 1, total))
        console.print(
            ui.render_question(
                handler.prompt(post, round_.lesson),
                handler.choices(),
                hint_available=not round_.store.has_used_hint(post.id),
                points=round_.potential_points(post),
            )
        )

        raw = Prompt.ask("Your answer", console=console, default="", show_default=False).strip().lower()

        if raw == "q":
            console.print("[dim]Progress saved.[/dim]")
            return
        if raw == "s":
            post = _next_open_post(round_, post)
            continue
        if raw == "h":
            hint = round_.request_hint(post)
            if hint is None:
                console.print("[yellow]Hint already used for this post.[/yellow]")
            else:
                console.print(ui.render_hint_panel(hint))
            continue

        answer = handler.parse(raw)
        if answer is None:
            keys = "/".join(c.key for c in handler.choices())
            console.print(f"[yellow]Please enter {keys}, h, s or q[/yellow]")
            continue

        outcome = round_.answer(post, answer)
        retry = not outcome.completed
        console.print(ui.render_result_panel(outcome, handler, retry=retry))

        if outcome.completed:
            if advance_delay:
                time.sleep(advance_delay)
            post = _next_open_post(round_, post)


@app.command()
def status(
    lesson_id: str = typer.Argument(..., help="Lesson to inspect"),
    data_dir: Optional[Path] = typer.Option(
        None,
        "--dir", "-d",
        help="Directory with lessons.json and posts/",
    ),
) -> None:
    """Show saved progress for a lesson."""
    settings = get_settings()
    catalog = LessonCatalog(data_dir or settings.data_dir)
    lesson = _get_lesson(catalog, lesson_id)

    store = _open_store(settings)
    state = store.load_lesson(lesson.id)
    total = len(catalog.load_posts(lesson).posts)

    console.print(ui.render_state_table(lesson, state, total))


@app.command()
def reset(
    lesson_id: str = typer.Argument(..., help="Lesson to reset"),
    clear: bool = typer.Option(
        False,
        "--clear",
        help="Delete the saved entry instead of saving a fresh state",
    ),
    confirm: bool = typer.Option(
        False,
        "--yes", "-y",
        help="Skip confirmation",
    ),
    data_dir: Optional[Path] = typer.Option(
        None,
        "--dir", "-d",
        help="Directory with lessons.json and posts/",
    ),
) -> None:
    """Reset saved progress for a lesson."""
    settings = get_settings()
    catalog = LessonCatalog(data_dir or settings.data_dir)
    lesson = _get_lesson(catalog, lesson_id)

    if not confirm and not Confirm.ask(f"Reset progress for {lesson.title}?", default=False):
        raise typer.Exit(0)

    store = _open_store(settings)
    store.load_lesson(lesson.id)
    store.reset(clear_storage=clear)
    console.print(f"[green]Progress for {lesson.title} has been reset.[/green]")


# =============================================================================
# Entry Point
# =============================================================================


def main() -> None:
    """CLI entry point."""
    settings = get_settings()

    # Configure logging
    logger.remove()
    logger.add(
        sys.stderr,
        level=settings.log_level.upper(),
        format="<level>{message}</level>",
    )

    app()


if __name__ == "__main__":
    main()
