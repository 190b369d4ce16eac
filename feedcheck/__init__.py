"""
Feedcheck: a terminal media-literacy trainer.

Learners read simulated social-media posts and classify them, either
answering whether a post is an example of a lesson's concept or naming the
manipulation technique it uses. Score, streak, completed posts and hints
are saved per lesson.

Packages:
- game: session state, scoring, persistence and the play flow
- content: lesson and post datasets
- storage: local key-value store
- delivery: Typer CLI and Rich visuals
"""

__version__ = "1.0.0"
