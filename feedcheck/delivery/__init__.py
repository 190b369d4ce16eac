"""
Terminal delivery for Feedcheck: the Typer app and its Rich visuals.
"""

from .cli import app, main

__all__ = ["app", "main"]
