"""Command-line interface for todo."""

from .app import app

__all__ = ["app"]
