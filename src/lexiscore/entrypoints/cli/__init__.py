"""Command-line entrypoint for LEXISCORE."""

from .main import lexiscore

__all__ = ["lexiscore"]
