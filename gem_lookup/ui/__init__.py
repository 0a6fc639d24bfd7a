"""User interaction helpers."""

from .console import ConsoleRenderer, TONE_STYLES

__all__ = ["ConsoleRenderer", "TONE_STYLES"]
