"""Rich console rendering of display lines."""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from ..models import DisplayLine, DisplayRecord, Tone

TONE_STYLES: dict[Tone, str] = {
    Tone.NEUTRAL: "",
    Tone.POSITIVE: "green",
    Tone.INFORMATIONAL: "bright_cyan",
    Tone.WARNING: "yellow",
    Tone.PROGRESS: "bright_yellow",
    Tone.MISSING: "bright_red",
    Tone.ERROR: "red",
}


class ConsoleRenderer:
    """Print lines to a rich console, styled by tone."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def line(self, line: DisplayLine) -> None:
        # Text objects bypass rich markup, so brackets in URLs print literally.
        self.console.print(Text(line.render(), style=TONE_STYLES[line.tone]), soft_wrap=True)

    def record(self, record: DisplayRecord) -> None:
        for line in record.lines:
            self.line(line)

    def document(self, text: str) -> None:
        self.console.print(Text(text), soft_wrap=True)


__all__ = ["ConsoleRenderer", "TONE_STYLES"]
