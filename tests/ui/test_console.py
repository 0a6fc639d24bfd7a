from __future__ import annotations

import io

from rich.console import Console

from gem_lookup.models import DisplayLine, DisplayRecord, Tone
from gem_lookup.ui import TONE_STYLES, ConsoleRenderer


def test_every_tone_has_a_style() -> None:
    assert set(TONE_STYLES) == set(Tone)


def test_line_prints_marker_and_text(console_buffer) -> None:
    renderer, buffer = console_buffer
    renderer.line(DisplayLine("=>", "💎 rails is at 6.1.3.2", Tone.POSITIVE))
    assert buffer.getvalue() == "=> 💎 rails is at 6.1.3.2\n"


def test_brackets_are_not_treated_as_markup(console_buffer) -> None:
    renderer, buffer = console_buffer
    renderer.line(DisplayLine("==>", "🔗 https://example.test/[bold]tree[/bold]", Tone.INFORMATIONAL))
    assert "[bold]tree[/bold]" in buffer.getvalue()


def test_record_prints_lines_in_order(console_buffer) -> None:
    renderer, buffer = console_buffer
    renderer.record(
        DisplayRecord(
            (
                DisplayLine("=>", "💎 rails not found", Tone.ERROR),
                DisplayLine("=>", "💎 rspec lookup timed out", Tone.ERROR),
            )
        )
    )
    assert buffer.getvalue().splitlines() == [
        "=> 💎 rails not found",
        "=> 💎 rspec lookup timed out",
    ]


def test_long_lines_are_not_wrapped() -> None:
    buffer = io.StringIO()
    renderer = ConsoleRenderer(Console(file=buffer, width=20, color_system=None))
    url = "https://github.com/rails/rails/releases/tag/v6.1.3.2"
    renderer.line(DisplayLine("==>", f"📑 {url}", Tone.INFORMATIONAL))
    assert buffer.getvalue() == f"==> 📑 {url}\n"


def test_document_prints_verbatim(console_buffer) -> None:
    renderer, buffer = console_buffer
    renderer.document('{"gems": []}')
    assert buffer.getvalue() == '{"gems": []}\n'
