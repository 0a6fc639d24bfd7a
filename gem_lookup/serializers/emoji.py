"""Emoji status-line serializer, the default output format."""

from __future__ import annotations

import re
from datetime import date, datetime

from ..config import LookupConfig
from ..errors import DateParseError
from ..logging_conf import component_logger
from ..models import (
    DisplayLine,
    DisplayRecord,
    Found,
    LookupOutcome,
    NotFound,
    TimedOut,
    Tone,
)
from .base import BaseSerializer

UNAVAILABLE = "Unavailable"

# Month names are spelled out here so output does not depend on the process locale.
MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

_DATE_PREFIX = re.compile(r"^(\d{4})-(\d{2})-(\d{2})")


def convert_date(value: str | None) -> str:
    """Return an ISO-style timestamp as ``"Month D, YYYY"``.

    >>> convert_date("2021-05-05T12:00:00Z")
    'May 5, 2021'
    """

    parsed = _parse_date(value)
    return f"{MONTH_NAMES[parsed.month - 1]} {parsed.day}, {parsed.year}"


def _parse_date(value: str | None) -> date:
    if not isinstance(value, str) or not value.strip():
        raise DateParseError(value)
    text = value.strip()
    normalized = text[:-1] + "+00:00" if text.endswith("Z") else text
    try:
        return datetime.fromisoformat(normalized).date()
    except ValueError:
        pass
    match = _DATE_PREFIX.match(text)
    if match is None:
        raise DateParseError(value)
    try:
        return date(int(match.group(1)), int(match.group(2)), int(match.group(3)))
    except ValueError as exc:
        raise DateParseError(value) from exc


class EmojiSerializer(BaseSerializer):
    """Render each outcome as emoji-prefixed lines with per-line tones."""

    streaming = True

    def __init__(self, config: LookupConfig | None = None) -> None:
        self.config = config or LookupConfig()
        self.logger = component_logger("serializer")

    def format(self, outcome: LookupOutcome) -> DisplayRecord:
        if isinstance(outcome, Found):
            return DisplayRecord(lines=tuple(self._found_lines(outcome)))
        if isinstance(outcome, TimedOut):
            return DisplayRecord(
                lines=(DisplayLine("=> 💎", f"{outcome.name} lookup timed out", Tone.ERROR),)
            )
        if isinstance(outcome, NotFound):
            return DisplayRecord(
                lines=(DisplayLine("=> 💎", f"{outcome.name} not found", Tone.ERROR),)
            )
        raise TypeError(f"Unsupported outcome: {outcome!r}")

    # ------------------------------------------------------------------
    def _found_lines(self, gem: Found) -> list[DisplayLine]:
        version = gem.optional("version") or UNAVAILABLE
        return [
            DisplayLine("=> 💎", f"{gem.name} is at {version}", Tone.POSITIVE),
            self._date_line(gem),
            self._optional_line("==> 💼", gem.optional("licenses")),
            DisplayLine("==> 🧭", self.config.gem_page_url(gem.name)),
            self._optional_line("==> 🏠", gem.optional("homepage_uri")),
            self._optional_line("==> 🔗", gem.optional("source_code_uri")),
            self._optional_line("==> 📑", gem.optional("changelog_uri"), Tone.INFORMATIONAL),
            self._optional_line("==> 💌", gem.optional("mailing_list_uri"), Tone.INFORMATIONAL),
        ]

    def _date_line(self, gem: Found) -> DisplayLine:
        try:
            return DisplayLine("==> 📅", convert_date(gem.version_created_at))
        except DateParseError as exc:
            self.logger.warning("date_parse_failed", gem=gem.name, value=exc.value)
            return DisplayLine("==> 📅", UNAVAILABLE, Tone.MISSING)

    @staticmethod
    def _optional_line(marker: str, value: str | None, tone: Tone = Tone.NEUTRAL) -> DisplayLine:
        if value is None:
            return DisplayLine(marker, UNAVAILABLE, Tone.MISSING)
        return DisplayLine(marker, value, tone)


__all__ = ["EmojiSerializer", "MONTH_NAMES", "UNAVAILABLE", "convert_date"]
