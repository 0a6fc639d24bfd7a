"""Raw JSON serializer: one document for the whole run."""

from __future__ import annotations

import json
from typing import Any, Sequence

from ..models import DisplayLine, DisplayRecord, Found, LookupOutcome, TimedOut
from .base import BaseSerializer


def outcome_payload(outcome: LookupOutcome) -> dict[str, Any]:
    """Return the JSON object reported for one outcome."""

    if isinstance(outcome, Found):
        return dict(outcome.raw) if outcome.raw else {"name": outcome.name, "version": outcome.version}
    if isinstance(outcome, TimedOut):
        return {"name": outcome.name, "timeout": True}
    return {"name": outcome.name, "not_found": True}


class JsonSerializer(BaseSerializer):
    """Collect every outcome and print the API payloads as one JSON object."""

    streaming = False

    def __init__(self, indent: int | None = 2) -> None:
        self.indent = indent

    def format(self, outcome: LookupOutcome) -> DisplayRecord:
        text = json.dumps(outcome_payload(outcome), ensure_ascii=False, indent=self.indent)
        return DisplayRecord(lines=(DisplayLine(marker="", text=text),))

    def finalize(self, outcomes: Sequence[LookupOutcome]) -> str:
        document = {"gems": [outcome_payload(outcome) for outcome in outcomes]}
        return json.dumps(document, ensure_ascii=False, indent=self.indent)


__all__ = ["JsonSerializer", "outcome_payload"]
