"""Serializer interface shared by the output formats."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from ..models import DisplayLine, DisplayRecord, LookupOutcome, Query, Tone


class BaseSerializer(ABC):
    """Turn lookup outcomes into display output.

    Streaming serializers render each outcome as soon as its batch
    completes; the others render the whole run once at the end.
    """

    streaming: bool = True

    @abstractmethod
    def format(self, outcome: LookupOutcome) -> DisplayRecord:
        """Render one outcome."""

    def gem_count(self, num: int) -> DisplayLine:
        return DisplayLine(marker="=> 🤔", text=f"{num} gems", tone=Tone.INFORMATIONAL)

    def batch_iterator(self, num: int, total: int) -> DisplayLine:
        return DisplayLine(marker="=> 🧺", text=f"{num} of {total}", tone=Tone.WARNING)

    def querying(self, batch: Sequence[Query]) -> DisplayLine:
        return DisplayLine(marker="=> 🔎", text=", ".join(batch), tone=Tone.PROGRESS)

    def finalize(self, outcomes: Sequence[LookupOutcome]) -> str | None:
        """Return the document for non-streaming serializers."""

        return None


__all__ = ["BaseSerializer"]
