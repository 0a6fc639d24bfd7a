"""Data model shared by the lookup engine and the serializers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

# A normalised (case-folded, trimmed) gem name.
Query = str
# An ordered, non-empty group of queries no larger than the rate limit.
Batch = tuple[Query, ...]


@dataclass(frozen=True, slots=True)
class Found:
    """Successful lookup carrying the fields the API returned.

    Optional fields are kept exactly as received, empty strings included;
    deciding what counts as unavailable is left to the serializers.
    """

    name: str
    version: str | None = None
    version_created_at: str | None = None
    homepage_uri: str | None = None
    source_code_uri: str | None = None
    changelog_uri: str | None = None
    mailing_list_uri: str | None = None
    licenses: str | list[str] | None = None
    raw: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_payload(cls, name: str, payload: dict[str, Any]) -> "Found":
        licenses = payload.get("licenses")
        if licenses is None:
            licenses = payload.get("license")
        return cls(
            name=payload.get("name") or name,
            version=payload.get("version"),
            version_created_at=payload.get("version_created_at"),
            homepage_uri=payload.get("homepage_uri"),
            source_code_uri=payload.get("source_code_uri"),
            changelog_uri=payload.get("changelog_uri"),
            mailing_list_uri=payload.get("mailing_list_uri"),
            licenses=licenses,
            raw=payload,
        )

    def optional(self, key: str) -> str | None:
        """Return the named optional field, or ``None`` when absent or blank."""

        value = getattr(self, key)
        if value is None:
            return None
        if isinstance(value, (list, tuple)):
            joined = ", ".join(str(item) for item in value if str(item).strip())
            return joined or None
        text = str(value)
        return text if text.strip() else None


@dataclass(frozen=True, slots=True)
class NotFound:
    """Non-success status, unreadable body, or transport failure."""

    name: str
    status_code: int | None = None
    error: str | None = None


@dataclass(frozen=True, slots=True)
class TimedOut:
    """No response arrived within the transport timeout window."""

    name: str


LookupOutcome = Union[Found, NotFound, TimedOut]


class Tone(str, Enum):
    """Semantic category of a display line."""

    NEUTRAL = "neutral"
    POSITIVE = "positive"
    INFORMATIONAL = "informational"
    WARNING = "warning"
    PROGRESS = "progress"
    MISSING = "warning-missing"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class DisplayLine:
    marker: str
    text: str
    tone: Tone = Tone.NEUTRAL

    def render(self) -> str:
        return f"{self.marker} {self.text}" if self.marker else self.text


@dataclass(frozen=True, slots=True)
class DisplayRecord:
    """Ordered lines produced from one lookup outcome."""

    lines: tuple[DisplayLine, ...]

    @property
    def texts(self) -> list[str]:
        return [line.text for line in self.lines]

    def render(self) -> str:
        return "\n".join(line.render() for line in self.lines)


class RunState(str, Enum):
    """Lifecycle of one engine run."""

    IDLE = "idle"
    NORMALIZING = "normalizing"
    SCHEDULING = "scheduling"
    DISPATCHING = "dispatching"
    FORMATTING = "formatting"
    PACING = "pacing"
    DONE = "done"
    FAILED = "failed"


@dataclass(slots=True)
class RunSummary:
    """Counters describing a finished run."""

    total: int = 0
    batches: int = 0
    found: int = 0
    not_found: int = 0
    timed_out: int = 0

    def record(self, outcome: LookupOutcome) -> None:
        if isinstance(outcome, Found):
            self.found += 1
        elif isinstance(outcome, TimedOut):
            self.timed_out += 1
        else:
            self.not_found += 1


__all__ = [
    "Batch",
    "DisplayLine",
    "DisplayRecord",
    "Found",
    "LookupOutcome",
    "NotFound",
    "Query",
    "RunState",
    "RunSummary",
    "TimedOut",
    "Tone",
]
