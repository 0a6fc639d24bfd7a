"""Pytest configuration providing shared fixtures and lookup stubs."""

from __future__ import annotations

import io
import json
import threading
from pathlib import Path
from typing import Any, Callable

import pytest
from rich.console import Console

from gem_lookup.config import LookupConfig
from gem_lookup.models import Found, LookupOutcome, NotFound, Query
from gem_lookup.ui import ConsoleRenderer

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"


def load_payload(name: str) -> dict[str, Any]:
    return json.loads((FIXTURES_DIR / f"{name}.json").read_text(encoding="utf-8"))


class StubFetcher:
    """Stand-in for ``Fetcher`` resolving names from a prepared mapping."""

    def __init__(self, outcomes: dict[str, LookupOutcome | Callable[[], LookupOutcome]] | None = None) -> None:
        self.outcomes = outcomes or {}
        self.calls: list[Query] = []
        self.closed = False
        self._lock = threading.Lock()

    def lookup(self, name: Query) -> LookupOutcome:
        with self._lock:
            self.calls.append(name)
        outcome = self.outcomes.get(name)
        if callable(outcome):
            return outcome()
        if outcome is None:
            return NotFound(name=name, status_code=404)
        return outcome

    def close(self) -> None:
        self.closed = True


class RecordingSleep:
    def __init__(self) -> None:
        self.calls: list[float] = []

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    home = tmp_path / "gem_lookup_home"
    monkeypatch.setenv("GEM_LOOKUP_HOME", str(home))
    return home


@pytest.fixture
def lookup_config() -> LookupConfig:
    return LookupConfig(timeout=2.0, pacing_delay=1.0)


@pytest.fixture
def rails_payload() -> dict[str, Any]:
    return load_payload("rails")


@pytest.fixture
def rails_found(rails_payload: dict[str, Any]) -> Found:
    return Found.from_payload("rails", rails_payload)


@pytest.fixture
def stub_fetcher() -> Callable[..., StubFetcher]:
    def _builder(outcomes: dict[str, Any] | None = None) -> StubFetcher:
        return StubFetcher(outcomes)

    return _builder


@pytest.fixture
def recording_sleep() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture
def console_buffer() -> tuple[ConsoleRenderer, io.StringIO]:
    buffer = io.StringIO()
    console = Console(file=buffer, width=200, color_system=None, force_terminal=False)
    return ConsoleRenderer(console), buffer

