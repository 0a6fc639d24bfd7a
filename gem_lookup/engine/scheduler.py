"""Batch planning and paced, strictly sequential batch execution."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Iterable, Mapping, Protocol, Sequence

import structlog

from ..logging_conf import component_logger
from ..models import Batch, LookupOutcome, Query, RunState
from ..rate_limit import MAX_REQUESTS_PER_SECOND

BatchStartHook = Callable[[int, int, Batch], None]
BatchHandler = Callable[[int, Batch, Sequence[LookupOutcome]], None]
StateHook = Callable[[RunState], None]


class BatchDispatcher(Protocol):
    def dispatch(self, batch: Batch) -> Mapping[Query, LookupOutcome]:
        """Resolve every query of the batch."""


@dataclass(frozen=True, slots=True)
class BatchPlan:
    """Ordered partition of the query list into rate-limited batches."""

    batches: tuple[Batch, ...]

    @property
    def batch_mode(self) -> bool:
        # Pacing only applies when more than one batch exists.
        return len(self.batches) > 1

    @property
    def total_queries(self) -> int:
        return sum(len(batch) for batch in self.batches)

    def __len__(self) -> int:
        return len(self.batches)


def schedule(queries: Iterable[Query], limit: int = MAX_REQUESTS_PER_SECOND) -> BatchPlan:
    """Split ``queries`` into consecutive chunks of at most ``limit`` items."""

    if limit < 1:
        raise ValueError("Batch limit must be >= 1")
    items = list(queries)
    batches = tuple(tuple(items[start : start + limit]) for start in range(0, len(items), limit))
    return BatchPlan(batches=batches)


class BatchScheduler:
    """Run batches one after another with a fixed pause between them.

    The pause is not shortened by the time a batch spent on the network.
    """

    def __init__(
        self,
        dispatcher: BatchDispatcher,
        pacing_delay: float = 1.0,
        sleep: Callable[[float], None] = time.sleep,
        logger: structlog.BoundLogger | None = None,
        on_state: StateHook | None = None,
    ) -> None:
        self.dispatcher = dispatcher
        self.pacing_delay = pacing_delay
        self._sleep = sleep
        self.logger = logger or component_logger("scheduler")
        self._on_state = on_state

    def run(
        self,
        plan: BatchPlan,
        on_batch: BatchHandler,
        on_batch_start: BatchStartHook | None = None,
    ) -> None:
        total = len(plan)
        for index, batch in enumerate(plan.batches, start=1):
            if on_batch_start is not None:
                on_batch_start(index, total, batch)

            self._transition(RunState.DISPATCHING)
            started = time.monotonic()
            outcomes = self.dispatcher.dispatch(batch)
            self.logger.info(
                "batch_dispatched",
                batch=index,
                total=total,
                size=len(batch),
                elapsed=round(time.monotonic() - started, 3),
            )

            # Display order follows the batch, not completion order.
            self._transition(RunState.FORMATTING)
            on_batch(index, batch, [outcomes[query] for query in batch])

            if plan.batch_mode and index < total:
                self._transition(RunState.PACING)
                self.logger.debug("batch_paced", batch=index, delay=self.pacing_delay)
                self._sleep(self.pacing_delay)

    def _transition(self, state: RunState) -> None:
        if self._on_state is not None:
            self._on_state(state)


__all__ = ["BatchDispatcher", "BatchPlan", "BatchScheduler", "schedule"]
