"""Engine wiring normalisation, batching, dispatch, formatting and pacing."""

from __future__ import annotations

import time
from typing import Callable, Iterable, Sequence

import structlog

from .config import LookupConfig
from .engine import BatchScheduler, Dispatcher, Fetcher, normalize, schedule
from .errors import EmptyInputError
from .logging_conf import component_logger
from .models import Batch, LookupOutcome, RunState, RunSummary
from .serializers import BaseSerializer, build_serializer
from .ui import ConsoleRenderer


class Engine:
    """Run one lookup session from raw names to rendered output.

    States move ``idle -> normalizing -> scheduling ->
    (dispatching -> formatting -> pacing?)* -> done``; an empty input list
    goes to ``failed`` before any batch is built. Nothing is retried.
    """

    def __init__(
        self,
        config: LookupConfig | None = None,
        serializer: BaseSerializer | None = None,
        renderer: ConsoleRenderer | None = None,
        fetcher: Fetcher | None = None,
        sleep: Callable[[float], None] = time.sleep,
        logger: structlog.BoundLogger | None = None,
    ) -> None:
        self.config = config or LookupConfig()
        self.serializer = serializer or build_serializer(self.config.output_format, self.config)
        self.renderer = renderer or ConsoleRenderer()
        self.logger = logger or component_logger("engine")
        self.fetcher = fetcher or Fetcher(self.config, logger=self.logger.bind(component="fetcher"))
        self.dispatcher = Dispatcher(
            self.fetcher.lookup,
            max_workers=self.config.max_requests_per_second,
            logger=self.logger.bind(component="dispatcher"),
        )
        self._sleep = sleep
        self.state = RunState.IDLE

    def __enter__(self) -> "Engine":
        return self

    def __exit__(self, *_exc: object) -> None:
        self.close()

    def close(self) -> None:
        self.dispatcher.close()
        self.fetcher.close()

    # ------------------------------------------------------------------
    def run(self, names: Iterable[str]) -> RunSummary:
        self._set_state(RunState.NORMALIZING)
        try:
            queries = normalize(names)
        except EmptyInputError as exc:
            self._set_state(RunState.FAILED)
            self.logger.warning("run_failed", error=str(exc))
            raise

        self._set_state(RunState.SCHEDULING)
        plan = schedule(queries, self.config.max_requests_per_second)
        summary = RunSummary(total=len(queries), batches=len(plan))
        streaming = self.serializer.streaming
        collected: list[LookupOutcome] = []

        if streaming and summary.total > 1:
            self.renderer.line(self.serializer.gem_count(summary.total))

        def on_batch_start(index: int, total: int, batch: Batch) -> None:
            if not streaming:
                return
            if plan.batch_mode:
                self.renderer.line(self.serializer.batch_iterator(index, total))
            self.renderer.line(self.serializer.querying(batch))

        def on_batch(_index: int, _batch: Batch, outcomes: Sequence[LookupOutcome]) -> None:
            for outcome in outcomes:
                summary.record(outcome)
                if streaming:
                    self.renderer.record(self.serializer.format(outcome))
                else:
                    collected.append(outcome)

        scheduler = BatchScheduler(
            self.dispatcher,
            pacing_delay=self.config.pacing_delay,
            sleep=self._sleep,
            logger=self.logger.bind(component="scheduler"),
            on_state=self._set_state,
        )
        scheduler.run(plan, on_batch, on_batch_start)

        if not streaming:
            document = self.serializer.finalize(collected)
            if document is not None:
                self.renderer.document(document)

        self._set_state(RunState.DONE)
        self.logger.info(
            "run_finished",
            total=summary.total,
            batches=summary.batches,
            found=summary.found,
            not_found=summary.not_found,
            timed_out=summary.timed_out,
        )
        return summary

    def _set_state(self, state: RunState) -> None:
        if state is not self.state:
            self.logger.debug("state_changed", previous=self.state.value, state=state.value)
        self.state = state


__all__ = ["Engine"]
