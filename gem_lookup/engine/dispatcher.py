"""Concurrent execution of one batch of lookups."""

from __future__ import annotations

from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from typing import Callable

import structlog

from ..logging_conf import component_logger
from ..models import Batch, LookupOutcome, NotFound, Query
from ..rate_limit import MAX_REQUESTS_PER_SECOND

LookupFn = Callable[[Query], LookupOutcome]


class Dispatcher:
    """Fan a batch out over a thread pool and join on every request.

    The pool is sized to the rate limit, so a batch never needs more
    workers than it has queries and no extra throttling happens here.
    """

    def __init__(
        self,
        lookup: LookupFn,
        max_workers: int = MAX_REQUESTS_PER_SECOND,
        logger: structlog.BoundLogger | None = None,
    ) -> None:
        self._lookup = lookup
        self.max_workers = max_workers
        self.logger = logger or component_logger("dispatcher")
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="gem-lookup")

    def dispatch(self, batch: Batch) -> dict[Query, LookupOutcome]:
        """Return one outcome per query, keyed and ordered as in ``batch``."""

        if len(batch) > self.max_workers:
            raise ValueError(
                f"Batch of {len(batch)} exceeds the {self.max_workers} concurrent request limit"
            )
        futures: dict[Future[LookupOutcome], Query] = {
            self._executor.submit(self._lookup, query): query for query in batch
        }
        completed: dict[Query, LookupOutcome] = {}
        for future in as_completed(futures):
            query = futures[future]
            try:
                completed[query] = future.result()
            except Exception as exc:  # noqa: BLE001
                self.logger.warning("lookup_failed", gem=query, error=str(exc))
                completed[query] = NotFound(name=query, error=str(exc))
        return {query: completed[query] for query in batch}

    def close(self) -> None:
        self._executor.shutdown(wait=True)


__all__ = ["Dispatcher"]
