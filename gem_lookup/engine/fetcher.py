"""HTTP lookups against the RubyGems.org JSON API."""

from __future__ import annotations

import json
from typing import Any

import httpx
import structlog

from ..config import LookupConfig
from ..errors import DecodeError
from ..logging_conf import component_logger
from ..models import Found, LookupOutcome, NotFound, Query, TimedOut


class Fetcher:
    """Issue one GET per gem and classify the response.

    Every failure is folded into an outcome; ``lookup`` does not raise for
    network or payload problems.
    """

    def __init__(
        self,
        config: LookupConfig | None = None,
        logger: structlog.BoundLogger | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.config = config or LookupConfig()
        self.logger = logger or component_logger("fetcher")
        self._client = httpx.Client(
            transport=transport,
            follow_redirects=True,
            timeout=self.config.timeout,
            headers={"User-Agent": self.config.user_agent, "Accept": "application/json"},
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "Fetcher":
        return self

    def __exit__(self, *_exc: object) -> None:
        self.close()

    def lookup(self, name: Query) -> LookupOutcome:
        url = self.config.api_url(name)
        try:
            response = self._client.get(url)
        except httpx.TimeoutException as exc:
            self.logger.warning("lookup_timed_out", gem=name, url=url, error=str(exc))
            return TimedOut(name=name)
        except httpx.HTTPError as exc:
            self.logger.warning("lookup_transport_error", gem=name, url=url, error=str(exc))
            return NotFound(name=name, error=str(exc))

        if response.status_code != 200:
            self.logger.info("lookup_not_found", gem=name, status=response.status_code)
            return NotFound(name=name, status_code=response.status_code)

        try:
            payload = self._decode(name, response)
        except DecodeError as exc:
            self.logger.warning("lookup_decode_error", gem=name, error=exc.reason)
            return NotFound(name=name, status_code=response.status_code, error=str(exc))

        self.logger.info("lookup_found", gem=name, version=payload.get("version"))
        return Found.from_payload(name, payload)

    @staticmethod
    def _decode(name: Query, response: httpx.Response) -> dict[str, Any]:
        try:
            payload = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise DecodeError(name, str(exc)) from exc
        if not isinstance(payload, dict):
            raise DecodeError(name, f"expected an object, got {type(payload).__name__}")
        return payload


__all__ = ["Fetcher"]
