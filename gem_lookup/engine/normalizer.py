"""Query normalisation: case-fold, trim and de-duplicate gem names."""

from __future__ import annotations

from typing import Iterable

from ..errors import EmptyInputError
from ..models import Query


def normalize(raw: Iterable[str]) -> list[Query]:
    """Return unique, lower-cased names in first-seen order.

    Names are not validated further; the catalog answers unknown names
    with a not-found status.
    """

    queries: list[Query] = []
    seen: set[Query] = set()
    for entry in raw:
        name = entry.strip().lower()
        if not name or name in seen:
            continue
        seen.add(name)
        queries.append(name)
    if not queries:
        raise EmptyInputError()
    return queries


__all__ = ["normalize"]
