"""Boundary between an external record loader and the store.

A loader reads records from some source and hands each one, in source
order, to a :class:`RecordHandler`. :class:`StoreRecordHandler` adapts a
:class:`~recstore.store.RecordStore` to that shape.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Generic, Protocol, TypeVar

from recstore.store import RecordStore

R = TypeVar("R")
R_contra = TypeVar("R_contra", contravariant=True)


class RecordHandler(Protocol[R_contra]):
    def add_record(self, record: R_contra) -> None: ...


class StoreRecordHandler(Generic[R]):
    """Forward every loaded record to ``store.set``."""

    def __init__(self, store: RecordStore[R]) -> None:
        self._store = store

    def add_record(self, record: R) -> None:
        self._store.set(record)


def feed_records(records: Iterable[R], handler: RecordHandler[R]) -> int:
    """Push *records* through *handler* in order and return how many were fed."""
    count = 0
    for record in records:
        handler.add_record(record)
        count += 1
    return count
