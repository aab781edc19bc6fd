"""In-memory record store with write notifications.

Records are keyed by their id. Every write publishes a
:class:`~recstore.events.BeforeWriteEvent` before the mutation and an
:class:`~recstore.events.AfterWriteEvent` after it. Reads never publish.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Callable
from typing import Generic, TypeVar

from recstore.config import StoreConfig
from recstore.events import AfterWriteEvent, BeforeWriteEvent
from recstore.hub import NotificationHub, Subscription
from recstore.records import record_id

_logger = logging.getLogger(__name__)

R = TypeVar("R")


class RecordStore(Generic[R]):
    """Keyed collection of records.

    With ``config.copy_records`` enabled (the default) the store owns its
    contents: records are deep-copied when written and again whenever they
    are handed back to a caller or a listener.
    """

    def __init__(self, config: StoreConfig | None = None) -> None:
        self._config = config or StoreConfig()
        self._records: dict[str, R] = {}
        self._before_add: NotificationHub[BeforeWriteEvent[R]] = NotificationHub()
        self._after_add: NotificationHub[AfterWriteEvent[R]] = NotificationHub()

    @property
    def config(self) -> StoreConfig:
        return self._config

    def _copy(self, record: R) -> R:
        if self._config.copy_records:
            return copy.deepcopy(record)
        return record

    def set(self, new_record: R) -> None:
        """Insert *new_record*, replacing any record with the same id.

        Listener exceptions propagate. When a before-write listener raises,
        the store is left unchanged.
        """
        key = record_id(new_record)
        stored = self._copy(new_record)
        previous = self._records.get(key)

        self._before_add.publish(
            BeforeWriteEvent(
                previous_value=self._copy(previous) if previous is not None else None,
                new_value=self._copy(stored),
            )
        )
        self._records[key] = stored
        _logger.debug("Record %s id=%s", "replaced" if previous is not None else "inserted", key)
        self._after_add.publish(AfterWriteEvent(value=self._copy(stored)))

    def get(self, id: str) -> R | None:  # noqa: A002
        """Return the record stored under *id*, or ``None``."""
        record = self._records.get(id)
        if record is None:
            return None
        return self._copy(record)

    def on_before_add(self, listener: Callable[[BeforeWriteEvent[R]], None]) -> Subscription:
        """Subscribe to events published right before each write."""
        return self._before_add.subscribe(listener)

    def on_after_add(self, listener: Callable[[AfterWriteEvent[R]], None]) -> Subscription:
        """Subscribe to events published right after each write."""
        return self._after_add.subscribe(listener)

    def visit(self, visitor: Callable[[R], None]) -> None:
        """Call *visitor* once for every stored record.

        Callers must not rely on the visiting order.
        """
        for record in list(self._records.values()):
            visitor(self._copy(record))

    def select_best(self, score: Callable[[R], float]) -> R | None:
        """Return the record with the strictly highest score.

        The scan is seeded with ``config.selection_baseline`` (``0`` by
        default): a record is only picked if it scores above it, so a store
        where every record scores at or below the baseline returns ``None``.
        Ties keep the first record seen.
        """
        best: R | None = None
        best_score = self._config.selection_baseline
        for record in list(self._records.values()):
            candidate = self._copy(record)
            value = score(candidate)
            if value > best_score:
                best = candidate
                best_score = value
        return best

    def ids(self) -> list[str]:
        return list(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, id: object) -> bool:  # noqa: A002
        return id in self._records

    def __repr__(self) -> str:
        return f"RecordStore(records={len(self._records)}, copy_records={self._config.copy_records})"
