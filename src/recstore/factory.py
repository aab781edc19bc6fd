"""Store construction: plain instances and per-record-type shared stores."""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from recstore.config import StoreConfig
from recstore.exceptions import RecstoreConfigError
from recstore.store import RecordStore

_logger = logging.getLogger(__name__)

R = TypeVar("R")

_shared_stores: dict[type[Any], RecordStore[Any]] = {}


def get_shared_store(record_type: type[R], config: StoreConfig | None = None) -> RecordStore[R]:
    """Return the process-wide store for *record_type*.

    The store is created on first access; *config* only applies to that
    first call. Each record type gets its own independent store.
    """
    store = _shared_stores.get(record_type)
    if store is None:
        store = RecordStore(config)
        _shared_stores[record_type] = store
        _logger.debug("Created shared store for %s", record_type.__name__)
    return store


def reset_shared_stores() -> None:
    """Forget every shared store. Later accesses start from empty stores."""
    _shared_stores.clear()


def create_store(config: StoreConfig | None = None, *, record_type: type[R] | None = None) -> RecordStore[R]:
    """Build a record store according to ``config.shared``.

    Raises
    ------
    RecstoreConfigError
        If shared mode is selected without a *record_type*.
    """
    config = config or StoreConfig()
    if not config.shared:
        return RecordStore(config)
    if record_type is None:
        raise RecstoreConfigError("record_type is required when shared stores are enabled")
    return get_shared_store(record_type, config)
