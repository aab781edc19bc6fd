"""Store configuration for recstore."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from recstore.exceptions import RecstoreConfigError


def _env_bool(name: str, value: str | None, default: bool) -> bool:
    if value is None or value.strip() == "":
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    raise RecstoreConfigError(f"{name} must be a boolean (true/false). Got: {value!r}")


def _env_float(name: str, value: str | None, default: float) -> float:
    if value is None or value.strip() == "":
        return default
    try:
        return float(value)
    except ValueError as exc:
        raise RecstoreConfigError(f"{name} must be a number. Got: {value!r}") from exc


@dataclasses.dataclass(frozen=True)
class StoreConfig:
    """Record store configuration.

    Parameters
    ----------
    copy_records : bool
        Deep-copy records on the way into and out of the store, so callers
        never share mutable state with the stored value.
    selection_baseline : float
        Score a record must strictly exceed to be picked by
        :meth:`recstore.store.RecordStore.select_best`. Defaults to ``0``,
        so a store whose records all score ``<= 0`` selects nothing.
    shared : bool
        Construction mode used by :func:`recstore.store.create_store`.
        When ``True`` the factory hands out the process-wide store for the
        requested record type instead of a fresh instance.
    """

    copy_records: bool = True
    selection_baseline: float = 0.0
    shared: bool = False

    @classmethod
    def from_env(cls, **overrides: Any) -> StoreConfig:
        """Create configuration from environment variables.

        Reads ``RECSTORE_COPY_RECORDS``, ``RECSTORE_SELECTION_BASELINE`` and
        ``RECSTORE_SHARED``. Explicit keyword arguments override environment
        values.

        Raises
        ------
        RecstoreConfigError
            If a variable is set to a value that cannot be parsed.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        if "copy_records" not in overrides:
            config_kwargs["copy_records"] = _env_bool(
                "RECSTORE_COPY_RECORDS", env.get("RECSTORE_COPY_RECORDS"), True
            )
        if "selection_baseline" not in overrides:
            config_kwargs["selection_baseline"] = _env_float(
                "RECSTORE_SELECTION_BASELINE", env.get("RECSTORE_SELECTION_BASELINE"), 0.0
            )
        if "shared" not in overrides:
            config_kwargs["shared"] = _env_bool("RECSTORE_SHARED", env.get("RECSTORE_SHARED"), False)

        config_kwargs.update(overrides)
        return cls(**config_kwargs)
