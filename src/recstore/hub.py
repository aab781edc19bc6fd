"""Synchronous publish/subscribe hub for a single event type."""

from __future__ import annotations

import itertools
import logging
from collections.abc import Callable
from typing import Any, Generic, TypeVar

_logger = logging.getLogger(__name__)

E = TypeVar("E")

Listener = Callable[[E], None]


class Subscription:
    """Handle for one listener registration.

    Calling the handle removes the registration. Further calls are no-ops.
    """

    __slots__ = ("_hub", "_token")

    def __init__(self, hub: NotificationHub[Any], token: int) -> None:
        self._hub: NotificationHub[Any] | None = hub
        self._token = token

    @property
    def active(self) -> bool:
        """Whether the listener is still registered."""
        return self._hub is not None and self._hub._has_token(self._token)  # noqa: SLF001

    def __call__(self) -> None:
        hub, self._hub = self._hub, None
        if hub is not None:
            hub._remove(self._token)  # noqa: SLF001

    def __repr__(self) -> str:
        return f"Subscription(token={self._token}, active={self.active})"


class NotificationHub(Generic[E]):
    """Fan-out registry delivering each published event to every listener.

    Listeners run inline on the publisher's call stack, in registration
    order. The listener list is snapshotted when :meth:`publish` starts, so
    registrations changed by a listener take effect from the next event.
    Exceptions raised by a listener propagate to the publisher and skip the
    listeners that had not run yet.
    """

    def __init__(self) -> None:
        self._listeners: dict[int, Listener[E]] = {}
        self._tokens = itertools.count(1)

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def subscribe(self, listener: Listener[E]) -> Subscription:
        """Register *listener* for every future event."""
        token = next(self._tokens)
        self._listeners[token] = listener
        _logger.debug("Listener subscribed token=%d listeners=%d", token, len(self._listeners))
        return Subscription(self, token)

    def publish(self, event: E) -> None:
        """Invoke every registered listener with *event*."""
        for listener in list(self._listeners.values()):
            listener(event)

    def clear(self) -> None:
        """Remove every registration."""
        self._listeners.clear()

    def _has_token(self, token: int) -> bool:
        return token in self._listeners

    def _remove(self, token: int) -> None:
        if self._listeners.pop(token, None) is not None:
            _logger.debug("Listener unsubscribed token=%d listeners=%d", token, len(self._listeners))
