"""Change notification dispatcher with pluggable listeners."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

Listener = Callable[[T], None]


class ChangeDispatcher(Generic[T]):
    """Publishes a value to registered listeners.

    Listeners are plain callables receiving the published value.
    Failures are isolated per-listener.
    """

    def __init__(self) -> None:
        self._listeners: list[Listener[T]] = []

    def register(self, listener: Listener[T]) -> None:
        self._listeners.append(listener)

    def unregister(self, listener: Listener[T]) -> None:
        self._listeners = [cb for cb in self._listeners if cb != listener]

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def publish(self, value: T) -> None:
        for listener in list(self._listeners):
            try:
                listener(value)
            except Exception:
                logger.exception("Change listener %r failed", listener)
