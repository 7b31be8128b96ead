"""Observable toy collection for interactive views."""

from __future__ import annotations

import logging

from toydesk.core.events import ChangeDispatcher, Listener
from toydesk.inventory.base import ToyStore
from toydesk.inventory.models import StoreResult, ToyRecord

logger = logging.getLogger(__name__)


class ToyManager:
    """Wraps a ToyStore and republishes the toy list after every change.

    Views subscribe with a callback that receives the full list.
    """

    def __init__(self, store: ToyStore) -> None:
        self._store = store
        self._changes: ChangeDispatcher[list[ToyRecord]] = ChangeDispatcher()
        self._toys = store.list()

    @property
    def toys(self) -> list[ToyRecord]:
        return list(self._toys)

    @property
    def store(self) -> ToyStore:
        return self._store

    def subscribe(self, listener: Listener[list[ToyRecord]]) -> None:
        self._changes.register(listener)

    def unsubscribe(self, listener: Listener[list[ToyRecord]]) -> None:
        self._changes.unregister(listener)

    def _publish(self) -> None:
        self._toys = self._store.list()
        self._changes.publish(self.toys)

    def reload(self) -> list[ToyRecord]:
        self._store.reload()
        self._publish()
        return self.toys

    def create_toy(self, name: str, amount: int) -> ToyRecord:
        if amount < 0:
            raise ValueError("amount must be >= 0")
        record = self._store.create(name, amount)
        logger.info("Created toy %r (amount=%d)", name, amount)
        self._publish()
        return record

    def update_quantity(self, name: str, amount: int) -> StoreResult:
        if amount < 0:
            raise ValueError("amount must be >= 0")
        result = self._store.update_quantity(name, amount)
        if result is not StoreResult.NOT_FOUND:
            self._publish()
        return result

    def add_category(self, category: str) -> StoreResult:
        result = self._store.add_category(category)
        self._publish()
        return result
