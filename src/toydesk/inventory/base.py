"""Storage interface shared by the toy inventory backends."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import replace

from toydesk.inventory.models import StoreResult, ToyRecord

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """A backend failed to read or write the collection."""


class StoreUnavailableError(StoreError):
    """The backend could not be opened at startup."""


class ToyStore(ABC):
    """In-memory toy collection backed by a persistence implementation.

    Every mutation writes the whole collection back through ``save``.
    A failed write is logged and reported as ``StoreResult.WRITE_FAILED``;
    the in-memory change is kept, so memory and disk may diverge until the
    next successful write.
    """

    # Re-read the collection from the backend after each successful write
    reload_after_save = False

    def __init__(self) -> None:
        self._records: list[ToyRecord] = []

    @abstractmethod
    def load(self) -> list[ToyRecord]:
        """Read the full collection from the backend."""
        ...

    @abstractmethod
    def save(self, records: list[ToyRecord]) -> None:
        """Write the full collection. Raises StoreError on failure."""
        ...

    @property
    def backend_name(self) -> str:
        return type(self).__name__

    def reload(self) -> list[ToyRecord]:
        self._records = self.load()
        return self.list()

    def list(self) -> list[ToyRecord]:
        """Return a snapshot of the current collection."""
        return [replace(r) for r in self._records]

    def create(self, name: str, amount: int) -> ToyRecord:
        """Append a new record. Names are not deduplicated."""
        record = ToyRecord(name=name, amount=amount)
        self._records.append(record)
        self._commit()
        return replace(record)

    def update_quantity(self, name: str, amount: int) -> StoreResult:
        """Set the amount of the first record named ``name``."""
        for record in self._records:
            if record.name == name:
                record.amount = amount
                return self._commit()
        logger.debug("No toy named %r; nothing updated", name)
        return StoreResult.NOT_FOUND

    def add_category(self, category: str) -> StoreResult:
        """Set ``category`` on every record."""
        for record in self._records:
            record.category = category
        return self._commit()

    def _commit(self) -> StoreResult:
        try:
            self.save(self._records)
        except StoreError as e:
            logger.warning("%s write failed: %s", self.backend_name, e)
            return StoreResult.WRITE_FAILED

        if self.reload_after_save:
            try:
                self._records = self.load()
            except StoreError as e:
                logger.warning("%s reload failed: %s", self.backend_name, e)
        return StoreResult.OK
