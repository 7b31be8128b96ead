"""Flat JSON file backend for the toy inventory."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from toydesk.inventory.base import StoreError, ToyStore
from toydesk.inventory.models import ToyRecord

logger = logging.getLogger(__name__)


class JsonToyStore(ToyStore):
    """Stores the whole collection as one JSON array, overwritten on every change."""

    def __init__(self, path: Path) -> None:
        super().__init__()
        self._path = path
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self.reload()

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[ToyRecord]:
        """Read the collection. A missing or unreadable file yields an empty list."""
        if not self._path.exists():
            return []
        try:
            with open(self._path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning(f"Failed to read toys from {self._path}: {e}")
            return []

        if not isinstance(data, list):
            logger.warning(f"Ignoring {self._path}: expected a JSON array")
            return []

        records = []
        for item in data:
            try:
                records.append(ToyRecord.from_dict(item))
            except (KeyError, TypeError, ValueError, AttributeError) as e:
                logger.warning(f"Skipping malformed toy entry {item!r}: {e}")
        return records

    def save(self, records: list[ToyRecord]) -> None:
        try:
            with open(self._path, "w", encoding="utf-8") as f:
                json.dump([r.to_dict() for r in records], f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise StoreError(f"could not write {self._path}: {e}") from e
        logger.debug(f"Saved {len(records)} toys to {self._path}")
