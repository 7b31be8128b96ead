"""SQLite backend for the toy inventory."""

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path

import sqlite_utils

from toydesk.inventory.base import StoreError, StoreUnavailableError, ToyStore
from toydesk.inventory.models import UNKNOWN_NAME, ToyRecord

logger = logging.getLogger(__name__)


class SqliteToyStore(ToyStore):
    """Persists toys to a ``toys`` table and reloads after every write."""

    reload_after_save = True

    def __init__(self, db_path: Path | None = None, memory: bool = False) -> None:
        super().__init__()
        try:
            if memory:
                self._db = sqlite_utils.Database(memory=True)
            else:
                if db_path is None:
                    raise StoreUnavailableError("db_path is required unless memory=True")
                db_path.parent.mkdir(parents=True, exist_ok=True)
                self._db = sqlite_utils.Database(str(db_path))
            self._ensure_table()
            self.reload()
        except StoreUnavailableError:
            raise
        except (sqlite3.Error, OSError, StoreError) as e:
            raise StoreUnavailableError(f"could not open toy store: {e}") from e

    def _ensure_table(self) -> None:
        if "toys" not in self._db.table_names():
            self._db["toys"].create({
                "id": str,
                "name": str,
                "amount": int,
                "category": str,  # NULL when uncategorized
            }, pk="id")

    def load(self) -> list[ToyRecord]:
        try:
            rows = list(self._db["toys"].rows_where(order_by="rowid"))
        except sqlite3.Error as e:
            raise StoreError(f"could not read toys: {e}") from e
        return [
            ToyRecord(
                id=row["id"],
                name=UNKNOWN_NAME if row["name"] is None else row["name"],
                amount=int(row["amount"] or 0),
                category=row["category"],
            )
            for row in rows
        ]

    def save(self, records: list[ToyRecord]) -> None:
        rows = [
            {"id": r.id, "name": r.name, "amount": r.amount, "category": r.category}
            for r in records
        ]
        try:
            with self._db.conn:
                self._db["toys"].delete_where()
                if rows:
                    self._db["toys"].insert_all(rows, pk="id")
        except sqlite3.Error as e:
            raise StoreError(f"could not write toys: {e}") from e
        logger.debug("Saved %d toys", len(rows))
