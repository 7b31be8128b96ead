"""Backend selection for the toy inventory."""

from __future__ import annotations

from toydesk.core.config import Settings
from toydesk.inventory.base import ToyStore

BACKENDS = ("sqlite", "json")


def create_store(settings: Settings, backend: str | None = None) -> ToyStore:
    """Open the configured toy store.

    Raises ValueError for an unknown backend name and StoreUnavailableError
    when the SQLite store cannot be opened.
    """
    name = (backend or settings.toy_backend).lower()
    if name == "sqlite":
        from toydesk.inventory.sqlite_store import SqliteToyStore

        return SqliteToyStore(settings.toys_db_path)
    if name == "json":
        from toydesk.inventory.json_store import JsonToyStore

        return JsonToyStore(settings.toys_json_path)
    raise ValueError(f"Unknown toy backend: {name!r} (expected one of {', '.join(BACKENDS)})")
