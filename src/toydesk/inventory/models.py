"""Toy inventory records."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

UNKNOWN_NAME = "Unknown"
UNCATEGORIZED = "Uncategorized"


def _new_id() -> str:
    return str(uuid.uuid4())


@dataclass
class ToyRecord:
    """One inventory entry."""

    name: str
    amount: int
    category: str | None = None
    id: str = field(default_factory=_new_id)

    @property
    def display_category(self) -> str:
        return self.category or UNCATEGORIZED

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"id": self.id, "name": self.name, "amount": self.amount}
        if self.category is not None:
            data["category"] = self.category
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ToyRecord:
        return cls(
            id=data.get("id") or _new_id(),
            name=UNKNOWN_NAME if data.get("name") is None else data["name"],
            amount=int(data["amount"]),
            category=data.get("category"),
        )


class StoreResult(str, Enum):
    """Outcome of a mutating store operation."""

    OK = "ok"
    NOT_FOUND = "not_found"
    WRITE_FAILED = "write_failed"
