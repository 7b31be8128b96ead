from toydesk.inventory.base import StoreError, StoreUnavailableError, ToyStore
from toydesk.inventory.factory import create_store
from toydesk.inventory.manager import ToyManager
from toydesk.inventory.models import StoreResult, ToyRecord

__all__ = [
    "StoreError",
    "StoreResult",
    "StoreUnavailableError",
    "ToyManager",
    "ToyRecord",
    "ToyStore",
    "create_store",
]
