"""Time capsule store implementations."""

from nuremento.capsules.store import CapsuleStore
from nuremento.capsules.stores.inmemory import InMemoryCapsuleStore
from nuremento.capsules.stores.postgres import PostgresCapsuleStore

__all__ = ["CapsuleStore", "InMemoryCapsuleStore", "PostgresCapsuleStore"]
