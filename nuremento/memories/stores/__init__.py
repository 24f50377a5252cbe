"""Memory store implementations."""

from nuremento.memories.store import MemoryStore
from nuremento.memories.stores.inmemory import InMemoryMemoryStore
from nuremento.memories.stores.postgres import PostgresMemoryStore

__all__ = ["InMemoryMemoryStore", "MemoryStore", "PostgresMemoryStore"]
