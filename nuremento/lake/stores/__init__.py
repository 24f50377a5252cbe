"""Lake note store implementations."""

from nuremento.lake.store import LakeNoteStore
from nuremento.lake.stores.inmemory import InMemoryLakeNoteStore
from nuremento.lake.stores.postgres import PostgresLakeNoteStore

__all__ = ["InMemoryLakeNoteStore", "LakeNoteStore", "PostgresLakeNoteStore"]
