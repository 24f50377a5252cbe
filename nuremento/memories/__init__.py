"""Memories: journal entries with an optional mood, place and date."""

from nuremento.memories.models import Memory, MemoryCreate, MemoryUpdate
from nuremento.memories.service import MemoryService
from nuremento.memories.store import MemoryStore

__all__ = ["Memory", "MemoryCreate", "MemoryService", "MemoryStore", "MemoryUpdate"]
