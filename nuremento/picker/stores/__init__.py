"""Daily-pick state store implementations."""

from nuremento.picker.store import DailyPickStateStore
from nuremento.picker.stores.inmemory import InMemoryDailyPickStateStore
from nuremento.picker.stores.postgres import PostgresDailyPickStateStore

__all__ = [
    "DailyPickStateStore",
    "InMemoryDailyPickStateStore",
    "PostgresDailyPickStateStore",
]
