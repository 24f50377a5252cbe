"""Deterministic daily picker.

Chooses one item per owner per calendar day from a hash of
(owner, day), with an optional once-per-day gate.
"""

from nuremento.picker.models import DailyPickState
from nuremento.picker.seed import SEED_PREFIX_BYTES, compute_seed, select_index
from nuremento.picker.service import DailyPicker, OrderedItemSource
from nuremento.picker.store import DailyPickStateStore

__all__ = [
    "DailyPickState",
    "DailyPickStateStore",
    "DailyPicker",
    "OrderedItemSource",
    "SEED_PREFIX_BYTES",
    "compute_seed",
    "select_index",
]
