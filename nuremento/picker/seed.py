"""Seed and index selection for the daily picker.

The mapping must be identical on every platform: SHA-256 over the UTF-8
seed, the first four digest bytes read as an unsigned big-endian integer,
reduced modulo the collection length.
"""

import hashlib
from datetime import date

from nuremento.errors import ProgrammingInvariantViolation

SEED_SEPARATOR = ":"
SEED_PREFIX_BYTES = 4


def compute_seed(owner_id: str, day: date) -> str:
    """Build the hash input for an owner on a calendar day.

    >>> compute_seed("user_123", date(2025, 3, 9))
    'user_123:2025-03-09'
    """
    return f"{owner_id}{SEED_SEPARATOR}{day.isoformat()}"


def select_index(seed: str, length: int) -> int:
    """Map a seed onto a position in a collection of the given length.

    Raises:
        ProgrammingInvariantViolation: If length is not positive. Callers
            must return "no item" for an empty collection instead.
    """
    if length <= 0:
        raise ProgrammingInvariantViolation(
            f"select_index requires a non-empty collection, got length={length}"
        )

    digest = hashlib.sha256(seed.encode("utf-8")).digest()
    value = int.from_bytes(digest[:SEED_PREFIX_BYTES], "big", signed=False)
    return value % length
