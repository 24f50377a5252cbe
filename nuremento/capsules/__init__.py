"""Time capsules: messages locked until a scheduled date."""

from nuremento.capsules.lock import CapsuleState, capsule_state, is_locked, parse_open_on
from nuremento.capsules.models import CapsuleCreate, TimeCapsule
from nuremento.capsules.service import CapsuleService, CapsuleSummary
from nuremento.capsules.store import CapsuleStore

__all__ = [
    "CapsuleCreate",
    "CapsuleService",
    "CapsuleSummary",
    "CapsuleState",
    "CapsuleStore",
    "TimeCapsule",
    "capsule_state",
    "is_locked",
    "parse_open_on",
]
