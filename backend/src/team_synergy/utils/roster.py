"""Roster slot helpers."""

from typing import Iterable, Optional

from team_synergy.config import settings

# Sentinel for an unassigned roster slot
EMPTY = None


def compact_roster(slots: Iterable[Optional[str]]) -> list[str]:
    """Drop empty slots, keeping hero order."""
    return [hero for hero in slots if hero]


def pad_roster(slots: Iterable[Optional[str]], size: Optional[int] = None) -> list[Optional[str]]:
    """Pad or truncate a roster to exactly ``size`` slots (default from settings).

    Falsy values (None, "") are normalized to EMPTY.
    """
    if size is None:
        size = settings.roster_size
    padded = [hero or EMPTY for hero in list(slots)[:size]]
    padded.extend([EMPTY] * (size - len(padded)))
    return padded


def first_empty_slot(slots: list[Optional[str]]) -> Optional[int]:
    """Index of the first empty slot, or None if the roster is full."""
    for i, hero in enumerate(slots):
        if hero is EMPTY:
            return i
    return None
