"""Utility modules for team_synergy."""

from team_synergy.utils.role_normalizer import (
    ROLE_ALIASES,
    normalize_role,
    normalize_role_strict,
    is_valid_role,
)
from team_synergy.utils.roster import (
    EMPTY,
    compact_roster,
    pad_roster,
    first_empty_slot,
)

__all__ = [
    "ROLE_ALIASES",
    "normalize_role",
    "normalize_role_strict",
    "is_valid_role",
    "EMPTY",
    "compact_roster",
    "pad_roster",
    "first_empty_slot",
]
