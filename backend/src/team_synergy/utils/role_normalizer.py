"""Centralized role normalization utility.

Knowledge files and callers may describe roles in several ways ("tank",
"DPS", "healer", ...). All of them normalize to the three canonical
``Role`` values through this module.
"""

from typing import Optional

from team_synergy.models.hero import Role

# Comprehensive mapping from any known role format (lowercase) to canonical role
ROLE_ALIASES: dict[str, Role] = {
    # Vanguard variations
    "vanguard": Role.VANGUARD,
    "tank": Role.VANGUARD,
    "frontline": Role.VANGUARD,

    # Duelist variations
    "duelist": Role.DUELIST,
    "dps": Role.DUELIST,
    "damage": Role.DUELIST,

    # Strategist variations
    "strategist": Role.STRATEGIST,
    "support": Role.STRATEGIST,
    "healer": Role.STRATEGIST,
}


def normalize_role(role: Optional[str]) -> Optional[Role]:
    """Normalize a role string to a canonical Role.

    Args:
        role: Role string in any known format (e.g., "Tank", "dps", "Strategist")

    Returns:
        Canonical Role, or None if invalid/None

    Examples:
        >>> normalize_role("Tank")
        <Role.VANGUARD: 'Vanguard'>
        >>> normalize_role("healer")
        <Role.STRATEGIST: 'Strategist'>
        >>> normalize_role(None)
    """
    if role is None:
        return None
    if isinstance(role, Role):
        return role
    return ROLE_ALIASES.get(role.strip().lower())


def normalize_role_strict(role: str) -> Role:
    """Normalize a role string, raising ValueError if unknown."""
    normalized = normalize_role(role)
    if normalized is None:
        raise ValueError(f"Unknown role: {role}")
    return normalized


def is_valid_role(role: Optional[str]) -> bool:
    """Check if a role string can be normalized."""
    return normalize_role(role) is not None
