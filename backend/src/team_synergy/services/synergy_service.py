"""Synergy scoring: active team-ups plus role-balance bonus."""
from typing import Iterable, Optional

from team_synergy.models.evaluation import EvaluationResult
from team_synergy.models.hero import ROLE_ORDER, HeroRegistry, Role, TeamUp
from team_synergy.services.hero_registry_loader import get_hero_registry

# Role-balance value by role count. Peaks at two; counts of 6+ score 0.
ROLE_BALANCE_TABLE = {0: -8, 1: 2, 2: 7, 3: 5, 4: 3, 5: 1}


def role_balance_value(count: int) -> int:
    """Role-balance bonus for a single role's hero count (6+ is capped at 0)."""
    return ROLE_BALANCE_TABLE.get(count, 0)


class SynergyService:
    """Scores roster synergy against a hero registry."""

    def __init__(self, registry: Optional[HeroRegistry] = None):
        self.registry = registry if registry is not None else get_hero_registry()

    def get_active_team_ups(self, roster: Iterable[Optional[str]]) -> list[TeamUp]:
        """Team-ups whose anchor and partner are both on the roster (table order)."""
        members = {hero for hero in roster if hero}
        return [t for t in self.registry.team_ups if t.is_active(members)]

    def count_roles(self, roster: Iterable[Optional[str]]) -> dict[Role, int]:
        """Tally heroes by role; unknown heroes and empty slots are ignored."""
        counts = {role: 0 for role in ROLE_ORDER}
        for hero in roster:
            role = self.registry.role_of(hero)
            if role is not None:
                counts[role] += 1
        return counts

    def evaluate(self, roster: Iterable[Optional[str]]) -> EvaluationResult:
        """Evaluate a roster's total synergy.

        Total = sum of active team-up scores + sum over roles of
        ``role_balance_value(count)``. Never raises for lists of strings;
        unknown heroes simply contribute nothing.
        """
        roster = list(roster)
        active = self.get_active_team_ups(roster)
        base_score = sum(t.score for t in active)

        role_counts = self.count_roles(roster)
        role_breakdown = {role: role_balance_value(c) for role, c in role_counts.items()}
        role_bonus = sum(role_breakdown.values())

        return EvaluationResult(
            score=base_score + role_bonus,
            base_score=base_score,
            active_team_ups=tuple(active),
            role_counts=role_counts,
            role_bonus=role_bonus,
            role_breakdown=role_breakdown,
        )

    def score(self, roster: Iterable[Optional[str]]) -> int:
        """Shortcut for ``evaluate(roster).score``."""
        return self.evaluate(roster).score
