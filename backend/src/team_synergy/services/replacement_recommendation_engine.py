"""Replacement recommendations for a single editable roster slot."""
import logging
from typing import Iterable, Optional

from team_synergy.config import settings
from team_synergy.models.evaluation import RankedCandidate
from team_synergy.models.hero import HeroRegistry, Role
from team_synergy.services.hero_registry_loader import get_hero_registry
from team_synergy.services.scorers import CounterScorer
from team_synergy.services.synergy_service import SynergyService

logger = logging.getLogger(__name__)


class ReplacementRecommendationEngine:
    """Ranks replacement heroes for one slot while the rest of the roster is fixed.

    Two modes:
    - synergy-only: ranking value = synergy delta + role-scarcity bias
    - combined: synergy delta + counter delta * counter_weight + role bias

    Candidates are scanned in the registry's canonical order and sorted
    with a stable sort, so ties keep registry order.
    """

    # Role-scarcity bias, keyed by how many other slots already hold the role
    MISSING_ROLE_BIAS = 5  # Strong push to cover a missing role
    SCARCE_ROLE_BIAS = 2  # Gentle nudge towards balancing singletons

    def __init__(
        self,
        registry: Optional[HeroRegistry] = None,
        synergy_service: Optional[SynergyService] = None,
        counter_scorer: Optional[CounterScorer] = None,
    ):
        self.registry = registry if registry is not None else get_hero_registry()
        self.synergy_service = synergy_service or SynergyService(self.registry)
        self.counter_scorer = counter_scorer or CounterScorer(self.registry)

    def recommend_replacements(
        self,
        roster: list[Optional[str]],
        editable_index: int,
        limit: Optional[int] = None,
    ) -> list[RankedCandidate]:
        """Recommend replacements ranked by synergy delta plus role bias.

        Args:
            roster: Current roster (empty slots allowed)
            editable_index: Slot the engine may change
            limit: Maximum candidates to return (default from settings)

        Returns:
            Candidates with a strictly positive ranking value, best first
        """
        if limit is None:
            limit = settings.recommendation_limit
        current = roster[editable_index]
        base_score = self.synergy_service.score(roster)
        other_counts = self._role_counts_elsewhere(roster, editable_index)

        results = []
        for candidate in self._candidate_pool(roster, current):
            details = self.synergy_service.evaluate(
                self._with_replacement(roster, editable_index, candidate)
            )
            raw_delta = details.score - base_score
            role = self.registry.role_of(candidate)
            role_bias = self._role_bias(role, other_counts)
            results.append(RankedCandidate(
                hero=candidate,
                role=role,
                synergy_delta=raw_delta,
                role_bias=role_bias,
                total=raw_delta + role_bias,
                details=details,
            ))

        results = [r for r in results if r.total > 0]
        results.sort(key=lambda r: -r.total)
        return results[:limit]

    def recommend_replacements_with_counters(
        self,
        roster: list[Optional[str]],
        editable_index: int,
        enemy_roster: Iterable[Optional[str]],
        limit: Optional[int] = None,
        counter_weight: Optional[float] = None,
    ) -> list[RankedCandidate]:
        """Recommend replacements using synergy, counter value and role bias.

        A candidate is kept if any of synergy delta, counter delta or role
        bias is positive, regardless of the weighted total.

        Args:
            roster: Current roster (empty slots allowed)
            editable_index: Slot the engine may change
            enemy_roster: Observed enemy heroes
            limit: Maximum candidates to return (default from settings)
            counter_weight: Multiplier on counter delta (default from settings)

        Returns:
            Kept candidates sorted by total, best first
        """
        if limit is None:
            limit = settings.recommendation_limit
        if counter_weight is None:
            counter_weight = settings.counter_weight
        enemy_roster = list(enemy_roster)

        current = roster[editable_index]
        base_score = self.synergy_service.score(roster)
        other_counts = self._role_counts_elsewhere(roster, editable_index)
        current_counter = self.counter_scorer.counter_score(current, roster, enemy_roster)

        results = []
        for candidate in self._candidate_pool(roster, current):
            details = self.synergy_service.evaluate(
                self._with_replacement(roster, editable_index, candidate)
            )
            synergy_delta = details.score - base_score
            counter_delta = (
                self.counter_scorer.counter_score(candidate, roster, enemy_roster)
                - current_counter
            )
            role = self.registry.role_of(candidate)
            role_bias = self._role_bias(role, other_counts)

            if synergy_delta > 0 or counter_delta > 0 or role_bias > 0:
                results.append(RankedCandidate(
                    hero=candidate,
                    role=role,
                    synergy_delta=synergy_delta,
                    counter_delta=counter_delta,
                    role_bias=role_bias,
                    total=synergy_delta + counter_delta * counter_weight + role_bias,
                    details=details,
                ))

        results.sort(key=lambda r: -r.total)
        return results[:limit]

    def recommend_for_slot(
        self,
        roster: list[Optional[str]],
        editable_index: int,
        enemy_roster: Optional[Iterable[Optional[str]]] = None,
        limit: Optional[int] = None,
        counter_weight: Optional[float] = None,
    ) -> list[RankedCandidate]:
        """Recommend for a UI-style roster with empty slots.

        Empty slots are dropped before scoring. Without any enemy heroes and a
        positive counter weight this falls back to synergy-only mode; at weight
        0 combined mode is kept, so role bias alone still qualifies a candidate.
        An empty editable slot yields no recommendations.
        """
        if not roster[editable_index]:
            return []

        compact = [hero for hero in roster if hero]
        local_index = sum(1 for hero in roster[:editable_index] if hero)
        enemy = [hero for hero in (enemy_roster or []) if hero]
        if counter_weight is None:
            counter_weight = settings.counter_weight

        if not enemy and counter_weight > 0:
            logger.debug("No enemy information; using synergy-only recommendations")
            return self.recommend_replacements(compact, local_index, limit=limit)

        return self.recommend_replacements_with_counters(
            compact, local_index, enemy, limit=limit, counter_weight=counter_weight
        )

    def _candidate_pool(self, roster: list[Optional[str]], current: Optional[str]) -> list[str]:
        """Known heroes not already on the roster, in canonical order."""
        taken = {hero for hero in roster if hero}
        return [
            hero for hero in self.registry.heroes
            if hero != current and hero not in taken
        ]

    def _role_counts_elsewhere(
        self, roster: list[Optional[str]], editable_index: int
    ) -> dict[Role, int]:
        """Role counts for every slot except the editable one."""
        others = [hero for i, hero in enumerate(roster) if i != editable_index % len(roster)]
        return self.synergy_service.count_roles(others)

    def _role_bias(self, role: Optional[Role], other_counts: dict[Role, int]) -> int:
        if role is None:
            return 0
        count = other_counts.get(role, 0)
        if count == 0:
            return self.MISSING_ROLE_BIAS
        if count == 1:
            return self.SCARCE_ROLE_BIAS
        return 0

    @staticmethod
    def _with_replacement(
        roster: list[Optional[str]], index: int, hero: str
    ) -> list[Optional[str]]:
        new_roster = list(roster)
        new_roster[index] = hero
        return new_roster
