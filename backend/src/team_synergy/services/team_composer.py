"""Ideal-team composer: greedy team-up fill followed by hill climbing."""
import logging
from typing import Iterable, Optional

from team_synergy.config import settings
from team_synergy.models.evaluation import ComposedTeam
from team_synergy.models.hero import HeroRegistry, TeamUp
from team_synergy.services.hero_registry_loader import get_hero_registry
from team_synergy.services.synergy_service import SynergyService
from team_synergy.utils.roster import first_empty_slot, pad_roster

logger = logging.getLogger(__name__)


class IdealTeamComposer:
    """Proposes a full roster that maximizes synergy score.

    Phases:
    1. Pass 1 - complete high-impact team-ups that are half present
    2. Pass 2 - seed remaining empty slots with untouched high-impact pairs
    3. Local search - first-improvement single-slot swaps, restarting the
       scan after each accepted swap, capped at ``max_iterations``

    Deterministic: slots are scanned in index order, heroes in registry order,
    team-ups in table order. Only strict improvements are accepted, so the
    result is a local optimum, not a guaranteed global one.
    """

    def __init__(
        self,
        registry: Optional[HeroRegistry] = None,
        synergy_service: Optional[SynergyService] = None,
        roster_size: Optional[int] = None,
        high_impact_threshold: Optional[int] = None,
        max_iterations: Optional[int] = None,
    ):
        self.registry = registry if registry is not None else get_hero_registry()
        self.synergy_service = synergy_service or SynergyService(self.registry)
        self.roster_size = roster_size if roster_size is not None else settings.roster_size
        self.high_impact_threshold = (
            high_impact_threshold
            if high_impact_threshold is not None
            else settings.high_impact_threshold
        )
        self.max_iterations = (
            max_iterations if max_iterations is not None else settings.local_search_max_iterations
        )

    def compose_ideal_team(self, partial_roster: Iterable[Optional[str]]) -> ComposedTeam:
        """Fill and improve a partial roster.

        Args:
            partial_roster: Up to ``roster_size`` slots; None/"" marks an empty slot

        Returns:
            ComposedTeam with the final roster (always ``roster_size`` slots),
            its evaluation, and local-search diagnostics
        """
        roster = pad_roster(partial_roster, self.roster_size)
        high_impact = self.registry.high_impact_team_ups(self.high_impact_threshold)

        self._complete_partial_pairs(roster, high_impact)
        self._seed_untouched_pairs(roster, high_impact)
        swaps, iterations = self._local_search(roster)

        return ComposedTeam(
            roster=roster,
            evaluation=self.synergy_service.evaluate(roster),
            swaps=swaps,
            iterations=iterations,
        )

    def _complete_partial_pairs(self, roster: list[Optional[str]], team_ups: list[TeamUp]) -> None:
        """Pass 1: add the missing half of any half-present high-impact team-up."""
        for team_up in team_ups:
            has_anchor = team_up.anchor in roster
            has_partner = team_up.partner in roster
            if has_anchor and not has_partner:
                self._try_add(roster, team_up.partner)
            elif has_partner and not has_anchor:
                self._try_add(roster, team_up.anchor)

    def _seed_untouched_pairs(self, roster: list[Optional[str]], team_ups: list[TeamUp]) -> None:
        """Pass 2: add both heroes of high-impact team-ups with neither present."""
        for team_up in team_ups:
            if first_empty_slot(roster) is None:
                return
            if team_up.anchor in roster or team_up.partner in roster:
                continue
            self._try_add(roster, team_up.anchor)
            self._try_add(roster, team_up.partner)

    def _local_search(self, roster: list[Optional[str]]) -> tuple[int, int]:
        """Hill-climb in place. Returns (accepted swaps, outer iterations)."""
        swaps = 0
        iterations = 0
        improved = True
        while improved and iterations < self.max_iterations:
            iterations += 1
            improved = False
            base = self.synergy_service.score(roster)

            for slot in range(len(roster)):
                original = roster[slot]
                for candidate in self.registry.heroes:
                    if candidate in roster and candidate != original:
                        continue
                    roster[slot] = candidate
                    new_score = self.synergy_service.score(roster)
                    if new_score > base:
                        improved = True
                        swaps += 1
                        logger.debug(
                            f"Swap slot {slot}: {original} -> {candidate} ({base} -> {new_score})"
                        )
                        break
                    roster[slot] = original
                if improved:
                    break

        return swaps, iterations

    @staticmethod
    def _try_add(roster: list[Optional[str]], hero: str) -> bool:
        """Place ``hero`` in the first empty slot if absent and a slot is free."""
        if hero in roster:
            return False
        index = first_empty_slot(roster)
        if index is None:
            return False
        roster[index] = hero
        return True
