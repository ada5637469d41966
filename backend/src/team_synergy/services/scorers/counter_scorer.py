"""Tag-based counter scoring against an observed enemy roster."""
from collections import Counter
from typing import Iterable, Optional

from team_synergy.models.hero import HeroRegistry
from team_synergy.services.hero_registry_loader import get_hero_registry


class CounterScorer:
    """Scores how well a hero's tags answer the enemy's aggregate tag profile.

    For every enemy tag (weighted by how many enemy heroes carry it), each
    candidate tag listed in that enemy tag's counter responses contributes
    the enemy tag count. If two or more teammates already carry the same
    tag, that contribution is halved (diminishing returns).

    The result is unnormalized; with the seed data it is usually a small
    non-negative number.
    """

    DIMINISHING_RETURNS_THRESHOLD = 2
    DIMINISHING_RETURNS_FACTOR = 0.5

    def __init__(self, registry: Optional[HeroRegistry] = None):
        self.registry = registry if registry is not None else get_hero_registry()

    def tag_histogram(
        self,
        roster: Iterable[Optional[str]],
        exclude: Optional[str] = None,
    ) -> Counter:
        """Count tag occurrences across a roster.

        Args:
            roster: Hero identifiers (empty slots and unknown heroes ignored)
            exclude: Hero whose occurrences are skipped

        Returns:
            Counter mapping tag -> number of heroes carrying it
        """
        counts: Counter = Counter()
        for hero in roster:
            if not hero or hero == exclude:
                continue
            counts.update(self.registry.tags_of(hero))
        return counts

    def counter_score(
        self,
        candidate: Optional[str],
        friendly_roster: Iterable[Optional[str]],
        enemy_roster: Iterable[Optional[str]],
    ) -> float:
        """Score a candidate hero against the enemy roster.

        Args:
            candidate: Hero being considered as an addition/replacement
            friendly_roster: Our roster (the candidate's own entries are excluded)
            enemy_roster: Observed enemy heroes

        Returns:
            Sum of contributions; 0 if the enemy roster contributes no tags
        """
        enemy_tags = self.tag_histogram(enemy_roster)
        if not enemy_tags:
            return 0

        candidate_tags = self.registry.tags_of(candidate)
        if not candidate_tags:
            return 0

        our_tags = self.tag_histogram(friendly_roster, exclude=candidate)
        score = 0
        for enemy_tag, enemy_count in enemy_tags.items():
            responses = self.registry.responses_to(enemy_tag)
            for tag in sorted(candidate_tags & responses):
                contribution = enemy_count
                if our_tags[tag] >= self.DIMINISHING_RETURNS_THRESHOLD:
                    contribution *= self.DIMINISHING_RETURNS_FACTOR
                score += contribution
        return score

    def team_counter_total(
        self,
        team: Iterable[Optional[str]],
        enemy_roster: Iterable[Optional[str]],
    ) -> float:
        """Total counter coverage of a team against an enemy roster.

        Each hero is scored as if it were the candidate, against the rest of
        its own team. Returns 0 if either side is empty.
        """
        team = [hero for hero in team if hero]
        enemy = [hero for hero in enemy_roster if hero]
        if not team or not enemy:
            return 0
        return sum(self.counter_score(hero, team, enemy) for hero in team)
