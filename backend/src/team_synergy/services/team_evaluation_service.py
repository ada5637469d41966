"""Team evaluation with strengths, weaknesses and head-to-head comparison."""
from typing import Iterable, Optional

from team_synergy.models.evaluation import EvaluationResult, MatchupEvaluation
from team_synergy.models.hero import ROLE_ORDER, HeroRegistry
from team_synergy.services.hero_registry_loader import get_hero_registry
from team_synergy.services.scorers import CounterScorer
from team_synergy.services.synergy_service import SynergyService
from team_synergy.utils.roster import compact_roster


class TeamEvaluationService:
    """Evaluates rosters on their own and against an enemy roster."""

    IDEAL_ROLE_COUNT = 2
    STRONG_TEAM_UP_SCORE = 7
    THREAT_TAG_COUNT = 2  # Enemy tag shared by this many heroes needs an answer

    def __init__(
        self,
        registry: Optional[HeroRegistry] = None,
        synergy_service: Optional[SynergyService] = None,
        counter_scorer: Optional[CounterScorer] = None,
    ):
        self.registry = registry if registry is not None else get_hero_registry()
        self.synergy_service = synergy_service or SynergyService(self.registry)
        self.counter_scorer = counter_scorer or CounterScorer(self.registry)

    def describe_team(self, evaluation: EvaluationResult) -> tuple[list[str], list[str]]:
        """Derive strengths and weaknesses from an evaluation."""
        strengths = []
        weaknesses = []

        for team_up in evaluation.active_team_ups:
            if team_up.score >= self.STRONG_TEAM_UP_SCORE:
                strengths.append(f"{team_up.name} team-up ({team_up.anchor} + {team_up.partner})")

        for role in ROLE_ORDER:
            count = evaluation.role_counts.get(role, 0)
            if count == 0:
                weaknesses.append(f"No {role.value}")
            elif count > self.IDEAL_ROLE_COUNT + 1:
                weaknesses.append(f"Stacked {role.value} ({count})")

        if all(evaluation.role_counts.get(r, 0) == self.IDEAL_ROLE_COUNT for r in ROLE_ORDER):
            strengths.append("Balanced 2-2-2 composition")

        return strengths[:3], weaknesses[:3]

    def evaluate_vs_enemy(
        self,
        our_roster: Iterable[Optional[str]],
        enemy_roster: Iterable[Optional[str]],
    ) -> MatchupEvaluation:
        """Compare our roster against the enemy's.

        Synergy advantage is only reported once the enemy roster is known;
        counter edge requires both rosters. The two are reported separately
        and the description only reflects synergy.
        """
        ours = compact_roster(our_roster)
        enemy = compact_roster(enemy_roster)

        our_eval = self.synergy_service.evaluate(ours)
        enemy_eval = self.synergy_service.evaluate(enemy)
        synergy_advantage = our_eval.score - enemy_eval.score if enemy else None

        our_counter = self.counter_scorer.team_counter_total(ours, enemy)
        enemy_counter = self.counter_scorer.team_counter_total(enemy, ours)
        counter_edge = our_counter - enemy_counter if ours and enemy else None

        strengths, weaknesses = self.describe_team(our_eval)
        suggestions = self.suggest_answers(ours, enemy)

        return MatchupEvaluation(
            our_evaluation=our_eval,
            enemy_evaluation=enemy_eval,
            synergy_advantage=synergy_advantage,
            our_counter_total=our_counter,
            enemy_counter_total=enemy_counter,
            counter_edge=counter_edge,
            description=self._describe_advantage(synergy_advantage),
            strengths=strengths,
            weaknesses=weaknesses,
            suggestions=suggestions,
        )

    def suggest_answers(self, ours: list[str], enemy: list[str]) -> list[str]:
        """Suggest a hero for each stacked enemy tag our roster cannot answer.

        A tag carried by at least ``THREAT_TAG_COUNT`` enemy heroes is
        unanswered when none of our heroes carries a response tag for it. The
        suggested hero is the best counter among heroes not on our roster,
        ties broken by registry order.
        """
        enemy_tags = self.counter_scorer.tag_histogram(enemy)
        our_tags = self.counter_scorer.tag_histogram(ours)
        taken = set(ours)

        suggestions = []
        for enemy_tag, count in enemy_tags.items():
            if count < self.THREAT_TAG_COUNT:
                continue
            answers = self.registry.responses_to(enemy_tag)
            if not answers or any(our_tags[tag] for tag in answers):
                continue
            candidates = [
                hero for hero in self.registry.heroes
                if hero not in taken and self.registry.tags_of(hero) & answers
            ]
            if not candidates:
                continue
            best = max(
                candidates,
                key=lambda hero: self.counter_scorer.counter_score(hero, ours, enemy),
            )
            answering = ", ".join(sorted(self.registry.tags_of(best) & answers))
            suggestions.append(f"Add {best} ({answering})")
        return suggestions

    def _describe_advantage(self, synergy_advantage: Optional[int]) -> str:
        """Generate human-readable synergy advantage description."""
        if synergy_advantage is None:
            return "Enemy roster unknown"
        if synergy_advantage > 0:
            return "Your composition has the synergy advantage"
        elif synergy_advantage < 0:
            return "Enemy composition has the synergy advantage"
        return "Even synergy matchup"
