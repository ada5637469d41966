"""Data models for the team synergy engine."""

from team_synergy.models.hero import ROLE_ORDER, HeroRegistry, Role, TeamUp
from team_synergy.models.evaluation import (
    ComposedTeam,
    EvaluationResult,
    MatchupEvaluation,
    RankedCandidate,
)

__all__ = [
    "ROLE_ORDER",
    "HeroRegistry",
    "Role",
    "TeamUp",
    "ComposedTeam",
    "EvaluationResult",
    "MatchupEvaluation",
    "RankedCandidate",
]
