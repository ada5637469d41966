"""Evaluation and recommendation result models."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from team_synergy.models.hero import Role, TeamUp


@dataclass(frozen=True)
class EvaluationResult:
    """Synergy evaluation of a single roster."""

    score: int  # base_score + role_bonus, may be negative
    base_score: int  # Sum of active team-up scores
    active_team_ups: tuple[TeamUp, ...]
    role_counts: Mapping[Role, int]
    role_bonus: int
    role_breakdown: Mapping[Role, int]

    def __post_init__(self):
        object.__setattr__(self, "active_team_ups", tuple(self.active_team_ups))
        object.__setattr__(self, "role_counts", MappingProxyType(dict(self.role_counts)))
        object.__setattr__(self, "role_breakdown", MappingProxyType(dict(self.role_breakdown)))

    def __hash__(self):
        return hash((
            self.score,
            self.base_score,
            self.active_team_ups,
            tuple(self.role_counts.items()),
            self.role_bonus,
            tuple(self.role_breakdown.items()),
        ))

    def to_dict(self) -> dict:
        """Serialize to dictionary for JSON response."""
        return {
            "score": self.score,
            "base_score": self.base_score,
            "active_team_ups": [t.to_dict() for t in self.active_team_ups],
            "role_counts": {r.value: c for r, c in self.role_counts.items()},
            "role_bonus": self.role_bonus,
            "role_breakdown": {r.value: v for r, v in self.role_breakdown.items()},
        }


@dataclass
class RankedCandidate:
    """A recommended replacement for the editable slot."""

    hero: str
    role: Role | None
    synergy_delta: int
    role_bias: int
    total: float  # Ranking value
    counter_delta: float = 0.0  # Always 0 in synergy-only mode
    details: Optional[EvaluationResult] = None  # Evaluation of the hypothetical roster

    def to_dict(self) -> dict:
        """Serialize to dictionary for JSON response."""
        return {
            "hero": self.hero,
            "role": self.role.value if self.role else None,
            "synergy_delta": self.synergy_delta,
            "counter_delta": self.counter_delta,
            "role_bias": self.role_bias,
            "total": self.total,
            "details": self.details.to_dict() if self.details else None,
        }


@dataclass
class ComposedTeam:
    """Output of the ideal-team composer."""

    roster: list[str | None]
    evaluation: EvaluationResult
    swaps: int = 0  # Accepted local-search swaps
    iterations: int = 0  # Outer local-search iterations run

    def to_dict(self) -> dict:
        return {
            "roster": list(self.roster),
            "evaluation": self.evaluation.to_dict(),
            "swaps": self.swaps,
            "iterations": self.iterations,
        }


@dataclass
class MatchupEvaluation:
    """Head-to-head comparison of two rosters."""

    our_evaluation: EvaluationResult
    enemy_evaluation: EvaluationResult
    synergy_advantage: int | None  # None until the enemy roster is known
    our_counter_total: float = 0.0
    enemy_counter_total: float = 0.0
    counter_edge: float | None = None  # None unless both rosters are known
    description: str = ""
    strengths: list[str] = field(default_factory=list)
    weaknesses: list[str] = field(default_factory=list)
    suggestions: list[str] = field(default_factory=list)  # e.g. "Add Namor (anti-dive, frontline)"

    def to_dict(self) -> dict:
        """Serialize to dictionary for JSON response."""
        return {
            "our_evaluation": self.our_evaluation.to_dict(),
            "enemy_evaluation": self.enemy_evaluation.to_dict(),
            "synergy_advantage": self.synergy_advantage,
            "our_counter_total": self.our_counter_total,
            "enemy_counter_total": self.enemy_counter_total,
            "counter_edge": self.counter_edge,
            "description": self.description,
            "strengths": list(self.strengths),
            "weaknesses": list(self.weaknesses),
            "suggestions": list(self.suggestions),
        }
