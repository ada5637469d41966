"""Scoring components for the recommendation engine."""
from team_synergy.services.scorers.counter_scorer import CounterScorer

__all__ = [
    "CounterScorer",
]
