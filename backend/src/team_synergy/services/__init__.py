"""Business logic services."""

from team_synergy.services.hero_registry_loader import (
    HeroRegistryError,
    HeroRegistryLoader,
    get_hero_registry,
    load_hero_registry,
)
from team_synergy.services.synergy_service import SynergyService, role_balance_value
from team_synergy.services.replacement_recommendation_engine import (
    ReplacementRecommendationEngine,
)
from team_synergy.services.team_composer import IdealTeamComposer
from team_synergy.services.team_evaluation_service import TeamEvaluationService

__all__ = [
    "HeroRegistryError",
    "HeroRegistryLoader",
    "get_hero_registry",
    "load_hero_registry",
    "SynergyService",
    "role_balance_value",
    "ReplacementRecommendationEngine",
    "IdealTeamComposer",
    "TeamEvaluationService",
]
