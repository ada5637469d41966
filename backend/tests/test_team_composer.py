"""Tests for the ideal-team composer."""
import pytest
from team_synergy.config import DEFAULT_KNOWLEDGE_DIR
from team_synergy.models.hero import HeroRegistry, Role, TeamUp
from team_synergy.services.hero_registry_loader import load_hero_registry
from team_synergy.services.synergy_service import SynergyService
from team_synergy.services.team_composer import IdealTeamComposer

ROLES = {
    "V1": Role.VANGUARD,
    "V2": Role.VANGUARD,
    "D1": Role.DUELIST,
    "D2": Role.DUELIST,
    "S1": Role.STRATEGIST,
    "S2": Role.STRATEGIST,
    "D3": Role.DUELIST,
}


@pytest.fixture
def flat_registry():
    """Registry without team-ups: only role balance matters."""
    return HeroRegistry(roles=ROLES)


@pytest.fixture
def linked_registry():
    """Registry with one high-impact and one low-impact team-up."""
    return HeroRegistry(
        roles=ROLES,
        team_ups=(
            TeamUp("S1", "D1", "Link", 8),
            TeamUp("V1", "S2", "Weak", 3),
        ),
    )


@pytest.fixture
def seed_registry():
    return load_hero_registry(DEFAULT_KNOWLEDGE_DIR)


# ======================================================================
# Greedy fill
# ======================================================================


def test_pass_one_completes_half_present_team_up(linked_registry):
    """Missing anchor goes into the first empty slot."""
    composer = IdealTeamComposer(linked_registry, max_iterations=0)
    result = composer.compose_ideal_team([None, "D1"])
    assert result.roster == ["S1", "D1", None, None, None, None]
    assert result.evaluation.base_score == 8
    assert result.swaps == 0


def test_pass_two_seeds_untouched_pairs(linked_registry):
    """High-impact pairs with neither hero present are added anchor first."""
    composer = IdealTeamComposer(linked_registry, max_iterations=0)
    result = composer.compose_ideal_team(["V1"])
    assert result.roster == ["V1", "S1", "D1", None, None, None]
    assert "S2" not in result.roster  # Low-impact team-up ignored


def test_seed_pass_one_fills_partner_before_search(seed_registry):
    """Wolverine joins Phoenix in pass 1; pass 2 fills the rest."""
    composer = IdealTeamComposer(seed_registry, max_iterations=0)
    result = composer.compose_ideal_team(["Phoenix", None, None, None, None, None])
    assert result.roster == [
        "Phoenix", "Wolverine", "Hulk", "Namor", "Rocket Raccoon", "Peni Parker"
    ]
    assert result.iterations == 0


def test_roster_padded_and_truncated(flat_registry):
    """Input is normalized to exactly six slots."""
    composer = IdealTeamComposer(flat_registry, max_iterations=0)
    assert composer.compose_ideal_team([]).roster == [None] * 6
    long_roster = ["V1", "V2", "D1", "D2", "S1", "S2", "D3"]
    assert composer.compose_ideal_team(long_roster).roster == long_roster[:6]


def test_explicit_roster_size_is_respected(flat_registry):
    """An explicit roster size, even zero, overrides the settings default."""
    four = IdealTeamComposer(flat_registry, roster_size=4, max_iterations=0)
    assert four.compose_ideal_team(["V1"]).roster == ["V1", None, None, None]
    empty = IdealTeamComposer(flat_registry, roster_size=0, max_iterations=0)
    assert empty.compose_ideal_team(["V1"]).roster == []


# ======================================================================
# Local search
# ======================================================================


def test_local_search_accepts_first_strict_improvement(flat_registry):
    """Equal-score swaps are skipped; the first strict improvement wins."""
    composer = IdealTeamComposer(flat_registry)
    result = composer.compose_ideal_team(["V1", "V2", "D1", "D2", "S1", "D3"])
    assert result.roster == ["V1", "V2", "S2", "D2", "S1", "D3"]
    assert result.evaluation.score == 21
    assert result.swaps == 1
    assert result.iterations == 2


def test_composer_is_idempotent(flat_registry):
    """Re-running on its own output performs no swaps."""
    composer = IdealTeamComposer(flat_registry)
    first = composer.compose_ideal_team(["V1", "V2", "D1", "D2", "S1", "D3"])
    second = composer.compose_ideal_team(first.roster)
    assert second.swaps == 0
    assert second.iterations == 1
    assert second.roster == first.roster
    assert second.evaluation.score == first.evaluation.score


def test_iteration_cap(flat_registry):
    """The outer loop stops at max_iterations."""
    composer = IdealTeamComposer(flat_registry, max_iterations=1)
    result = composer.compose_ideal_team([])
    assert result.roster == ["V1", None, None, None, None, None]
    assert result.swaps == 1
    assert result.iterations == 1


def test_seed_composition_is_valid(seed_registry):
    """Seed composition has six distinct known heroes and never loses score."""
    composer = IdealTeamComposer(seed_registry)
    filled = IdealTeamComposer(seed_registry, max_iterations=0).compose_ideal_team(["Phoenix"])
    result = composer.compose_ideal_team(["Phoenix"])

    assert len(result.roster) == 6
    assert len(set(result.roster)) == 6
    assert all(hero in seed_registry.roles for hero in result.roster)
    assert result.evaluation.score >= filled.evaluation.score
    assert result.evaluation == SynergyService(seed_registry).evaluate(result.roster)


def test_seed_composition_is_deterministic(seed_registry):
    """Same input, same output."""
    composer = IdealTeamComposer(seed_registry)
    assert composer.compose_ideal_team(["Hela"]) == composer.compose_ideal_team(["Hela"])
