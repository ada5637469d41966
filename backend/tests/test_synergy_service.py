"""Tests for synergy service."""
import pytest
from team_synergy.config import DEFAULT_KNOWLEDGE_DIR
from team_synergy.models.hero import Role
from team_synergy.services.hero_registry_loader import load_hero_registry
from team_synergy.services.synergy_service import SynergyService, role_balance_value


@pytest.fixture
def service():
    return SynergyService(load_hero_registry(DEFAULT_KNOWLEDGE_DIR))


# ======================================================================
# Role-balance table
# ======================================================================


@pytest.mark.parametrize("count,expected", [
    (0, -8),
    (1, 2),
    (2, 7),
    (3, 5),
    (4, 3),
    (5, 1),
    (6, 0),
    (7, 0),
])
def test_role_balance_value(count, expected):
    """Role bonus peaks at two and tapers off."""
    assert role_balance_value(count) == expected


# ======================================================================
# Evaluation
# ======================================================================


def test_phoenix_wolverine_scenario(service):
    """Primal Flame is active; both heroes are Duelists."""
    result = service.evaluate(["Phoenix", "Wolverine", None, None, None, None])
    assert [t.name for t in result.active_team_ups] == ["Primal Flame"]
    assert result.base_score == 10
    assert result.role_counts == {Role.VANGUARD: 0, Role.DUELIST: 2, Role.STRATEGIST: 0}
    assert result.role_bonus == role_balance_value(0) + role_balance_value(2) + role_balance_value(0)
    assert result.score == 10 - 8 + 7 - 8


def test_empty_roster(service):
    """An empty roster is penalized for every missing role."""
    result = service.evaluate([])
    assert result.base_score == 0
    assert result.active_team_ups == ()
    assert result.score == -24


def test_unknown_heroes_ignored(service):
    """Unknown heroes contribute no role and no team-up."""
    result = service.evaluate(["Nobody", "Phoenix"])
    assert result.role_counts[Role.DUELIST] == 1
    assert result.base_score == 0
    assert result.score == -8 + 2 - 8


def test_duplicates_do_not_double_team_ups(service):
    """Team-ups match by set membership; duplicate heroes still count per slot for roles."""
    result = service.evaluate(["Phoenix", "Phoenix", "Wolverine"])
    assert result.base_score == 10
    assert result.role_counts[Role.DUELIST] == 3
    assert result.score == 10 - 8 + 5 - 8


def test_shared_anchor_team_ups_all_count(service):
    """Several relations sharing an anchor contribute independently."""
    result = service.evaluate(["Invisible Woman", "Mister Fantastic", "Human Torch", "The Thing"])
    assert len(result.active_team_ups) == 3
    assert result.base_score == 24
    # Vanguard 1, Duelist 2, Strategist 1
    assert result.role_bonus == 2 + 7 + 2
    assert result.score == 35


def test_balanced_roster(service):
    """2-2-2 roster earns the maximum role bonus."""
    result = service.evaluate(
        ["Hulk", "Thor", "Phoenix", "Wolverine", "Adam Warlock", "Luna Snow"]
    )
    assert {t.name for t in result.active_team_ups} == {
        "Primal Flame", "Duality Dance", "Fastball Special"
    }
    assert result.base_score == 10 + 8 + 1
    assert result.role_bonus == 21
    assert result.score == 40


def test_team_up_activation(service):
    """Every relation is active with both heroes and inactive with one."""
    for team_up in service.registry.team_ups:
        both = service.get_active_team_ups([team_up.anchor, team_up.partner])
        assert team_up in both
        only_anchor = service.get_active_team_ups([team_up.anchor])
        assert team_up not in only_anchor


def test_evaluate_is_deterministic(service):
    """Repeated evaluation returns identical results."""
    roster = ["Hela", "Thor", "Storm", "Jeff the Land Shark", "Groot", "Magik"]
    assert service.evaluate(roster) == service.evaluate(roster)


def test_to_dict_uses_role_names(service):
    """Serialized result uses role strings."""
    data = service.evaluate(["Phoenix", "Wolverine"]).to_dict()
    assert data["score"] == 1
    assert data["role_counts"] == {"Vanguard": 0, "Duelist": 2, "Strategist": 0}
    assert data["active_team_ups"][0]["name"] == "Primal Flame"


def test_score_shortcut(service):
    """score() matches evaluate().score."""
    roster = ["Hulk", "Namor"]
    assert service.score(roster) == service.evaluate(roster).score
