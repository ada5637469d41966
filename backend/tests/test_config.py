"""Tests for settings."""
from pathlib import Path

from team_synergy.config import DEFAULT_KNOWLEDGE_DIR, Settings


def test_defaults(monkeypatch):
    """Defaults match the documented scoring knobs."""
    monkeypatch.delenv("KNOWLEDGE_DIR", raising=False)
    settings = Settings(_env_file=None)
    assert settings.roster_size == 6
    assert settings.high_impact_threshold == 7
    assert settings.local_search_max_iterations == 20
    assert settings.recommendation_limit == 3
    assert settings.counter_weight == 2.0
    assert settings.knowledge_path == DEFAULT_KNOWLEDGE_DIR


def test_env_overrides(monkeypatch, tmp_path):
    """Environment variables override defaults."""
    monkeypatch.setenv("COUNTER_WEIGHT", "3.5")
    monkeypatch.setenv("KNOWLEDGE_DIR", str(tmp_path))
    settings = Settings(_env_file=None)
    assert settings.counter_weight == 3.5
    assert settings.knowledge_path == Path(tmp_path)


def test_bundled_knowledge_exists():
    """Seed knowledge files ship with the package."""
    for name in ("heroes.json", "team_ups.json", "counter_responses.json"):
        assert (DEFAULT_KNOWLEDGE_DIR / name).exists()
