"""Builds the immutable HeroRegistry from knowledge JSON files."""
import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from team_synergy.config import settings
from team_synergy.models.hero import HeroRegistry, Role, TeamUp
from team_synergy.utils.role_normalizer import normalize_role_strict

logger = logging.getLogger(__name__)


class HeroRegistryError(ValueError):
    """Raised when knowledge data is malformed."""


class HeroRegistryLoader:
    """Loads hero roles, tags, team-ups and counter responses.

    Knowledge files (all optional; a missing file yields an empty table):
    - heroes.json: {"heroes": [{"name", "role", "tags"}]} - order is canonical
    - team_ups.json: {"team_ups": [{"anchor", "partner", "name", "score", "notes"}]}
    - counter_responses.json: {"counter_responses": {enemy_tag: [friendly_tags]}}
    """

    HEROES_FILE = "heroes.json"
    TEAM_UPS_FILE = "team_ups.json"
    COUNTER_RESPONSES_FILE = "counter_responses.json"

    def __init__(self, knowledge_dir: Optional[Path] = None):
        if knowledge_dir is None:
            knowledge_dir = settings.knowledge_path
        self.knowledge_dir = Path(knowledge_dir)

    def load(self) -> HeroRegistry:
        """Read all knowledge files and build the registry."""
        roles, tags = self._load_heroes()
        team_ups = self._load_team_ups()
        counter_responses = self._load_counter_responses()

        registry = HeroRegistry(
            roles=roles,
            tags=tags,
            team_ups=tuple(team_ups),
            counter_responses=counter_responses,
        )
        logger.info(
            f"Loaded hero registry from {self.knowledge_dir}: "
            f"{len(roles)} heroes, {len(team_ups)} team-ups, "
            f"{len(counter_responses)} counter rules"
        )
        return registry

    def _read_json(self, filename: str) -> Optional[dict]:
        path = self.knowledge_dir / filename
        if not path.exists():
            logger.warning(f"{filename} not found at {path}")
            return None
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise HeroRegistryError(f"Invalid JSON in {path}: {e}") from e
        if not isinstance(data, dict):
            raise HeroRegistryError(f"Expected a JSON object in {path}")
        return data

    def _load_heroes(self) -> tuple[dict[str, Role], dict[str, list[str]]]:
        """Load hero roles and tags, preserving file order."""
        data = self._read_json(self.HEROES_FILE)
        roles: dict[str, Role] = {}
        tags: dict[str, list[str]] = {}
        if data is None:
            return roles, tags

        for entry in data.get("heroes", []):
            if not isinstance(entry, dict):
                raise HeroRegistryError(f"Hero entry must be an object: {entry!r}")
            name = entry.get("name")
            if not name:
                raise HeroRegistryError(f"Hero entry without a name: {entry}")
            try:
                roles[name] = normalize_role_strict(entry.get("role") or "")
            except ValueError as e:
                raise HeroRegistryError(f"Hero {name!r}: {e}") from e
            hero_tags = entry.get("tags") or []
            if not isinstance(hero_tags, list):
                raise HeroRegistryError(f"Hero {name!r}: tags must be a list")
            if hero_tags:
                tags[name] = hero_tags
        return roles, tags

    def _load_team_ups(self) -> list[TeamUp]:
        data = self._read_json(self.TEAM_UPS_FILE)
        if data is None:
            return []

        team_ups = []
        for entry in data.get("team_ups", []):
            try:
                team_up = TeamUp(
                    anchor=entry["anchor"],
                    partner=entry["partner"],
                    name=entry.get("name", ""),
                    score=int(entry["score"]),
                    notes=entry.get("notes", ""),
                )
            except (KeyError, TypeError, ValueError) as e:
                raise HeroRegistryError(f"Malformed team-up entry {entry}: {e}") from e
            if team_up.score <= 0:
                raise HeroRegistryError(
                    f"Team-up {team_up.anchor} + {team_up.partner} must have a positive score"
                )
            team_ups.append(team_up)
        return team_ups

    def _load_counter_responses(self) -> dict[str, list[str]]:
        data = self._read_json(self.COUNTER_RESPONSES_FILE)
        if data is None:
            return {}
        table = data.get("counter_responses", {})
        if not isinstance(table, dict):
            raise HeroRegistryError("counter_responses must map enemy tags to tag lists")

        responses = {}
        for enemy_tag, answers in table.items():
            if not isinstance(answers, list):
                raise HeroRegistryError(
                    f"Counter responses for {enemy_tag!r} must be a list, got {answers!r}"
                )
            responses[enemy_tag] = answers
        return responses


def load_hero_registry(knowledge_dir: Optional[Path] = None) -> HeroRegistry:
    """Convenience wrapper: build a registry from a knowledge directory."""
    return HeroRegistryLoader(knowledge_dir).load()


@lru_cache
def get_hero_registry() -> HeroRegistry:
    """Get the cached registry for the configured knowledge directory."""
    return load_hero_registry()
