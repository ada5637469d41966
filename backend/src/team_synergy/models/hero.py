"""Hero, role and team-up models."""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class Role(str, Enum):
    """Combat archetype assigned one-per-hero."""

    VANGUARD = "Vanguard"  # Frontline / tank
    DUELIST = "Duelist"  # Damage
    STRATEGIST = "Strategist"  # Support / healer


# Canonical role ordering for counts, breakdowns and display
ROLE_ORDER = (Role.VANGUARD, Role.DUELIST, Role.STRATEGIST)


@dataclass(frozen=True)
class TeamUp:
    """A weighted pairwise team-up relation.

    Stored as (anchor, partner) but symmetric in effect: the relation is
    active whenever both heroes are on the roster.
    """

    anchor: str
    partner: str
    name: str
    score: int  # Relative impact, 1-10 (10 = top tier)
    notes: str = ""

    def is_active(self, members: set[str] | frozenset[str]) -> bool:
        """Check whether both heroes are present in a roster set."""
        return self.anchor in members and self.partner in members

    def to_dict(self) -> dict:
        return {
            "anchor": self.anchor,
            "partner": self.partner,
            "name": self.name,
            "score": self.score,
            "notes": self.notes,
        }


def _freeze(mapping: Mapping) -> Mapping:
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True)
class HeroRegistry:
    """Immutable static configuration: roles, tags, team-ups and counters.

    Built once at start-up (see HeroRegistryLoader) and injected into every
    service. Iteration order of ``roles`` is the canonical hero order used
    for deterministic tie-breaks.
    """

    roles: Mapping[str, Role]
    tags: Mapping[str, frozenset[str]] = field(default_factory=dict)
    team_ups: tuple[TeamUp, ...] = ()
    counter_responses: Mapping[str, frozenset[str]] = field(default_factory=dict)

    def __post_init__(self):
        # Read-only views so the registry cannot drift after construction
        object.__setattr__(self, "roles", _freeze(self.roles))
        object.__setattr__(
            self, "tags", _freeze({h: frozenset(t) for h, t in self.tags.items()})
        )
        object.__setattr__(self, "team_ups", tuple(self.team_ups))
        object.__setattr__(
            self,
            "counter_responses",
            _freeze({t: frozenset(r) for t, r in self.counter_responses.items()}),
        )

    @property
    def heroes(self) -> tuple[str, ...]:
        """All known heroes in canonical order."""
        return tuple(self.roles)

    def role_of(self, hero: str | None) -> Role | None:
        """Role of a hero, or None if unknown."""
        if hero is None:
            return None
        return self.roles.get(hero)

    def tags_of(self, hero: str | None) -> frozenset[str]:
        """Capability tags of a hero (empty for unknown heroes)."""
        if hero is None:
            return frozenset()
        return self.tags.get(hero, frozenset())

    def responses_to(self, enemy_tag: str) -> frozenset[str]:
        """Friendly tags that answer an opponent tag."""
        return self.counter_responses.get(enemy_tag, frozenset())

    def high_impact_team_ups(self, threshold: int) -> list[TeamUp]:
        """Team-ups scoring at least ``threshold``, in table order."""
        return [t for t in self.team_ups if t.score >= threshold]
