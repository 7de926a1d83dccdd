"""Request and result records for the generation pipelines."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Mapping, Optional, TypedDict


class EntityKind(str, Enum):
    """Entity-type discriminator for generated records."""

    NPC = "npc"
    CREATURE = "creature"


@dataclass
class GenerationOptions:
    """Sparse options for one NPC/creature generation call."""

    kind: EntityKind = EntityKind.NPC
    campaign_theme: Optional[str] = None
    level: Optional[str] = None
    terrain: Optional[str] = None
    style: Optional[str] = None
    campaign_context: Optional[str] = None

    def __post_init__(self) -> None:
        self.kind = EntityKind(self.kind)

    @property
    def is_creature(self) -> bool:
        return self.kind is EntityKind.CREATURE

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "GenerationOptions":
        """Build options from a request body. ``kind`` defaults to ``npc``."""
        return cls(
            kind=EntityKind(payload.get("kind") or EntityKind.NPC.value),
            campaign_theme=payload.get("campaign_theme") or None,
            level=_as_text(payload.get("level")),
            terrain=payload.get("terrain") or None,
            style=payload.get("style") or None,
            campaign_context=payload.get("campaign_context") or None,
        )


class GeneratedEntity(TypedDict, total=False):
    """Flat record returned by the NPC/creature pipeline.

    Every attribute is free text exactly as the model produced it; keys the
    model left out are simply absent.
    """

    name: str
    role: str
    race: str
    occupation: str
    location: str
    motivation: str
    appearance: str
    personality: str
    abilities: str
    memorableTrait: str
    threatLevel: str
    strength: str
    dexterity: str
    constitution: str
    intelligence: str
    wisdom: str
    charisma: str
    healthPoints: str
    specialAbilities: str
    plotHooks: str
    notes: str
    entityType: str


@dataclass
class MapLocation:
    name: str
    description: str = ""


@dataclass
class MapOptions:
    """World-building fields used to describe a campaign map."""

    campaign_name: str
    central_concept: Optional[str] = None
    geography: Optional[str] = None
    factions: Optional[str] = None
    history: Optional[str] = None
    magic_tech: Optional[str] = None
    style: Optional[str] = None
    locations: List[MapLocation] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.campaign_name:
            raise ValueError("campaign_name is required")

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "MapOptions":
        locations = [
            loc if isinstance(loc, MapLocation) else MapLocation(
                name=loc.get("name", ""),
                description=loc.get("description") or "",
            )
            for loc in payload.get("locations") or []
        ]
        return cls(
            campaign_name=payload.get("campaign_name", ""),
            central_concept=payload.get("central_concept") or None,
            geography=payload.get("geography") or None,
            factions=payload.get("factions") or None,
            history=payload.get("history") or None,
            magic_tech=payload.get("magic_tech") or None,
            style=payload.get("style") or None,
            locations=locations,
        )


def _as_text(value: Any) -> Optional[str]:
    # levels often arrive as ints from forms
    if value is None or value == "":
        return None
    return str(value)
