"""Turn stored campaign rows into generation inputs.

The calling layer loads campaigns, NPCs and locations from the database and
hands them over as plain mappings; nothing here touches storage.
"""

from typing import Any, Iterable, List, Mapping, Optional

from rpg_campaign_agent.core.models import MapLocation, MapOptions

# Keep the prompt small: only the first few rows are described
MAX_CONTEXT_NPCS = 3
MAX_CONTEXT_LOCATIONS = 3
LOCATION_DESCRIPTION_PREVIEW = 100


def _describe_npcs(npcs: List[Mapping[str, Any]]) -> str:
    lines = ["", "Personagens importantes na campanha:"]
    for npc in npcs[:MAX_CONTEXT_NPCS]:
        lines.append(f"- {npc.get('name')}: {npc.get('role') or 'Papel desconhecido'}")
    return "\n".join(lines)


def _describe_locations(locations: List[Mapping[str, Any]]) -> str:
    lines = ["", "Locais importantes na campanha:"]
    for location in locations[:MAX_CONTEXT_LOCATIONS]:
        description = location.get("description")
        if description:
            preview = description[:LOCATION_DESCRIPTION_PREVIEW] + "..."
        else:
            preview = "Sem descrição"
        lines.append(f"- {location.get('name')}: {preview}")
    return "\n".join(lines)


def build_campaign_context(
    campaign: Mapping[str, Any],
    npcs: Optional[Iterable[Mapping[str, Any]]] = None,
    locations: Optional[Iterable[Mapping[str, Any]]] = None,
) -> str:
    """Summarize a campaign for the NPC prompt's reference block."""
    sections = [
        "\n".join([
            f"Nome da Campanha: {campaign.get('name')}",
            f"Descrição: {campaign.get('description') or 'Não disponível'}",
            f"Ambiente: {campaign.get('setting') or 'Não especificado'}",
            f"Estilo: {campaign.get('game_system') or 'D&D 5e'}",
        ])
    ]

    npc_rows = list(npcs or [])
    if npc_rows:
        sections.append(_describe_npcs(npc_rows))

    location_rows = list(locations or [])
    if location_rows:
        sections.append(_describe_locations(location_rows))

    return "\n".join(sections)


def map_options_from_campaign(
    campaign: Mapping[str, Any],
    locations: Optional[Iterable[Mapping[str, Any]]] = None,
    style: Optional[str] = None,
) -> MapOptions:
    """Collect a campaign's world-building fields into MapOptions."""
    return MapOptions(
        campaign_name=campaign.get("name", ""),
        central_concept=campaign.get("central_concept") or None,
        geography=campaign.get("geography") or None,
        factions=campaign.get("factions") or None,
        history=campaign.get("history") or None,
        magic_tech=campaign.get("magic_tech") or None,
        style=style or None,
        locations=[
            MapLocation(name=row.get("name", ""), description=row.get("description") or "")
            for row in locations or []
        ],
    )
