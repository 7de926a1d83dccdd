"""Coerce text-generation output into the npcs persistence shape."""

import json
from typing import Any, Dict

from rpg_campaign_agent.config.rules import NPC_REQUIRED_FIELDS, RELATIONSHIPS_LABEL
from rpg_campaign_agent.core.errors import EntityParseError
from rpg_campaign_agent.core.models import EntityKind, GeneratedEntity


def parse_entity_content(content: str) -> Dict[str, Any]:
    """Parse the model's message content as a JSON object.

    Raises:
        EntityParseError: content is empty, not JSON, not an object, or lacks
            one of ``NPC_REQUIRED_FIELDS``.
    """
    if not content or not content.strip():
        raise EntityParseError("Resposta vazia da OpenAI")

    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise EntityParseError(f"Resposta da OpenAI não é JSON válido: {exc}") from exc

    if not isinstance(data, dict):
        raise EntityParseError(f"Esperado um objeto JSON, recebido {type(data).__name__}")

    missing = [name for name in NPC_REQUIRED_FIELDS if not data.get(name)]
    if missing:
        raise EntityParseError(
            f"Campos obrigatórios ausentes: {', '.join(missing)}",
            missing_fields=missing,
        )

    return data


def fold_relationships_into_notes(record: Dict[str, Any]) -> Dict[str, Any]:
    """Move ``relationships`` into ``notes``; the npcs table has no such column.

    Returns a new dict. ``relationships`` is always dropped; a non-empty value
    is appended to ``notes`` on its own labelled line.
    """
    folded = dict(record)
    if "relationships" not in folded:
        return folded

    relationships = folded.pop("relationships")
    if relationships:
        folded["notes"] = f"{folded.get('notes') or ''}\n{RELATIONSHIPS_LABEL}: {relationships}"
    return folded


def coerce_entity(content: str, kind: EntityKind) -> GeneratedEntity:
    """Parse, fold and tag one model response."""
    data = parse_entity_content(content)
    folded = fold_relationships_into_notes(data)
    folded["entityType"] = EntityKind(kind).value
    return GeneratedEntity(**folded)
