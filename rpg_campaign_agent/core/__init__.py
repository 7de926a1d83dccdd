from .models import EntityKind, GenerationOptions, GeneratedEntity, MapLocation, MapOptions
from .errors import EntityGenerationError, EntityParseError, GenerationError, MapGenerationError
from .generators import ContentGenerator
from .coercion import coerce_entity, fold_relationships_into_notes, parse_entity_content
from .campaign_context import build_campaign_context, map_options_from_campaign
from .npc_generator import EntityGenerator
from .map_generator import WorldMapGenerator

__all__ = [
    "EntityKind",
    "GenerationOptions",
    "GeneratedEntity",
    "MapLocation",
    "MapOptions",
    "GenerationError",
    "EntityGenerationError",
    "EntityParseError",
    "MapGenerationError",
    "ContentGenerator",
    "coerce_entity",
    "fold_relationships_into_notes",
    "parse_entity_content",
    "build_campaign_context",
    "map_options_from_campaign",
    "EntityGenerator",
    "WorldMapGenerator",
]
