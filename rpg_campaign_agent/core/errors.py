"""Exception types raised by the generation pipelines."""

from typing import List, Optional


class GenerationError(Exception):
    """Base class for a failed generation call."""


class EntityGenerationError(GenerationError):
    """The NPC/creature pipeline failed. The cause is logged, not inspected."""

    def __init__(self, message: str = "Falha ao gerar NPC com OpenAI"):
        super().__init__(message)


class MapGenerationError(GenerationError):
    """The world map pipeline failed."""

    def __init__(self, message: str = "Falha ao gerar mapa do mundo com OpenAI"):
        super().__init__(message)


class EntityParseError(ValueError):
    """Model output could not be coerced into an entity record."""

    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []

