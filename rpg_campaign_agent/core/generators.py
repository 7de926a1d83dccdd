"""Prompt builders for NPC, creature and world map generation."""

from typing import List

from rpg_campaign_agent.config.rules import (
    ABILITY_SCORE_RANGE,
    DEFAULT_MAP_STYLE,
    MAP_REQUIRED_ELEMENTS,
    NPC_ROLES,
    THREAT_LEVELS,
)
from rpg_campaign_agent.core.models import GenerationOptions, MapLocation, MapOptions

ENTITY_JSON_TEMPLATE = """

Retorne APENAS no formato JSON com estas propriedades:
{{
  "name": "Nome",
  "role": "Papel ({roles}) - você decide",
  "race": "{race_label}",
  "occupation": "{occupation_label}",
  "location": "Habitat natural ou local",
  "motivation": "Motivação principal",
  "relationships": "Relacionamentos e contexto social",
  "appearance": "Aparência física notável",
  "personality": "Traços de personalidade",
  "abilities": "Habilidades importantes",
  "memorableTrait": "Um traço memorável único",
  "threatLevel": "Nível de ameaça ({threat_levels})",
  "strength": "Valor de Força (entre {low}-{high})",
  "dexterity": "Valor de Destreza (entre {low}-{high})",
  "constitution": "Valor de Constituição (entre {low}-{high})",
  "intelligence": "Valor de Inteligência (entre {low}-{high})",
  "wisdom": "Valor de Sabedoria (entre {low}-{high})",
  "charisma": "Valor de Carisma (entre {low}-{high})",
  "healthPoints": "Pontos de vida aproximados",
  "specialAbilities": "Habilidades especiais ou ataques",
  "plotHooks": "Ideias de história envolvendo este {subject}",
  "notes": "Outras informações úteis para o Mestre"
}}"""

CAMPAIGN_CONTEXT_TEMPLATE = """

Informações detalhadas da campanha para usar como referência:
{context}

Ao criar {article}, use essas informações para incorporar personagens, locais e temas existentes na campanha."""

MAP_CLOSING_TEMPLATE = """

O mapa deve incluir: {elements}. Não inclua texto além do título e dos nomes dos locais."""


class ContentGenerator:
    """Prompt builders for campaign content generation."""

    @staticmethod
    def _entity_article(options: GenerationOptions) -> str:
        return "a criatura" if options.is_creature else "o NPC"

    @classmethod
    def generate_entity_prompt(cls, options: GenerationOptions) -> str:
        """Build the NPC/creature prompt, closing with the JSON property block."""
        creature = options.is_creature
        subject = "uma criatura" if creature else "um NPC"
        prompt = f"Gere {subject} para Dungeons & Dragons 5e em português."

        if options.campaign_theme:
            prompt += f' A campanha tem como tema "{options.campaign_theme}".'

        if options.level:
            if creature:
                prompt += f" A criatura deve ser de nível/desafio {options.level}."
            else:
                prompt += f" O NPC deve ser compatível com personagens de nível {options.level}."

        if options.terrain:
            article = "A criatura" if creature else "O NPC"
            prompt += f" {article} está em/associado com o terreno: {options.terrain}."

        if options.style:
            prompt += f" O estilo geral deve ser: {options.style}."

        if options.campaign_context:
            prompt += CAMPAIGN_CONTEXT_TEMPLATE.format(
                context=options.campaign_context,
                article=cls._entity_article(options),
            )

        low, high = ABILITY_SCORE_RANGE
        prompt += ENTITY_JSON_TEMPLATE.format(
            roles=", ".join(NPC_ROLES),
            race_label="Tipo de criatura" if creature else "Raça",
            occupation_label="Comportamento" if creature else "Ocupação",
            threat_levels=", ".join(THREAT_LEVELS),
            low=low,
            high=high,
            subject="monstro" if creature else "personagem",
        )
        return prompt

    @staticmethod
    def _format_locations(locations: List[MapLocation]) -> str:
        lines = []
        for location in locations:
            if location.description:
                lines.append(f"- {location.name}: {location.description}")
            else:
                lines.append(f"- {location.name}")
        return "\n".join(lines)

    @classmethod
    def generate_map_prompt(cls, options: MapOptions) -> str:
        """Build the image prompt for a campaign world map."""
        prompt = f'Crie um mapa de mundo de fantasia para a campanha de RPG "{options.campaign_name}".'

        if options.central_concept:
            prompt += f" Conceito central do mundo: {options.central_concept}."

        if options.geography:
            prompt += f" Geografia: {options.geography}."

        if options.factions:
            prompt += f" Facções e reinos: {options.factions}."

        if options.history:
            prompt += f" História do mundo: {options.history}."

        if options.magic_tech:
            prompt += f" Magia e tecnologia: {options.magic_tech}."

        if options.locations:
            prompt += "\n\nLocais importantes que devem aparecer no mapa:\n"
            prompt += cls._format_locations(options.locations)

        style = options.style or DEFAULT_MAP_STYLE
        prompt += f"\n\nEstilo visual: {style}."

        prompt += MAP_CLOSING_TEMPLATE.format(elements="; ".join(MAP_REQUIRED_ELEMENTS))
        return prompt
