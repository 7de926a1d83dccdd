import logging
from typing import Any, Dict, Optional

from rpg_campaign_agent.config.settings import AGENT_CONFIG
from rpg_campaign_agent.core.coercion import coerce_entity
from rpg_campaign_agent.core.errors import EntityGenerationError
from rpg_campaign_agent.core.generators import ContentGenerator
from rpg_campaign_agent.core.models import GeneratedEntity, GenerationOptions

logger = logging.getLogger(__name__)


class EntityGenerator:
    """
    NPC / creature generation pipeline.
    Responsibilities:
    1. Assemble the prompt from the sparse options (ContentGenerator).
    2. Issue one JSON-constrained chat completion.
    3. Reshape the reply into the npcs table layout (coerce_entity).
    """

    def __init__(self, llm_client, llm_config: Optional[Dict[str, Any]] = None):
        self.llm_client = llm_client
        self.llm_config = llm_config or AGENT_CONFIG["llm"]

    def request_completion(self, prompt: str) -> str:
        """Run exactly one chat completion and return the message content."""
        response = self.llm_client.chat.completions.create(
            model=self.llm_config["model"],
            messages=[{"role": "user", "content": prompt}],
            response_format={"type": "json_object"},
            max_tokens=self.llm_config["max_tokens"],
            # non-zero on purpose: each call should produce a different NPC
            temperature=self.llm_config["temperature"],
        )
        if not response.choices:
            raise ValueError("Resposta vazia da OpenAI")
        return response.choices[0].message.content

    def generate(self, options: GenerationOptions) -> GeneratedEntity:
        """Generate one NPC or creature record.

        Raises:
            EntityGenerationError: on any upstream or parse failure.
        """
        logger.info("Gerando %s com as opções: %s", options.kind.value, options)
        prompt = ContentGenerator.generate_entity_prompt(options)
        logger.debug("Prompt: %s", prompt)

        try:
            content = self.request_completion(prompt)
            entity = coerce_entity(content, options.kind)
        except Exception as exc:  # pylint: disable=broad-except
            logger.error("Erro ao gerar NPC: %s", exc)
            raise EntityGenerationError() from exc

        logger.info("NPC gerado: %s", entity.get("name"))
        return entity
