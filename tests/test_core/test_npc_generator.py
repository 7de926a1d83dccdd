"""
Unit tests for the NPC/creature generation pipeline.
"""

import pytest
from unittest.mock import MagicMock

from tests.mocks.llm_mock import MockLLMClient, MOCK_CREATURE, MOCK_NPC_FULL, MOCK_NPC_MIRA

from rpg_campaign_agent.core.errors import EntityGenerationError, EntityParseError
from rpg_campaign_agent.core.models import EntityKind, GenerationOptions
from rpg_campaign_agent.core.npc_generator import EntityGenerator


@pytest.mark.unit
class TestEntityGeneratorRequest:
    """Tests for the outbound chat completion call."""

    def test_single_call_with_fixed_parameters(self, mock_llm: MockLLMClient, llm_config):
        mock_llm.set_response("Gere um NPC", MOCK_NPC_MIRA)

        EntityGenerator(mock_llm, llm_config).generate(GenerationOptions(kind=EntityKind.NPC))

        assert mock_llm.call_count == 1
        call = mock_llm.get_last_call_kwargs()
        assert call["model"] == "test-model"
        assert call["response_format"] == {"type": "json_object"}
        assert call["max_tokens"] == 1500
        assert call["temperature"] > 0
        assert len(call["messages"]) == 1
        assert call["messages"][0]["role"] == "user"

    def test_prompt_reflects_options(self, mock_llm: MockLLMClient, llm_config):
        mock_llm.default_response = MOCK_NPC_MIRA
        options = GenerationOptions(kind=EntityKind.NPC, campaign_theme="haunted swamp", level="5")

        EntityGenerator(mock_llm, llm_config).generate(options)

        prompt = mock_llm.get_last_call_kwargs()["messages"][0]["content"]
        assert "haunted swamp" in prompt
        assert "nível 5" in prompt


@pytest.mark.unit
class TestEntityGeneratorResult:
    """Tests for the coerced result."""

    def test_mira_scenario(self, mock_llm: MockLLMClient, llm_config):
        mock_llm.default_response = MOCK_NPC_MIRA
        options = GenerationOptions(kind=EntityKind.NPC, campaign_theme="haunted swamp", level="5")

        entity = EntityGenerator(mock_llm, llm_config).generate(options)

        assert entity == {
            "name": "Mira",
            "notes": "quiet\nRelações: sister of the mayor",
            "entityType": "npc",
        }

    def test_full_npc_folds_relationships(self, mock_llm: MockLLMClient, llm_config):
        mock_llm.default_response = MOCK_NPC_FULL

        entity = EntityGenerator(mock_llm, llm_config).generate(GenerationOptions(kind=EntityKind.NPC))

        assert "relationships" not in entity
        assert entity["notes"] == "Cobra caro de elfos\nRelações: Irmão do capitão da guarda"
        assert entity["charisma"] == "9"

    def test_creature_kind_wins_over_model_value(self, mock_llm: MockLLMClient, llm_config):
        mock_llm.set_response("Gere uma criatura", MOCK_CREATURE)

        entity = EntityGenerator(mock_llm, llm_config).generate(GenerationOptions(kind=EntityKind.CREATURE))

        assert entity["entityType"] == "creature"
        assert entity["name"] == "Serpe do Pântano"


@pytest.mark.unit
class TestEntityGeneratorErrors:
    """Every failure surfaces as EntityGenerationError."""

    def test_upstream_exception(self, mock_llm: MockLLMClient, llm_config):
        mock_llm.raise_error_on_call = ConnectionError("network down")

        with pytest.raises(EntityGenerationError) as exc_info:
            EntityGenerator(mock_llm, llm_config).generate(GenerationOptions())

        assert isinstance(exc_info.value.__cause__, ConnectionError)
        assert mock_llm.call_count == 1

    def test_empty_content(self, mock_llm: MockLLMClient, llm_config):
        mock_llm.default_response = ""

        with pytest.raises(EntityGenerationError):
            EntityGenerator(mock_llm, llm_config).generate(GenerationOptions())

    def test_non_json_content(self, mock_llm: MockLLMClient, llm_config):
        mock_llm.default_response = "Mira, a irmã do prefeito"

        with pytest.raises(EntityGenerationError) as exc_info:
            EntityGenerator(mock_llm, llm_config).generate(GenerationOptions())

        assert isinstance(exc_info.value.__cause__, EntityParseError)

    def test_no_choices(self, llm_config):
        client = MagicMock()
        client.chat.completions.create.return_value = MagicMock(choices=[])

        with pytest.raises(EntityGenerationError):
            EntityGenerator(client, llm_config).generate(GenerationOptions())

    def test_failure_is_not_retried(self, mock_llm: MockLLMClient, llm_config):
        mock_llm.default_response = "not json"

        with pytest.raises(EntityGenerationError):
            EntityGenerator(mock_llm, llm_config).generate(GenerationOptions())

        assert mock_llm.call_count == 1

    def test_error_message_is_generic(self, mock_llm: MockLLMClient, llm_config):
        mock_llm.raise_error_on_call = RuntimeError("secret upstream detail")

        with pytest.raises(EntityGenerationError, match="Falha ao gerar NPC com OpenAI"):
            EntityGenerator(mock_llm, llm_config).generate(GenerationOptions())
