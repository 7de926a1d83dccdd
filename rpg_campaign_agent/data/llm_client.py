"""LLM Client Factory - explicit construction of OpenAI clients.

Pipelines receive the client they use as a constructor argument; this module
only knows how to build one from a configuration section.
"""

import logging
from typing import Any, Dict, Optional

from openai import OpenAI

from rpg_campaign_agent.config.settings import AGENT_CONFIG

logger = logging.getLogger(__name__)


class LLMClientFactory:
    """Builds OpenAI-compatible clients from an ``llm`` config section."""

    @classmethod
    def get_config(cls) -> Dict[str, Any]:
        """Get the current LLM configuration from AGENT_CONFIG."""
        return AGENT_CONFIG.get("llm", {})

    @classmethod
    def create_client(cls, llm_config: Optional[Dict[str, Any]] = None) -> OpenAI:
        """
        Create a new client instance.

        Args:
            llm_config: ``llm`` section holding ``api_key`` and optionally
                ``base_url`` and ``timeout``. Defaults to AGENT_CONFIG["llm"].

        Raises:
            ValueError: If no API key is configured.
        """
        if llm_config is None:
            llm_config = cls.get_config()

        api_key = llm_config.get("api_key")
        if not api_key:
            raise ValueError("OPENAI_API_KEY não configurada: defina a chave da API antes de gerar conteúdo")

        kwargs: Dict[str, Any] = {"api_key": api_key}
        if llm_config.get("base_url"):
            kwargs["base_url"] = llm_config["base_url"]
        if llm_config.get("timeout"):
            kwargs["timeout"] = llm_config["timeout"]

        client = OpenAI(**kwargs)
        logger.info("LLM client initialized: %s", llm_config.get("base_url") or "api.openai.com")
        return client


def create_llm_client(llm_config: Optional[Dict[str, Any]] = None) -> OpenAI:
    """Alias for LLMClientFactory.create_client."""
    return LLMClientFactory.create_client(llm_config)
