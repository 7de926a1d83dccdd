"""
Pytest configuration and fixtures for the campaign generation tests.
"""

import os
import sys
from typing import Any, Dict, Generator, List

import httpx
import pytest

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from tests.mocks.llm_mock import MockLLMClient, create_mock_llm_client, MOCK_IMAGE_BYTES

from rpg_campaign_agent.data.image_fetcher import ImageFetcher
from rpg_campaign_agent.data.storage_adapter import LocalFileStorage


# ============================================================================
# LLM Mock Fixtures
# ============================================================================

@pytest.fixture
def mock_llm() -> Generator[MockLLMClient, None, None]:
    """Create a fresh MockLLMClient instance for each test."""
    llm = create_mock_llm_client()
    yield llm
    llm.reset()


@pytest.fixture
def llm_config() -> Dict[str, Any]:
    """Explicit llm config section, independent of the environment."""
    return {
        "api_key": "test-key",
        "base_url": None,
        "model": "test-model",
        "temperature": 0.8,
        "max_tokens": 1500,
        "timeout": None,
    }


@pytest.fixture
def image_config() -> Dict[str, Any]:
    return {"model": "test-image-model", "size": "1024x1024", "quality": "standard"}


# ============================================================================
# HTTP / Storage Fixtures
# ============================================================================

@pytest.fixture
def download_log() -> List[str]:
    """URLs requested through the fake image transport."""
    return []


@pytest.fixture
def image_fetcher(download_log: List[str]) -> Generator[ImageFetcher, None, None]:
    """ImageFetcher whose transport serves PNG bytes, or 404 for '/missing' URLs."""

    def handler(request: httpx.Request) -> httpx.Response:
        download_log.append(str(request.url))
        if request.url.path.startswith("/missing"):
            return httpx.Response(404, content=b"not found")
        return httpx.Response(200, content=MOCK_IMAGE_BYTES, headers={"content-type": "image/png"})

    fetcher = ImageFetcher(httpx.Client(transport=httpx.MockTransport(handler)))
    yield fetcher
    fetcher.close()


@pytest.fixture
def public_dir(tmp_path) -> str:
    """Served-assets root; not created until something is written."""
    return str(tmp_path / "public")


@pytest.fixture
def local_storage(public_dir: str) -> LocalFileStorage:
    return LocalFileStorage(public_dir)


# ============================================================================
# Data Fixtures
# ============================================================================

@pytest.fixture
def sample_campaign() -> Dict[str, Any]:
    """Campaign row as loaded by the calling layer."""
    return {
        "id": 7,
        "name": "As Brumas de Ravenloft",
        "description": "Uma terra amaldiçoada presa em névoa eterna.",
        "setting": "Gótico",
        "game_system": "D&D 5e",
        "central_concept": "Um vampiro aprisionado em seu próprio domínio",
        "geography": "Vales enevoados, um lago escuro e montanhas íngremes",
        "factions": "Os Vistani, a Ordem da Fênix Prateada",
        "history": "Séculos de escuridão desde o pacto de Strahd",
        "magic_tech": "Magia sombria, sem pólvora",
        "map_image_url": None,
    }


@pytest.fixture
def sample_npcs() -> List[Dict[str, Any]]:
    return [
        {"name": "Ismark", "role": "aliado"},
        {"name": "Ireena", "role": None},
        {"name": "Rahadin", "role": "vilão"},
        {"name": "Ezmerelda", "role": "aliado"},
    ]


@pytest.fixture
def sample_locations() -> List[Dict[str, Any]]:
    return [
        {"name": "Vallaki", "description": "Cidade murada onde festivais são obrigatórios. " * 4},
        {"name": "Castelo Ravenloft", "description": "Fortaleza de Strahd."},
        {"name": "Moinho das Velhas", "description": None},
        {"name": "Argynvostholt", "description": "Mansão em ruínas."},
    ]


# ============================================================================
# Markers
# ============================================================================

def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")
