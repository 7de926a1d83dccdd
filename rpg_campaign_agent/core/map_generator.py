import logging
import uuid
from typing import Any, Dict, Optional

from rpg_campaign_agent.config.settings import AGENT_CONFIG
from rpg_campaign_agent.core.errors import MapGenerationError
from rpg_campaign_agent.core.generators import ContentGenerator
from rpg_campaign_agent.core.models import MapOptions
from rpg_campaign_agent.data.image_fetcher import ImageFetcher
from rpg_campaign_agent.data.storage_adapter import StorageAdapter

logger = logging.getLogger(__name__)

MAP_FILE_PREFIX = "map-"
MAP_FILE_EXTENSION = ".png"


class WorldMapGenerator:
    """
    World map generation pipeline.
    Responsibilities:
    1. Describe the campaign world as an image prompt.
    2. Request exactly one image and take its remote URL.
    3. Download the bytes and store them under ``maps/`` with a fresh name.
    """

    def __init__(
        self,
        llm_client,
        storage: StorageAdapter,
        fetcher: Optional[ImageFetcher] = None,
        image_config: Optional[Dict[str, Any]] = None,
        maps_dir: Optional[str] = None,
    ):
        self.llm_client = llm_client
        self.storage = storage
        self.fetcher = fetcher or ImageFetcher()
        self.image_config = image_config or AGENT_CONFIG["image"]
        self.maps_dir = maps_dir or AGENT_CONFIG["storage"]["maps_dir"]

    def request_image_url(self, prompt: str) -> str:
        """Run exactly one image generation and return the image URL."""
        response = self.llm_client.images.generate(
            model=self.image_config["model"],
            prompt=prompt,
            n=1,
            size=self.image_config["size"],
            quality=self.image_config["quality"],
        )
        if not response.data or not response.data[0].url:
            raise ValueError("Nenhuma URL de imagem retornada pela OpenAI")
        return response.data[0].url

    @staticmethod
    def new_map_filename() -> str:
        return f"{MAP_FILE_PREFIX}{uuid.uuid4()}{MAP_FILE_EXTENSION}"

    def persist_image(self, image_url: str) -> str:
        """Download ``image_url`` into the maps directory.

        Returns the path relative to the served-assets root, e.g.
        ``/maps/map-<uuid>.png``. Nothing is written if the download fails.
        """
        data = self.fetcher.fetch(image_url)

        filename = self.new_map_filename()
        object_name = f"{self.maps_dir}/{filename}"
        self.storage.save_bytes(object_name, data, content_type="image/png")
        logger.info("Mapa salvo em %s (%d bytes)", object_name, len(data))
        return f"/{object_name}"

    def generate(self, options: MapOptions) -> str:
        """Generate, download and store a world map for a campaign.

        Raises:
            MapGenerationError: on any upstream, download or write failure.
        """
        logger.info("Gerando mapa para a campanha: %s", options.campaign_name)
        prompt = ContentGenerator.generate_map_prompt(options)
        logger.debug("Prompt do mapa: %s", prompt)

        try:
            image_url = self.request_image_url(prompt)
            return self.persist_image(image_url)
        except Exception as exc:  # pylint: disable=broad-except
            logger.error("Erro ao gerar mapa do mundo: %s", exc)
            raise MapGenerationError() from exc
