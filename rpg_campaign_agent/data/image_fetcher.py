"""Download generated images from the URL the image service returns."""

import logging
from typing import Optional

import httpx

logger = logging.getLogger(__name__)


class ImageDownloadError(Exception):
    """Fetching the generated image bytes failed."""

    def __init__(self, url: str, status_code: Optional[int] = None, reason: str = ""):
        self.url = url
        self.status_code = status_code
        detail = f"HTTP {status_code}" if status_code is not None else reason
        super().__init__(f"Falha ao baixar a imagem do mapa ({detail}): {url}")


class ImageFetcher:
    """Thin wrapper over an ``httpx.Client`` that returns image bytes."""

    def __init__(self, http_client: Optional[httpx.Client] = None):
        self.http_client = http_client or httpx.Client(follow_redirects=True)

    def fetch(self, url: str) -> bytes:
        """GET ``url`` and return the body. Non-2xx or transport errors raise."""
        try:
            response = self.http_client.get(url)
        except httpx.HTTPError as exc:
            logger.error("Erro de rede ao baixar imagem %s: %s", url, exc)
            raise ImageDownloadError(url, reason=str(exc)) from exc

        if not response.is_success:
            logger.error("Download da imagem falhou %s: HTTP %s", url, response.status_code)
            raise ImageDownloadError(url, status_code=response.status_code)

        return response.content

    def close(self) -> None:
        self.http_client.close()
