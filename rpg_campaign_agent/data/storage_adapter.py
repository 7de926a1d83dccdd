"""Storage adapter interface and implementations for generated assets.

Supports both local file storage (served from ``public/``) and MinIO
S3-compatible storage.
"""

import io
import logging
import os
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from rpg_campaign_agent.config.settings import AGENT_CONFIG

logger = logging.getLogger(__name__)


class StorageAdapter(ABC):
    """Abstract base class for asset storage adapters."""

    @abstractmethod
    def save_bytes(self, object_name: str, data: bytes, content_type: str = "image/png") -> None:
        """Write binary data under ``object_name``."""
        pass

    @abstractmethod
    def list_objects(self, prefix: str = "") -> List[str]:
        """List all objects with given prefix."""
        pass

    @abstractmethod
    def exists(self, object_name: str) -> bool:
        """Check if an object exists."""
        pass


class LocalFileStorage(StorageAdapter):
    """Local file system storage adapter rooted at the served-assets directory."""

    def __init__(self, base_path: Optional[str] = None):
        """Initialize local file storage.

        Args:
            base_path: Served-assets root. Defaults to ``public/`` under the
                current working directory.
        """
        if base_path is None:
            base_path = os.path.join(os.getcwd(), AGENT_CONFIG["storage"]["public_dir"])
        self.base_path = base_path

    def _ensure_directory(self, dir_path: str) -> None:
        """Create ``dir_path`` and any missing parent; existing ones are fine."""
        if not os.path.isdir(dir_path):
            os.makedirs(dir_path, exist_ok=True)
            logger.info("Diretório criado: %s", dir_path)

    def _get_full_path(self, object_name: str) -> str:
        """Get full file path for an object name."""
        normalized_name = object_name.replace("/", os.sep)
        return os.path.join(self.base_path, normalized_name)

    def save_bytes(self, object_name: str, data: bytes, content_type: str = "image/png") -> None:
        """Write bytes to a local file, creating its directories on demand."""
        full_path = self._get_full_path(object_name)
        self._ensure_directory(self.base_path)
        self._ensure_directory(os.path.dirname(full_path))
        with open(full_path, "wb") as f:
            f.write(data)

    def list_objects(self, prefix: str = "") -> List[str]:
        """List all files with given prefix, as ``/``-separated relative names."""
        results = []
        if not os.path.exists(self.base_path):
            return results
        for root, _dirs, files in os.walk(self.base_path):
            for filename in files:
                rel_path = os.path.relpath(os.path.join(root, filename), self.base_path)
                rel_path = rel_path.replace(os.sep, "/")
                if not prefix or rel_path.startswith(prefix):
                    results.append(rel_path)
        return sorted(results)

    def exists(self, object_name: str) -> bool:
        """Check if a file exists."""
        return os.path.exists(self._get_full_path(object_name))


class MinIOStorage(StorageAdapter):
    """MinIO S3-compatible storage adapter."""

    def __init__(self, minio_config: Optional[Dict[str, Any]] = None, client=None):
        """Initialize MinIO storage.

        Args:
            minio_config: ``minio`` config section. Defaults to AGENT_CONFIG["minio"].
            client: Pre-built ``Minio`` client, mostly for tests.
        """
        conf = minio_config or AGENT_CONFIG["minio"]
        if client is None:
            import urllib3
            from minio import Minio

            http_client = None
            if conf["secure"]:
                http_client = urllib3.PoolManager(cert_reqs="CERT_NONE", assert_hostname=False)
            client = Minio(
                conf["endpoint"],
                access_key=conf["access_key"],
                secret_key=conf["secret_key"],
                secure=conf["secure"],
                http_client=http_client,
            )
        self.client = client
        self.bucket_name = conf["bucket_name"]
        if not self.client.bucket_exists(self.bucket_name):
            self.client.make_bucket(self.bucket_name)
        logger.info("MinIO conectado, bucket %s", self.bucket_name)

    def save_bytes(self, object_name: str, data: bytes, content_type: str = "image/png") -> None:
        """Upload bytes to MinIO."""
        self.client.put_object(
            self.bucket_name,
            object_name,
            io.BytesIO(data),
            len(data),
            content_type=content_type,
        )

    def list_objects(self, prefix: str = "") -> List[str]:
        """List objects with given prefix."""
        objects = self.client.list_objects(self.bucket_name, prefix=prefix, recursive=True)
        return sorted(obj.object_name for obj in objects)

    def exists(self, object_name: str) -> bool:
        """Check if an object exists."""
        from minio.error import S3Error

        try:
            self.client.stat_object(self.bucket_name, object_name)
            return True
        except S3Error:
            return False


def get_storage_adapter(storage_config: Optional[Dict[str, Any]] = None) -> StorageAdapter:
    """Get the appropriate storage adapter based on configuration.

    Returns:
        StorageAdapter: LocalFileStorage or MinIOStorage instance
    """
    conf = storage_config or AGENT_CONFIG["storage"]
    storage_type = conf.get("type", "local").lower()
    if storage_type == "minio":
        return MinIOStorage()
    return LocalFileStorage(os.path.join(os.getcwd(), conf.get("public_dir", "public")))
