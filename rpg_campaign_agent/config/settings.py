"""Global configuration values for the RPG campaign agent."""

import os

AGENT_CONFIG = {
    "llm": {
        "api_key": os.getenv("OPENAI_API_KEY", ""),
        "base_url": os.getenv("RPG_LLM_BASE_URL") or None,
        "model": os.getenv("RPG_LLM_MODEL", "gpt-4o"),
        "temperature": float(os.getenv("RPG_LLM_TEMPERATURE", "0.8")),
        "max_tokens": int(os.getenv("RPG_LLM_MAX_TOKENS", "1500")),
        # None keeps the HTTP client's own default
        "timeout": float(os.environ["RPG_LLM_TIMEOUT"]) if os.getenv("RPG_LLM_TIMEOUT") else None,
    },
    "image": {
        "model": os.getenv("RPG_IMAGE_MODEL", "dall-e-3"),
        "size": os.getenv("RPG_IMAGE_SIZE", "1024x1024"),
        "quality": os.getenv("RPG_IMAGE_QUALITY", "standard"),
    },
    "storage": {
        "type": os.getenv("RPG_STORAGE_TYPE", "local"),  # "local" or "minio"
        "public_dir": os.getenv("RPG_PUBLIC_DIR", "public"),
        "maps_dir": os.getenv("RPG_MAPS_DIR", "maps"),
    },
    "minio": {
        "endpoint": os.getenv("RPG_MINIO_ENDPOINT", "localhost:9000"),
        "access_key": os.getenv("RPG_MINIO_ACCESS_KEY", "minioadmin"),
        "secret_key": os.getenv("RPG_MINIO_SECRET_KEY", "minioadmin"),
        "secure": os.getenv("RPG_MINIO_SECURE", "False").lower() == "true",
        "bucket_name": os.getenv("RPG_MINIO_BUCKET", "rpg-campaign-assets"),
    },
}
