"""
Factory functions to provide shared clients and services as FastAPI dependencies.
"""

from functools import lru_cache

from app.clients import S3BlobClient, ThoughtsTableClient
from app.core.config import get_settings
from app.services import ImageUploadService, ThoughtService


@lru_cache()
def _settings():
    """Internal helper to cache settings for client factories."""
    return get_settings()


@lru_cache()
def get_thoughts_table_client() -> ThoughtsTableClient:
    """Create a singleton DynamoDB client for the Thoughts table."""
    settings = _settings()
    return ThoughtsTableClient(settings.aws)


@lru_cache()
def get_blob_client() -> S3BlobClient:
    """Create a singleton S3 client for the images bucket."""
    settings = _settings()
    return S3BlobClient(settings.aws)


def get_thought_service() -> ThoughtService:
    """Build a thought service over the shared table client."""
    return ThoughtService(get_thoughts_table_client())


def get_image_upload_service() -> ImageUploadService:
    """Build an image upload service over the shared S3 client."""
    return ImageUploadService(get_blob_client())


__all__ = [
    "get_blob_client",
    "get_image_upload_service",
    "get_thought_service",
    "get_thoughts_table_client",
]
