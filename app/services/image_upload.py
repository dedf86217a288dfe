"""
Business logic for storing user images in S3.
"""

from __future__ import annotations

import asyncio
import logging
import uuid

from app.clients import S3BlobClient
from app.schemas import ImageUploadResponse

logger = logging.getLogger(__name__)


def new_token() -> str:
    """Random 128-bit identifier used as the object name."""
    return str(uuid.uuid4())


def build_storage_key(filename: str, token: str) -> str:
    """Join ``token`` with the text after the last dot in ``filename``.

    A name without a dot keeps the whole name as its "extension", so
    ``noext`` becomes ``<token>.noext``.
    """
    extension = filename.split(".")[-1]
    return f"{token}.{extension}"


class ImageUploadService:
    """Store an uploaded image under a freshly generated key."""

    def __init__(self, blob_client: S3BlobClient) -> None:
        self._blobs = blob_client

    async def upload_image(
        self,
        *,
        filename: str,
        data: bytes,
        content_type: str | None = None,
    ) -> ImageUploadResponse:
        key = build_storage_key(filename, new_token())
        logger.info("Uploading %s (%d bytes) as %s", filename, len(data), key)
        descriptor = await asyncio.to_thread(
            self._blobs.upload, data, key, content_type
        )
        return ImageUploadResponse.model_validate(descriptor)


__all__ = ["ImageUploadService", "build_storage_key", "new_token"]
