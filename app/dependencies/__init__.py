"""Expose dependency helpers for FastAPI routers."""

from .clients import (
    get_blob_client,
    get_image_upload_service,
    get_thought_service,
    get_thoughts_table_client,
)

__all__ = [
    "get_blob_client",
    "get_image_upload_service",
    "get_thought_service",
    "get_thoughts_table_client",
]
