"""Expose constructed client wrappers."""

from .dynamodb import ThoughtsTableClient
from .errors import StoreError
from .s3 import S3BlobClient

__all__ = [
    "S3BlobClient",
    "StoreError",
    "ThoughtsTableClient",
]
