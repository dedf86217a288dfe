"""
Amazon S3 client wrapper for storing uploaded images.
"""

from __future__ import annotations

from typing import Any, Dict
from urllib.parse import quote

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from app.clients.errors import StoreError
from app.core.config import AWSSettings


class S3BlobClient:
    """Put and fetch opaque objects in the images bucket."""

    def __init__(self, settings: AWSSettings) -> None:
        self._settings = settings
        self._client = boto3.client(
            "s3",
            region_name=settings.region_name,
            endpoint_url=settings.endpoint_url,
        )

    @property
    def bucket(self) -> str:
        return self._settings.images_bucket_name

    def upload(
        self, body: bytes, key: str, content_type: str | None = None
    ) -> Dict[str, Any]:
        """Store ``body`` under ``key`` and return its location descriptor."""
        params: Dict[str, Any] = {"Bucket": self.bucket, "Key": key, "Body": body}
        if content_type:
            params["ContentType"] = content_type
        try:
            response = self._client.put_object(**params)
        except (ClientError, BotoCoreError) as exc:
            raise StoreError.from_boto(exc) from exc
        return {
            "Bucket": self.bucket,
            "Key": key,
            "Location": self.object_url(key),
            "ETag": response.get("ETag"),
        }

    def download(self, key: str) -> bytes:
        """Return the stored bytes for ``key``."""
        try:
            response = self._client.get_object(Bucket=self.bucket, Key=key)
            return response["Body"].read()
        except (ClientError, BotoCoreError) as exc:
            raise StoreError.from_boto(exc) from exc

    def object_url(self, key: str) -> str:
        """Public URL of an object in the bucket."""
        quoted = quote(key)
        if self._settings.endpoint_url:
            return f"{self._settings.endpoint_url.rstrip('/')}/{self.bucket}/{quoted}"
        return (
            f"https://{self.bucket}.s3.{self._settings.region_name}.amazonaws.com/{quoted}"
        )


__all__ = ["S3BlobClient"]
