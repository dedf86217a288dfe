"""
Application configuration models and helpers.

Centralizes settings management so the FastAPI app and the provisioning and
seed scripts share a consistent configuration surface.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AWSSettings(BaseSettings):
    """Settings for the DynamoDB table and S3 bucket backing the API."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    region_name: str = Field("us-east-2", validation_alias="AWS_REGION")
    endpoint_url: Optional[str] = Field(
        None,
        validation_alias="AWS_ENDPOINT_URL",
        description="Override endpoint, e.g. http://localhost:8000 for DynamoDB Local.",
    )
    thoughts_table_name: str = Field("Thoughts", validation_alias="THOUGHTS_TABLE_NAME")
    images_bucket_name: str = Field(..., validation_alias="IMAGES_BUCKET_NAME")
    read_capacity_units: int = Field(10, validation_alias="THOUGHTS_READ_CAPACITY")
    write_capacity_units: int = Field(10, validation_alias="THOUGHTS_WRITE_CAPACITY")
    consistent_read: bool = Field(
        False,
        validation_alias="THOUGHTS_CONSISTENT_READ",
        description="Request strongly consistent reads for scans and queries.",
    )

    @field_validator("endpoint_url", mode="before")
    @classmethod
    def _blank_endpoint_is_none(cls, value: Optional[str]) -> Optional[str]:
        """Treat an empty AWS_ENDPOINT_URL as unset."""
        if isinstance(value, str) and not value.strip():
            return None
        return value


class AppSettings(BaseSettings):
    """Root settings object for the FastAPI application."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    environment: str = Field("development", validation_alias="APP_ENV")
    log_level: str = Field("INFO", validation_alias="APP_LOG_LEVEL")
    aws: AWSSettings = Field(default_factory=AWSSettings)


@lru_cache()
def get_settings() -> AppSettings:
    """Return a cached settings object."""
    return AppSettings()  # type: ignore[call-arg]


__all__ = [
    "AppSettings",
    "AWSSettings",
    "get_settings",
]
