"""Service layer exports."""

from .image_upload import ImageUploadService, build_storage_key, new_token
from .thoughts import ThoughtService, epoch_millis

__all__ = [
    "ImageUploadService",
    "ThoughtService",
    "build_storage_key",
    "epoch_millis",
    "new_token",
]
