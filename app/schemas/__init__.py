"""Public schema exports."""

from .thought import (
    ImageUploadResponse,
    Thought,
    ThoughtCreateRequest,
    ThoughtCreateResponse,
)

__all__ = [
    "ImageUploadResponse",
    "Thought",
    "ThoughtCreateRequest",
    "ThoughtCreateResponse",
]
