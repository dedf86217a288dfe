"""
Pydantic models for thoughts and image uploads.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Thought(BaseModel):
    """A single post as stored in the Thoughts table."""

    model_config = ConfigDict(populate_by_name=True)

    username: str = Field(..., description="Posting user; partition key of the table.")
    created_at: int = Field(
        ...,
        alias="createdAt",
        description="Server-assigned creation time in epoch milliseconds.",
    )
    thought: str = Field(..., description="Free-text content of the post.")
    image: Optional[str] = Field(
        None,
        description="Reference to a previously uploaded image, not verified.",
    )

    def to_item(self) -> dict:
        """Render as a DynamoDB item, leaving out unset attributes."""
        return self.model_dump(by_alias=True, exclude_none=True)


class ThoughtCreateRequest(BaseModel):
    """Incoming payload for posting a thought."""

    username: str = Field(..., description="User posting the thought.")
    thought: str = Field(..., description="Free-text content of the post.")
    image: Optional[str] = Field(
        None,
        description="Location returned by the image upload endpoint.",
    )


class ThoughtCreateResponse(BaseModel):
    """Acknowledgment returned after a thought is written."""

    model_config = ConfigDict(populate_by_name=True)

    added: Thought = Field(..., alias="Added")


class ImageUploadResponse(BaseModel):
    """Location descriptor of an uploaded image."""

    model_config = ConfigDict(populate_by_name=True)

    bucket: str = Field(..., alias="Bucket")
    key: str = Field(..., alias="Key")
    location: str = Field(..., alias="Location")
    etag: Optional[str] = Field(None, alias="ETag")
