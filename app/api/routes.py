"""
FastAPI routes for the thoughts API.
"""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Annotated, Any

from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.responses import JSONResponse

from app.clients import StoreError
from app.dependencies import get_image_upload_service, get_thought_service
from app.schemas import (
    ImageUploadResponse,
    ThoughtCreateRequest,
    ThoughtCreateResponse,
)

router = APIRouter()
logger = logging.getLogger(__name__)


def _store_error_response(exc: StoreError) -> JSONResponse:
    """Forward a store failure to the client as-is."""
    return JSONResponse(
        status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
        content=exc.to_dict(),
    )


@router.get(
    "/users",
    response_model=None,
    status_code=HTTPStatus.OK,
)
async def list_thoughts(
    service: Annotated[Any, Depends(get_thought_service)],
) -> Any:
    """Return every stored thought, passed through as the table holds it."""
    try:
        return await service.list_all()
    except StoreError as exc:
        logger.error("Unable to scan thoughts: %s", exc.to_dict())
        return _store_error_response(exc)


@router.get(
    "/users/{username}",
    response_model=None,
    status_code=HTTPStatus.OK,
)
async def list_user_thoughts(
    username: str,
    service: Annotated[Any, Depends(get_thought_service)],
) -> Any:
    """Return one user's thoughts, most recent first."""
    logger.info("Querying for thought(s) from %s.", username)
    try:
        thoughts = await service.list_by_user(username)
    except StoreError as exc:
        logger.error("Unable to query. Error: %s", exc.to_dict())
        return _store_error_response(exc)
    logger.info("Query succeeded with %d item(s).", len(thoughts))
    return thoughts


@router.post(
    "/users",
    response_model=ThoughtCreateResponse,
    response_model_exclude_none=True,
    status_code=HTTPStatus.OK,
)
async def create_thought(
    payload: ThoughtCreateRequest,
    service: Annotated[Any, Depends(get_thought_service)],
) -> Any:
    """Post a new thought; the server assigns ``createdAt``."""
    try:
        thought = await service.create_thought(payload)
    except StoreError as exc:
        logger.error("Unable to add item. Error: %s", exc.to_dict())
        return _store_error_response(exc)
    logger.info("Added thought for %s at %d.", thought.username, thought.created_at)
    return ThoughtCreateResponse(added=thought)


@router.post(
    "/image-upload",
    response_model=ImageUploadResponse,
    response_model_exclude_none=True,
    status_code=HTTPStatus.OK,
)
async def upload_image(
    service: Annotated[Any, Depends(get_image_upload_service)],
    image: UploadFile = File(..., description="Image file to store."),
) -> Any:
    """Store an image and return where it landed."""
    data = await image.read()
    try:
        return await service.upload_image(
            filename=image.filename or "",
            data=data,
            content_type=image.content_type,
        )
    except StoreError as exc:
        logger.error("Image upload failed: %s", exc.to_dict())
        return _store_error_response(exc)
