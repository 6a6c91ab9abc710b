"""Image API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Body, File, Form, UploadFile, status
from fastapi.responses import Response

from imagehost.models.errors import ErrorResponse

from .dependencies import ImageServiceDep
from .schemas import (
    ImageResponse,
    ImageSummaryResponse,
    MessageResponse,
    RenameImageRequest,
    UploadResponse,
)

router = APIRouter(tags=["images"])


@router.post(
    "/upload",
    response_model=UploadResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def upload_image(
    service: ImageServiceDep,
    image: Annotated[UploadFile | None, File()] = None,
    name: Annotated[str | None, Form()] = None,
) -> UploadResponse:
    """Upload an image from a multipart form."""
    data = await image.read() if image is not None else None
    content_type = image.content_type if image is not None else None

    record = await service.upload(name, data, content_type)
    return UploadResponse(message="Image uploaded successfully", id=record.id)


@router.get(
    "/images",
    response_model=list[ImageSummaryResponse],
    responses={500: {"model": ErrorResponse}},
)
async def list_images(service: ImageServiceDep) -> list[ImageSummaryResponse]:
    """List image metadata, newest first."""
    summaries = await service.list_images()
    return [ImageSummaryResponse.model_validate(summary) for summary in summaries]


@router.get(
    "/images/{image_id}/view",
    responses={
        200: {"content": {"image/*": {}}, "description": "Raw image bytes"},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def view_image(image_id: str, service: ImageServiceDep) -> Response:
    """Serve the raw image with its stored content type."""
    content = await service.get_content(image_id)
    return Response(content=content.data, media_type=content.content_type)


@router.put(
    "/images/{image_id}",
    response_model=ImageResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def rename_image(
    image_id: str,
    service: ImageServiceDep,
    payload: Annotated[RenameImageRequest | None, Body()] = None,
) -> ImageResponse:
    """Rename an image."""
    record = await service.rename(image_id, payload.name if payload else None)
    return ImageResponse.model_validate(record)


@router.delete(
    "/images/{image_id}",
    response_model=MessageResponse,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def delete_image(image_id: str, service: ImageServiceDep) -> MessageResponse:
    """Delete an image."""
    await service.delete(image_id)
    return MessageResponse(message="Image deleted successfully")
