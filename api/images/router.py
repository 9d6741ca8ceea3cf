"""
Image API endpoints.
"""

from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, Depends, File, Response, UploadFile, status

from core.config import Settings
from core.db import Database
from core.dependencies import get_db, settings_dependency
from core.params import Limit, Offset, RowId

from . import repository, schemas, service

router = APIRouter()


@router.get("/api/images", response_model=list[schemas.ImageResponse])
async def list_images(
    limit: Limit = None,
    offset: Offset = None,
    db: Database = Depends(get_db),
) -> list[schemas.ImageResponse]:
    rows = await repository.list_images(db, limit=limit, offset=offset)
    return [schemas.to_image_response(row) for row in rows]


@router.get("/api/images/{image_id}", response_model=schemas.ImageResponse)
async def get_image(image_id: RowId, db: Database = Depends(get_db)) -> schemas.ImageResponse:
    row = await repository.get_image(db, image_id)
    return schemas.to_image_response(row)


@router.post("/api/images", status_code=status.HTTP_201_CREATED)
async def upload_image(
    file: UploadFile | None = File(default=None),
    db: Database = Depends(get_db),
    settings: Settings = Depends(settings_dependency),
) -> dict[str, int]:
    """
    Upload one image (multipart field `file`, at most `MAX_UPLOAD_BYTES`).

    The size check runs before anything touches the database.
    """
    upload = await service.read_upload(file, max_bytes=settings.max_upload_bytes)
    image_id = await service.create_image(db, upload, images_dir=Path(settings.images_dir))
    return {"ImageID": image_id}


@router.delete("/api/images/{image_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_image(image_id: RowId, db: Database = Depends(get_db)) -> Response:
    await repository.delete_image(db, image_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
