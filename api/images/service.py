"""
Image upload handling.

This file contains logic that is independent of FastAPI's routing layer:
- Read upload bytes with a size limit
- Insert the image row and write the file under the same transaction
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from fastapi import UploadFile
from starlette.concurrency import run_in_threadpool

from core.db import Database, store_errors
from core.errors import BadRequestError

from . import repository
from .schemas import image_filename

logger = logging.getLogger(__name__)

READ_CHUNK_BYTES = 64 * 1024


@dataclass(frozen=True)
class UploadedImage:
    filename: str
    content_type: str
    data: bytes


async def read_upload_bytes(file: UploadFile, max_bytes: int) -> bytes:
    """
    Read the upload into memory, enforcing a maximum size.

    Stops as soon as the limit is crossed so oversize uploads are never
    fully buffered.
    """
    if file.size is not None and file.size > max_bytes:
        raise BadRequestError("file exceed 1MByte")

    buf = bytearray()
    while True:
        chunk = await file.read(READ_CHUNK_BYTES)
        if not chunk:
            break
        buf.extend(chunk)
        if len(buf) > max_bytes:
            raise BadRequestError("file exceed 1MByte")

    return bytes(buf)


async def read_upload(file: UploadFile | None, *, max_bytes: int) -> UploadedImage:
    if file is None:
        raise BadRequestError("file missing")
    data = await read_upload_bytes(file, max_bytes)
    return UploadedImage(
        filename=file.filename or "",
        content_type=file.content_type or "",
        data=data,
    )


def _write_image_file(images_dir: Path, image_id: int, data: bytes) -> Path:
    images_dir.mkdir(parents=True, exist_ok=True)
    destination = images_dir / image_filename(image_id)
    destination.write_bytes(data)
    return destination


async def create_image(db: Database, upload: UploadedImage, *, images_dir: Path) -> int:
    """
    Insert the image row, then write `<images_dir>/<id>.png`, then commit.

    If the write fails the row is rolled back; a partially written file is
    left on disk.
    """
    with store_errors("image"):
        async with db.transaction() as conn:
            image_id = await repository.insert_image(
                conn,
                image_name=upload.filename,
                mime_type=upload.content_type,
            )
            destination = await run_in_threadpool(_write_image_file, images_dir, image_id, upload.data)

    logger.info(
        "image_stored image_id=%s bytes=%s path=%s",
        image_id,
        len(upload.data),
        destination,
    )
    return image_id
