"""
Image API schemas.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

IMAGE_URL_PREFIX = "/images"
# Stored files always get this suffix, whatever the upload's MIME type.
IMAGE_FILE_SUFFIX = ".png"


def image_filename(image_id: int) -> str:
    return f"{image_id}{IMAGE_FILE_SUFFIX}"


def image_path(image_id: int) -> str:
    return f"{IMAGE_URL_PREFIX}/{image_filename(image_id)}"


class ImageResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    image_id: int
    image_name: str
    content_type: str
    image_path: str = Field(alias="ImagePath")


def to_image_response(row: dict) -> ImageResponse:
    image_id = int(row["image_id"])
    return ImageResponse(
        image_id=image_id,
        image_name=str(row["image_name"]),
        content_type=str(row.get("mime_type") or ""),
        image_path=image_path(image_id),
    )
