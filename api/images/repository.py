"""
Image persistence (rows only; file handling lives in `service.py`).
"""

from __future__ import annotations

from typing import Any

import asyncpg

from core.db import Database, store_errors
from core.errors import InternalError, NotFoundError


async def list_images(
    db: Database,
    *,
    limit: int | None = None,
    offset: int | None = None,
) -> list[dict[str, Any]]:
    with store_errors("image"):
        return await db.fetch_all(
            """
            SELECT image_id, image_name, mime_type
            FROM images
            ORDER BY image_id
            LIMIT $1
            OFFSET $2
            """,
            limit,
            offset,
        )


async def get_image(db: Database, image_id: int) -> dict[str, Any]:
    with store_errors("image"):
        row = await db.fetch_one(
            """
            SELECT image_id, image_name, mime_type
            FROM images
            WHERE image_id = $1
            """,
            image_id,
        )
    if row is None:
        raise NotFoundError("not found: image")
    return row


async def insert_image(conn: asyncpg.Connection, *, image_name: str, mime_type: str) -> int:
    """
    Insert an image row on a connection that is already inside a transaction.
    """
    row = await conn.fetchrow(
        """
        INSERT INTO images (image_name, mime_type)
        VALUES ($1, $2)
        RETURNING image_id
        """,
        image_name,
        mime_type,
    )
    if row is None:
        raise InternalError("Failed to insert image.")
    return int(row["image_id"])


async def delete_image(db: Database, image_id: int) -> None:
    """
    Delete the row only. The stored file and any tagging rows stay behind.
    """
    with store_errors("image"):
        await db.execute("DELETE FROM images WHERE image_id = $1", image_id)
