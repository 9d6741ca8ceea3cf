"""
Event persistence.
This module is where event-related SQL lives, including the two lookups
that resolve an event's tagged persons and images.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from core.db import Database, store_errors
from core.errors import InternalError, NotFoundError

_EVENT_COLUMNS = "event_id, account_id, title, description, event_date"


async def list_events(
    db: Database,
    *,
    limit: int | None = None,
    offset: int | None = None,
) -> list[dict[str, Any]]:
    with store_errors("event"):
        return await db.fetch_all(
            f"""
            SELECT {_EVENT_COLUMNS}
            FROM events
            ORDER BY event_id
            LIMIT $1
            OFFSET $2
            """,
            limit,
            offset,
        )


async def get_event(db: Database, event_id: int) -> dict[str, Any]:
    with store_errors("event"):
        row = await db.fetch_one(
            f"""
            SELECT {_EVENT_COLUMNS}
            FROM events
            WHERE event_id = $1
            """,
            event_id,
        )
    if row is None:
        raise NotFoundError("not found: event")
    return row


async def create_event(
    db: Database,
    *,
    account_id: int,
    title: str,
    description: str,
    event_date: datetime,
) -> int:
    """
    Insert an event and return the generated id, in a single transaction.
    """
    with store_errors("event"):
        async with db.transaction() as conn:
            row = await conn.fetchrow(
                """
                INSERT INTO events (account_id, title, description, event_date)
                VALUES ($1, $2, $3, $4)
                RETURNING event_id
                """,
                account_id,
                title,
                description,
                event_date,
            )
            if row is None:
                raise InternalError("Failed to insert event.")
            return int(row["event_id"])


async def delete_event(db: Database, event_id: int) -> None:
    """
    Delete the event row only. Tagging rows for the event are kept.
    """
    with store_errors("event"):
        await db.execute("DELETE FROM events WHERE event_id = $1", event_id)


async def list_tagged_persons(db: Database, event_id: int) -> list[dict[str, Any]]:
    with store_errors("event"):
        return await db.fetch_all(
            """
            SELECT person_id, first_name, last_name
            FROM persons
            WHERE person_id IN (
              SELECT DISTINCT person_id
              FROM event_person_tagging
              WHERE event_id = $1
            )
            ORDER BY person_id
            """,
            event_id,
        )


async def list_tagged_images(db: Database, event_id: int) -> list[dict[str, Any]]:
    with store_errors("event"):
        return await db.fetch_all(
            """
            SELECT image_id, image_name, mime_type
            FROM images
            WHERE image_id IN (
              SELECT DISTINCT image_id
              FROM event_image_tagging
              WHERE event_id = $1
            )
            ORDER BY image_id
            """,
            event_id,
        )
