"""
Person persistence.

Deleting a person leaves its `event_person_tagging` rows in place; the
event detail query ignores tags whose person no longer exists.
"""

from __future__ import annotations

from typing import Any

from core.db import Database, store_errors
from core.errors import InternalError, NotFoundError


async def list_persons(
    db: Database,
    *,
    limit: int | None = None,
    offset: int | None = None,
) -> list[dict[str, Any]]:
    # NULL limit/offset means "no limit" / "start at 0" in Postgres.
    with store_errors("person"):
        return await db.fetch_all(
            """
            SELECT person_id, first_name, last_name
            FROM persons
            ORDER BY person_id
            LIMIT $1
            OFFSET $2
            """,
            limit,
            offset,
        )


async def get_person(db: Database, person_id: int) -> dict[str, Any]:
    with store_errors("person"):
        row = await db.fetch_one(
            """
            SELECT person_id, first_name, last_name
            FROM persons
            WHERE person_id = $1
            """,
            person_id,
        )
    if row is None:
        raise NotFoundError("not found: person")
    return row


async def create_person(db: Database, *, first_name: str, last_name: str) -> int:
    with store_errors("person"):
        async with db.transaction() as conn:
            row = await conn.fetchrow(
                """
                INSERT INTO persons (first_name, last_name)
                VALUES ($1, $2)
                RETURNING person_id
                """,
                first_name,
                last_name,
            )
            if row is None:
                raise InternalError("Failed to insert person.")
            return int(row["person_id"])


async def delete_person(db: Database, person_id: int) -> None:
    with store_errors("person"):
        await db.execute("DELETE FROM persons WHERE person_id = $1", person_id)
