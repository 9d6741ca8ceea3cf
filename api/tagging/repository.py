"""
Tagging persistence.

Each bind call is one transaction: rows are inserted in input order and the
first failure rolls back the whole batch. Referenced ids are not checked;
only the pair's primary key is enforced by the store.
"""

from __future__ import annotations

from typing import Sequence

from core.db import Database, store_errors


async def bind_persons_to_event(db: Database, event_id: int, person_ids: Sequence[int]) -> None:
    if not person_ids:
        return None
    with store_errors("bind"):
        async with db.transaction() as conn:
            for person_id in person_ids:
                await conn.execute(
                    "INSERT INTO event_person_tagging (event_id, person_id) VALUES ($1, $2)",
                    event_id,
                    person_id,
                )


async def bind_images_to_event(db: Database, event_id: int, image_ids: Sequence[int]) -> None:
    if not image_ids:
        return None
    with store_errors("bind"):
        async with db.transaction() as conn:
            for image_id in image_ids:
                await conn.execute(
                    "INSERT INTO event_image_tagging (event_id, image_id) VALUES ($1, $2)",
                    event_id,
                    image_id,
                )
