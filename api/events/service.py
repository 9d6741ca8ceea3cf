"""
Event detail aggregation.

The detail view is composed per request from three queries and never
stored: the event itself, the persons tagged on it, and the images tagged
on it (with the public path each image is served under).
"""

from __future__ import annotations

from core.db import Database
from images.schemas import to_image_response
from persons.schemas import to_person_response

from . import repository, schemas


async def get_event_detail(db: Database, event_id: int) -> schemas.EventDetailResponse:
    event_row = await repository.get_event(db, event_id)
    person_rows = await repository.list_tagged_persons(db, event_id)
    image_rows = await repository.list_tagged_images(db, event_id)

    return schemas.EventDetailResponse(
        event=schemas.to_event_response(event_row),
        persons=[to_person_response(row) for row in person_rows],
        images=[to_image_response(row) for row in image_rows],
    )
