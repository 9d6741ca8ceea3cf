"""
Tagging API endpoints.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Response, status

from core.db import Database
from core.dependencies import get_db
from core.params import RowId

from . import repository, schemas

router = APIRouter()

logger = logging.getLogger(__name__)


@router.post("/api/events/{event_id}/persons", status_code=status.HTTP_204_NO_CONTENT)
async def bind_event_persons(
    event_id: RowId,
    payload: list[schemas.PersonRef],
    db: Database = Depends(get_db),
) -> Response:
    person_ids = [ref.person_id for ref in payload]
    await repository.bind_persons_to_event(db, event_id, person_ids)
    logger.info("persons_bound event_id=%s count=%s", event_id, len(person_ids))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/api/events/{event_id}/images", status_code=status.HTTP_204_NO_CONTENT)
async def bind_event_images(
    event_id: RowId,
    payload: list[schemas.ImageRef],
    db: Database = Depends(get_db),
) -> Response:
    image_ids = [ref.image_id for ref in payload]
    await repository.bind_images_to_event(db, event_id, image_ids)
    logger.info("images_bound event_id=%s count=%s", event_id, len(image_ids))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
