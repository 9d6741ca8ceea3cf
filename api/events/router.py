"""
Event API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from core.config import Settings
from core.db import Database
from core.dependencies import get_db, settings_dependency
from core.params import Limit, Offset, RowId

from . import repository, schemas, service

router = APIRouter()


@router.get("/api/events", response_model=list[schemas.EventResponse])
async def list_events(
    limit: Limit = None,
    offset: Offset = None,
    db: Database = Depends(get_db),
) -> list[schemas.EventResponse]:
    rows = await repository.list_events(db, limit=limit, offset=offset)
    return [schemas.to_event_response(row) for row in rows]


@router.get("/api/events/{event_id}", response_model=schemas.EventDetailResponse)
async def get_event(event_id: RowId, db: Database = Depends(get_db)) -> schemas.EventDetailResponse:
    """
    Event plus the persons and images tagged on it.
    """
    return await service.get_event_detail(db, event_id)


@router.post("/api/events", status_code=status.HTTP_201_CREATED)
async def create_event(
    payload: schemas.EventCreateRequest,
    db: Database = Depends(get_db),
    settings: Settings = Depends(settings_dependency),
) -> dict[str, int]:
    event_id = await repository.create_event(
        db,
        account_id=settings.default_account_id,
        title=payload.title,
        description=payload.description,
        event_date=payload.event_datetime(),
    )
    return {"EventID": event_id}


@router.delete("/api/events/{event_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_event(event_id: RowId, db: Database = Depends(get_db)) -> Response:
    await repository.delete_event(db, event_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
