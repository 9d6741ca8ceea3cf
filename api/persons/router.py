"""
Person API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from core.db import Database
from core.dependencies import get_db
from core.params import Limit, Offset, RowId

from . import repository, schemas

router = APIRouter()


@router.get("/api/persons", response_model=list[schemas.PersonResponse])
async def list_persons(
    limit: Limit = None,
    offset: Offset = None,
    db: Database = Depends(get_db),
) -> list[schemas.PersonResponse]:
    rows = await repository.list_persons(db, limit=limit, offset=offset)
    return [schemas.to_person_response(row) for row in rows]


@router.get("/api/persons/{person_id}", response_model=schemas.PersonResponse)
async def get_person(person_id: RowId, db: Database = Depends(get_db)) -> schemas.PersonResponse:
    row = await repository.get_person(db, person_id)
    return schemas.to_person_response(row)


@router.post("/api/persons", status_code=status.HTTP_201_CREATED)
async def create_person(
    payload: schemas.PersonCreateRequest,
    db: Database = Depends(get_db),
) -> dict[str, int]:
    person_id = await repository.create_person(
        db,
        first_name=payload.first_name,
        last_name=payload.last_name,
    )
    return {"PersonID": person_id}


@router.delete("/api/persons/{person_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_person(person_id: RowId, db: Database = Depends(get_db)) -> Response:
    await repository.delete_person(db, person_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
