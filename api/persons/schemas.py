"""
Person API schemas.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from core.params import DbText


class PersonCreateRequest(BaseModel):
    first_name: DbText = Field(..., max_length=255)
    last_name: DbText = Field(..., max_length=255)


class PersonResponse(BaseModel):
    person_id: int
    first_name: str
    last_name: str


def to_person_response(row: dict) -> PersonResponse:
    return PersonResponse(
        person_id=int(row["person_id"]),
        first_name=str(row["first_name"]),
        last_name=str(row["last_name"]),
    )
