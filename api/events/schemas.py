"""
Event API schemas (request/response models).
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field

from core.params import DbText
from images.schemas import ImageResponse
from persons.schemas import PersonResponse


class EventCreateRequest(BaseModel):
    title: DbText = Field(..., max_length=255)
    description: DbText = ""
    # Unix epoch seconds.
    event_date: int = Field(..., ge=-62135596800, le=253402300799)

    def event_datetime(self) -> datetime:
        return datetime.fromtimestamp(self.event_date, tz=timezone.utc)


class EventResponse(BaseModel):
    # PascalCase keys are what the frontend reads.
    model_config = ConfigDict(populate_by_name=True)

    event_id: int = Field(alias="EventID")
    account_id: int = Field(alias="AccountID")
    title: str = Field(alias="Title")
    description: str = Field(alias="Description")
    event_date: datetime = Field(alias="EventDate")


class EventDetailResponse(BaseModel):
    event: EventResponse
    persons: list[PersonResponse]
    images: list[ImageResponse]


def to_event_response(row: dict) -> EventResponse:
    return EventResponse(
        event_id=int(row["event_id"]),
        account_id=int(row["account_id"]),
        title=str(row["title"]),
        description=str(row.get("description") or ""),
        event_date=row["event_date"],
    )
