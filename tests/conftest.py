"""
Shared fixtures.

Router tests run against `FakeStore`, an in-memory stand-in for the
repositories. Its methods share the repository call signatures (first
argument is the injected db, which is the store itself) and are patched
onto the repository modules, so routers, services and error handling run
unchanged.
"""

from __future__ import annotations

import copy
from contextlib import asynccontextmanager
from datetime import datetime
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

import accounts.repository
import events.repository
import images.repository
import persons.repository
import tagging.repository
from core.config import Settings
from core.dependencies import get_db
from core.errors import ConflictError, NotFoundError
from main import create_app


class FakeStore:
    def __init__(self) -> None:
        self.tables: dict = {
            "accounts": {1: {"account_id": 1, "login_name": "admin", "shadow_password": "x"}},
            "events": {},
            "persons": {},
            "images": {},
            "event_person_tagging": [],
            "event_image_tagging": [],
        }
        self.sequences = {"events": 0, "persons": 0, "images": 0}

    @asynccontextmanager
    async def transaction(self):
        snapshot = copy.deepcopy((self.tables, self.sequences))
        try:
            yield self
        except BaseException:
            self.tables, self.sequences = snapshot
            raise

    def _next_id(self, table: str) -> int:
        self.sequences[table] += 1
        return self.sequences[table]

    @staticmethod
    def _page(rows: list, limit: int | None, offset: int | None) -> list:
        rows = rows[offset or 0 :]
        return rows if limit is None else rows[:limit]

    # accounts

    async def list_accounts(self) -> list[dict]:
        return list(self.tables["accounts"].values())

    # persons

    async def list_persons(self, *, limit=None, offset=None) -> list[dict]:
        return self._page(sorted(self.tables["persons"].values(), key=lambda r: r["person_id"]), limit, offset)

    async def get_person(self, person_id: int) -> dict:
        row = self.tables["persons"].get(person_id)
        if row is None:
            raise NotFoundError("not found: person")
        return dict(row)

    async def create_person(self, *, first_name: str, last_name: str) -> int:
        async with self.transaction():
            for row in self.tables["persons"].values():
                if (row["first_name"], row["last_name"]) == (first_name, last_name):
                    raise ConflictError("duplicated: person")
            person_id = self._next_id("persons")
            self.tables["persons"][person_id] = {
                "person_id": person_id,
                "first_name": first_name,
                "last_name": last_name,
            }
            return person_id

    async def delete_person(self, person_id: int) -> None:
        self.tables["persons"].pop(person_id, None)

    # events

    async def list_events(self, *, limit=None, offset=None) -> list[dict]:
        return self._page(sorted(self.tables["events"].values(), key=lambda r: r["event_id"]), limit, offset)

    async def get_event(self, event_id: int) -> dict:
        row = self.tables["events"].get(event_id)
        if row is None:
            raise NotFoundError("not found: event")
        return dict(row)

    async def create_event(self, *, account_id: int, title: str, description: str, event_date: datetime) -> int:
        async with self.transaction():
            event_id = self._next_id("events")
            self.tables["events"][event_id] = {
                "event_id": event_id,
                "account_id": account_id,
                "title": title,
                "description": description,
                "event_date": event_date,
            }
            return event_id

    async def delete_event(self, event_id: int) -> None:
        self.tables["events"].pop(event_id, None)

    async def list_tagged_persons(self, event_id: int) -> list[dict]:
        ids = {p for (e, p) in self.tables["event_person_tagging"] if e == event_id}
        return [dict(self.tables["persons"][i]) for i in sorted(ids) if i in self.tables["persons"]]

    async def list_tagged_images(self, event_id: int) -> list[dict]:
        ids = {i for (e, i) in self.tables["event_image_tagging"] if e == event_id}
        return [dict(self.tables["images"][i]) for i in sorted(ids) if i in self.tables["images"]]

    # images

    async def list_images(self, *, limit=None, offset=None) -> list[dict]:
        return self._page(sorted(self.tables["images"].values(), key=lambda r: r["image_id"]), limit, offset)

    async def get_image(self, image_id: int) -> dict:
        row = self.tables["images"].get(image_id)
        if row is None:
            raise NotFoundError("not found: image")
        return dict(row)

    async def insert_image(self, *, image_name: str, mime_type: str) -> int:
        image_id = self._next_id("images")
        self.tables["images"][image_id] = {
            "image_id": image_id,
            "image_name": image_name,
            "mime_type": mime_type,
        }
        return image_id

    async def delete_image(self, image_id: int) -> None:
        self.tables["images"].pop(image_id, None)

    # tagging

    async def _bind(self, table: str, event_id: int, ids) -> None:
        if not ids:
            return None
        async with self.transaction():
            for other_id in ids:
                pair = (event_id, other_id)
                if pair in self.tables[table]:
                    raise ConflictError("duplicated: bind")
                self.tables[table].append(pair)

    async def bind_persons_to_event(self, event_id: int, person_ids) -> None:
        await self._bind("event_person_tagging", event_id, person_ids)

    async def bind_images_to_event(self, event_id: int, image_ids) -> None:
        await self._bind("event_image_tagging", event_id, image_ids)


_PATCHES = {
    accounts.repository: ["list_accounts"],
    persons.repository: ["list_persons", "get_person", "create_person", "delete_person"],
    events.repository: [
        "list_events",
        "get_event",
        "create_event",
        "delete_event",
        "list_tagged_persons",
        "list_tagged_images",
    ],
    images.repository: ["list_images", "get_image", "insert_image", "delete_image"],
    tagging.repository: ["bind_persons_to_event", "bind_images_to_event"],
}


@pytest.fixture
def store(monkeypatch) -> FakeStore:
    for module, names in _PATCHES.items():
        for name in names:
            monkeypatch.setattr(module, name, getattr(FakeStore, name))
    return FakeStore()


@pytest.fixture
def images_dir(tmp_path) -> Path:
    return tmp_path / "images"


@pytest.fixture
def settings(tmp_path, images_dir) -> Settings:
    return Settings(images_dir=str(images_dir), frontend_dir=str(tmp_path / "public"))


@pytest.fixture
def client(store, settings) -> TestClient:
    # No `with` block: the lifespan (real pool) never runs.
    app = create_app(settings)
    app.dependency_overrides[get_db] = lambda: store
    return TestClient(app)
