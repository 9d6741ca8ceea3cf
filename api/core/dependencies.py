"""
Shared FastAPI dependencies.

Both the pool and the settings live on `app.state`; handlers never reach
for module globals.
"""

from __future__ import annotations

from fastapi import Request

from .config import Settings
from .db import Database


def get_db(request: Request) -> Database:
    return request.app.state.db


def settings_dependency(request: Request) -> Settings:
    return request.app.state.settings
