"""
Account API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from core.db import Database
from core.dependencies import get_db

from . import repository, schemas

router = APIRouter()


@router.get("/api/accounts", response_model=list[schemas.AccountResponse])
async def list_accounts(db: Database = Depends(get_db)) -> list[schemas.AccountResponse]:
    rows = await repository.list_accounts(db)
    return [
        schemas.AccountResponse(account_id=int(row["account_id"]), login_name=str(row["login_name"]))
        for row in rows
    ]
