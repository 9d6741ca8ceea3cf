"""
Account persistence.
"""

from __future__ import annotations

from typing import Any

from core.db import Database, store_errors


async def list_accounts(db: Database) -> list[dict[str, Any]]:
    with store_errors("account"):
        return await db.fetch_all(
            """
            SELECT account_id, login_name, shadow_password
            FROM accounts
            ORDER BY account_id
            """
        )
