"""
Account API schemas.
"""

from __future__ import annotations

from pydantic import BaseModel


class AccountResponse(BaseModel):
    # shadow_password stays server-side.
    account_id: int
    login_name: str
