"""
Validation shared by request parameters and bodies.

Values that Postgres would refuse (ids outside int4, paging outside int8,
text with NUL bytes) are rejected here so they surface as 400s instead of
driver errors.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Path, Query
from pydantic import AfterValidator, Field

INT4_MIN = -(2**31)
INT4_MAX = 2**31 - 1
INT8_MAX = 2**63 - 1


def _reject_nul(value: str) -> str:
    if "\x00" in value:
        raise ValueError("must not contain NUL characters")
    return value


RowId = Annotated[int, Path(ge=INT4_MIN, le=INT4_MAX)]
RefId = Annotated[int, Field(ge=INT4_MIN, le=INT4_MAX)]
Limit = Annotated[int | None, Query(ge=0, le=INT8_MAX)]
Offset = Annotated[int | None, Query(ge=0, le=INT8_MAX)]
DbText = Annotated[str, AfterValidator(_reject_nul)]
