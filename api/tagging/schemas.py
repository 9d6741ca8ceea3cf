"""
Tagging request bodies: JSON arrays of id wrappers.
"""

from __future__ import annotations

from pydantic import BaseModel

from core.params import RefId


class PersonRef(BaseModel):
    person_id: RefId


class ImageRef(BaseModel):
    image_id: RefId
