from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from .tags import TagResponse


class NoteIn(BaseModel):
    """Body for both POST and PUT; PUT replaces every field."""

    title: Optional[str] = None
    content: Optional[str] = None
    folder_id: Optional[str] = None
    tags: Optional[List[str]] = None


class NoteResponse(BaseModel):
    id: UUID
    title: str
    content: Optional[str] = None
    folder_id: Optional[UUID] = None
    tags: List[TagResponse] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
