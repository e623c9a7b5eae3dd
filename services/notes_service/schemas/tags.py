from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel


class TagIn(BaseModel):
    name: Optional[str] = None


class TagResponse(BaseModel):
    id: UUID
    name: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
