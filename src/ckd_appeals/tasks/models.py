"""Task models: the stored record and the create/update payloads."""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field, StrictBool


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Task(BaseModel):
    """A stored task."""

    id: int
    title: str
    description: str | None = None
    completed: bool = False
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)


class TaskCreate(BaseModel):
    """Payload for creating a task."""

    title: str | None = None
    description: str | None = None


class TaskUpdate(BaseModel):
    """Payload for a partial update. Only fields present in the request are applied."""

    title: str | None = None
    description: str | None = None
    completed: StrictBool | None = None
