from datetime import datetime
from typing import Optional
from sqlmodel import SQLModel, Field

from ..clock import utcnow


class Activity(SQLModel, table=True):
    """One logged walking session. Rows are never updated or deleted."""
    __tablename__ = "activities"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: str = Field(foreign_key="users.id", index=True)
    date: datetime = Field(index=True)  # UTC
    minutes: int
    notes: Optional[str] = Field(default=None)
    created_at: datetime = Field(default_factory=utcnow)
