from datetime import datetime
from typing import Optional
from sqlmodel import SQLModel, Field

from ..clock import utcnow


class Team(SQLModel, table=True):
    """User-created teams, joined by sharing the join code."""
    __tablename__ = "teams"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(index=True)
    code: str = Field(unique=True, index=True)
    creator_id: str = Field(foreign_key="users.id")
    created_at: datetime = Field(default_factory=utcnow)


class TeamMembership(SQLModel, table=True):
    __tablename__ = "team_members"

    id: Optional[int] = Field(default=None, primary_key=True)
    team_id: int = Field(foreign_key="teams.id", index=True)
    # One team per user
    user_id: str = Field(foreign_key="users.id", unique=True, index=True)
    joined_at: datetime = Field(default_factory=utcnow)
