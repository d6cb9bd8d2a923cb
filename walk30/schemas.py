from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .clock import as_utc
from .config import MIN_ACTIVITY_MINUTES, MAX_ACTIVITY_MINUTES


class ApiModel(BaseModel):
    """Base schema: snake_case in Python, camelCase on the wire."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    @field_validator("*")
    @classmethod
    def datetimes_to_utc(cls, value):
        # Timestamps are aware UTC; naive values are taken as UTC
        if isinstance(value, datetime):
            return as_utc(value)
        return value


class ActivityCreate(ApiModel):
    """Schema for logging a walk."""
    date: datetime
    minutes: int = Field(ge=MIN_ACTIVITY_MINUTES, le=MAX_ACTIVITY_MINUTES)
    notes: Optional[str] = Field(default=None, max_length=500)


class ActivityResponse(ApiModel):
    id: int
    user_id: str
    date: datetime
    minutes: int
    notes: Optional[str] = None
    created_at: datetime


class StatsResponse(ApiModel):
    total_minutes: int
    current_streak: int
    days_active: int
    daily_average: int


class TeamCreate(ApiModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=3, max_length=30)


class TeamJoin(ApiModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    code: str = Field(min_length=1, max_length=20)

    @field_validator("code")
    @classmethod
    def normalize_code(cls, value: str) -> str:
        return value.upper()


class MemberResponse(ApiModel):
    id: str
    name: str
    email: Optional[str] = None
    avatar_url: Optional[str] = None


class TeamResponse(ApiModel):
    id: int
    name: str
    code: str
    creator_id: str
    created_at: datetime
    member_count: Optional[int] = None


class MyTeamResponse(TeamResponse):
    members: List[MemberResponse] = []


class LeaderboardEntry(ApiModel):
    rank: int
    id: str  # user id or team id
    name: str
    minutes: int
    avatar_url: Optional[str] = None
    team_name: Optional[str] = None
    member_count: Optional[int] = None


class LoginRequest(ApiModel):
    """Identity claims handed over by the identity provider."""
    model_config = ConfigDict(str_strip_whitespace=True)

    sub: str = Field(min_length=1)
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None


class UserResponse(ApiModel):
    id: str
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None
    display_name: str
