from datetime import date
from typing import List
from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from ..clock import get_today
from ..database import get_session
from ..dependencies import require_user
from ..models.user import User
from ..schemas import ActivityCreate, ActivityResponse, StatsResponse
from ..services.activities import get_user_stats, list_activities, log_activity

router = APIRouter(prefix="/api", tags=["activities"])


@router.post("/activities", response_model=ActivityResponse, status_code=status.HTTP_201_CREATED)
async def create_activity(
    activity_data: ActivityCreate,
    current_user: User = Depends(require_user),
    db: Session = Depends(get_session)
):
    """Log a walk for the current user."""
    return log_activity(db, current_user.id, activity_data)


@router.get("/activities", response_model=List[ActivityResponse])
async def get_activities(
    limit: int = Query(default=10, ge=1, le=100),
    current_user: User = Depends(require_user),
    db: Session = Depends(get_session)
):
    """The current user's most recent walks, newest first."""
    return list_activities(db, current_user.id, limit)


@router.get("/stats", response_model=StatsResponse)
async def get_stats(
    current_user: User = Depends(require_user),
    today: date = Depends(get_today),
    db: Session = Depends(get_session)
):
    return get_user_stats(db, current_user.id, today)
