import logging
from datetime import date
from typing import List
from sqlmodel import Session, select

from ..models.activity import Activity
from ..schemas import ActivityCreate
from ..stats import UserStats, compute_stats

logger = logging.getLogger(__name__)


def log_activity(db: Session, user_id: str, data: ActivityCreate) -> Activity:
    """
    Store a walk for the user.

    `data` has already been validated (minutes within 1..1440, parseable
    date). Callers refresh any cached stats or leaderboards afterwards.
    """
    activity = Activity(
        user_id=user_id,
        date=data.date,
        minutes=data.minutes,
        notes=data.notes
    )
    db.add(activity)
    db.commit()
    db.refresh(activity)

    logger.info("User %s logged %d minutes", user_id, activity.minutes)
    return activity


def list_activities(db: Session, user_id: str, limit: int = 10) -> List[Activity]:
    """Most recent activities first."""
    statement = (
        select(Activity)
        .where(Activity.user_id == user_id)
        .order_by(Activity.date.desc(), Activity.id.desc())
        .limit(limit)
    )
    return list(db.exec(statement).all())


def get_user_stats(db: Session, user_id: str, today: date) -> UserStats:
    activities = db.exec(select(Activity).where(Activity.user_id == user_id)).all()
    return compute_stats(activities, today)
