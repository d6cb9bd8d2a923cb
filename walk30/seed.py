import logging
import random
from datetime import timedelta
from sqlmodel import Session, select

from .clock import utcnow
from .models.team import Team
from .schemas import ActivityCreate
from .services.activities import log_activity
from .services.auth import upsert_user
from .services.teams import create_team

logger = logging.getLogger(__name__)

DEMO_USER_ID = "demo-user-1"
DEMO_TEAM_NAME = "The Walkie Talkies"


def seed_demo_data(db: Session) -> bool:
    """Insert a demo walker, team and a week of walks into an empty database."""
    if db.exec(select(Team)).first():
        return False

    logger.info("Seeding database...")
    upsert_user(
        db,
        DEMO_USER_ID,
        email="demo@example.com",
        first_name="Demo",
        last_name="Walker"
    )
    create_team(db, DEMO_USER_ID, DEMO_TEAM_NAME)

    today = utcnow()
    for i in range(5):
        log_activity(db, DEMO_USER_ID, ActivityCreate(
            date=today - timedelta(days=i),
            minutes=30 + random.randint(0, 29),
            notes=f"Walk day {i + 1}"
        ))

    logger.info("Database seeded successfully")
    return True
