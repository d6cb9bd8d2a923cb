from sqlmodel import select

from walk30.models import Activity, Team
from walk30.seed import DEMO_TEAM_NAME, DEMO_USER_ID, seed_demo_data
from walk30.services.teams import get_user_team


def test_seed_populates_empty_database(session):
    assert seed_demo_data(session) is True

    team = get_user_team(session, DEMO_USER_ID)
    assert team.name == DEMO_TEAM_NAME

    activities = session.exec(select(Activity).where(Activity.user_id == DEMO_USER_ID)).all()
    assert len(activities) == 5
    assert all(30 <= a.minutes <= 59 for a in activities)


def test_seed_skips_when_teams_exist(session):
    seed_demo_data(session)
    assert seed_demo_data(session) is False
    assert len(session.exec(select(Team)).all()) == 1
