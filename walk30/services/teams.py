import logging
import random
import string
from typing import List, Optional, Tuple
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select, func

from ..errors import AlreadyInTeamError, JoinCodeUnavailableError, TeamNotFoundError
from ..models.team import Team, TeamMembership
from ..models.user import User

logger = logging.getLogger(__name__)

JOIN_CODE_LENGTH = 6
JOIN_CODE_ATTEMPTS = 5


def generate_join_code(length: int = JOIN_CODE_LENGTH) -> str:
    """Generate a random alphanumeric join code."""
    return ''.join(random.choices(string.ascii_uppercase + string.digits, k=length))


def get_membership(db: Session, user_id: str) -> Optional[TeamMembership]:
    statement = select(TeamMembership).where(TeamMembership.user_id == user_id)
    return db.exec(statement).first()


def create_team(db: Session, creator_id: str, name: str) -> Team:
    """
    Create a team and enroll its creator as the first member.

    A join code collision rolls back and retries with a fresh code. The
    team and the creator's membership are committed together.
    """
    if get_membership(db, creator_id):
        raise AlreadyInTeamError()

    for attempt in range(1, JOIN_CODE_ATTEMPTS + 1):
        team = Team(name=name, code=generate_join_code(), creator_id=creator_id)
        db.add(team)
        try:
            db.flush()
        except IntegrityError:
            db.rollback()
            logger.warning("Join code collision on attempt %d, retrying", attempt)
            continue

        db.add(TeamMembership(team_id=team.id, user_id=creator_id))
        try:
            db.commit()
        except IntegrityError as exc:
            db.rollback()
            raise AlreadyInTeamError() from exc

        db.refresh(team)
        logger.info("User %s created team %s (%s)", creator_id, team.id, team.code)
        return team

    raise JoinCodeUnavailableError()


def get_team_by_code(db: Session, code: str) -> Optional[Team]:
    return db.exec(select(Team).where(Team.code == code)).first()


def join_team(db: Session, user_id: str, code: str) -> Team:
    team = get_team_by_code(db, code)
    if not team:
        raise TeamNotFoundError()

    if get_membership(db, user_id):
        raise AlreadyInTeamError()

    db.add(TeamMembership(team_id=team.id, user_id=user_id))
    try:
        db.commit()
    except IntegrityError as exc:
        # A concurrent join slipped past the check above
        db.rollback()
        raise AlreadyInTeamError() from exc

    db.refresh(team)
    logger.info("User %s joined team %s", user_id, team.id)
    return team


def get_user_team(db: Session, user_id: str) -> Optional[Team]:
    """The single team a user belongs to, if any."""
    statement = (
        select(Team)
        .join(TeamMembership, TeamMembership.team_id == Team.id)
        .where(TeamMembership.user_id == user_id)
    )
    return db.exec(statement).first()


def get_team_members(db: Session, team_id: int) -> List[User]:
    statement = (
        select(User)
        .join(TeamMembership, TeamMembership.user_id == User.id)
        .where(TeamMembership.team_id == team_id)
        .order_by(TeamMembership.joined_at, TeamMembership.id)
    )
    return list(db.exec(statement).all())


def count_members(db: Session, team_id: int) -> int:
    return db.exec(
        select(func.count(TeamMembership.id))
        .where(TeamMembership.team_id == team_id)
    ).one()


def list_teams(db: Session) -> List[Tuple[Team, int]]:
    """Every team with its member count, oldest first."""
    statement = (
        select(Team, func.count(TeamMembership.id))
        .outerjoin(TeamMembership, TeamMembership.team_id == Team.id)
        .group_by(Team.id)
        .order_by(Team.id)
    )
    return [(team, member_count) for team, member_count in db.exec(statement).all()]
