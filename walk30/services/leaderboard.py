from typing import Any, Dict, List
from sqlmodel import Session, select, func

from ..config import LEADERBOARD_SIZE
from ..models.activity import Activity
from ..models.team import Team, TeamMembership
from ..models.user import User


def individual_leaderboard(db: Session, limit: int = LEADERBOARD_SIZE) -> List[Dict[str, Any]]:
    """
    Users ranked by total minutes walked.

    Users without activities are included with 0 minutes. Equal totals are
    ordered by user id.
    """
    total_minutes = func.coalesce(func.sum(Activity.minutes), 0)
    leaderboard_query = (
        select(User, total_minutes.label("minutes"))
        .outerjoin(Activity, Activity.user_id == User.id)
        .group_by(User.id)
        .order_by(total_minutes.desc(), User.id)
        .limit(limit)
    )
    results = db.exec(leaderboard_query).all()

    # Team names for the listed users
    user_ids = [user.id for user, _ in results]
    team_names = {}
    if user_ids:
        team_rows = db.exec(
            select(TeamMembership.user_id, Team.name)
            .join(Team, Team.id == TeamMembership.team_id)
            .where(TeamMembership.user_id.in_(user_ids))
        ).all()
        team_names = {user_id: team_name for user_id, team_name in team_rows}

    return [
        {
            "rank": i + 1,
            "id": user.id,
            "name": user.display_name,
            "minutes": int(minutes or 0),
            "avatar_url": user.profile_image_url,
            "team_name": team_names.get(user.id),
        }
        for i, (user, minutes) in enumerate(results)
    ]


def team_leaderboard(db: Session, limit: int = LEADERBOARD_SIZE) -> List[Dict[str, Any]]:
    """
    Teams ranked by the summed minutes of their members.

    Teams whose members have logged nothing do not appear. Equal totals are
    ordered by team id.
    """
    total_minutes = func.sum(Activity.minutes)
    leaderboard_query = (
        select(Team.id, Team.name, total_minutes.label("minutes"))
        .join(TeamMembership, TeamMembership.team_id == Team.id)
        .join(Activity, Activity.user_id == TeamMembership.user_id)
        .group_by(Team.id, Team.name)
        .order_by(total_minutes.desc(), Team.id)
        .limit(limit)
    )
    results = db.exec(leaderboard_query).all()

    team_ids = [row[0] for row in results]
    member_counts = {}
    if team_ids:
        count_rows = db.exec(
            select(TeamMembership.team_id, func.count(TeamMembership.id))
            .where(TeamMembership.team_id.in_(team_ids))
            .group_by(TeamMembership.team_id)
        ).all()
        member_counts = dict(count_rows)

    return [
        {
            "rank": i + 1,
            "id": str(row[0]),
            "name": row[1],
            "minutes": int(row[2]),
            "member_count": member_counts.get(row[0], 0),
        }
        for i, row in enumerate(results)
    ]
