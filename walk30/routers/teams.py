from typing import List, Optional
from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from ..database import get_session
from ..dependencies import require_user
from ..models.team import Team
from ..models.user import User
from ..schemas import MemberResponse, MyTeamResponse, TeamCreate, TeamJoin, TeamResponse
from ..services import teams as team_service

router = APIRouter(prefix="/api/teams", tags=["teams"])


def team_payload(team: Team, member_count: int) -> TeamResponse:
    return TeamResponse(
        id=team.id,
        name=team.name,
        code=team.code,
        creator_id=team.creator_id,
        created_at=team.created_at,
        member_count=member_count
    )


@router.post("", response_model=TeamResponse, status_code=status.HTTP_201_CREATED)
async def create_team(
    team_data: TeamCreate,
    current_user: User = Depends(require_user),
    db: Session = Depends(get_session)
):
    """Create a team; the creator joins it immediately."""
    team = team_service.create_team(db, current_user.id, team_data.name)
    return team_payload(team, team_service.count_members(db, team.id))


@router.get("", response_model=List[TeamResponse])
async def list_teams(
    current_user: User = Depends(require_user),
    db: Session = Depends(get_session)
):
    return [team_payload(team, count) for team, count in team_service.list_teams(db)]


@router.post("/join", response_model=TeamResponse)
async def join_team(
    join_data: TeamJoin,
    current_user: User = Depends(require_user),
    db: Session = Depends(get_session)
):
    """Join a team by its code. 404 for unknown codes, 400 if already in a team."""
    team = team_service.join_team(db, current_user.id, join_data.code)
    return team_payload(team, team_service.count_members(db, team.id))


@router.get("/me", response_model=Optional[MyTeamResponse])
async def my_team(
    current_user: User = Depends(require_user),
    db: Session = Depends(get_session)
):
    """The current user's team with its members, or null."""
    team = team_service.get_user_team(db, current_user.id)
    if not team:
        return None

    members = [
        MemberResponse(
            id=member.id,
            name=member.display_name,
            email=member.email,
            avatar_url=member.profile_image_url
        )
        for member in team_service.get_team_members(db, team.id)
    ]

    return MyTeamResponse(
        **team_payload(team, len(members)).model_dump(),
        members=members
    )
