from enum import Enum
from typing import List
from fastapi import APIRouter, Depends
from sqlmodel import Session

from ..database import get_session
from ..dependencies import require_user
from ..models.user import User
from ..schemas import LeaderboardEntry
from ..services.leaderboard import individual_leaderboard, team_leaderboard

router = APIRouter(prefix="/api/leaderboard", tags=["leaderboard"])


class LeaderboardType(str, Enum):
    individual = "individual"
    team = "team"


@router.get("", response_model=List[LeaderboardEntry], response_model_exclude_none=True)
async def get_leaderboard(
    type: LeaderboardType = LeaderboardType.individual,
    current_user: User = Depends(require_user),
    db: Session = Depends(get_session)
):
    """Top 50 walkers, or top 50 teams with `type=team`."""
    if type == LeaderboardType.team:
        return team_leaderboard(db)
    return individual_leaderboard(db)
