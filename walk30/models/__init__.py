from .user import User
from .session import Session
from .activity import Activity
from .team import Team, TeamMembership

__all__ = [
    "User",
    "Session",
    "Activity",
    "Team",
    "TeamMembership",
]
