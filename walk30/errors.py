from typing import Optional


class Walk30Error(Exception):
    """Base class for errors surfaced to API callers."""
    status_code = 500
    message = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)
        if message:
            self.message = message


class TeamNotFoundError(Walk30Error):
    status_code = 404
    message = "Team not found"


class AlreadyInTeamError(Walk30Error):
    status_code = 400
    message = "You are already in a team"


class JoinCodeUnavailableError(Walk30Error):
    status_code = 500
    message = "Could not generate a unique team code"
