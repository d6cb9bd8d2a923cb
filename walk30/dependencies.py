from typing import Optional
from fastapi import Request, Depends, HTTPException, status
from sqlmodel import Session

from .config import SESSION_COOKIE_NAME
from .database import get_session
from .models.user import User
from .services.auth import get_user_by_session_token


async def get_current_user(
    request: Request,
    db: Session = Depends(get_session)
) -> Optional[User]:
    """Get the current signed-in user from the session cookie."""
    session_token = request.cookies.get(SESSION_COOKIE_NAME)
    if not session_token:
        return None

    return get_user_by_session_token(db, session_token)


async def require_user(
    current_user: Optional[User] = Depends(get_current_user)
) -> User:
    """Require a signed-in user."""
    if not current_user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated"
        )
    return current_user
