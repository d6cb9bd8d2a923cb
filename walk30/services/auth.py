import logging
import secrets
from datetime import timedelta
from typing import Optional
from sqlmodel import Session, select

from ..clock import as_utc, utcnow
from ..config import SESSION_EXPIRE_DAYS
from ..models.user import User
from ..models.session import Session as UserSession

logger = logging.getLogger(__name__)


def upsert_user(
    db: Session,
    user_id: str,
    email: Optional[str] = None,
    first_name: Optional[str] = None,
    last_name: Optional[str] = None,
    profile_image_url: Optional[str] = None
) -> User:
    """Create the user on first sign-in, refresh profile fields afterwards."""
    user = db.get(User, user_id)
    if user is None:
        user = User(id=user_id)
        logger.info("Creating user %s", user_id)

    user.email = email
    user.first_name = first_name
    user.last_name = last_name
    user.profile_image_url = profile_image_url
    user.updated_at = utcnow()

    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def generate_session_token() -> str:
    """Generate a secure random session token."""
    return secrets.token_urlsafe(32)


def create_session(db: Session, user_id: str) -> UserSession:
    """Create a new session for a user."""
    user_session = UserSession(
        user_id=user_id,
        session_token=generate_session_token(),
        expires_at=utcnow() + timedelta(days=SESSION_EXPIRE_DAYS)
    )

    db.add(user_session)
    db.commit()
    db.refresh(user_session)

    return user_session


def get_user_by_session_token(db: Session, session_token: str) -> Optional[User]:
    """Get user by session token if session is valid."""
    statement = select(UserSession).where(UserSession.session_token == session_token)
    user_session = db.exec(statement).first()

    if not user_session:
        return None

    # Expired sessions are cleaned up on lookup
    if as_utc(user_session.expires_at) < utcnow():
        db.delete(user_session)
        db.commit()
        return None

    return db.get(User, user_session.user_id)


def delete_session(db: Session, session_token: str) -> bool:
    """Delete a session (logout)."""
    statement = select(UserSession).where(UserSession.session_token == session_token)
    user_session = db.exec(statement).first()

    if user_session:
        db.delete(user_session)
        db.commit()
        return True

    return False
