from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from sqlmodel import Session

from ..config import SESSION_COOKIE_NAME, SESSION_EXPIRE_DAYS, settings
from ..database import get_session
from ..dependencies import require_user
from ..models.user import User
from ..schemas import LoginRequest, UserResponse
from ..services.auth import create_session, delete_session, upsert_user

router = APIRouter(prefix="/api/auth", tags=["auth"])


def user_payload(user: User) -> UserResponse:
    return UserResponse(
        id=user.id,
        email=user.email,
        first_name=user.first_name,
        last_name=user.last_name,
        profile_image_url=user.profile_image_url,
        display_name=user.display_name
    )


@router.post("/login", response_model=UserResponse)
async def login(
    claims: LoginRequest,
    response: Response,
    db: Session = Depends(get_session)
):
    """Sign in with identity claims and start a session."""
    if not settings.dev_login_enabled:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not found")

    user = upsert_user(
        db,
        claims.sub,
        email=claims.email,
        first_name=claims.first_name,
        last_name=claims.last_name,
        profile_image_url=claims.profile_image_url
    )
    user_session = create_session(db, user.id)

    response.set_cookie(
        key=SESSION_COOKIE_NAME,
        value=user_session.session_token,
        httponly=True,
        max_age=SESSION_EXPIRE_DAYS * 24 * 60 * 60,
        samesite="lax"
    )
    return user_payload(user)


@router.post("/logout")
async def logout(
    request: Request,
    response: Response,
    db: Session = Depends(get_session)
):
    session_token = request.cookies.get(SESSION_COOKIE_NAME)
    if session_token:
        delete_session(db, session_token)

    response.delete_cookie(SESSION_COOKIE_NAME)
    return {"status": "success"}


@router.get("/user", response_model=UserResponse)
async def current_user(current_user: User = Depends(require_user)):
    return user_payload(current_user)
