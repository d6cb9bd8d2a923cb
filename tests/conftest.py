from datetime import date, datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel, create_engine
from sqlmodel.pool import StaticPool

from main import app
from walk30.clock import get_today
from walk30.config import SESSION_COOKIE_NAME
from walk30.database import get_session
from walk30.models import Activity, User, Session as UserSession

# Create in-memory database for testing
TEST_DATABASE_URL = "sqlite:///:memory:"

# Fixed "today" for streak calculations
TODAY = date(2026, 3, 15)

engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)


@pytest.fixture(name="session")
def session_fixture():
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        yield session
    SQLModel.metadata.drop_all(engine)


@pytest.fixture(name="client")
def client_fixture(session: Session):
    def get_session_override():
        return session

    app.dependency_overrides[get_session] = get_session_override
    app.dependency_overrides[get_today] = lambda: TODAY
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


def create_user(session: Session, user_id: str = "user-1", first_name: str = "Test", **fields) -> User:
    user = User(
        id=user_id,
        email=fields.pop("email", f"{user_id}@example.com"),
        first_name=first_name,
        last_name=fields.pop("last_name", "Walker"),
        **fields
    )
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


def add_activity(session: Session, user_id: str, day: date, minutes: int, hour: int = 8) -> Activity:
    activity = Activity(
        user_id=user_id,
        date=datetime(day.year, day.month, day.day, hour, tzinfo=timezone.utc),
        minutes=minutes
    )
    session.add(activity)
    session.commit()
    session.refresh(activity)
    return activity


@pytest.fixture(name="user")
def user_fixture(session: Session):
    return create_user(session)


@pytest.fixture(name="user_token")
def user_token_fixture(session: Session, user: User):
    """Create a session for the test user and return its token."""
    import secrets

    token = secrets.token_urlsafe(32)
    user_session = UserSession(
        user_id=user.id,
        session_token=token,
        expires_at=datetime.now(timezone.utc) + timedelta(days=7)
    )
    session.add(user_session)
    session.commit()

    return token


@pytest.fixture(name="auth_client")
def auth_client_fixture(client: TestClient, user_token: str):
    client.cookies.set(SESSION_COOKIE_NAME, user_token)
    return client
