from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict

# Base directory
BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    # Database
    database_url: str = f"sqlite:///{BASE_DIR}/walk30.db"

    # Sessions
    session_cookie_name: str = "walk30_session"
    session_expire_days: int = 7

    # App
    app_name: str = "Walk30"
    log_level: str = "INFO"
    seed_demo_data: bool = True
    dev_login_enabled: bool = True  # Accept identity claims directly at /api/auth/login
    leaderboard_size: int = 50

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )


settings = Settings()

DATABASE_URL = settings.database_url
SESSION_COOKIE_NAME = settings.session_cookie_name
SESSION_EXPIRE_DAYS = settings.session_expire_days
LEADERBOARD_SIZE = settings.leaderboard_size

# Activity limits
MIN_ACTIVITY_MINUTES = 1
MAX_ACTIVITY_MINUTES = 1440
