from pydantic_settings import BaseSettings
from functools import lru_cache

class Settings(BaseSettings):
    # --- App Config ---
    APP_NAME: str = "Tours"
    APP_ENV: str = "development"
    APP_HOST: str = "0.0.0.0"
    APP_PORT: int = 8000
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"

    # --- Database ---
    DATABASE_URL: str | None = None
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = "postgres"
    POSTGRES_DB: str = "tours"
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: int = 5432
    DB_ECHO: bool = False

    # --- JWT / Auth ---
    JWT_SECRET_KEY: str
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    # --- OAuth / Google ---
    GOOGLE_CLIENT_ID: str | None = None
    GOOGLE_CLIENT_SECRET: str | None = None
    GOOGLE_REDIRECT_URI: str | None = None

    # --- Tours ---
    DEFAULT_PAGE_LIMIT: int = 10
    # any signed-in user may edit/delete any tour unless this is on
    RESTRICT_EDITS_TO_AUTHOR: bool = False

    class Config:
        env_file = ".env"

@lru_cache()
def get_settings():
    return Settings()
