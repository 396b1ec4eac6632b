from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Rasov Wash application settings.
    Read from the environment (CARWASH_ prefix) or from the .env file.
    """
    APP_NAME: str = "Rasov Wash"
    APP_VERSION: str = "1.0.0"

    DATABASE_URL: str = Field(
        default="sqlite:///./carwash.db",
        description="SQLAlchemy URL of the data store (hosted Postgres or a local SQLite file)."
    )
    SESSION_SECRET: str = Field(
        default="dev-secret-key-change-in-prod",
        description="Key used to sign the session cookie."
    )
    HTTPS_ONLY: bool = Field(default=False, description="Only send the session cookie over HTTPS.")
    SEED_SERVICES: bool = Field(default=True, description="Insert the default service catalogue on start-up.")

    HOST: str = "127.0.0.1"
    PORT: int = 8000

    LOG_LEVEL: str = Field(default="INFO", description="logging level")
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    model_config = SettingsConfigDict(
        env_prefix="CARWASH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
