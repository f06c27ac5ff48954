"""Application configuration."""

import os
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, ValidationError, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from redditclone.util.error import ConfigurationError


class AuthSettings(BaseModel):
    """Authentication configuration."""

    model_config = ConfigDict(frozen=True)

    jwt_secret: str
    jwt_algorithm: Literal["HS256"] = "HS256"
    token_ttl_seconds: int = 3600
    session_ttl_seconds: int = 3600


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    logfire_token: str | None = None

    # If None, sends when a token is present
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    Required environment variables:
        JWT_SECRET      token signing secret
        MYSQL_DSN       SQLAlchemy async URL of the relational store
        MONGO_URI       MongoDB connection string
        MONGO_DB_NAME   MongoDB database holding the posts collection

    The START variable names the dotenv file to load (see load_settings).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows OBSERVABILITY__LOGFIRE_TOKEN syntax
        extra="ignore",
    )

    environment: Literal["test", "development", "staging", "production"] = (
        "development"
    )
    debug: bool = False

    host: str = "0.0.0.0"
    port: int = 8082
    static_dir: str = "static"

    # Required, no defaults
    jwt_secret: str
    mysql_dsn: str
    mongo_uri: str
    mongo_db_name: str

    auth: AuthSettings | None = None  # Built in validator
    observability: ObservabilitySettings = ObservabilitySettings()

    @model_validator(mode="after")
    def initialize_auth_settings(self) -> "Settings":
        """Freeze the token settings so the secret is read exactly once."""
        for name in ("jwt_secret", "mysql_dsn", "mongo_uri", "mongo_db_name"):
            if not getattr(self, name):
                raise ValueError(f"{name.upper()} is not set in environment")

        self.auth = AuthSettings(jwt_secret=self.jwt_secret)
        return self

    @property
    def index_html(self) -> Path:
        """Entry document of the single-page application."""
        return Path(self.static_dir) / "html" / "index.html"


def load_settings() -> Settings:
    """Load settings from the environment and the dotenv file named by START.

    Raises:
        ConfigurationError: If the dotenv file is missing or a required
            variable is absent
    """
    env_file = os.environ.get("START")
    if env_file and not Path(env_file).is_file():
        raise ConfigurationError(f"Env file not found: {env_file}")

    try:
        if env_file:
            return Settings(_env_file=env_file)
        return Settings()
    except ValidationError as e:
        raise ConfigurationError(str(e)) from e
