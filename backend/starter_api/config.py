"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache) — single instance per process
    - CORS policy and listening port reach the app only through BootstrapConfig

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all non-secret settings: works out-of-the-box with docker-compose
    - port defaults to 8080 (container startup); local development sets PORT=3000
    - JWT settings are read but not consumed by any route yet
"""

from dataclasses import dataclass
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from starter_api.core.domain_types import Environment

DEFAULT_ALLOWED_METHODS = ("GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS")


@dataclass(frozen=True)
class BootstrapConfig:
    """Explicit startup policy handed to create_app()."""
    allowed_origins: tuple[str, ...] = ("*",)
    port: int = 8080
    cors_credentials: bool = True
    allowed_methods: tuple[str, ...] = DEFAULT_ALLOWED_METHODS


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = (
        "postgresql+asyncpg://starter:starter@db:5432/starter"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosting providers hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Auth
    jwt_secret: str = "change-me"
    jwt_expires_in: str = "1d"

    # Server
    environment: Environment = Environment.DEVELOPMENT
    host: str = "0.0.0.0"
    port: int = 8080

    # CORS
    cors_allowed_origins: list[str] = ["*"]
    cors_credentials: bool = True
    cors_allowed_methods: list[str] = list(DEFAULT_ALLOWED_METHODS)

    # API documentation
    docs_path: str = "/docs"
    api_title: str = "Example"
    api_description: str = "Example API description"
    api_version: str = "1.0"

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("cors_allowed_methods")
    @classmethod
    def upper_methods(cls, v: list[str]) -> list[str]:
        return [method.upper() for method in v]

    def bootstrap_config(self) -> BootstrapConfig:
        return BootstrapConfig(
            allowed_origins=tuple(self.cors_allowed_origins),
            port=self.port,
            cors_credentials=self.cors_credentials,
            allowed_methods=tuple(self.cors_allowed_methods),
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
