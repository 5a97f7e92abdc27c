"""Application configuration using Pydantic Settings V2."""

from functools import cached_property
from typing import Literal

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.core.settings import (
    AppConfig,
    CorsConfig,
    DatabaseConfig,
    ServerConfig,
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Flat fields are loaded directly from environment variables.
    Domain properties provide grouped access (e.g. settings.server.port).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = Field(
        default="session-share",
        description="Application name",
    )
    app_env: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Application environment",
    )
    debug: bool = Field(
        default=False,
        description="Debug mode",
    )

    # Server
    host: str = Field(
        default="0.0.0.0",
        description="Server host",
    )
    port: int = Field(
        default=3000,
        ge=1,
        le=65535,
        description="Server port",
    )

    # CORS
    cors_origins: str = Field(
        default="*",
        description="Comma-separated list of allowed CORS origins",
    )

    # Database
    database_url: SecretStr = Field(
        default=SecretStr("sqlite+aiosqlite:///./data/sessions.db"),
        description="Async database URL (sqlite+aiosqlite or mysql+aiomysql)",
    )

    # --- Domain properties ---

    @cached_property
    def app(self) -> AppConfig:
        """Application environment configuration."""
        return AppConfig(
            name=self.app_name,
            env=self.app_env,
            debug=self.debug,
        )

    @cached_property
    def server(self) -> ServerConfig:
        """Server configuration."""
        return ServerConfig(
            host=self.host,
            port=self.port,
        )

    @cached_property
    def cors(self) -> CorsConfig:
        """CORS configuration."""
        return CorsConfig(allow_origins=self.cors_origins)

    @cached_property
    def database(self) -> DatabaseConfig:
        """Database connection configuration."""
        return DatabaseConfig(url=self.database_url)

    # --- Convenience properties (delegate to domain configs) ---

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.app.is_development


# Global settings instance
settings = Settings()
