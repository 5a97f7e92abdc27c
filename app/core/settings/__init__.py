"""Domain-specific configuration models."""

from app.core.settings.app_config import AppConfig
from app.core.settings.cors_config import CorsConfig
from app.core.settings.database_config import DatabaseConfig
from app.core.settings.server_config import ServerConfig

__all__ = [
    "AppConfig",
    "CorsConfig",
    "DatabaseConfig",
    "ServerConfig",
]
