"""CORS configuration."""

from pydantic import BaseModel


class CorsConfig(BaseModel, frozen=True):
    """Cross-origin settings."""

    allow_origins: str

    @property
    def allow_origins_list(self) -> list[str]:
        """Get allowed origins as a list."""
        return [
            origin.strip() for origin in self.allow_origins.split(",") if origin.strip()
        ]
