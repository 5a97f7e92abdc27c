"""Listen address configuration."""

from pydantic import BaseModel


class ServerConfig(BaseModel, frozen=True):
    """Address uvicorn binds to."""

    host: str
    port: int

    @property
    def bind(self) -> str:
        """``host:port`` form for logging."""
        return f"{self.host}:{self.port}"
