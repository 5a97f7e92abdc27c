"""Database connection configuration."""

from pathlib import Path

from pydantic import BaseModel, SecretStr
from sqlalchemy.engine import make_url


class DatabaseConfig(BaseModel, frozen=True):
    """Database connection settings."""

    url: SecretStr

    @property
    def async_url(self) -> str:
        """DB URL, with charset appended for MySQL."""
        base = self.url.get_secret_value()
        if base.startswith("mysql") and "?" not in base:
            return f"{base}?charset=utf8mb4"
        return base

    @property
    def is_sqlite(self) -> bool:
        """Check if the URL points at a SQLite database."""
        return make_url(self.async_url).get_backend_name() == "sqlite"

    @property
    def sqlite_path(self) -> Path | None:
        """Filesystem path of a file-backed SQLite database, if any."""
        if not self.is_sqlite:
            return None
        database = make_url(self.async_url).database
        if not database or database == ":memory:":
            return None
        return Path(database)
