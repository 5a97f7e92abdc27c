"""Tests for domain-specific configuration."""

from pathlib import Path

import pytest
from pydantic import SecretStr, ValidationError

from app.core.config import Settings
from app.core.settings import (
    AppConfig,
    CorsConfig,
    DatabaseConfig,
    ServerConfig,
)


class TestAppConfig:
    """AppConfig frozen immutability and property tests."""

    def test_frozen_immutability(self) -> None:
        config = AppConfig(name="test", env="development", debug=True)
        with pytest.raises(ValidationError):
            config.name = "changed"  # type: ignore[misc]

    def test_is_development(self) -> None:
        config = AppConfig(name="app", env="development", debug=True)
        assert config.is_development is True
        assert config.is_production is False

    def test_is_production(self) -> None:
        config = AppConfig(name="app", env="production", debug=False)
        assert config.is_production is True
        assert config.is_development is False

    @pytest.mark.parametrize(
        ("env", "expected"),
        [("development", True), ("staging", True), ("production", False)],
    )
    def test_auto_create_tables(self, env: str, expected: bool) -> None:
        config = AppConfig(name="app", env=env, debug=False)  # type: ignore[arg-type]
        assert config.auto_create_tables is expected


class TestServerConfig:
    """ServerConfig frozen immutability tests."""

    def test_frozen_immutability(self) -> None:
        config = ServerConfig(host="127.0.0.1", port=3000)
        with pytest.raises(ValidationError):
            config.port = 9000  # type: ignore[misc]

    def test_bind(self) -> None:
        assert ServerConfig(host="127.0.0.1", port=3000).bind == "127.0.0.1:3000"


class TestCorsConfig:
    """CorsConfig origin parsing."""

    def test_wildcard(self) -> None:
        assert CorsConfig(allow_origins="*").allow_origins_list == ["*"]

    def test_comma_separated(self) -> None:
        config = CorsConfig(allow_origins="https://a.example, https://b.example,")
        assert config.allow_origins_list == ["https://a.example", "https://b.example"]


class TestDatabaseConfig:
    """DatabaseConfig URL handling."""

    def test_sqlite_file_path(self) -> None:
        config = DatabaseConfig(url=SecretStr("sqlite+aiosqlite:///./data/sessions.db"))
        assert config.is_sqlite is True
        assert config.sqlite_path == Path("./data/sessions.db")
        assert config.async_url == "sqlite+aiosqlite:///./data/sessions.db"

    def test_sqlite_memory_has_no_path(self) -> None:
        config = DatabaseConfig(url=SecretStr("sqlite+aiosqlite:///:memory:"))
        assert config.is_sqlite is True
        assert config.sqlite_path is None

    def test_mysql_charset_appended(self) -> None:
        config = DatabaseConfig(url=SecretStr("mysql+aiomysql://u:p@db/share"))
        assert config.is_sqlite is False
        assert config.sqlite_path is None
        assert config.async_url == "mysql+aiomysql://u:p@db/share?charset=utf8mb4"

    def test_mysql_existing_query_kept(self) -> None:
        config = DatabaseConfig(
            url=SecretStr("mysql+aiomysql://u:p@db/share?charset=latin1")
        )
        assert config.async_url.endswith("?charset=latin1")


class TestSettings:
    """Settings defaults and domain grouping."""

    @pytest.fixture(autouse=True)
    def clean_env(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        for name in ("PORT", "HOST", "APP_ENV", "DATABASE_URL", "CORS_ORIGINS"):
            monkeypatch.delenv(name, raising=False)
        # keep a developer's .env out of the defaults
        monkeypatch.chdir(tmp_path)

    def test_defaults(self) -> None:
        s = Settings()
        assert s.server.port == 3000
        assert s.server.host == "0.0.0.0"
        assert s.app.env == "development"
        assert s.is_development is True
        assert s.cors.allow_origins_list == ["*"]
        assert s.database.sqlite_path == Path("./data/sessions.db")

    def test_port_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "8080")
        assert Settings().server.port == 8080

    def test_port_out_of_range(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "70000")
        with pytest.raises(ValidationError):
            Settings()

    def test_domain_configs_are_cached(self) -> None:
        s = Settings()
        assert s.database is s.database
        assert s.server is s.server
