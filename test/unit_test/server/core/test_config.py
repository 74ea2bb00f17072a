"""Unit tests for server configuration settings model.

Tests verify that the Settings model binds the environment variables listed
in .env.example and that the grouped configuration properties reflect them.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from marketplace.server.core.config import AdminConfig, CORSConfig, DatabaseConfig, JWTConfig, Settings

SECRET = "0123456789abcdef0123456789abcdef"


@pytest.fixture
def env_example_path() -> Path:
    """Get path to .env.example file."""
    return Path(__file__).resolve().parents[4] / ".env.example"


@pytest.fixture
def env_example_vars(env_example_path: Path) -> dict[str, str]:
    """Parse .env.example file and return environment variables."""
    env_vars = {}
    with open(env_example_path) as f:
        for line in f:
            line = line.strip()
            # Skip comments and empty lines
            if not line or line.startswith("#"):
                continue
            if "=" in line:
                key, value = line.split("=", 1)
                env_vars[key.strip()] = value.strip()
    return env_vars


class TestSettingsBinding:
    """Test Settings model environment variable binding."""

    def test_every_example_variable_is_bound(self, env_example_vars: dict[str, str], monkeypatch):
        # Values left blank in the example (JWT_SECRET) must be supplied by the operator.
        for key, value in env_example_vars.items():
            if not value:
                continue
            monkeypatch.setenv(key, value)

        settings = Settings(_env_file=None)

        assert settings.server_host == env_example_vars["MARKETPLACE_SERVER_HOST"]
        assert settings.server_port == int(env_example_vars["MARKETPLACE_SERVER_PORT"])
        assert settings.log_level == env_example_vars["MARKETPLACE_LOG_LEVEL"]
        assert settings.database_url == env_example_vars["DATABASE_URL"]
        assert settings.admin_email == env_example_vars["ADMIN_EMAIL"]
        assert settings.admin_password == env_example_vars["ADMIN_PASSWORD"]
        assert settings.jwt_expires_in == int(env_example_vars["JWT_EXPIRES_IN"])

    def test_run_migrations_flag_binding(self, monkeypatch):
        monkeypatch.setenv("RUN_MIGRATIONS_ON_STARTUP", "false")

        settings = Settings(_env_file=None)
        assert settings.run_migrations_on_startup is False
        assert settings.database.run_migrations_on_startup is False

    def test_admin_credentials_default_to_none(self, monkeypatch):
        monkeypatch.delenv("ADMIN_EMAIL", raising=False)
        monkeypatch.delenv("ADMIN_PASSWORD", raising=False)

        settings = Settings(_env_file=None)
        assert settings.admin == AdminConfig(email=None, password=None)

    def test_cors_origins_parsed_from_json(self, monkeypatch):
        monkeypatch.setenv("CORS_ORIGINS", '["https://shop.example.com"]')

        settings = Settings(_env_file=None)
        assert settings.cors.origins == ["https://shop.example.com"]

    def test_invalid_port_rejected(self, monkeypatch):
        monkeypatch.setenv("MARKETPLACE_SERVER_PORT", "not-a-port")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_missing_jwt_secret_rejected(self, monkeypatch):
        monkeypatch.delenv("JWT_SECRET", raising=False)

        with pytest.raises(ValidationError, match="JWT_SECRET"):
            Settings(_env_file=None)

    def test_short_jwt_secret_rejected(self, monkeypatch):
        monkeypatch.setenv("JWT_SECRET", "change-me")

        with pytest.raises(ValidationError, match="JWT_SECRET"):
            Settings(_env_file=None)


class TestGroupedConfigs:
    """Test the grouped configuration properties."""

    def test_database_group(self):
        settings = Settings(_env_file=None, DATABASE_URL="postgresql://u:p@host/db")

        assert isinstance(settings.database, DatabaseConfig)
        assert settings.database.url == "postgresql://u:p@host/db"

    def test_jwt_group(self):
        settings = Settings(_env_file=None, JWT_SECRET=SECRET, JWT_EXPIRES_IN=60)

        assert settings.jwt == JWTConfig(secret=SECRET, algorithm="HS256", expires_in=60)

    def test_populate_by_field_name(self):
        settings = Settings(_env_file=None, jwt_secret="by-name-" + SECRET)
        assert settings.jwt.secret == "by-name-" + SECRET

    def test_jwt_lifetime_must_be_positive(self):
        with pytest.raises(ValidationError):
            JWTConfig(secret="s", expires_in=0)

    def test_cors_defaults(self):
        cors = CORSConfig()

        assert cors.origins == ["*"]
        assert cors.allow_credentials is True
