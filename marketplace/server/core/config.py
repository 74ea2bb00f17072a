"""
Configuration Settings.

This module defines the application configuration using Pydantic's BaseSettings.
It automatically loads all configuration from environment variables and .env file
without explicit dotenv loading.
"""

from typing import Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# =====================================================================
# Grouped Configuration Models
# =====================================================================


class DatabaseConfig(BaseModel):
    """Relational database configuration."""

    url: str = Field(description="Database connection URL")
    run_migrations_on_startup: bool = Field(
        default=True, description="Apply pending Alembic migrations while the server boots"
    )


class AdminConfig(BaseModel):
    """Credentials used to seed the admin account on first boot."""

    email: Optional[str] = Field(default=None, description="Admin account email address")
    password: Optional[str] = Field(default=None, description="Admin account password")


class JWTConfig(BaseModel):
    """Access token signing configuration."""

    secret: str = Field(description="Secret key for token signing")
    algorithm: str = Field(default="HS256", description="JWT signing algorithm")
    expires_in: int = Field(default=3600, ge=1, description="Token lifetime in seconds")


class CORSConfig(BaseModel):
    """CORS configuration."""

    origins: list[str] = Field(default=["*"], description="Allowed CORS origins (use * for all)")
    allow_credentials: bool = Field(default=True, description="Allow credentials in CORS requests")
    allow_methods: list[str] = Field(default=["*"], description="Allowed HTTP methods (use * for all)")
    allow_headers: list[str] = Field(default=["*"], description="Allowed HTTP headers (use * for all)")


# =====================================================================
# Main Settings Class
# =====================================================================


class Settings(BaseSettings):
    """
    Application settings model.

    All properties are automatically bound from environment variables and .env file.
    Pydantic's BaseSettings handles dotenv loading automatically via model_config.
    """

    # =====================================================================
    # Pydantic Configuration
    # =====================================================================
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
        populate_by_name=True,
    )

    # =====================================================================
    # Server Configuration
    # =====================================================================
    server_host: str = Field(
        default="0.0.0.0",
        description="Server host address to bind to",
        alias="MARKETPLACE_SERVER_HOST",
    )
    server_port: int = Field(
        default=8000,
        description="Server port number",
        alias="MARKETPLACE_SERVER_PORT",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        alias="MARKETPLACE_LOG_LEVEL",
    )
    log_format: str = Field(default="detailed", description="Log line format (simple, detailed, json)", alias="LOG_FORMAT")
    log_file_dir: str = Field(default="logs", description="Directory for the log file", alias="LOG_FILE_DIR")
    enable_file_logging: bool = Field(default=False, description="Also write logs to a file", alias="ENABLE_FILE_LOGGING")

    # =====================================================================
    # Database Configuration
    # =====================================================================
    database_url: str = Field(
        default="postgresql+asyncpg://marketplace:changeme@db:5432/marketplace",
        description="Async PostgreSQL connection URL for application database",
        alias="DATABASE_URL",
    )
    run_migrations_on_startup: bool = Field(
        default=True,
        description="Apply pending migrations during application startup",
        alias="RUN_MIGRATIONS_ON_STARTUP",
    )

    # =====================================================================
    # Admin Seeding Configuration
    # =====================================================================
    admin_email: Optional[str] = Field(default=None, description="Seeded admin email", alias="ADMIN_EMAIL")
    admin_password: Optional[str] = Field(default=None, description="Seeded admin password", alias="ADMIN_PASSWORD")

    # =====================================================================
    # Authentication Configuration
    # =====================================================================
    jwt_secret: str = Field(min_length=32, description="JWT signing secret (required)", alias="JWT_SECRET")
    jwt_algorithm: str = Field(default="HS256", description="JWT signing algorithm", alias="JWT_ALGORITHM")
    jwt_expires_in: int = Field(default=3600, description="Access token lifetime in seconds", alias="JWT_EXPIRES_IN")

    # =====================================================================
    # CORS Configuration
    # =====================================================================
    cors_origins: list[str] = Field(default=["*"], description="Allowed CORS origins", alias="CORS_ORIGINS")

    # =====================================================================
    # Computed Properties (Grouped Configurations)
    # =====================================================================

    @property
    def database(self) -> DatabaseConfig:
        """Get database configuration."""
        return DatabaseConfig(url=self.database_url, run_migrations_on_startup=self.run_migrations_on_startup)

    @property
    def admin(self) -> AdminConfig:
        """Get admin seeding configuration."""
        return AdminConfig(email=self.admin_email, password=self.admin_password)

    @property
    def jwt(self) -> JWTConfig:
        """Get JWT configuration."""
        return JWTConfig(secret=self.jwt_secret, algorithm=self.jwt_algorithm, expires_in=self.jwt_expires_in)

    @property
    def cors(self) -> CORSConfig:
        """Get CORS configuration."""
        return CORSConfig(origins=self.cors_origins)


settings = Settings()
