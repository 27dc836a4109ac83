"""
Application Configuration Module

Settings are loaded with Pydantic Settings from environment variables,
falling back to a .env file and then to the defaults below.

The only store-related options are the connection parameters
(host, port, database name, user, password, charset). Each one is a
plain override of the default of a local XAMPP-style MySQL server:

    DB_HOST=localhost
    DB_PORT=3306
    DB_NAME=library
    DB_USER=root
    DB_PASSWORD=
    DB_CHARSET=utf8mb4

Usage:
    from catalog.config import get_settings

    settings = get_settings()
    print(settings.database_url)
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Pydantic validates every value against its type when the settings
    object is created, so a malformed DB_PORT fails at startup rather
    than on the first query.
    """

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------
    app_name: str = Field(
        default="WebBiblio",
        description="Application name displayed in docs and logs"
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode (SQL echo, detailed errors)"
    )
    api_version: str = Field(
        default="v1",
        description="API version for URL routing"
    )
    host: str = Field(
        default="127.0.0.1",
        description="Host to bind the development server to"
    )
    port: int = Field(
        default=8000,
        description="Port to bind the development server to"
    )

    # -------------------------------------------------------------------------
    # Database Settings
    # -------------------------------------------------------------------------
    db_driver: str = Field(
        default="mysql+pymysql",
        description="SQLAlchemy dialect+driver name"
    )
    db_host: str = Field(
        default="localhost",
        description="MySQL server host"
    )
    db_port: int = Field(
        default=3306,
        description="MySQL server port"
    )
    db_name: str = Field(
        default="library",
        description="Database holding the books table"
    )
    db_user: str = Field(
        default="root",
        description="Database user"
    )
    db_password: str = Field(
        default="",
        description="Database password (empty for a default XAMPP install)"
    )
    db_charset: str = Field(
        default="utf8mb4",
        description="Connection character set"
    )

    # -------------------------------------------------------------------------
    # Logging Settings
    # -------------------------------------------------------------------------
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------
    @property
    def database_url(self) -> URL:
        """
        Build the SQLAlchemy URL from the connection parameters.

        URL.create() escapes the password, so credentials containing
        '@' or '/' do not need manual quoting.
        """
        return URL.create(
            self.db_driver,
            username=self.db_user,
            password=self.db_password or None,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
            query={"charset": self.db_charset},
        )

    # -------------------------------------------------------------------------
    # Validators
    # -------------------------------------------------------------------------
    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Validate that log_level is a valid Python logging level.

        Raises:
            ValueError: If log level is invalid
        """
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v.upper()

    @field_validator("db_port")
    @classmethod
    def validate_db_port(cls, v: int) -> int:
        """Validate the port is in the TCP range."""
        if not 0 < v < 65536:
            raise ValueError("db_port must be between 1 and 65535")
        return v


@lru_cache
def get_settings() -> Settings:
    """
    Get cached application settings.

    The first call reads the environment and .env file; later calls
    return the same instance. Tests that change the environment call
    get_settings.cache_clear() first.
    """
    return Settings()
