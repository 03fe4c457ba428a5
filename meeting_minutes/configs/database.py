"""
Database configuration settings.

Holds the two connection parameters the data access layer needs (store
endpoint URL and access key) plus engine pool tuning. Both connection
parameters are optional at load time; presence is validated by the
connection accessor on first use.

Dependencies: pydantic, pydantic_settings
System role: Store connection configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from meeting_minutes.configs.base import BaseSettings


class DatabaseSettings(BaseSettings):
    """Remote relational store configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="MINUTES_DATABASE_",
        case_sensitive=False,
        extra="ignore",
    )

    url: str | None = Field(
        default=None,
        description="Store endpoint URL, e.g. postgresql+asyncpg://app@db.example.com:5432/minutes",
    )
    access_key: str | None = Field(
        default=None,
        description="Access key bound as the connection credential",
    )

    pool_size: int = Field(default=5, description="Connection pool size")
    max_overflow: int = Field(default=10, description="Maximum overflow connections")
    pool_timeout: int = Field(default=30, description="Connection pool timeout in seconds")
    echo_sql: bool = Field(default=False, description="Echo SQL statements to logs")

    @property
    def url_env_var(self) -> str:
        """Environment variable name holding the endpoint URL."""
        return f"{self.model_config['env_prefix']}URL"

    @property
    def access_key_env_var(self) -> str:
        """Environment variable name holding the access key."""
        return f"{self.model_config['env_prefix']}ACCESS_KEY"
