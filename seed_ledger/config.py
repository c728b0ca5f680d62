"""
Configuration for the Seed Ledger service.

Values come from environment variables or a ``.env`` file in the working
directory, with defaults suitable for local development only. Field names
match the variables case-insensitively (``db_name`` reads ``DB_NAME``).
"""
from typing import Optional

from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    """Service settings."""

    # Full SQLAlchemy URL; overrides the DB_* parts when set
    database_url: Optional[str] = None
    db_driver: str = "postgresql+psycopg2"
    db_host: str = "localhost"
    db_port: Optional[int] = None
    db_user: str = "seeds"
    db_password: str = "seeds123"
    db_name: str = "seed_inventory"

    # Connection pool
    db_pool_size: int = 10
    db_pool_timeout: float = 30.0  # seconds to wait for a pooled connection

    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"
    static_dir: str = "public"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        env_ignore_empty = True
        extra = "ignore"
        frozen = True

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Read settings from the process environment and ``.env``.

        Raises:
            pydantic.ValidationError: if a numeric variable cannot be parsed
        """
        return cls()

    @property
    def sqlalchemy_url(self):
        """The explicit ``DATABASE_URL`` if set, otherwise one built from the DB_* values."""
        if self.database_url:
            return self.database_url
        return URL.create(
            self.db_driver,
            username=self.db_user,
            password=self.db_password,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        )
