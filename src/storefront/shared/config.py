"""Application settings, read from the environment (and an optional `.env` file)."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Storefront configuration.

    Every field can be overridden with a ``STOREFRONT_``-prefixed environment
    variable, e.g. ``STOREFRONT_DATABASE_URL`` or ``STOREFRONT_ENV``.
    """

    env: str = Field(default="development", description="development | test | staging | production")

    # Storage
    database_url: str = Field(default="sqlite+aiosqlite:///data/orders.db")
    sql_echo: bool = Field(default=False)
    seed_sample_orders: bool = Field(default=True)

    # Ordering
    order_number_strategy: str = Field(default="monotonic", description="monotonic | timestamp")

    # Logging
    log_level: str | None = Field(default=None, description="Overrides the level derived from `env`")
    log_dir: str = Field(default="logs")
    json_logs: bool | None = Field(default=None, description="Defaults to JSON in staging/production")

    # HTTP server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000)

    model_config = SettingsConfigDict(env_prefix="STOREFRONT_", env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """Process-wide settings singleton."""
    return Settings()
