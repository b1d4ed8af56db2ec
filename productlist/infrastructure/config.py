"""Application configuration.

Settings come from environment variables (or a ``.env`` file), e.g.
``DATABASE_URL``, ``REPOSITORY_BACKEND=memory`` or ``LOG_LEVEL=DEBUG``.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Product list API settings."""

    api_version: str = "0.1.0"
    debug: bool = False

    # Product storage: "sql" uses the database, "memory" keeps products in-process
    repository_backend: Literal["sql", "memory"] = "sql"

    database_url: str = "postgresql+asyncpg://productlist:productlist_dev_password@db:5432/productlist"
    database_pool_size: int = Field(default=5, ge=1)
    database_max_overflow: int = Field(default=10, ge=0)
    create_tables_on_startup: bool = False

    log_level: str = "INFO"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


settings = Settings()
