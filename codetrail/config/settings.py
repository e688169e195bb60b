from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    The history driver that embeds this package usually builds one Settings
    instance per run and hands the derived repository and cache objects to
    its workers, so nothing here is read lazily by the services themselves.
    """

    # Repository access
    CODETRAIL_REPO_PATH: str = "."
    CODETRAIL_RENAME_THRESHOLD: int = Field(default=50, ge=1, le=100)

    # Persisted lookup cache
    CODETRAIL_CACHE_PATH: str = "./.codetrail/cache.json"

    # Development and debugging
    CODETRAIL_LOG_LEVEL: str = "INFO"
    DEBUG: bool = False


@lru_cache
def get_settings() -> Settings:
    return Settings()
