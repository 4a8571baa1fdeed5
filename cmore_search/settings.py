from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="CMORE_SEARCH_", env_nested_delimiter="__", env_file=".env")

    base_url: str = "https://search.b17g.services/"
    app_name: str | None = None
    timeout: float = 10.0

    log_level: str = "INFO"


@lru_cache(maxsize=1)
def get_settings():
    return Settings()
