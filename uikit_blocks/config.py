from functools import lru_cache
import logging

from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class BuilderSettings(BaseSettings):
    # UUID version used when no id generator is injected (1 = time-based, 4 = random)
    id_version: int = 1
    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="UIKIT_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> BuilderSettings:
    """Load settings once per process"""
    settings = BuilderSettings()
    logger.debug(f"Builder settings loaded: id_version={settings.id_version}")
    return settings
