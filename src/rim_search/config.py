"""Runtime configuration for RimSearch."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven runtime settings."""

    model_config = SettingsConfigDict(env_prefix="RIM_SEARCH_", env_file=".env", extra="ignore")

    app_name: str = "rim-search"
    log_level: str = "INFO"
    default_search_term: str = Field(
        default="-.",
        description="Search term a new search session starts with.",
    )
    debounce_ticks: int = Field(
        default=40,
        ge=1,
        description="Ticks of quiet after the last edit before a search runs.",
    )
    world_flag_enabled: bool = Field(
        default=False,
        description="Recognize '<' as the world-map flag.",
    )
    settings_file: Path = Field(
        default=Path("~/.config/rim-search/settings.json"),
        description="Where the persisted default search term lives.",
    )


settings = Settings()
