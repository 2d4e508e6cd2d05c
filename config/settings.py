"""
Global configuration for the Taqvim date engine.

All values are read from environment variables (prefixed TAQVIM_).
Defaults need no configuration at all; the only operational knob is the
Islamic administrative offset table, e.g.

    TAQVIM_ISLAMIC_YEAR_OFFSETS='{"1447": 1}'
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="TAQVIM_", env_file=".env", extra="ignore")

    # ── Logging ───────────────────────────────────────────────────────────
    log_level: str = "INFO"

    # ── Islamic calendar ──────────────────────────────────────────────────
    # Islamic year -> signed day shift applied to every lunar holiday that year.
    # Merged over the built-in table in services.holiday_service.
    islamic_year_offsets: dict[int, int] = Field(default_factory=dict)
    max_islamic_offset_days: int = 2              # reject corrections beyond ±this


settings = Settings()
