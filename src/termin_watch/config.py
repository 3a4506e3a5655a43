"""Application configuration via pydantic-settings."""

from functools import lru_cache

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from termin_watch.extraction.markers import parse_hhmm
from termin_watch.models.notification import DEFAULT_TITLE

DEFAULT_START_URL = "https://termine-buergerbuero.dresden.de/select2?md=1"
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/118 Safari/537.36"
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Pushover
    pushover_user: str = ""
    pushover_token: str = ""
    notification_title: str = DEFAULT_TITLE

    # Target site
    start_url: str = DEFAULT_START_URL
    user_agent: str = DEFAULT_USER_AGENT
    navigation_timeout_ms: int = Field(default=60_000, gt=0)

    # Slot selection
    max_slots: int = Field(default=4, ge=1)
    check_window_start: str | None = None  # "HH:MM", inclusive
    check_window_end: str | None = None

    # App
    log_level: str = "WARNING"
    log_format: str = "json"

    @field_validator("check_window_start", "check_window_end")
    @classmethod
    def _valid_time_of_day(cls, value: str | None) -> str | None:
        if not value:
            return None
        parse_hhmm(value)
        return value.strip()

    @model_validator(mode="after")
    def _window_bounds_paired(self) -> "Settings":
        if (self.check_window_start is None) != (self.check_window_end is None):
            raise ValueError("check_window_start and check_window_end must be set together")
        return self

    @property
    def has_credentials(self) -> bool:
        """True when both Pushover credentials are configured."""
        return bool(self.pushover_user and self.pushover_token)

    @property
    def check_window(self) -> tuple[int, int] | None:
        """Inclusive check window in minutes since midnight, or None when unset."""
        if self.check_window_start is None or self.check_window_end is None:
            return None
        return parse_hhmm(self.check_window_start), parse_hhmm(self.check_window_end)


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings. Lazy initialization to avoid import-time errors."""
    return Settings()
