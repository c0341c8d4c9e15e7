"""Application configuration settings."""

from functools import lru_cache

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from zenreader.logging_config import LOG_LEVELS
from zenreader.services.tokenizer import (
    DEFAULT_WPM,
    MAX_WPM,
    MIN_WPM,
    SEEK_STEP,
    WPM_STEP,
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    app_name: str = "ZenReader"
    debug: bool = False
    log_level: str = "INFO"
    json_logs: bool = False

    # Speed
    default_wpm: int = DEFAULT_WPM
    min_wpm: int = Field(MIN_WPM, gt=0)
    max_wpm: int = MAX_WPM
    wpm_step: int = Field(WPM_STEP, gt=0)

    # Seeking
    seek_step: int = Field(SEEK_STEP, gt=0)

    # Reserved for multi-word display; only single words are supported
    chunk_size: int = Field(1, ge=1, le=1)

    # Uploads
    max_upload_bytes: int = Field(5 * 1024 * 1024, gt=0)

    # Startup
    load_sample_text: bool = True

    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:5173", "http://localhost:3000"]
    )

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @model_validator(mode="after")
    def check_speed_bounds(self) -> "Settings":
        if self.min_wpm > self.max_wpm:
            raise ValueError(
                f"min_wpm ({self.min_wpm}) must not exceed max_wpm ({self.max_wpm})"
            )
        if not self.min_wpm <= self.default_wpm <= self.max_wpm:
            raise ValueError(
                f"default_wpm ({self.default_wpm}) must be within "
                f"[{self.min_wpm}, {self.max_wpm}]"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings."""
    return Settings()
