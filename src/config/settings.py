from __future__ import annotations

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    database_url: str
    farm_header: str = "X-Farm-ID"
    log_level: str = "INFO"
    environment: str = "dev"
    # CORS
    cors_allow_origins: str = "*"
    # Reproduction thresholds (farm overrides take precedence)
    repro_open_days_warning: int = 120
    repro_open_days_critical: int = 180
    repro_iep_warning: int = 430
    repro_iep_critical: int = 480
    repro_open_days_severe: int = 240
    repro_iep_severe: int = 540
    repro_diagnosis_window_days: int = 120  # continuous mode pregnancy-rate window
    # Reports
    summary_top_alerts_limit: int = 20
    summary_recent_decisions_limit: int = 50

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @field_validator("database_url")
    @classmethod
    def ensure_asyncpg_scheme(cls, value: str) -> str:
        if value.startswith("postgres://"):
            return value.replace("postgres://", "postgresql+asyncpg://", 1)
        if value.startswith("postgresql://") and "+" not in value.split("://", 1)[0]:
            return value.replace("postgresql://", "postgresql+asyncpg://", 1)
        return value

    @field_validator(
        "repro_open_days_warning",
        "repro_open_days_critical",
        "repro_iep_warning",
        "repro_iep_critical",
        "repro_open_days_severe",
        "repro_iep_severe",
        "repro_diagnosis_window_days",
    )
    @classmethod
    def ensure_positive(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("Reproduction thresholds must be positive")
        return value

    @property
    def cors_allow_origins_list(self) -> list[str]:
        """Convert cors_allow_origins string to list"""
        if isinstance(self.cors_allow_origins, str):
            return [v.strip() for v in self.cors_allow_origins.split(",") if v.strip()]
        return self.cors_allow_origins


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
