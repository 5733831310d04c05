"""
Application configuration, loaded from environment / .env file.

Scoring thresholds are NOT configurable; they live as constants in
eligibility_engine.scoring.
"""
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # ── App ──
    app_name: str = "eligibility-engine"
    app_env: str = "development"
    log_level: str = "INFO"
    scoring_model_version: str = "1.0"

    # ── HTTP ──
    cors_allow_origins: list[str] = ["*"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
