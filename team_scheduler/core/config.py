# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Core configuration, all env-driven.
Single source of truth for every tunable parameter.
"""

import os


class Settings:
    """Application settings loaded from environment variables."""

    SERVICE_NAME: str = os.getenv("SERVICE_NAME", "team-scheduler")
    SERVICE_VERSION: str = os.getenv("SERVICE_VERSION", "1.0.0")
    SERVICE_HOST: str = os.getenv("SERVICE_HOST", "0.0.0.0")
    SERVICE_PORT: int = int(os.getenv("SERVICE_PORT", "3001"))

    DEFAULT_ROLE: str = os.getenv("DEFAULT_ROLE", "Team Member")

    TIME_SLOT_START: str = os.getenv("TIME_SLOT_START", "06:00")
    TIME_SLOT_END: str = os.getenv("TIME_SLOT_END", "22:00")
    TIME_SLOT_STEP_MINUTES: int = int(os.getenv("TIME_SLOT_STEP_MINUTES", "30"))

    CORS_ORIGINS: list[str] = os.getenv("CORS_ORIGINS", "*").split(",")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    SEED_DEFAULT_USERS: bool = (
        os.getenv("SEED_DEFAULT_USERS", "true").lower() == "true"
    )


settings = Settings()
