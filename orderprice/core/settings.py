# orderprice/core/settings.py
import os
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_DEFAULT_CATALOG = Path(__file__).resolve().parents[1] / "catalogs" / "sample.yaml"


class Settings(BaseSettings):
    # === General ===
    app_env: str = "local"  # local | development | production

    # === Logging ===
    log_level: str = "INFO"
    log_json: bool = True

    # === Pricing ===
    price_tolerance: float = Field(0.001, description="Absolute tolerance when verifying expected totals")
    catalog_path: str = Field(str(_DEFAULT_CATALOG), description="YAML catalog used by the demo harness")

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Singleton Settings instance with simple env overrides."""
    s = Settings()

    env = os.getenv("ENVIRONMENT", s.app_env).lower()
    if env == "production":
        s.log_level = "WARNING"

    return s
