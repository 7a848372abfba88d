"""Configuration management using Pydantic Settings"""

from decimal import Decimal
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent / "data" / "catalog.json"


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database (saved scenarios)
    database_url: str = "sqlite:///./growth_gateway.db"

    # Product catalog snapshot
    catalog_path: Path = DEFAULT_CATALOG_PATH

    # Service
    service_name: str = "growth-gateway"
    log_level: str = "INFO"
    default_locale: str = "en"

    # Recommendation rules
    region_of_interest: str = "Brazil"
    long_term_months: int = 60
    low_entry_threshold: Decimal = Decimal(100)
    low_entry_max_picks: int = 3


settings = Settings()
