"""
Configuration settings for the bellows configurator.

Values come from the environment (prefix BELLOWSCFG_) or a local .env
file.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Catalog: JSON list of part records used instead of the bundled dataset
    catalog_path: Optional[str] = None

    # Application
    log_level: str = "INFO"
    log_file: Optional[str] = None

    # API server
    api_host: str = "127.0.0.1"
    api_port: int = 8000

    model_config = SettingsConfigDict(
        env_prefix="BELLOWSCFG_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


def get_settings() -> Settings:
    """Read settings fresh from the environment."""
    return Settings()
