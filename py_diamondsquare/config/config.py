import os
from pathlib import Path

from dotenv import dotenv_values
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env for local/dev environments only for values missing from the environment
BASE_DIR = Path(__file__).resolve().parent.parent.parent
env_file = BASE_DIR / ".env"

if env_file.exists():
    file_env = dotenv_values(env_file)
    missing_keys = {k: v for k, v in file_env.items() if k not in os.environ and v is not None}
    for k, v in missing_keys.items():
        os.environ[k] = v


class Settings(BaseSettings):
    """Application settings pulled from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="DIAMONDSQUARE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Generation defaults
    default_size: int = Field(default=513, ge=3, description="Default grid side length")
    default_max_value: float = Field(default=1.0, description="Default upper value bound")
    default_min_value: float = Field(default=0.0, description="Default lower value bound")
    default_roughness: float = Field(default=0.2, ge=0.0, description="Default roughness coefficient")
    max_grid_size: int = Field(default=8193, ge=3, description="Largest accepted grid side length")

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="json", description="Logging format (json or console)")


# Instantiate singleton settings object
settings = Settings()
