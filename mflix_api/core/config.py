# Settings management (reads env vars/secrets)
# mflix_api/core/config.py

import logging
import os
from functools import lru_cache
from typing import List, Optional, Union

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logging.basicConfig(level=os.environ.get("LOG_LEVEL", "INFO").upper())
logger = logging.getLogger(__name__)

class Settings(BaseSettings):
    """
    Application configuration settings loaded from environment variables or .env file.
    """
    # --- Project Info ---
    PROJECT_NAME: str = Field("Mflix API", validation_alias="PROJECT_NAME")
    API_PREFIX: str = Field("/api", validation_alias="API_PREFIX")
    VERSION: str = Field("0.1.0", validation_alias="APP_VERSION")

    # --- Logging ---
    LOG_LEVEL: str = Field("INFO", validation_alias="LOG_LEVEL")

    # --- Database (MongoDB) ---
    # SecretStr keeps credentials embedded in the URI out of logs
    MONGODB_URI: SecretStr = Field(..., validation_alias="MONGODB_URI")
    MONGODB_DB_NAME: str = Field("sample_mflix", validation_alias="MONGODB_DB_NAME")

    # --- Authentication (JWT) ---
    # No defaults: the service refuses to start without signing secrets
    JWT_SECRET: SecretStr = Field(..., validation_alias="JWT_SECRET")
    REFRESH_SECRET: SecretStr = Field(..., validation_alias="REFRESH_SECRET")
    JWT_ALGORITHM: str = Field("HS256", validation_alias="JWT_ALGORITHM")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(15, ge=1, validation_alias="ACCESS_TOKEN_EXPIRE_MINUTES")
    REFRESH_TOKEN_EXPIRE_DAYS: int = Field(7, ge=1, validation_alias="REFRESH_TOKEN_EXPIRE_DAYS")
    BCRYPT_ROUNDS: int = Field(10, ge=4, le=31, validation_alias="BCRYPT_ROUNDS")
    COOKIE_SECURE: bool = Field(True, validation_alias="COOKIE_SECURE")

    # Optional account available right after startup
    DEMO_USERNAME: Optional[str] = Field(None, validation_alias="DEMO_USERNAME")
    DEMO_PASSWORD: Optional[SecretStr] = Field(None, validation_alias="DEMO_PASSWORD")

    # --- Server ---
    HOST: str = Field("0.0.0.0", validation_alias="HOST")
    PORT: int = Field(8080, validation_alias="PORT")

    # --- CORS ---
    # Expects a comma-separated string in env var like "http://localhost:3000,https://*.example.com"
    BACKEND_CORS_ORIGINS: List[str] = Field(
        default=["*"],
        validation_alias="BACKEND_CORS_ORIGINS"
    )

    @field_validator("BACKEND_CORS_ORIGINS", mode='before')
    @classmethod
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> Union[List[str], str]:
        if isinstance(v, str) and not v.startswith("["):
            return [i.strip() for i in v.split(",") if i.strip()]
        elif isinstance(v, list):
            return v
        raise ValueError(f"Invalid BACKEND_CORS_ORIGINS format: {v}")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore'
    )

# Settings are loaded only once per process
@lru_cache()
def get_settings() -> Settings:
    """Returns the application settings instance."""
    logger.info("Attempting to load application settings...")
    try:
        settings_instance = Settings()
        logger.info(f"Settings loaded successfully for Project: {settings_instance.PROJECT_NAME}")
        logger.info(f"Log Level: {settings_instance.LOG_LEVEL}")
        logger.info(f"Database: {settings_instance.MONGODB_DB_NAME}")
        logger.info(f"CORS Origins: {settings_instance.BACKEND_CORS_ORIGINS}")
        logger.info(f"Demo account: {settings_instance.DEMO_USERNAME or 'Not Set'}")
        return settings_instance
    except Exception as e:
        logger.critical(f"CRITICAL ERROR: Failed to load application settings: {e}", exc_info=True)
        raise RuntimeError(f"Could not load settings: {e}")


settings: Settings = get_settings()
