"""
Application configuration management using Pydantic Settings.

Compiler defaults (emitted API/auth blocks, hash algorithm, nesting limits)
live here so a deployment can tune them through the environment without
touching the conversion code.
"""
import logging
from typing import Literal, List
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator
from dotenv import load_dotenv

# Load .env first
load_dotenv()

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Mobile schema compiler settings"""

    # -------------------------
    # APPLICATION METADATA & RUNTIME
    # -------------------------
    app_name: str = "Mobile Schema Compiler"
    app_version: str = "1.0.0"
    api_title: str = "Mobile Content Schema API"
    environment: Literal["development", "staging", "production"] = "development"
    debug: bool = True
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    cors_origins: List[str] = ["http://localhost:3000", "http://localhost:8000"]

    # -------------------------
    # LOG FILES (used when debug is off)
    # -------------------------
    log_dir: str = "logs"
    log_rotation: str = "100 MB"
    log_retention: str = "10 days"

    # -------------------------
    # COMPILER
    # -------------------------
    max_widget_depth: int = 64
    content_hash_algorithm: Literal["rolling32", "sha256"] = "rolling32"
    bottom_tab_limit: int = 5
    default_indent: int = 2

    # -------------------------
    # EMITTED API / AUTH DEFAULTS
    # -------------------------
    api_timeout_ms: int = 30000
    api_retry_count: int = 3
    auth_type: Literal["jwt", "oauth2", "apiKey", "none"] = "jwt"
    auth_login_endpoint: str = "/api/auth/signin"
    auth_refresh_endpoint: str = "/api/auth/refresh"
    auth_logout_endpoint: str = "/api/auth/signout"
    auth_user_endpoint: str = "/api/auth/me"
    auth_token_storage: Literal["secure", "memory"] = "secure"

    # -------------------------
    # LOCALIZATION
    # -------------------------
    default_locale: str = "en"
    supported_locales: List[str] = ["en"]

    # -------------------------
    # VALIDATORS
    # -------------------------
    @field_validator('log_level', mode='before')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        return str(v).upper()

    @field_validator('environment', mode='before')
    @classmethod
    def validate_environment(cls, v: str) -> str:
        valid_envs = ["development", "staging", "production"]
        if v not in valid_envs:
            logger.warning(f"Invalid environment '{v}', defaulting to 'development'")
            return "development"
        return v

    @field_validator('max_widget_depth')
    @classmethod
    def validate_max_widget_depth(cls, v: int) -> int:
        if v < 1:
            raise ValueError("max_widget_depth must be at least 1")
        return v

    @field_validator('bottom_tab_limit')
    @classmethod
    def validate_bottom_tab_limit(cls, v: int) -> int:
        if not 1 <= v <= 5:
            raise ValueError("bottom_tab_limit must be between 1 and 5")
        return v

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_prefix="MOBILE_SCHEMA_",
        validate_default=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    logger.info("Initializing settings...")
    return Settings()


settings = get_settings()
