"""Configuration management using Pydantic Settings"""

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "gameplan-gateway"
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 3000

    # Calculator
    max_term_periods: int = 1200  # 100 years of monthly payments

    # CORS
    cors_allow_origins: List[str] = ["*"]


settings = Settings()
