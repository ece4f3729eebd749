"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "dhan-advisor"
    log_level: str = "INFO"

    # External text-generation service
    advisor_api_base: str = "http://localhost:8003"
    advisor_timeout_seconds: float = 5.0
    advisor_max_retries: int = 2
    advisor_backoff_base: float = 0.5  # Exponential backoff base in seconds

    # Upper bound for the whole narrative step, retries included
    narrative_timeout_seconds: float = 8.0


settings = Settings()
