"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "fd-gateway"
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000

    # Text-generation service (Ollama-compatible chat API)
    generation_api_base: str = "http://localhost:11434"
    generation_model: str = "llama3.1"
    generation_temperature: float = 0.2

    # HTTP Client
    http_timeout_seconds: float = 5.0
    advisory_timeout_seconds: float = 8.0  # Upper bound on the whole advisory step

    # Advisory gate
    rate_deviation_threshold_pp: float = 2.0  # Percentage points from the reference rate
    maturity_deviation_tolerance: float = 0.05  # Relative to the simple-interest estimate


settings = Settings()
