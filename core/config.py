"""
Application configuration using Pydantic Settings
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support"""

    # Database
    DATABASE_URL: str = "sqlite:///./digimark.db"
    AUTO_CREATE_TABLES: bool = True

    # Key-value store
    STORE_KEY_PREFIX: str = "digimark"

    # Environment
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # Marketing data
    STRICT_METRIC_KEYS: bool = False  # Reject metric keys outside the channel schema
    EXPORT_FILENAME_PREFIX: str = "marketing_report"

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


settings = Settings()
