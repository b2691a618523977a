"""
Core configuration settings for the Users Location API
"""
from typing import List, Union
from pydantic_settings import BaseSettings
from pydantic import field_validator


class Settings(BaseSettings):
    """Application settings with validation"""

    # App settings
    APP_NAME: str = "Users Location API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    NODE_ENV: str = "development"
    CORS_ORIGINS: Union[str, List[str]] = ["http://localhost:3000", "http://127.0.0.1:3000"]

    # Database settings
    DATABASE_URL_ASYNC: str = "sqlite+aiosqlite:///./users_location.db"

    # Demo fixture loaded on startup when the users table is empty
    SEED_DEMO_DATA: bool = True

    # Monitoring settings
    LOG_LEVEL: str = "INFO"

    @field_validator("NODE_ENV")
    def validate_node_env(cls, v):
        if v not in ["development", "staging", "production"]:
            raise ValueError("NODE_ENV must be one of: development, staging, production")
        return v

    @field_validator("LOG_LEVEL")
    def validate_log_level(cls, v):
        if v not in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
            raise ValueError("LOG_LEVEL must be one of: DEBUG, INFO, WARNING, ERROR, CRITICAL")
        return v

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"

    @property
    def is_production(self) -> bool:
        return self.NODE_ENV == "production"

    @property
    def is_development(self) -> bool:
        return self.NODE_ENV == "development"

    @property
    def cors_origins_list(self) -> List[str]:
        """Get CORS_ORIGINS as a list"""
        if isinstance(self.CORS_ORIGINS, str):
            return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]
        return self.CORS_ORIGINS


# Create settings instance with validation
settings = Settings()

# Getter function for dependency injection
def get_settings() -> Settings:
    """Get settings instance for dependency injection"""
    return settings
