"""Application settings using Pydantic Settings."""

from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database Configuration
    mongo_uri: str = "mongodb://localhost:27017/exercise_tracker"
    database_name: str = ""
    store_backend: str = "mongo"  # "mongo" or "memory"

    # Application Configuration
    app_name: str = "Exercise Tracker"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server Configuration
    host: str = "0.0.0.0"
    port: int = 3000

    # CORS Configuration
    cors_origins: List[str] = ["*"]

    class Config:
        env_file = ".env"
        case_sensitive = False

    def resolved_database_name(self) -> str:
        """Database name from settings, else the path segment of the URI."""
        if self.database_name:
            return self.database_name
        rest = self.mongo_uri.split("://", 1)[-1]
        if "/" in rest:
            name = rest.split("/", 1)[1].split("?", 1)[0]
            if name:
                return name
        return "exercise_tracker"


# Global settings instance
settings = Settings()
