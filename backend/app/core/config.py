from pydantic_settings import BaseSettings
from functools import lru_cache

class Settings(BaseSettings):
    PROJECT_NAME: str = "School Equipment API"
    VERSION: str = "1.0.0"
    API_PREFIX: str = "/api"

    # CORS Configuration
    CORS_ALLOW_ORIGIN: str = "*"

    # Logging
    LOG_LEVEL: str = "INFO"

    # Server (only used when running main.py directly)
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    class Config:
        env_file = ".env"

@lru_cache()
def get_settings():
    return Settings()
