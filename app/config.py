# app/config.py
from pydantic_settings import BaseSettings
from functools import lru_cache

class Settings(BaseSettings):
    # MongoDB settings
    MONGODB_URI: str = "mongodb://localhost:27017"
    MONGODB_DB_NAME: str = "company_services"
    INSERT_SAMPLE_DATA: bool = True

    # Server settings
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    RELOAD: bool = True
    LOG_LEVEL: str = "INFO"

    # API settings
    API_PREFIX: str = "/api"
    INVENTORY_PREFIX: str = "/api/v1"

    # Department service, as seen from the employee service
    DEPARTMENT_SERVICE_URL: str = "http://localhost:8000/api/departments"
    DEPARTMENT_CLIENT_TIMEOUT: float = 5.0

    class Config:
        env_file = ".env"

@lru_cache()
def get_settings():
    return Settings()
