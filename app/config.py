from pathlib import Path

from fastapi import FastAPI
from loguru import logger
from pydantic_settings import BaseSettings, SettingsConfigDict

# Define the base directory using pathlib
BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    API_PREFIX: str = "/api"  # Common prefix for every route
    DOCS_URL: str | None = "/docs"
    REDOC_URL: str | None = None
    UVICORN_HOST: str = "127.0.0.1"
    UVICORN_PORT: str | None = "8000"
    ALLOW_ORIGINS: list[str] = ["*"]  # CORS origins
    ALLOW_CREDENTIALS: bool = False

    LOG_LEVEL: str = "INFO"
    LOG_ROTATION: str = "100 MB"

    # Configuration for loading environment variables from the .env file
    model_config = SettingsConfigDict(env_file=f"{BASE_DIR}/.env")


# Create an instance of the settings
settings = Settings()

# Configure loguru
logger.add(f"{BASE_DIR}/logs/logs.log", rotation=settings.LOG_ROTATION, level=settings.LOG_LEVEL)

# Create an instance of FastAPI with documentation URLs loaded from environment variables
app = FastAPI(
    title="Habit Tracker API",
    docs_url=settings.DOCS_URL if settings.DOCS_URL != "None" else None,
    redoc_url=settings.REDOC_URL if settings.REDOC_URL != "None" else None,
)
