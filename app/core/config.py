# app/core/config.py
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables (.env file).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    APP_NAME: str = "Trip Stop Planner API"
    APP_VERSION: str = "0.1.0"
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # Allow any origin by default
    CORS_ORIGINS: List[str] = ["*"]

    # External collaborators
    NOMINATIM_URL: str = "https://nominatim.openstreetmap.org/search"
    OVERPASS_URL: str = "https://overpass-api.de/api/interpreter"
    HTTP_USER_AGENT: str = "trip-planner-app"
    HTTP_TIMEOUT_S: float = 30.0

    # Route sampling / stop selection
    SEGMENT_LENGTH_KM: float = Field(default=10.0, gt=0)
    MAX_STOP_DISTANCE_KM: float = Field(default=5.0, ge=0)
    POI_RADIUS_M: int = Field(default=3000, gt=0)


settings = Settings()
