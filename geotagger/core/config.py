# geotagger/core/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from pathlib import Path

class Settings(BaseSettings):
    app_name: str = Field(default="GeoTagger Core API", alias="APP_NAME")
    app_env: str = Field(default="dev", alias="APP_ENV")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Persistence (JSON document)
    data_file: Path = Field(default=Path("geotagger-data.json"), alias="GEOTAGGER_DATA_FILE")

    # Folders
    proximity_threshold_m: float = Field(default=50.0, gt=0, alias="PROXIMITY_THRESHOLD_M")

    # Synthetic rasters / heatmaps
    grid_size: int = Field(default=20, ge=1, alias="GRID_SIZE")
    grid_span_deg: float = Field(default=0.01, gt=0, alias="GRID_SPAN_DEG")
    pixels_per_cell: int = Field(default=10, ge=1, alias="PIXELS_PER_CELL")
    fetch_latency_s: float = Field(default=0.5, ge=0, alias="FETCH_LATENCY_S")
    fetch_failure_rate: float = Field(default=0.0, ge=0, le=1, alias="FETCH_FAILURE_RATE")

    # Optional real provider returning DataGrid-shaped JSON
    raster_provider_url: str | None = Field(default=None, alias="RASTER_PROVIDER_URL")
    http_timeout_s: float = Field(default=30.0, gt=0, alias="HTTP_TIMEOUT_S")

    # Missions
    mission_objective_count: int = Field(default=3, ge=1, alias="MISSION_OBJECTIVE_COUNT")
    mission_required_distance_m: float = Field(default=50.0, gt=0, alias="MISSION_REQUIRED_DISTANCE_M")
    mission_reward: int = Field(default=100, ge=0, alias="MISSION_REWARD")

    model_config = SettingsConfigDict(
        env_file=str(Path(__file__).resolve().parents[1] / ".env"),  # geotagger/.env
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

settings = Settings()
