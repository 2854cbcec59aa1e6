"""Service configuration."""

import json

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Service settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # Logging
    log_level: str = "info"

    # Tile grid (XYZ over Web Mercator)
    max_zoom: int = 15
    tile_size: int = 256
    tile_cache_size: int = 128

    # Geographic data is generated in data_projection and decoded into feature_projection
    data_projection: str = "EPSG:4326"
    feature_projection: str = "EPSG:3857"

    # Synthesis
    num_vertices: int = 5
    random_seed: int | None = None  # None = fresh randomness per tile

    # "Feature count" parameter: [min, max] in steps of step
    feature_count_default: int = 500
    feature_count_min: int = 500
    feature_count_max: int = 10000
    feature_count_step: int = 500

    cors_origins: list[str] = ["http://localhost:5173"]

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS origins from string (JSON or comma-separated) or list."""
        if isinstance(v, str):
            try:
                parsed = json.loads(v)
                if isinstance(parsed, list):
                    return parsed
            except json.JSONDecodeError:
                pass
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    @model_validator(mode="after")
    def check_feature_count_range(self) -> "Settings":
        """The default feature count must sit on the configured step grid."""
        if self.feature_count_step <= 0:
            raise ValueError("feature_count_step must be positive")
        if not self.feature_count_min <= self.feature_count_default <= self.feature_count_max:
            raise ValueError("feature_count_default must lie within [feature_count_min, feature_count_max]")
        if (self.feature_count_default - self.feature_count_min) % self.feature_count_step:
            raise ValueError("feature_count_default must be a multiple of feature_count_step from feature_count_min")
        if self.num_vertices < 3:
            raise ValueError("num_vertices must be at least 3")
        return self


settings = Settings()
