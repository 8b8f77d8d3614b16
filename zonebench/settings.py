"""Configuration settings for zonebench, loaded from environment variables."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BuildingSettings(BaseSettings):
    """Baseline values for the reference single-zone test building.

    These feed `BuildingOptions.default()`, so a different baseline can be
    selected through the environment (e.g. `ZONEBENCH_ZONE_VOLUME=60`)
    without touching the calling code.
    """

    model_config = SettingsConfigDict(
        env_prefix="ZONEBENCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    zone_volume: float = Field(default=40.0, title="Zone volume [m3]", gt=0)
    surface_width: float = Field(default=3.0, title="Surface width [m]", gt=0)
    surface_height: float = Field(default=3.0, title="Surface height [m]", gt=0)
    infiltration_rate: float = Field(
        default=0.01, title="Infiltration rate [m3/s]", ge=0
    )
    emissivity: float = Field(default=0.84, title="Emissivity", ge=0, le=1)
    solar_absorptance: float = Field(
        default=0.7, title="Solar absorptance", ge=0, le=1
    )
    concrete_thickness: float = Field(
        default=0.2, title="Thickness of the baseline concrete layer [m]", gt=0
    )


# Singleton instance for application-wide use
building_settings = BuildingSettings()
