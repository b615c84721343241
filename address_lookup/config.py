"""Application configuration via Pydantic Settings.

NOTE: The geocoder adapter never reads these values itself; they are
only consumed when wiring the API (see infrastructure/api/dependencies.py).
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ArcGIS Online
    arcgis_source_country: str | None = Field(
        default=None,
        validation_alias="ARCGIS_SOURCE_COUNTRY",
    )
    arcgis_use_ssl: bool = Field(default=False, validation_alias="ARCGIS_USE_SSL")
    arcgis_max_locations: int = Field(default=5, ge=1, validation_alias="ARCGIS_MAX_LOCATIONS")

    # HTTP transport
    http_timeout: float = Field(default=10.0, gt=0, validation_alias="HTTP_TIMEOUT")
    geocoder_user_agent: str = Field(
        default="address-lookup",
        validation_alias="GEOCODER_USER_AGENT",
    )

    # App
    debug: bool = Field(default=False, validation_alias="DEBUG")

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
