"""12-factor configuration adapter using environment variables and TOML config."""

import tomllib
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_assignment=True,
    )

    # Darwin (National Rail OpenLDBWS) configuration
    darwin_username: str | None = Field(
        default=None, description="Darwin username, first half of the access token"
    )
    darwin_password: str | None = Field(
        default=None, description="Darwin password, second half of the access token"
    )
    darwin_url: str = Field(
        default="https://lite.realtime.nationalrail.co.uk/OpenLDBWS/ldb12.asmx",
        description="Darwin SOAP endpoint",
    )

    # TfL Unified API configuration
    tfl_app_id: str | None = Field(default=None, description="TfL application id (optional)")
    tfl_app_key: str | None = Field(default=None, description="TfL application key (optional)")
    tfl_base_url: str = Field(default="https://api.tfl.gov.uk", description="TfL API base URL")

    request_timeout_seconds: float = Field(
        default=10, description="Timeout for a single upstream request in seconds"
    )

    # Display configuration
    refresh_interval_seconds: int = Field(
        default=30, description="Interval between board refreshes in seconds"
    )
    board_rows: int = Field(default=8, description="Number of departures shown per board")
    rail_fetch_rows: int = Field(
        default=10, description="Number of services requested from Darwin per board"
    )
    timezone: str = Field(
        default="Europe/London",
        description="Timezone for displaying light-rail arrival times (IANA timezone name)",
    )

    # TOML config file path
    config_file: str | None = Field(
        default="config.example.toml",
        description="Path to TOML configuration file listing the stations to display",
    )

    @classmethod
    def for_testing(cls, **overrides: Any) -> "AppConfig":
        """Build a config that ignores any local .env file."""
        return cls(_env_file=None, **overrides)

    @field_validator("refresh_interval_seconds", "board_rows", "rail_fetch_rows")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Validate counts and intervals are positive."""
        if v <= 0:
            raise ValueError("value must be a positive integer")
        return v

    @field_validator("request_timeout_seconds")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Validate the request timeout is positive."""
        if v <= 0:
            raise ValueError("request_timeout_seconds must be positive")
        return v

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Validate timezone is a known IANA name."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"timezone must be a valid IANA timezone name: {v}") from e
        return v

    @property
    def darwin_token(self) -> str | None:
        """Darwin access token ("username:password"), or None if either half is missing."""
        if not self.darwin_username or not self.darwin_password:
            return None
        return f"{self.darwin_username}:{self.darwin_password}"

    def _load_toml_data(self) -> dict[str, Any]:
        """Load and parse TOML file, updating display settings."""
        if not self.config_file:
            raise ValueError("config_file must be set to load stations configuration")

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        # Update display settings from TOML if present
        display = toml_data.get("display", {})
        if isinstance(display, dict):
            if "refresh_interval_seconds" in display:
                self.refresh_interval_seconds = display["refresh_interval_seconds"]
            if "board_rows" in display:
                self.board_rows = display["board_rows"]
            if "timezone" in display:
                self.timezone = display["timezone"]

        return toml_data

    def get_stations_config(self) -> list[dict[str, Any]]:
        """Parse and return the [[stations]] list from the TOML file.

        Loads configuration from the TOML file specified in config_file.
        Order is preserved; it is the order boards are displayed in.
        """
        toml_data = self._load_toml_data()

        stations = toml_data.get("stations", [])
        if not isinstance(stations, list):
            raise ValueError("TOML config 'stations' must be a list")
        return [s for s in stations if isinstance(s, dict)]
