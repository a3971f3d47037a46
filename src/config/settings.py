"""Centralized configuration management using Pydantic Settings.

This module provides a single source of truth for all configuration values.
All settings can be overridden via environment variables.
"""

from pathlib import Path
from typing import Annotated, List
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

CalendarMonth = Annotated[int, Field(ge=1, le=12)]


class Settings(BaseSettings):
    """Application settings with environment variable support.

    All settings can be overridden via environment variables.
    For example, EXCESS_GUEST_PREMIUM=350 will override the default.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # ========== Reference Data Configuration ==========
    reference_data_json: Path = Field(
        default=Path("data/reference_data.json"),
        description="Path to the operator-edited reference data JSON file"
    )

    # ========== Currency Configuration ==========
    default_currency: str = Field(
        default="ILS",
        description="Default currency code"
    )
    currency_symbol: str = Field(
        default="₪",
        description="Currency symbol used in the pricing advisory"
    )

    # ========== Pricing Rules ==========
    excess_guest_premium: float = Field(
        default=320.0,
        ge=0,
        allow_inf_nan=False,
        description="Flat surcharge per guest above the vessel's rated capacity"
    )
    summer_season_factor: float = Field(
        default=1.15,
        gt=0,
        allow_inf_nan=False,
        description="Multiplier applied when the sail date falls in a pricing-season month"
    )
    pricing_season_months: List[CalendarMonth] = Field(
        default=[6, 7, 8],
        description="Calendar months (1-12) that carry the summer pricing factor"
    )
    advisory_peak_months: List[CalendarMonth] = Field(
        default=[4, 5, 6, 7],
        description="Calendar months (1-12) that produce the peak-season advisory"
    )
    estimate_rounding_unit: int = Field(
        default=10,
        gt=0,
        description="Estimates are rounded half-up to a multiple of this amount"
    )

    # ========== Booking Form Bounds (caller-side) ==========
    min_passengers: int = Field(
        default=2,
        description="Smallest party size offered by the booking form"
    )
    max_passengers: int = Field(
        default=24,
        description="Largest party size offered by the booking form"
    )
    default_passengers: int = Field(
        default=8,
        description="Party size preselected by the booking form"
    )

    # ========== Server Configuration ==========
    server_host: str = Field(
        default="0.0.0.0",
        description="Server host address"
    )
    server_port: int = Field(
        default=7860,
        description="Server port number"
    )

    # ========== Logging ==========
    log_level: str = Field(
        default="INFO",
        description="Root logging level"
    )

    def get_reference_data_path(self, project_dir: Path) -> Path:
        """Get absolute path to the reference data JSON file.

        Args:
            project_dir: Project root directory

        Returns:
            Absolute path to reference data JSON file
        """
        if self.reference_data_json.is_absolute():
            return self.reference_data_json
        return project_dir / self.reference_data_json


# Global settings instance
# Environment variables are read on first access
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the global settings instance.

    Creates and caches a Settings instance on first call.
    Subsequent calls return the cached instance.

    Returns:
        Settings instance
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
