"""Configuration models and loading utilities."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .domain.models import DEFAULT_SPOT_PRICES, VehicleCategory
from .domain.strategies import SpotSelectionStrategyType


class AllocatorSettings(BaseModel):
    """Settings for a parking lot and its category managers."""

    model_config = ConfigDict(frozen=True)

    spot_prices: Dict[VehicleCategory, int] = Field(
        default_factory=lambda: dict(DEFAULT_SPOT_PRICES)
    )
    default_strategy: SpotSelectionStrategyType = SpotSelectionStrategyType.NEAREST_TO_GATE
    strict: bool = False  # Raise on invalid operations instead of ignoring them
    log_level: str = "INFO"

    @field_validator("spot_prices")
    @classmethod
    def validate_prices(cls, v: Dict[VehicleCategory, int]) -> Dict[VehicleCategory, int]:
        """Every category needs a positive price."""
        missing = [str(category) for category in VehicleCategory if category not in v]
        if missing:
            raise ValueError(f"Missing spot price for: {', '.join(missing)}")

        for category, price in v.items():
            if price <= 0:
                raise ValueError(f"Spot price for {category} must be positive, got {price}")
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = str(v).upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AllocatorSettings":
        return cls(**data)


def load_settings(path: Union[str, Path]) -> AllocatorSettings:
    """
    Load settings from a JSON file.

    Args:
        path: Path to the settings file

    Returns:
        Validated AllocatorSettings instance

    Raises:
        FileNotFoundError: If the settings file doesn't exist
        ValueError: If the settings are invalid
    """
    settings_path = Path(path)

    if not settings_path.exists():
        raise FileNotFoundError(f"Settings file not found: {settings_path}")

    with open(settings_path) as f:
        data = json.load(f)

    return AllocatorSettings(**data)
