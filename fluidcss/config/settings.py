"""
settings.py

This module provides configuration management for the fluidcss transform.

Features:
- Centralized configuration using Pydantic settings
- Environment overrides with the FLUID_ prefix
- Optional JSON configuration file in the user config directory
- Validation of the breakpoint range and px base size

Usage:
Import appsettings for default configuration values, or call settings_build()
to merge command line overrides on top of the config file and environment.
"""

import json
from pathlib import Path
from typing import Any, Final, Self
from appdirs import user_config_dir
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from fluidcss.lib.log import LOG

# Set up the configuration directory and file using appdirs
CONFIG_DIR: Final[Path] = Path(user_config_dir("fluidcss", ""))
CONFIG_FILE: Final[Path] = CONFIG_DIR / "config.json"


class FluidSettings(BaseSettings):
    """
    Settings for a fluid() transform pass.

    Settings can be overridden through environment variables with FLUID_ prefix.

    Attributes:
        tokensPath: Location of the design-token source file
        minBreakpoint: Default viewport width (rem) where interpolation starts
        maxBreakpoint: Default viewport width (rem) where interpolation ends
        basePxSize: Divisor used to convert px to rem
        precision: Decimal places in the emitted clamp()
        beQuiet: Suppress debug logging output
        noComplain: Suppress warnings about untransformed fluid() calls
    """

    tokensPath: str = "./src/assets/tokens.css"
    minBreakpoint: float = 21.25
    maxBreakpoint: float = 80.0
    basePxSize: float = Field(default=16.0, gt=0)
    precision: int = Field(default=4, ge=0, le=10)

    beQuiet: bool = False
    noComplain: bool = False

    model_config = SettingsConfigDict(
        env_prefix="FLUID_",
        case_sensitive=False,
        extra="ignore",
    )

    @model_validator(mode="after")
    def breakpoints_check(self) -> Self:
        """Reject a zero-width breakpoint range, which has no slope."""
        if self.minBreakpoint == self.maxBreakpoint:
            raise ValueError(
                f"minBreakpoint and maxBreakpoint must differ "
                f"(both are {self.minBreakpoint})"
            )
        return self


def config_fileRead(path: Path = CONFIG_FILE) -> dict[str, Any]:
    """
    Read setting overrides from a JSON config file.

    A missing file is not an error. An unreadable or malformed file is logged
    and ignored.

    Args:
        path: Location of the JSON config file

    Returns:
        dict: Overrides keyed by setting name, empty if none
    """
    if not path.exists():
        return {}
    try:
        data: Any = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        LOG(f"Ignoring config file {path}: {e}")
        return {}
    if not isinstance(data, dict):
        LOG(f"Ignoring config file {path}: expected a JSON object")
        return {}
    return {k: v for k, v in data.items() if k in FluidSettings.model_fields}


def settings_build(
    overrides: dict[str, Any] | None = None, config_file: Path = CONFIG_FILE
) -> FluidSettings:
    """
    Build settings with precedence: overrides > config file > env > defaults.

    Overrides whose value is None are treated as not given, so an argparse
    Namespace can be passed through vars() directly.

    Args:
        overrides: Explicit setting values, typically from the command line
        config_file: JSON config file consulted before the environment

    Returns:
        FluidSettings: The merged settings

    Raises:
        pydantic.ValidationError: If the merged values are invalid
    """
    merged: dict[str, Any] = config_fileRead(config_file)
    for key, value in (overrides or {}).items():
        if key in FluidSettings.model_fields and value is not None:
            merged[key] = value
    return FluidSettings(**merged)


# Create the application settings instance
appsettings: Final[FluidSettings] = FluidSettings()
