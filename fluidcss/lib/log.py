"""
Centralized application-specific logging using Loguru.

This module provides function-based logging (`LOG`, `COMPLAIN`) that
dynamically respects the `beQuiet` and `noComplain` flags from application
settings.

Features:
- A custom `LOG` function for debug diagnostics (tokens loaded, calls rewritten).
- A `COMPLAIN` function for warnings about fluid() calls left untouched.
- Consistent and customizable logging format.

Example:
    from fluidcss.lib.log import LOG
    LOG("Loaded 12 tokens")

Environment:
- Set `FLUID_BEQUIET=True` to suppress debug output.
- Set `FLUID_NOCOMPLAIN=True` to suppress warnings.
- The config file or command line can set either flag for a pass; the pass
  installs its merged settings with `log_configure`.
"""

from loguru import logger
from typing import Any, TYPE_CHECKING
import sys

if TYPE_CHECKING:
    from fluidcss.config.settings import FluidSettings

# Create a distinct logger instance for the app
app_logger = logger.bind(app="FLUIDCSS")

logger_format = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> │ "
    "<level>{level: <7}</level> │ "
    "<yellow>{name: >28}</yellow>::"
    "<cyan>{function: <24}</cyan> @ "
    "<cyan>{line: <4}</cyan> ║ "
    "<level>{message}</level>"
)

app_logger.remove()  # Remove any default handlers
app_logger.add(sys.stderr, format=logger_format)

# Settings of the running pass; None means the env/default appsettings
active_settings: "FluidSettings | None" = None


def log_configure(settings: "FluidSettings | None") -> None:
    """
    Install the settings whose `beQuiet`/`noComplain` flags gate logging.

    :param settings: Merged settings of the current pass, or None to fall
        back to the environment-derived `appsettings`.
    """
    global active_settings
    active_settings = settings


def settings_active() -> "FluidSettings":
    """Return the settings currently gating log output."""
    if active_settings is not None:
        return active_settings
    from fluidcss.config.settings import appsettings

    return appsettings


def LOG(*args: Any, **kwargs: Any) -> None:
    """
    Debug logging, suppressed when `beQuiet` is set.

    :param args: Positional arguments for the log message.
    :param kwargs: Keyword arguments for additional log metadata.
    """
    if not settings_active().beQuiet:
        app_logger.opt(depth=1).debug(*args, **kwargs)


def COMPLAIN(*args: Any, **kwargs: Any) -> None:
    """
    Warning-level logging, suppressed when `noComplain` is set.

    :param args: Positional arguments for the log message.
    :param kwargs: Keyword arguments for additional log metadata.
    """
    if not settings_active().noComplain:
        app_logger.opt(depth=1).warning(*args, **kwargs)
