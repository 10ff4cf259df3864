"""
Telegram weather bot with fuzzy province name resolution.
"""
from .app import WeatherBotApp
from .cities import PROVINCES
from .config import WeatherBotConfig
from .config_loader import load_config_from_env
from .exceptions import (
    WeatherBotError,
    ConfigurationError,
    LookupFailure,
    PromptDecodeError,
)

__all__ = [
    "WeatherBotApp",
    "PROVINCES",
    "WeatherBotConfig",
    "load_config_from_env",
    "WeatherBotError",
    "ConfigurationError",
    "LookupFailure",
    "PromptDecodeError",
]
