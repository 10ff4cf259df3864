"""
Configuration loader with validation.
"""
import logging

from dotenv import load_dotenv

from .config import WeatherBotConfig
from .config_validator import (
    get_bool_env,
    get_float_env,
    get_int_env,
    get_optional_env,
    get_required_env,
    validate_bot_token,
    validate_matching_thresholds,
)
from .exceptions import ConfigurationError


def load_config_from_env(use_dotenv: bool = True) -> WeatherBotConfig:
    """
    Load configuration from environment variables with validation.

    Usage:
        config = load_config_from_env()
        app = WeatherBotApp(config)
        app.initialize()

    :param use_dotenv: Load a .env file first (local development)
    :return: Validated WeatherBotConfig instance
    :raises: ConfigurationError if required configs are missing or invalid
    """
    if use_dotenv:
        load_dotenv()

    token = validate_bot_token(
        get_required_env(
            "TELEGRAM_BOT_TOKEN",
            description="Bot token issued by BotFather",
        )
    )

    webhook_path = get_optional_env("WEBHOOK_PATH", default="/bot")
    if not webhook_path.startswith("/"):
        webhook_path = "/" + webhook_path

    config = WeatherBotConfig(
        telegram_bot_token=token,
        host=get_optional_env("HOST", default="0.0.0.0"),
        port=get_int_env("PORT", 8080),
        webhook_path=webhook_path,
        webhook_url=get_optional_env("WEBHOOK_URL"),
        webhook_secret=get_optional_env("WEBHOOK_SECRET"),
        weather_base_url=get_optional_env("WEATHER_BASE_URL", default="https://wttr.in").rstrip("/"),
        weather_query_format=get_optional_env("WEATHER_QUERY_FORMAT", default="qmT0"),
        weather_language=get_optional_env("WEATHER_LANGUAGE", default="tr"),
        lookup_timeout_seconds=get_float_env("LOOKUP_TIMEOUT_SECONDS", 10.0),
        fuzzy_min_score=get_float_env("FUZZY_MIN_SCORE", 0.0),
        close_match_cutoff=get_float_env("CLOSE_MATCH_CUTOFF", 0.5),
        debug=get_bool_env("DEBUG", False),
        log_level=get_optional_env("LOG_LEVEL", default="INFO").upper(),
    )

    if not 0 < config.port < 65536:
        raise ConfigurationError(f"PORT must be between 1 and 65535, got {config.port}")

    if config.lookup_timeout_seconds <= 0:
        raise ConfigurationError(
            f"LOOKUP_TIMEOUT_SECONDS must be positive, got {config.lookup_timeout_seconds}"
        )

    if not isinstance(logging.getLevelName(config.log_level), int):
        raise ConfigurationError(f"LOG_LEVEL is not a logging level: {config.log_level!r}")

    validate_matching_thresholds(config.close_match_cutoff, config.fuzzy_min_score)

    return config
