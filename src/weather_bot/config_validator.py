"""
Configuration validation utilities.

Environment lookups with placeholder detection and secret masking.
"""
import os
import re
import warnings
from typing import Optional

from .exceptions import ConfigurationError

# <bot id>:<secret>, as issued by BotFather
_BOT_TOKEN_PATTERN = re.compile(r"^\d+:[A-Za-z0-9_-]{20,}$")


def get_required_env(key: str, description: str = None) -> str:
    """
    Get required environment variable with validation.

    :param key: Environment variable name
    :param description: Human-readable description for error messages
    :return: Environment variable value
    :raises: ConfigurationError if not set or a placeholder
    """
    value = os.getenv(key)

    if not value:
        desc = description or key
        raise ConfigurationError(
            f"{key} is required but not set.\n"
            f"Please set it using one of these methods:\n"
            f"  1. Environment variable: export {key}='your-value'\n"
            f"  2. .env file: Create .env in project root with {key}=your-value\n\n"
            f"Description: {desc}"
        )

    if _is_placeholder(value):
        raise ConfigurationError(
            f"{key} appears to be a placeholder value.\n"
            f"Please set a real value. Current value: {_mask_secret(value)}"
        )

    return value


def get_optional_env(key: str, default: Optional[str] = None) -> Optional[str]:
    """
    Get optional environment variable.

    :param key: Environment variable name
    :param default: Default value if not set
    :return: Environment variable value or default
    """
    value = os.getenv(key, default)

    if value and _is_placeholder(value):
        # Warn but don't fail for optional configs
        warnings.warn(
            f"{key} appears to be a placeholder. Using default or None.",
            UserWarning
        )
        return default

    return value


def get_float_env(key: str, default: float) -> float:
    """Get optional numeric environment variable."""
    raw = get_optional_env(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ConfigurationError(f"{key} must be a number, got {raw!r}") from None


def get_int_env(key: str, default: int) -> int:
    """Get optional integer environment variable."""
    raw = get_optional_env(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{key} must be an integer, got {raw!r}") from None


def get_bool_env(key: str, default: bool = False) -> bool:
    """Get optional boolean environment variable ("true"/"false")."""
    raw = get_optional_env(key, "true" if default else "false")
    return raw.strip().lower() == "true"


def validate_bot_token(token: str, key_name: str = "TELEGRAM_BOT_TOKEN") -> str:
    """
    Validate Telegram bot token format.

    :param token: Token to validate
    :param key_name: Name of the setting (for error messages)
    :return: Validated token
    :raises: ConfigurationError if malformed
    """
    if not token:
        raise ConfigurationError(f"{key_name} is required.")

    if not _BOT_TOKEN_PATTERN.match(token):
        raise ConfigurationError(
            f"{key_name} appears to be invalid: {_mask_secret(token)}\n"
            f"Expected the '<bot id>:<secret>' format issued by BotFather."
        )

    return token


def validate_matching_thresholds(close_match_cutoff: float, fuzzy_min_score: float) -> None:
    """
    Validate the fuzzy matching thresholds.

    :raises: ConfigurationError if CLOSE_MATCH_CUTOFF is outside 0.0-1.0 or
        FUZZY_MIN_SCORE is negative
    """
    if not 0.0 <= close_match_cutoff <= 1.0:
        raise ConfigurationError(
            f"CLOSE_MATCH_CUTOFF must be between 0.0 and 1.0, got {close_match_cutoff}"
        )

    if fuzzy_min_score < 0.0:
        raise ConfigurationError(
            f"FUZZY_MIN_SCORE must not be negative, got {fuzzy_min_score}"
        )


def _is_placeholder(value: str) -> bool:
    """Check if value is a placeholder."""
    if not value:
        return False

    placeholder_patterns = [
        "your_",
        "your-",
        "placeholder",
        "changeme",
        "xxx",
        "replace",
        "TODO",
    ]

    value_lower = value.lower()
    return any(pattern.lower() in value_lower for pattern in placeholder_patterns)


def _mask_secret(secret: str, show_chars: int = 4) -> str:
    """
    Mask secret for safe display in error messages.

    :param secret: Secret to mask
    :param show_chars: Number of characters to show at start/end
    :return: Masked secret
    """
    if not secret or len(secret) <= show_chars * 2:
        return "***"

    return f"{secret[:show_chars]}...{secret[-show_chars:]}"
