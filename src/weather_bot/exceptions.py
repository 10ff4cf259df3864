class WeatherBotError(Exception):
    """Base exception for the weather bot."""


class ConfigurationError(WeatherBotError):
    """Raised when required configuration is missing or invalid. Fatal at startup."""


class LookupFailure(WeatherBotError):
    """Raised when the weather gateway cannot produce a report."""


class PromptDecodeError(WeatherBotError):
    """Raised when a confirmation prompt cannot be mapped back to a city."""
