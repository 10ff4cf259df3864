from dataclasses import dataclass
from typing import Optional


@dataclass
class WeatherBotConfig:
    # Telegram
    telegram_bot_token: str

    # Webhook listener
    host: str = "0.0.0.0"
    port: int = 8080
    webhook_path: str = "/bot"
    webhook_url: Optional[str] = None
    webhook_secret: Optional[str] = None

    # Weather lookup
    weather_base_url: str = "https://wttr.in"
    weather_query_format: str = "qmT0"
    weather_language: str = "tr"
    lookup_timeout_seconds: float = 10.0

    # Resolution
    fuzzy_min_score: float = 0.0
    close_match_cutoff: float = 0.5

    # Diagnostics
    debug: bool = False
    log_level: str = "INFO"
