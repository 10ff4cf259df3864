"""
Application context for the weather bot.

Owns every long-lived collaborator (bot client, update queue, resolution
flow, dispatcher, webhook app). Built once at startup and passed by
reference; nothing is kept in module globals.
"""
import logging
import queue
import sys
import threading
from typing import Optional, Sequence

import requests
import telebot
from telebot.apihelper import ApiTelegramException

from .cities import PROVINCES
from .config import WeatherBotConfig
from .config_loader import load_config_from_env
from .confirmation import ConfirmationCodec
from .exceptions import ConfigurationError
from .gateway import WeatherGateway, WttrWeatherGateway
from .interaction import ResolutionFlow
from .resolution import create_city_resolver
from .transport import TelegramTransport, UpdateDispatcher, create_webhook_app

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def create_weather_gateway(config: WeatherBotConfig) -> WttrWeatherGateway:
    """Build the wttr.in gateway from configuration."""
    return WttrWeatherGateway(
        base_url=config.weather_base_url,
        query_format=config.weather_query_format,
        language=config.weather_language,
        timeout_seconds=config.lookup_timeout_seconds,
    )


class WeatherBotApp:
    """
    Public application facade.

    Usage:
        config = load_config_from_env()
        app = WeatherBotApp(config)
        app.run()  # blocks in the dispatch loop
    """

    def __init__(
        self,
        config: WeatherBotConfig,
        bot: Optional[telebot.TeleBot] = None,
        gateway: Optional[WeatherGateway] = None,
        reference: Sequence[str] = PROVINCES,
    ):
        """
        :param config: WeatherBotConfig instance
        :param bot: Optional pre-built bot client (tests inject a mock)
        :param gateway: Optional weather gateway (defaults to wttr.in)
        :param reference: Canonical names to resolve against
        """
        self._config = config
        self._bot = bot
        self._gateway = gateway
        self._reference = reference

        self.updates: "queue.Queue" = queue.Queue()
        self.flow: Optional[ResolutionFlow] = None
        self.dispatcher: Optional[UpdateDispatcher] = None
        self.webhook_app = None

    @property
    def config(self) -> WeatherBotConfig:
        return self._config

    def initialize(self) -> None:
        """
        Authenticate the bot and wire all collaborators.

        :raises: ConfigurationError if Telegram rejects the token or is unreachable
        """
        if self.dispatcher:
            return

        if self._config.debug:
            telebot.logger.setLevel(logging.DEBUG)

        if self._bot is None:
            self._bot = telebot.TeleBot(self._config.telegram_bot_token, threaded=False)

        try:
            me = self._bot.get_me()
        except (ApiTelegramException, requests.RequestException) as e:
            raise ConfigurationError(f"Could not authorize with Telegram: {e}") from e
        logger.info(f"Authorized on account {me.username}")

        gateway = self._gateway or create_weather_gateway(self._config)
        resolver = create_city_resolver(self._config, self._reference)

        self.flow = ResolutionFlow(
            resolver=resolver,
            codec=ConfirmationCodec(resolver.reference),
            gateway=gateway,
        )
        self.dispatcher = UpdateDispatcher(
            self.updates,
            self.flow,
            TelegramTransport(self._bot),
        )
        self.webhook_app = create_webhook_app(
            self.updates,
            path=self._config.webhook_path,
            secret_token=self._config.webhook_secret,
        )

    def register_webhook(self) -> None:
        """
        Point Telegram at this process if WEBHOOK_URL is configured.

        WEBHOOK_URL is the public base URL; the webhook path is appended.
        """
        if not self._config.webhook_url:
            logger.info("WEBHOOK_URL not set; assuming the webhook is registered externally")
            return

        url = self._config.webhook_url.rstrip("/") + self._config.webhook_path
        self._bot.remove_webhook()
        self._bot.set_webhook(
            url=url,
            secret_token=self._config.webhook_secret,
            allowed_updates=["message", "callback_query"],
        )
        logger.info(f"Webhook registered at {url}")

    def start_listener(self) -> threading.Thread:
        """Serve the webhook on a daemon thread."""
        thread = threading.Thread(
            target=self.webhook_app.run,
            kwargs={
                "host": self._config.host,
                "port": self._config.port,
                "use_reloader": False,
            },
            name="webhook-listener",
            daemon=True,
        )
        thread.start()
        logger.info(
            f"Listening for webhook deliveries on "
            f"{self._config.host}:{self._config.port}{self._config.webhook_path}"
        )
        return thread

    def run(self) -> None:
        """Initialize, start the listener and block in the dispatch loop."""
        self.initialize()
        self.register_webhook()
        self.start_listener()
        self.dispatcher.run_forever()

    def stop(self) -> None:
        if self.dispatcher:
            self.dispatcher.stop()


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler()]
    )


def main() -> int:
    """Console entry point. Exits non-zero on configuration errors."""
    configure_logging()

    try:
        config = load_config_from_env()
        logging.getLogger().setLevel(config.log_level)
        WeatherBotApp(config).run()
    except ConfigurationError as e:
        logger.critical(f"Configuration error: {e}")
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")

    return 0


if __name__ == "__main__":
    sys.exit(main())
