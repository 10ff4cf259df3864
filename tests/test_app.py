"""
Tests for the application context and entry point.
"""
import logging

import pytest
from unittest.mock import Mock, patch

from telebot import types
from telebot.apihelper import ApiTelegramException

from weather_bot import app as app_module
from weather_bot.app import WeatherBotApp, create_weather_gateway, main
from weather_bot.config import WeatherBotConfig
from weather_bot.exceptions import ConfigurationError
from weather_bot.gateway import WttrWeatherGateway
from weather_bot.interaction import messages
from telegram_payloads import callback_payload, message_payload

VALID_TOKEN = "123456789:AAH-abcdefghijklmnopqrstuvwxyz012345"


@pytest.fixture
def config():
    return WeatherBotConfig(telegram_bot_token=VALID_TOKEN)


@pytest.fixture
def bot():
    bot = Mock()
    bot.get_me.return_value = Mock(username="hava_bot")
    return bot


@pytest.fixture
def gateway():
    gateway = Mock()
    gateway.fetch_report.return_value = "Istanbul: ☀️ +21°C"
    return gateway


class TestWeatherBotApp:
    """Tests for WeatherBotApp."""

    def test_initialize_wires_components(self, config, bot, gateway, caplog):
        """Test that initialize authorizes and builds flow, dispatcher and webhook."""
        app = WeatherBotApp(config, bot=bot, gateway=gateway)

        with caplog.at_level(logging.INFO):
            app.initialize()

        bot.get_me.assert_called_once()
        assert app.flow is not None
        assert app.dispatcher is not None
        assert app.webhook_app is not None
        assert any("hava_bot" in record.getMessage() for record in caplog.records)

    def test_initialize_is_idempotent(self, config, bot, gateway):
        """Test that a second initialize is a no-op."""
        app = WeatherBotApp(config, bot=bot, gateway=gateway)
        app.initialize()
        dispatcher = app.dispatcher

        app.initialize()

        assert app.dispatcher is dispatcher
        bot.get_me.assert_called_once()

    def test_rejected_token_is_configuration_error(self, config, bot):
        """Test that Telegram rejecting the token is fatal."""
        bot.get_me.side_effect = ApiTelegramException(
            "getMe", Mock(), {"error_code": 401, "description": "Unauthorized"}
        )

        with pytest.raises(ConfigurationError, match="authorize"):
            WeatherBotApp(config, bot=bot).initialize()

    def test_end_to_end_confirmation(self, config, bot, gateway):
        """Test istanbull -> prompt -> accept through queue, dispatcher and transport."""
        app = WeatherBotApp(config, bot=bot, gateway=gateway)
        app.initialize()

        app.updates.put(types.Update.de_json(message_payload("istanbull", update_id=1)))
        app.updates.put(types.Update.de_json(
            callback_payload("accept", "Istanbul mı demek istediniz❓", update_id=2)
        ))
        app.stop()
        app.dispatcher.run_forever()

        sent = [c.args[1] for c in bot.send_message.call_args_list]
        assert sent == ["*Istanbul* mı demek istediniz❓", "Istanbul: ☀️ +21°C"]
        gateway.fetch_report.assert_called_once_with("istanbul")
        bot.answer_callback_query.assert_called_once_with("cb-1")

    def test_webhook_feeds_dispatcher(self, config, bot, gateway):
        """Test that a webhook delivery reaches the flow through the queue."""
        app = WeatherBotApp(config, bot=bot, gateway=gateway)
        app.initialize()
        client = app.webhook_app.test_client()

        client.post("/bot", json=message_payload("/start"))
        app.stop()
        app.dispatcher.run_forever()

        assert bot.send_message.call_args.args[1] == messages.START

    def test_register_webhook(self, bot, gateway):
        """Test that the webhook is registered at base URL plus path."""
        config = WeatherBotConfig(
            telegram_bot_token=VALID_TOKEN,
            webhook_url="https://bot.hava.dev/",
            webhook_secret="s3cr3t",
        )
        app = WeatherBotApp(config, bot=bot, gateway=gateway)
        app.initialize()

        app.register_webhook()

        bot.remove_webhook.assert_called_once()
        bot.set_webhook.assert_called_once_with(
            url="https://bot.hava.dev/bot",
            secret_token="s3cr3t",
            allowed_updates=["message", "callback_query"],
        )

    def test_register_webhook_skipped_without_url(self, config, bot, gateway):
        """Test that nothing is registered without WEBHOOK_URL."""
        app = WeatherBotApp(config, bot=bot, gateway=gateway)
        app.initialize()

        app.register_webhook()

        bot.set_webhook.assert_not_called()

    def test_default_gateway_from_config(self):
        """Test that the wttr.in gateway is built from config when none is injected."""
        config = WeatherBotConfig(telegram_bot_token=VALID_TOKEN, lookup_timeout_seconds=4.0)

        gateway = create_weather_gateway(config)

        assert isinstance(gateway, WttrWeatherGateway)
        assert gateway.timeout_seconds == 4.0
        assert gateway.build_url("van") == "https://wttr.in/van?qmT0"


class TestMain:
    """Tests for the console entry point."""

    def test_missing_token_exits_nonzero(self, monkeypatch, caplog):
        """Test that a missing credential stops startup."""
        monkeypatch.delenv("TELEGRAM_BOT_TOKEN", raising=False)

        with patch("weather_bot.config_loader.load_dotenv"), \
                patch.object(app_module, "configure_logging"), \
                caplog.at_level(logging.CRITICAL):
            assert main() == 1

        assert any("TELEGRAM_BOT_TOKEN" in record.getMessage() for record in caplog.records)

    def test_runs_app(self, monkeypatch):
        """Test that main loads config and runs the app."""
        monkeypatch.setenv("TELEGRAM_BOT_TOKEN", VALID_TOKEN)
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.delenv("PORT", raising=False)

        with patch("weather_bot.config_loader.load_dotenv"), \
                patch.object(app_module, "configure_logging"), \
                patch.object(app_module, "WeatherBotApp") as app_cls:
            assert main() == 0

        app_cls.return_value.run.assert_called_once()
