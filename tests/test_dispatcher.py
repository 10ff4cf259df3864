"""
Tests for the single-consumer dispatch loop.
"""
import logging
import queue

import pytest
from unittest.mock import Mock

from telebot import types

from weather_bot.cities import PROVINCES
from weather_bot.confirmation import ConfirmationCodec
from weather_bot.interaction import ResolutionFlow
from weather_bot.interaction import messages
from weather_bot.resolution import CityNameResolver
from weather_bot.transport import (
    CommandEvent,
    ConfirmationEvent,
    TextMessageEvent,
    UpdateDispatcher,
)
from telegram_payloads import callback_payload, message_payload


@pytest.fixture
def gateway():
    gateway = Mock()
    gateway.fetch_report.return_value = "report"
    return gateway


@pytest.fixture
def transport():
    return Mock()


@pytest.fixture
def updates():
    return queue.Queue()


@pytest.fixture
def dispatcher(updates, gateway, transport):
    flow = ResolutionFlow(CityNameResolver(PROVINCES), ConfirmationCodec(PROVINCES), gateway)
    return UpdateDispatcher(updates, flow, transport)


def update(payload):
    return types.Update.de_json(payload)


class TestDispatch:
    """Tests for routing single updates."""

    def test_command_routed(self, dispatcher, transport):
        """Test that /start is answered with the greeting."""
        dispatcher.dispatch(update(message_payload("/start")))

        event, reply = transport.deliver.call_args.args
        assert isinstance(event, CommandEvent)
        assert reply.text == messages.START

    def test_text_routed(self, dispatcher, transport, gateway):
        """Test that free text goes through resolution."""
        dispatcher.dispatch(update(message_payload("ankara")))

        event, reply = transport.deliver.call_args.args
        assert isinstance(event, TextMessageEvent)
        assert reply.text == "report"
        gateway.fetch_report.assert_called_once_with("ankara")

    def test_callback_routed(self, dispatcher, transport, gateway):
        """Test that a button press completes the confirmation round trip."""
        dispatcher.dispatch(update(callback_payload("accept", "Istanbul mı demek istediniz❓")))

        event, reply = transport.deliver.call_args.args
        assert isinstance(event, ConfirmationEvent)
        assert reply.reply_to_prompt
        gateway.fetch_report.assert_called_once_with("istanbul")

    def test_unknown_command_delivers_nothing_visible(self, dispatcher, transport):
        """Test that ignored commands pass a None reply to the transport."""
        dispatcher.dispatch(update(message_payload("/help")))

        _, reply = transport.deliver.call_args.args
        assert reply is None

    def test_irrelevant_update_skipped(self, dispatcher, transport):
        """Test that updates without message or callback are skipped."""
        dispatcher.dispatch(update({"update_id": 9}))

        transport.deliver.assert_not_called()

    def test_delivery_error_is_contained(self, dispatcher, transport, caplog):
        """Test that an exception while handling one update is logged, not raised."""
        transport.deliver.side_effect = RuntimeError("telegram down")

        with caplog.at_level(logging.ERROR):
            dispatcher.dispatch(update(message_payload("ankara")))

        assert any("telegram down" in record.getMessage() for record in caplog.records)


class TestRunForever:
    """Tests for the dispatch loop."""

    def test_processes_in_order_until_sentinel(self, dispatcher, updates, transport):
        """Test that queued updates are processed in order and the sentinel stops the loop."""
        updates.put(update(message_payload("/start", update_id=1)))
        updates.put(update(message_payload("istanbull", update_id=2)))
        dispatcher.stop()

        dispatcher.run_forever()

        replies = [c.args[1].text for c in transport.deliver.call_args_list]
        assert replies == [messages.START, "*Istanbul* mı demek istediniz❓"]
        assert updates.empty()

    def test_keeps_running_after_failure(self, dispatcher, updates, transport):
        """Test that a failing update does not stop the loop."""
        transport.deliver.side_effect = [RuntimeError("boom"), None]
        updates.put(update(message_payload("ankara", update_id=1)))
        updates.put(update(message_payload("bursa", update_id=2)))
        dispatcher.stop()

        dispatcher.run_forever()

        assert transport.deliver.call_count == 2
