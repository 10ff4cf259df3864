"""
Telegram transport: inbound events, webhook listener, dispatch loop and delivery.
"""
from .events import (
    CommandEvent,
    TextMessageEvent,
    ConfirmationEvent,
    InboundEvent,
    event_from_update,
)
from .telegram_transport import TelegramTransport, build_markup
from .dispatcher import UpdateDispatcher
from .webhook import create_webhook_app, SECRET_TOKEN_HEADER

__all__ = [
    "CommandEvent",
    "TextMessageEvent",
    "ConfirmationEvent",
    "InboundEvent",
    "event_from_update",
    "TelegramTransport",
    "build_markup",
    "UpdateDispatcher",
    "create_webhook_app",
    "SECRET_TOKEN_HEADER",
]
