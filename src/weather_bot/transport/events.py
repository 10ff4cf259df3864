"""
Inbound events, decoupled from Telegram's update objects.
"""
from dataclasses import dataclass
from typing import Optional, Union

from telebot import types, util


@dataclass(frozen=True)
class CommandEvent:
    chat_id: int
    command: str
    message_id: int


@dataclass(frozen=True)
class TextMessageEvent:
    chat_id: int
    text: str
    message_id: int


@dataclass(frozen=True)
class ConfirmationEvent:
    """Button press on a confirmation prompt; prompt_text is the echoed prompt."""
    chat_id: int
    signal: str
    prompt_text: str
    callback_query_id: str
    prompt_message_id: Optional[int]


InboundEvent = Union[CommandEvent, TextMessageEvent, ConfirmationEvent]


def event_from_update(update: types.Update) -> Optional[InboundEvent]:
    """
    Classify a Telegram update.

    Messages without text (stickers, photos, ...) are treated as empty text.
    Updates carrying neither a message nor a callback query yield None.
    """
    if update.message is not None:
        message = update.message
        text = message.text or ""
        command = util.extract_command(text)
        if command:
            return CommandEvent(message.chat.id, command, message.message_id)
        return TextMessageEvent(message.chat.id, text, message.message_id)

    if update.callback_query is not None:
        query = update.callback_query
        prompt = query.message
        if prompt is None:
            return None
        return ConfirmationEvent(
            chat_id=prompt.chat.id,
            signal=query.data or "",
            prompt_text=getattr(prompt, "text", None) or "",
            callback_query_id=query.id,
            prompt_message_id=prompt.message_id,
        )

    return None
