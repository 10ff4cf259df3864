"""
Delivers replies through the Telegram Bot API (pyTelegramBotAPI).
"""
import logging
from typing import List, Optional

import telebot
from telebot import types
from telebot.apihelper import ApiTelegramException

from .events import ConfirmationEvent, InboundEvent
from ..interaction.replies import Button, Reply

logger = logging.getLogger(__name__)


def build_markup(rows: List[List[Button]]) -> Optional[types.InlineKeyboardMarkup]:
    """Render button rows as an inline keyboard (None if there are no buttons)."""
    if not rows:
        return None
    markup = types.InlineKeyboardMarkup()
    for row in rows:
        markup.row(*[
            types.InlineKeyboardButton(button.label, callback_data=button.signal)
            for button in row
        ])
    return markup


class TelegramTransport:
    """
    Sends Reply objects to Telegram.

    Every button press is answered so the client stops its progress
    indicator; alert replies are shown as that answer.
    """

    def __init__(self, bot: telebot.TeleBot):
        self._bot = bot

    def deliver(self, event: InboundEvent, reply: Optional[Reply]) -> None:
        """
        Deliver a reply for the event that caused it.

        :param event: The inbound event being answered
        :param reply: Reply to deliver (None: nothing to send)
        """
        if isinstance(event, ConfirmationEvent):
            if reply is not None and reply.alert:
                self._bot.answer_callback_query(
                    event.callback_query_id, text=reply.text, show_alert=True
                )
                return
            self._bot.answer_callback_query(event.callback_query_id)

        if reply is None:
            return

        reply_to = None
        if reply.reply_to_prompt and isinstance(event, ConfirmationEvent):
            reply_to = event.prompt_message_id

        self.send(event.chat_id, reply, reply_to_message_id=reply_to)

    def send(self, chat_id: int, reply: Reply, reply_to_message_id: Optional[int] = None) -> None:
        """
        Send a reply as a chat message.

        Weather reports carry raw "_" and "\\" characters that Telegram may
        refuse to parse as Markdown; such messages are re-sent once as plain text.
        """
        markup = build_markup(reply.buttons)
        try:
            self._bot.send_message(
                chat_id,
                reply.text,
                parse_mode=reply.parse_mode,
                reply_markup=markup,
                reply_to_message_id=reply_to_message_id,
            )
        except ApiTelegramException as e:
            if reply.parse_mode is None or e.error_code != 400:
                raise
            logger.warning(f"Telegram rejected {reply.parse_mode} entities, resending as plain text: {e}")
            self._bot.send_message(
                chat_id,
                reply.text,
                reply_markup=markup,
                reply_to_message_id=reply_to_message_id,
            )
