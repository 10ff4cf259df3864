"""
Single-consumer dispatch loop.

Updates are taken one at a time from the queue and processed to completion
before the next one. No state is shared between updates.
"""
import logging
import queue
from typing import Optional

from telebot import types

from .events import CommandEvent, ConfirmationEvent, TextMessageEvent, event_from_update
from .telegram_transport import TelegramTransport
from ..interaction import ResolutionFlow

logger = logging.getLogger(__name__)


class UpdateDispatcher:
    """
    Routes inbound updates to the resolution flow and delivers the replies.

    A failure while handling one update is logged and never stops the loop.
    """

    def __init__(
        self,
        updates: "queue.Queue[Optional[types.Update]]",
        flow: ResolutionFlow,
        transport: TelegramTransport,
    ):
        self._updates = updates
        self._flow = flow
        self._transport = transport

    def dispatch(self, update: types.Update) -> None:
        """Process a single update to completion."""
        try:
            event = event_from_update(update)
            if event is None:
                logger.debug(f"Skipping update {update.update_id} without message or callback")
                return

            if isinstance(event, CommandEvent):
                reply = self._flow.handle_command(event.command)
            elif isinstance(event, TextMessageEvent):
                reply = self._flow.handle_text(event.text)
            elif isinstance(event, ConfirmationEvent):
                reply = self._flow.handle_signal(event.signal, event.prompt_text)
            else:
                return

            self._transport.deliver(event, reply)
        except Exception as e:
            logger.error(f"Failed to handle update {getattr(update, 'update_id', '?')}: {e}", exc_info=True)

    def run_forever(self) -> None:
        """
        Consume updates until a None sentinel is received.
        """
        logger.info("Dispatch loop started")
        while True:
            update = self._updates.get()
            try:
                if update is None:
                    logger.info("Dispatch loop stopped")
                    return
                self.dispatch(update)
            finally:
                self._updates.task_done()

    def stop(self) -> None:
        """Ask the loop to exit after the updates already queued."""
        self._updates.put(None)
