"""
Resolution flow: turns inbound commands, text and confirmation signals into replies.

Holds no per-conversation state. A fuzzy candidate is offered through an
encoded prompt and recovered from that prompt when the user answers.
"""
import logging
from typing import Optional

from . import messages
from .replies import Reply
from ..confirmation import ConfirmationCodec, ConfirmationSignal
from ..exceptions import LookupFailure, PromptDecodeError
from ..gateway import WeatherGateway
from ..resolution import CityNameResolver, MatchKind

logger = logging.getLogger(__name__)


class ResolutionFlow:
    """
    Orchestrates normalizer, matcher, confirmation codec and weather gateway.

    Outcomes per inbound text:
    - exact match: weather lookup, report (or retry message) returned
    - fuzzy candidate: confirmation prompt with accept/reject/about buttons
    - no match: not-found message

    Lookup failures never propagate; they become the retry message.
    """

    def __init__(
        self,
        resolver: CityNameResolver,
        codec: ConfirmationCodec,
        gateway: WeatherGateway,
    ):
        self._resolver = resolver
        self._codec = codec
        self._gateway = gateway

    def handle_command(self, command: str) -> Optional[Reply]:
        """
        Reply to a bot command. Unknown commands are ignored (None).
        """
        if command == "start":
            return Reply(messages.START)
        logger.debug(f"Ignoring unknown command '{command}'")
        return None

    def handle_text(self, text: str) -> Reply:
        """
        Resolve free text to a city and reply accordingly.

        :param text: Message text as typed by the user
        :return: Report, confirmation prompt or not-found reply
        """
        result = self._resolver.match(text or "")
        logger.info(
            f"Resolved '{text}' -> kind={result.kind.value}, name={result.name}, "
            f"score={result.score:.2f}, strategy={result.strategy}"
        )

        if result.kind is MatchKind.EXACT:
            return self._lookup(result.name, failure=Reply(messages.LOOKUP_FAILED))

        if result.kind is MatchKind.FUZZY:
            return Reply(
                self._codec.encode(result.name),
                buttons=messages.CONFIRMATION_BUTTONS,
            )

        return Reply(messages.NOT_FOUND)

    def handle_signal(self, signal: str, prompt_text: str) -> Reply:
        """
        Handle a button press on a confirmation prompt.

        :param signal: Raw button payload ("accept", "reject", "about")
        :param prompt_text: Text of the prompt the button belongs to
        :return: Reply (alerts are answered on the button press itself)
        """
        parsed = ConfirmationSignal.parse(signal)

        if parsed is ConfirmationSignal.ACCEPT:
            try:
                city = self._codec.decode(prompt_text)
            except PromptDecodeError as e:
                logger.warning(f"Could not recover city from prompt: {e}")
                return Reply(messages.FALLBACK, parse_mode=None, alert=True)
            return self._lookup(
                city,
                failure=Reply(messages.LOOKUP_FAILED_ALERT, parse_mode=None, alert=True),
                reply_to_prompt=True,
            )

        if parsed is ConfirmationSignal.REJECT:
            return Reply(messages.ASK_AGAIN, parse_mode=None, reply_to_prompt=True)

        if parsed is ConfirmationSignal.ABOUT:
            return Reply(messages.ABOUT, parse_mode=None, alert=True)

        logger.warning(f"Unknown confirmation signal: {signal!r}")
        return Reply(messages.FALLBACK, parse_mode=None, alert=True)

    def _lookup(self, city: str, failure: Reply, reply_to_prompt: bool = False) -> Reply:
        try:
            report = self._gateway.fetch_report(city)
        except LookupFailure as e:
            logger.error(f"Weather lookup failed for '{city}': {e}")
            return failure
        return Reply(report, reply_to_prompt=reply_to_prompt)
