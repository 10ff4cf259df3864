"""
Interactive console for the resolution flow.

Lets the conversation be tried locally without Telegram: replies are printed,
and after a confirmation prompt the user types accept, reject or about.
"""
import logging
import sys
from typing import Callable, Optional

from dotenv import load_dotenv

from .cities import PROVINCES
from .config_validator import get_float_env, get_optional_env, validate_matching_thresholds
from .confirmation import ConfirmationCodec, ConfirmationSignal
from .exceptions import ConfigurationError
from .gateway import WttrWeatherGateway
from .interaction import Reply, ResolutionFlow
from .resolution import CityNameResolver

logger = logging.getLogger(__name__)

QUIT_WORDS = {"quit", "exit"}
SIGNAL_WORDS = {signal.value for signal in ConfirmationSignal}


def print_banner(output_fn: Callable[[str], None]) -> None:
    output_fn("=" * 60)
    output_fn("  Hava Durumu Bot - Console")
    output_fn("=" * 60)
    output_fn("Type a province name. Answer prompts with: accept, reject, about.")
    output_fn("Type 'quit' or 'exit' to end the session.")
    output_fn("-" * 60)


def render_reply(reply: Reply, output_fn: Callable[[str], None]) -> None:
    prefix = "[alert] " if reply.alert else ""
    output_fn(f"{prefix}{reply.text}")
    for row in reply.buttons:
        output_fn("  ".join(f"[{button.signal}] {button.label}" for button in row))


def run_console(
    flow: ResolutionFlow,
    input_fn: Callable[[str], str] = input,
    output_fn: Callable[[str], None] = print,
) -> None:
    """
    Run the read-reply loop until quit/exit or end of input.

    :param flow: Resolution flow to drive
    :param input_fn: Line reader (input() by default)
    :param output_fn: Line writer (print() by default)
    """
    print_banner(output_fn)
    # Text of the last prompt on screen; the console's stand-in for the
    # message a Telegram user would tap.
    open_prompt: Optional[str] = None

    while True:
        try:
            line = input_fn("> ")
        except EOFError:
            break

        text = line.strip()
        if text.lower() in QUIT_WORDS:
            break
        if not text:
            continue

        if text.startswith("/"):
            parts = text[1:].split()
            reply = flow.handle_command(parts[0].lower()) if parts else None
        elif open_prompt is not None and text.lower() in SIGNAL_WORDS:
            reply = flow.handle_signal(text.lower(), open_prompt)
        else:
            reply = flow.handle_text(line)

        if reply is None:
            continue

        render_reply(reply, output_fn)
        if reply.buttons:
            open_prompt = reply.text
        elif not reply.alert:
            open_prompt = None


def console_main() -> int:
    """Entry point for weather-bot-console. Needs no Telegram token."""
    load_dotenv()
    logging.basicConfig(level=logging.WARNING)

    try:
        min_score = get_float_env("FUZZY_MIN_SCORE", 0.0)
        close_match_cutoff = get_float_env("CLOSE_MATCH_CUTOFF", 0.5)
        validate_matching_thresholds(close_match_cutoff, min_score)
        timeout_seconds = get_float_env("LOOKUP_TIMEOUT_SECONDS", 10.0)
    except ConfigurationError as e:
        logger.critical(f"Configuration error: {e}")
        return 1

    gateway = WttrWeatherGateway(
        base_url=get_optional_env("WEATHER_BASE_URL", default="https://wttr.in"),
        query_format=get_optional_env("WEATHER_QUERY_FORMAT", default="qmT0"),
        language=get_optional_env("WEATHER_LANGUAGE", default="tr"),
        timeout_seconds=timeout_seconds,
    )
    resolver = CityNameResolver(
        PROVINCES,
        min_score=min_score,
        close_match_cutoff=close_match_cutoff,
    )
    flow = ResolutionFlow(resolver, ConfirmationCodec(resolver.reference), gateway)

    try:
        run_console(flow)
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(console_main())
