"""
Stateless confirmation round trip.

A fuzzy candidate is embedded in the prompt text and recovered from the same
text when the user presses a button.
"""
from .prompt_codec import ConfirmationCodec, display_name, PROMPT_SUFFIX
from .signals import ConfirmationSignal

__all__ = ["ConfirmationCodec", "display_name", "PROMPT_SUFFIX", "ConfirmationSignal"]
