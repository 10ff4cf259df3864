"""
Confirmation prompt encoding.

The candidate city travels inside the prompt text itself; when the user
answers, the city is recovered from the echoed prompt. No server-side record
of offered candidates exists.
"""
import re
from typing import Sequence, Tuple

from ..exceptions import PromptDecodeError
from ..resolution.normalizer import fold_case

PROMPT_SUFFIX = " mı demek istediniz❓"

# Telegram echoes the rendered text in callback queries, so the bold markers
# may or may not be present.
_PROMPT_PATTERN = re.compile(r"\*?(?P<name>[^*]+?)\*?" + re.escape(PROMPT_SUFFIX))


def display_name(name: str) -> str:
    """Capitalize the first letter for display ("istanbul" → "Istanbul")."""
    return name[:1].upper() + name[1:]


class ConfirmationCodec:
    """
    Encodes a candidate into prompt text and decodes it back.

    Decoding is a closed round trip: it accepts only text this codec
    produced (optionally with Markdown markers stripped) and only names that
    belong to the reference list.
    """

    def __init__(self, reference: Sequence[str]):
        """
        :param reference: Canonical names that prompts may carry
        """
        self._reference: Tuple[str, ...] = tuple(reference)

    def encode(self, candidate: str) -> str:
        """
        Render the confirmation prompt for a candidate.

        :param candidate: Canonical name (e.g., "istanbul")
        :return: Prompt text (e.g., "*Istanbul* mı demek istediniz❓")
        """
        return f"*{display_name(candidate)}*{PROMPT_SUFFIX}"

    def decode(self, prompt_text: str) -> str:
        """
        Recover the canonical name from a prompt produced by encode().

        :param prompt_text: Prompt text as echoed back by the transport
        :return: Canonical name from the reference list
        :raises: PromptDecodeError if the text is not a prompt or names an unknown city
        """
        match = _PROMPT_PATTERN.fullmatch((prompt_text or "").strip())
        if not match:
            raise PromptDecodeError(f"Not a confirmation prompt: {prompt_text!r}")

        shown = match.group("name").strip()

        # Display form first: "Isparta" must map back to "ısparta", not "isparta".
        for name in self._reference:
            if display_name(name) == shown:
                return name

        folded = fold_case(shown)
        for name in self._reference:
            if fold_case(name) == folded:
                return name

        raise PromptDecodeError(f"Prompt names an unknown city: {shown!r}")
