"""
Signal values carried by the confirmation prompt's buttons.
"""
from enum import Enum
from typing import Optional


class ConfirmationSignal(Enum):
    """Button payloads of a confirmation prompt."""
    ACCEPT = "accept"
    REJECT = "reject"
    ABOUT = "about"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["ConfirmationSignal"]:
        """Map a raw callback payload to a signal, or None if unrecognized."""
        for signal in cls:
            if signal.value == value:
                return signal
        return None
