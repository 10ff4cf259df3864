from dataclasses import dataclass, field
from typing import List, Optional

MARKDOWN = "Markdown"


@dataclass(frozen=True)
class Button:
    label: str
    signal: str


@dataclass
class Reply:
    """
    Transport-neutral outbound message.

    alert: deliver as a pop-up answer to the confirmation press instead of a chat message.
    reply_to_prompt: thread the message under the prompt that was answered.
    """
    text: str
    parse_mode: Optional[str] = MARKDOWN
    buttons: List[List[Button]] = field(default_factory=list)
    alert: bool = False
    reply_to_prompt: bool = False
