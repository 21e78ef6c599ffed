"""
Pyinteract: a platform-agnostic schema for interactive chat messages.

Each module hides a specific design decision, such as the button
naming convention or the wire encoding.
"""

__version__ = "0.1.0"

from .codec import MessageDecodeError, create_codec
from .message import (
    Button,
    ButtonBuilder,
    Message,
    Section,
    replace_bot_name_placeholder,
)

__all__ = [
    "Button",
    "ButtonBuilder",
    "Message",
    "MessageDecodeError",
    "Section",
    "create_codec",
    "replace_bot_name_placeholder",
]
