"""Bot name placeholder substitution.

Walks the whole message tree and returns a copy with the placeholder
replaced, leaving the original value untouched.
"""

import logging
from enum import Enum
from typing import Any

from pydantic import BaseModel

from ..config import BOT_NAME_PLACEHOLDER, get_bot_name
from .models import Message

logger = logging.getLogger(__name__)


def replace_bot_name_placeholder(message: Message, bot_name: str | None = None) -> Message:
    """Replace the bot name placeholder in every text field of a message.

    Args:
        message: Message to process
        bot_name: Invocation prefix; read from configuration when omitted

    Returns:
        New message with the placeholder substituted
    """
    name = bot_name if bot_name is not None else get_bot_name()
    logger.debug("Replacing %s with %r", BOT_NAME_PLACEHOLDER, name)
    return _replace(message, name)


def _replace(value: Any, bot_name: str) -> Any:
    if isinstance(value, Enum):
        return value
    if isinstance(value, str):
        return value.replace(BOT_NAME_PLACEHOLDER, bot_name)
    if isinstance(value, tuple):
        return tuple(_replace(item, bot_name) for item in value)
    if isinstance(value, BaseModel):
        update = {}
        for field_name in type(value).model_fields:
            current = getattr(value, field_name)
            replaced = _replace(current, bot_name)
            if replaced != current:
                update[field_name] = replaced
        return value.model_copy(update=update) if update else value
    return value
