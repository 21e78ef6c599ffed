"""JSON message codec.

Hidden design decisions:
- Machine-consumption labels, with section base fields inlined
- Compact output unless an indent is requested
"""

import json
import logging

from ..message.models import Message, MessageModel
from .base import Label, MessageCodec, MessageDecodeError, to_labeled_dict

logger = logging.getLogger(__name__)


class JSONMessageCodec(MessageCodec):
    """Codec for the JSON wire representation of messages."""

    def __init__(self, indent: int | None = None):
        """Initialize the JSON codec.

        Args:
            indent: Indentation for pretty output (compact when None)
        """
        self._indent = indent

    @property
    def format_name(self) -> str:
        return "json"

    def encode(self, message: MessageModel) -> str:
        """Encode a message as JSON."""
        return json.dumps(
            to_labeled_dict(message, Label.JSON),
            indent=self._indent,
            ensure_ascii=False,
        )

    def decode(self, text: str | bytes) -> Message:
        """Decode a JSON document into a message."""
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise MessageDecodeError(self.format_name, str(e)) from e
        logger.debug("Decoded JSON document with keys: %s", list(data) if isinstance(data, dict) else None)
        return self._validate(data)
