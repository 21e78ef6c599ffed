"""YAML message codec using PyYAML.

Hidden design decisions:
- Human-configuration labels, with section base fields nested under `base`
- Key order follows the schema rather than being sorted
"""

import logging

import yaml

from ..message.models import Message, MessageModel
from .base import Label, MessageCodec, MessageDecodeError, to_labeled_dict

logger = logging.getLogger(__name__)


class YAMLMessageCodec(MessageCodec):
    """Codec for the YAML configuration representation of messages."""

    @property
    def format_name(self) -> str:
        return "yaml"

    def encode(self, message: MessageModel) -> str:
        """Encode a message as YAML."""
        data = to_labeled_dict(message, Label.YAML)
        if not data:
            return ""
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)

    def decode(self, text: str | bytes) -> Message:
        """Decode a YAML document into a message.

        An empty document decodes to an empty message.
        """
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise MessageDecodeError(self.format_name, str(e)) from e
        if data is None:
            logger.debug("Empty YAML document, returning empty message")
        return self._validate(data)
