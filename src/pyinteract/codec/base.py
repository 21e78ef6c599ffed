"""Abstract base class for message codecs.

The abstraction hides:
- Wire format (JSON, YAML)
- Which label each field is written under
- Zero-value omission rules
"""

from abc import ABC, abstractmethod
from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ValidationError

from ..message.models import Message, MessageModel, is_zero_time


class Label(str, Enum):
    """Which external label set to write fields under."""

    JSON = "json"  # Machine consumption
    YAML = "yaml"  # Human configuration


class MessageDecodeError(ValueError):
    """Raised when a document cannot be decoded into a Message."""

    def __init__(self, format_name: str, message: str):
        super().__init__(f"Invalid {format_name} message: {message}")
        self.format_name = format_name


class MessageCodec(ABC):
    """Abstract message codec.

    Encodes messages into a textual document and decodes them back.
    """

    @abstractmethod
    def encode(self, message: MessageModel) -> str:
        """Encode a message, or any of its elements, into a document."""

    @abstractmethod
    def decode(self, text: str | bytes) -> Message:
        """Decode a document into a message.

        Raises:
            MessageDecodeError: If the document is malformed or does not
                describe a valid message
        """

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Get the format identifier."""

    def _validate(self, data: Any) -> Message:
        """Validate a decoded document into a Message."""
        if data is None:
            return Message()
        if not isinstance(data, dict):
            raise MessageDecodeError(
                self.format_name,
                f"expected a mapping at the top level, got {type(data).__name__}"
            )
        try:
            return Message.model_validate(data)
        except ValidationError as e:
            raise MessageDecodeError(self.format_name, str(e)) from e


def to_labeled_dict(model: BaseModel, label: Label) -> dict[str, Any]:
    """Convert a model to a dict keyed by the given label set.

    Zero values are omitted, so absent and zero-valued fields look the same.
    An optional element that is set is kept even when its own fields are
    all zero, so it still decodes as present.

    Args:
        model: Schema model to convert
        label: Label set to use

    Returns:
        Plain dict of JSON/YAML-safe values
    """
    out: dict[str, Any] = {}
    for field_name, field in type(model).model_fields.items():
        extra = field.json_schema_extra if isinstance(field.json_schema_extra, dict) else {}
        raw = getattr(model, field_name)
        value = _to_plain(raw, label)
        if _is_zero(value) and not (field.default is None and isinstance(raw, BaseModel)):
            continue
        if label == Label.JSON and extra.get("json_inline"):
            out.update(value)
            continue
        key = field.alias or field_name
        if label == Label.YAML:
            key = extra.get("yaml_label", key)
        out[key] = value
    return out


def _to_plain(value: Any, label: Label) -> Any:
    if isinstance(value, BaseModel):
        return to_labeled_dict(value, label)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return None if is_zero_time(value) else value.isoformat()
    if isinstance(value, (tuple, list)):
        return [_to_plain(item, label) for item in value]
    return value


def _is_zero(value: Any) -> bool:
    return value is None or value == "" or value is False or value == [] or value == {}
