"""Message serialization for pyinteract."""

from .base import Label, MessageCodec, MessageDecodeError, to_labeled_dict
from .factory import codec_for_path, create_codec
from .json_codec import JSONMessageCodec
from .yaml_codec import YAMLMessageCodec

__all__ = [
    "JSONMessageCodec",
    "Label",
    "MessageCodec",
    "MessageDecodeError",
    "YAMLMessageCodec",
    "codec_for_path",
    "create_codec",
    "to_labeled_dict",
]
