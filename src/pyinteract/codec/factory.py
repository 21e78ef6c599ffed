"""Factory for creating message codecs."""

from pathlib import Path
from typing import Any

from ..config import JSON_SUFFIXES, YAML_SUFFIXES
from .base import MessageCodec


def create_codec(fmt: str = "json", **kwargs: Any) -> MessageCodec:
    """Create a message codec.

    Args:
        fmt: Format name ("json", "yaml" or "yml")
        **kwargs: Codec-specific configuration

    Returns:
        MessageCodec instance

    Raises:
        ValueError: If format is not supported
    """
    fmt = fmt.lower()

    if fmt == "json":
        from .json_codec import JSONMessageCodec
        return JSONMessageCodec(**kwargs)

    elif fmt in ("yaml", "yml"):
        from .yaml_codec import YAMLMessageCodec
        return YAMLMessageCodec(**kwargs)

    raise ValueError(
        f"Unsupported message format: {fmt}. "
        f"Supported formats: json, yaml"
    )


def codec_for_path(path: Path, **kwargs: Any) -> MessageCodec:
    """Create the codec matching a file suffix.

    Raises:
        ValueError: If the suffix is not a known message format
    """
    suffix = path.suffix.lower()
    if suffix in JSON_SUFFIXES:
        return create_codec("json", **kwargs)
    if suffix in YAML_SUFFIXES:
        return create_codec("yaml", **kwargs)
    raise ValueError(
        f"Cannot detect message format from suffix '{path.suffix}'. "
        f"Supported suffixes: {', '.join(sorted(JSON_SUFFIXES | YAML_SUFFIXES))}"
    )
