"""Configuration constants for pyinteract.

Centralizes the placeholder token and environment-driven settings.
"""

import os

# Token embedded in generated commands, replaced with the bot invocation prefix before display
BOT_NAME_PLACEHOLDER = "{{BotName}}"

# Environment variable holding the bot invocation prefix
BOT_NAME_ENV_VAR = "PYINTERACT_BOT_NAME"
DEFAULT_BOT_NAME = "@Bot"

# File suffixes understood by the codec factory
JSON_SUFFIXES = {".json"}
YAML_SUFFIXES = {".yaml", ".yml"}


def get_bot_name() -> str:
    """Get the bot invocation prefix.

    Environment variables:
        PYINTERACT_BOT_NAME: Bot invocation prefix (default: @Bot)
    """
    return os.getenv(BOT_NAME_ENV_VAR) or DEFAULT_BOT_NAME
