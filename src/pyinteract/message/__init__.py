"""Interactive message schema for pyinteract."""

from .bot_name import replace_bot_name_placeholder
from .buttons import ButtonBuilder
from .models import (
    Base,
    Body,
    BulletList,
    Button,
    ButtonDescriptionStyle,
    ButtonStyle,
    ContextItem,
    DispatchedInputAction,
    DividerStyle,
    LabelInput,
    Message,
    MessageModel,
    MessageType,
    MultiSelect,
    OptionGroup,
    OptionItem,
    Section,
    SectionStyle,
    Select,
    Selects,
    SelectType,
    TextField,
    are_items_defined,
    are_options_defined,
    buttons_with_description,
    buttons_without_description,
    is_context_defined,
    is_zero_time,
)

__all__ = [
    "Base",
    "Body",
    "BulletList",
    "Button",
    "ButtonBuilder",
    "ButtonDescriptionStyle",
    "ButtonStyle",
    "ContextItem",
    "DispatchedInputAction",
    "DividerStyle",
    "LabelInput",
    "Message",
    "MessageModel",
    "MessageType",
    "MultiSelect",
    "OptionGroup",
    "OptionItem",
    "Section",
    "SectionStyle",
    "Select",
    "SelectType",
    "Selects",
    "TextField",
    "are_items_defined",
    "are_options_defined",
    "buttons_with_description",
    "buttons_without_description",
    "is_context_defined",
    "is_zero_time",
    "replace_bot_name_placeholder",
]
