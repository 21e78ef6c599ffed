"""Data models for interactive chat messages.

These models describe everything a renderer needs to lay out an interactive
or plaintext message, independent of the target chat platform.

Hidden design decisions:
- Frozen models with tuple collections, so values can be shared freely
- camelCase wire labels generated from field names
- Section base fields accepted either nested or flattened
- YAML scalars (numbers, booleans, dates) accepted as text in string fields
"""

from collections.abc import Iterable
from datetime import date, datetime, timedelta
from enum import Enum
from typing import Any

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationInfo,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel

# Keys of Base that may appear flattened into a section
_BASE_KEYS = ("header", "description", "body")


class MessageType(str, Enum):
    """How a communicator should display a message."""

    DEFAULT = ""
    # Plaintext card, buttons sent in a separate interactive message
    BASIC_CARD_WITH_BUTTONS_IN_SEPARATE_MESSAGE = "basicCardWithButtonsInSeparateMessage"
    # Only the base body is preserved, built-in filter supported
    BASE_BODY_WITH_FILTER = "baseBodyWithFilter"
    # Exactly one section; interactive elements and base body are ignored
    NON_INTERACTIVE_SINGLE_SECTION = "nonInteractiveEventSingleSection"
    POPUP = "form"
    THREAD = "threadMessage"
    SKIP = "skipMessage"


class ButtonStyle(str, Enum):
    """Visual style of a button."""

    DEFAULT = ""
    PRIMARY = "primary"
    DANGER = "danger"


class ButtonDescriptionStyle(str, Enum):
    """How a button description is rendered."""

    UNSPECIFIED = ""  # Rendered as CODE
    BOLD = "bold"
    TEXT = "text"
    CODE = "code"


class SelectType(str, Enum):
    """Source of select dropdown options."""

    UNSPECIFIED = ""
    STATIC = "static"
    EXTERNAL = "external"


class DividerStyle(str, Enum):
    """Divider placed between section blocks."""

    DEFAULT = ""  # Block divider, like an <hr>
    NONE = "none"


class DispatchedInputAction(str, Enum):
    """When an input action is dispatched to the backend."""

    NONE = ""
    ON_ENTER = "on_enter_pressed"
    ON_CHARACTER = "on_character_entered"


class MessageModel(BaseModel):
    """Base for all message schema models."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
        extra="ignore",
        coerce_numbers_to_str=True,
    )

    @field_validator("*", mode="before")
    @classmethod
    def scalars_as_text(cls, value: Any, info: ValidationInfo) -> Any:
        """Read booleans, dates and nulls into string fields as their YAML text."""
        annotation = cls.model_fields[info.field_name].annotation
        if annotation is str:
            return _scalar_text(value)
        if annotation == tuple[str, ...] and isinstance(value, (list, tuple)):
            return [_scalar_text(item) for item in value]
        return value


class Body(MessageModel):
    """Plain or code-formatted text."""

    code_block: str = ""
    plaintext: str = ""

    def is_empty(self) -> bool:
        """Return True if both fields are empty."""
        return not self.code_block and not self.plaintext


class Base(MessageModel):
    """Header, description and body shared by sections."""

    header: str = ""
    description: str = ""
    body: Body = Field(default_factory=Body)


class SectionStyle(MessageModel):
    """Visual separation of a section."""

    divider: DividerStyle = Field(
        default=DividerStyle.DEFAULT,
        alias="divider",
        validation_alias=AliasChoices("divider", "dividerStyle"),
        json_schema_extra={"yaml_label": "dividerStyle"},
    )


class OptionItem(MessageModel):
    """A selectable option."""

    name: str = ""
    value: str = ""


class OptionGroup(MessageModel):
    """Named group of options in a select menu."""

    name: str = ""
    options: tuple[OptionItem, ...] = ()


class Select(MessageModel):
    """Single-choice dropdown.

    `initial_option` should be one of the offered options. This is not
    validated here.
    """

    type: SelectType = SelectType.UNSPECIFIED
    name: str = ""
    command: str = ""
    option_groups: tuple[OptionGroup, ...] = ()
    initial_option: OptionItem | None = None


class Selects(MessageModel):
    """Block of select dropdowns."""

    id: str = Field(default="", description="Identifies the block when it is updated")
    items: tuple[Select, ...] = ()

    def are_options_defined(self) -> bool:
        """Return True if some selects are available."""
        return len(self.items) > 0


class MultiSelect(MessageModel):
    """Multi-choice dropdown.

    `initial_options` should be a subset of `options`. This is not
    validated here.
    """

    name: str = ""
    description: Body = Field(default_factory=Body)
    command: str = ""
    options: tuple[OptionItem, ...] = ()
    initial_options: tuple[OptionItem, ...] = ()

    def are_options_defined(self) -> bool:
        """Return True if some options are available."""
        return len(self.options) > 0


class LabelInput(MessageModel):
    """Free-text input field."""

    command: str = ""
    text: str = ""
    placeholder: str = ""
    dispatched_action: DispatchedInputAction = DispatchedInputAction.NONE


class TextField(MessageModel):
    """Key/value display pair."""

    key: str = ""
    value: str = ""

    def is_empty(self) -> bool:
        """Return True if all fields have zero value."""
        return not self.key and not self.value


class BulletList(MessageModel):
    """Titled list of strings."""

    title: str = ""
    items: tuple[str, ...] = ()


class ContextItem(MessageModel):
    """Small annotation or footer text."""

    text: str = ""


class Button(MessageModel):
    """A clickable action.

    A button is meant to carry either a command or a URL, but both are
    accepted.
    """

    description: str = ""
    description_style: ButtonDescriptionStyle = ButtonDescriptionStyle.UNSPECIFIED
    name: str = ""
    command: str = ""
    url: str = ""
    style: ButtonStyle = ButtonStyle.DEFAULT

    @property
    def effective_description_style(self) -> ButtonDescriptionStyle:
        """Description style to render, CODE when unspecified."""
        if self.description_style == ButtonDescriptionStyle.UNSPECIFIED:
            return ButtonDescriptionStyle.CODE
        return self.description_style


class Section(MessageModel):
    """A self-contained renderable block within a message."""

    style: SectionStyle = Field(default_factory=SectionStyle)
    base: Base = Field(default_factory=Base, json_schema_extra={"json_inline": True})
    buttons: tuple[Button, ...] = ()
    multi_select: MultiSelect = Field(default_factory=MultiSelect)
    selects: Selects = Field(default_factory=Selects)
    plaintext_inputs: tuple[LabelInput, ...] = ()
    text_fields: tuple[TextField, ...] = ()
    bullet_lists: tuple[BulletList, ...] = ()
    context: tuple[ContextItem, ...] = ()

    @model_validator(mode="before")
    @classmethod
    def collect_base_fields(cls, data: Any) -> Any:
        """Fold flattened header/description/body keys into `base`."""
        if not isinstance(data, dict) or "base" in data:
            return data
        flattened = {key: data[key] for key in _BASE_KEYS if key in data}
        if not flattened:
            return data
        rest = {key: value for key, value in data.items() if key not in _BASE_KEYS}
        rest["base"] = flattened
        return rest

    @property
    def header(self) -> str:
        return self.base.header

    @property
    def description(self) -> str:
        return self.base.description

    @property
    def body(self) -> Body:
        return self.base.body


class Message(MessageModel):
    """One outgoing chat message."""

    type: MessageType = MessageType.DEFAULT
    base_body: Body = Field(
        default_factory=Body,
        description="Payload used when interactive elements are not supported"
    )
    timestamp: datetime | None = None
    sections: tuple[Section, ...] = ()
    plaintext_inputs: tuple[LabelInput, ...] = ()
    only_visible_for_you: bool = False
    replace_original: bool = False
    user_handle: str = ""
    parent_activity_id: str = Field(
        default="",
        description="Thread to reply in instead of the default one"
    )

    def is_empty(self) -> bool:
        """Return True if there is nothing to send."""
        if self.has_base_body():
            return False
        if self.has_inputs():
            return False
        if self.has_sections():
            return False
        if not is_zero_time(self.timestamp):
            return False
        return True

    def has_base_body(self) -> bool:
        """Return True if message has base body defined."""
        return not self.base_body.is_empty()

    def has_sections(self) -> bool:
        """Return True if message has interactive sections."""
        return len(self.sections) != 0

    def has_inputs(self) -> bool:
        """Return True if message has interactive inputs."""
        return len(self.plaintext_inputs) != 0


def is_zero_time(value: datetime | None) -> bool:
    """Check whether a timestamp is unset.

    Producers written in Go emit 0001-01-01T00:00:00Z for unset times.
    """
    if value is None:
        return True
    offset = value.utcoffset() or timedelta(0)
    return value.replace(tzinfo=None) - datetime.min == offset


def _scalar_text(value: Any) -> Any:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, date):
        return value.isoformat()
    return value


def are_items_defined(bullet_lists: Iterable[BulletList] | None) -> bool:
    """Return True if at least one list has items defined."""
    if bullet_lists is None:
        return False
    for bullet_list in bullet_lists:
        if len(bullet_list.items) > 0:
            return True
    return False


def is_context_defined(context_items: Iterable[ContextItem] | None) -> bool:
    """Return True if there are any context items defined."""
    if context_items is None:
        return False
    return any(True for _ in context_items)


def are_options_defined(select: Selects | MultiSelect | None) -> bool:
    """Return True if the select offers some options. Safe to call with None."""
    if select is None:
        return False
    return select.are_options_defined()


def buttons_with_description(buttons: Iterable[Button] | None) -> list[Button]:
    """Return all buttons with description, in their original order."""
    if buttons is None:
        return []
    return [button for button in buttons if button.description]


def buttons_without_description(buttons: Iterable[Button] | None) -> list[Button]:
    """Return all buttons without description, in their original order."""
    if buttons is None:
        return []
    return [button for button in buttons if not button.description]
