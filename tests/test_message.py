"""Unit and property-based tests for the message schema."""
from datetime import datetime, timedelta, timezone

import pytest
from hypothesis import given
from hypothesis import strategies as st
from pydantic import ValidationError

from pyinteract.message import (
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
    MessageType,
    MultiSelect,
    OptionItem,
    Section,
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

text = st.text(max_size=10)
buttons_strategy = st.lists(
    st.builds(Button, name=text, description=text, command=text),
    max_size=10,
)


class TestMessageEmptiness:
    """Tests for Message.is_empty and its helpers."""

    def test_default_message_is_empty(self):
        """Test that a message with no fields set is empty."""
        message = Message()

        assert message.is_empty()
        assert not message.has_base_body()
        assert not message.has_sections()
        assert not message.has_inputs()

    def test_timestamp_only_is_not_empty(self):
        """Test that a non-zero timestamp alone makes a message non-empty."""
        message = Message(timestamp=datetime(2024, 1, 1, tzinfo=timezone.utc))

        assert not message.is_empty()
        assert not message.has_base_body()
        assert not message.has_sections()
        assert not message.has_inputs()

    def test_zero_instant_counts_as_unset(self):
        """Test that the 0001-01-01 zero instant is treated as no timestamp."""
        message = Message(timestamp="0001-01-01T00:00:00Z")

        assert is_zero_time(message.timestamp)
        assert message.is_empty()

    def test_zero_instant_with_offset(self):
        """Test that the zero instant is recognised in any timezone."""
        plus_one = timezone(timedelta(hours=1))

        assert is_zero_time(datetime(1, 1, 1, 1, 0, tzinfo=plus_one))
        assert not is_zero_time(datetime(1, 1, 1, 0, 0, tzinfo=plus_one))
        assert is_zero_time(datetime(1, 1, 1))
        assert not is_zero_time(datetime(2024, 1, 1, tzinfo=timezone.utc))

    def test_base_body_makes_message_non_empty(self):
        """Test that a code block in the base body is enough content."""
        message = Message(base_body=Body(code_block="kubectl get pods"))

        assert message.has_base_body()
        assert not message.is_empty()

    def test_inputs_and_sections(self):
        """Test the input and section existence checks."""
        message = Message(
            sections=[Section()],
            plaintext_inputs=[LabelInput(command="exec")],
        )

        assert message.has_sections()
        assert message.has_inputs()
        assert not message.is_empty()

    def test_flags_and_handles_do_not_count_as_content(self):
        """Test that routing fields alone leave a message empty."""
        message = Message(
            type=MessageType.THREAD,
            only_visible_for_you=True,
            replace_original=True,
            user_handle="@alice",
            parent_activity_id="thread-1",
        )

        assert message.is_empty()

    @given(
        plaintext=st.text(max_size=5),
        section_count=st.integers(min_value=0, max_value=2),
        input_count=st.integers(min_value=0, max_value=2),
        with_timestamp=st.booleans(),
    )
    def test_is_empty_matches_predicates(self, plaintext, section_count, input_count, with_timestamp):
        """Property test: is_empty holds iff every predicate is false and there is no timestamp."""
        message = Message(
            base_body=Body(plaintext=plaintext),
            sections=[Section()] * section_count,
            plaintext_inputs=[LabelInput()] * input_count,
            timestamp=datetime(2024, 1, 1, tzinfo=timezone.utc) if with_timestamp else None,
        )

        expected = not (
            message.has_base_body()
            or message.has_sections()
            or message.has_inputs()
            or with_timestamp
        )
        assert message.is_empty() == expected


class TestValueSemantics:
    """Tests for immutability and structural equality."""

    def test_models_are_frozen(self):
        """Test that assigning to a field fails."""
        button = Button(name="Run")

        with pytest.raises(ValidationError):
            button.name = "Stop"  # type: ignore

    def test_structural_equality_and_hashing(self):
        """Test that equal values compare and hash equal."""
        first = Section(header="A", buttons=[Button(name="Run")])
        second = Section(header="A", buttons=(Button(name="Run"),))

        assert first == second
        assert hash(first) == hash(second)

    def test_collections_are_tuples(self):
        """Test that sequences are stored as tuples."""
        bullet_list = BulletList(title="Steps", items=["one", "two"])

        assert bullet_list.items == ("one", "two")

    def test_camel_case_keys_accepted(self):
        """Test that wire labels populate fields."""
        message = Message.model_validate({
            "baseBody": {"codeBlock": "x"},
            "onlyVisibleForYou": True,
            "parentActivityId": "p-1",
        })

        assert message.base_body.code_block == "x"
        assert message.only_visible_for_you
        assert message.parent_activity_id == "p-1"


class TestSection:
    """Tests for Section composition."""

    def test_flattened_base_fields(self):
        """Test that header, description and body fold into base."""
        section = Section(header="Title", description="Desc", body=Body(plaintext="text"))

        assert section.base == Base(header="Title", description="Desc", body=Body(plaintext="text"))
        assert section.header == "Title"
        assert section.description == "Desc"
        assert section.body.plaintext == "text"

    def test_nested_base(self):
        """Test that base may be given as a nested value."""
        section = Section(base=Base(header="Title"))

        assert section.header == "Title"

    def test_defaults(self):
        """Test the default section composition."""
        section = Section()

        assert section.style.divider == DividerStyle.DEFAULT
        assert section.buttons == ()
        assert not section.selects.are_options_defined()
        assert not section.multi_select.are_options_defined()

    def test_divider_accepts_both_labels(self):
        """Test that the divider style is read from either label."""
        assert Section.model_validate({"style": {"divider": "none"}}).style.divider == DividerStyle.NONE
        assert Section.model_validate({"style": {"dividerStyle": "none"}}).style.divider == DividerStyle.NONE


class TestPredicates:
    """Tests for collection predicates."""

    def test_text_field_is_empty(self):
        """Test TextField emptiness."""
        assert TextField().is_empty()
        assert not TextField(key="Kind").is_empty()
        assert not TextField(value="Pod").is_empty()

    def test_body_is_empty(self):
        """Test Body emptiness."""
        assert Body().is_empty()
        assert not Body(plaintext="x").is_empty()

    def test_context_defined(self):
        """Test context item existence."""
        assert not is_context_defined(None)
        assert not is_context_defined(())
        assert is_context_defined([ContextItem(text="footer")])

    def test_bullet_items_defined(self):
        """Test bullet list item detection."""
        assert not are_items_defined(None)
        assert not are_items_defined([])
        assert not are_items_defined([BulletList(title="empty"), BulletList()])
        assert are_items_defined([BulletList(title="empty"), BulletList(items=["one"])])

    @given(st.lists(st.lists(st.text(max_size=3), max_size=3), max_size=5))
    def test_bullet_items_defined_property(self, item_lists):
        """Property test: items are defined iff some list is non-empty."""
        bullet_lists = [BulletList(items=items) for items in item_lists]

        assert are_items_defined(bullet_lists) == any(item_lists)

    def test_options_defined_is_none_safe(self):
        """Test that a missing select reports no options."""
        assert not are_options_defined(None)

    def test_selects_options_defined(self):
        """Test select block option detection."""
        assert not are_options_defined(Selects())
        assert are_options_defined(Selects(items=[Select(type=SelectType.EXTERNAL, name="ns")]))

    def test_multi_select_options_defined(self):
        """Test multi-select option detection."""
        option = OptionItem(name="a", value="1")

        assert not are_options_defined(MultiSelect(initial_options=[option]))
        assert are_options_defined(MultiSelect(options=[option]))


class TestButtonPartition:
    """Tests for splitting buttons by description."""

    def test_none_input(self):
        """Test that a missing collection yields empty results."""
        assert buttons_with_description(None) == []
        assert buttons_without_description(None) == []

    def test_preserves_order(self):
        """Test that both halves keep the original order."""
        a = Button(name="a", description="first")
        b = Button(name="b")
        c = Button(name="c", description="third")
        d = Button(name="d")

        assert buttons_with_description([a, b, c, d]) == [a, c]
        assert buttons_without_description([a, b, c, d]) == [b, d]

    @given(buttons_strategy)
    def test_partition_property(self, buttons):
        """Property test: the two halves are disjoint and cover every button."""
        with_desc = buttons_with_description(buttons)
        without_desc = buttons_without_description(buttons)

        assert len(with_desc) + len(without_desc) == len(buttons)
        assert all(button.description for button in with_desc)
        assert not any(button.description for button in without_desc)
        assert with_desc == [button for button in buttons if button.description]
        assert without_desc == [button for button in buttons if not button.description]


class TestEnums:
    """Tests for the string enumerations."""

    def test_zero_values_are_defaults(self):
        """Test that the empty string is the default variant of each enum."""
        assert ButtonStyle("") == ButtonStyle.DEFAULT
        assert ButtonDescriptionStyle("") == ButtonDescriptionStyle.UNSPECIFIED
        assert SelectType("") == SelectType.UNSPECIFIED
        assert DividerStyle("") == DividerStyle.DEFAULT
        assert DispatchedInputAction("") == DispatchedInputAction.NONE
        assert MessageType("") == MessageType.DEFAULT

    def test_wire_values(self):
        """Test wire values of the less obvious variants."""
        assert MessageType.POPUP == "form"
        assert MessageType.NON_INTERACTIVE_SINGLE_SECTION == "nonInteractiveEventSingleSection"
        assert DispatchedInputAction.ON_ENTER == "on_enter_pressed"
        assert DispatchedInputAction.ON_CHARACTER == "on_character_entered"

    def test_unknown_value_rejected(self):
        """Test that values outside the enum are rejected."""
        with pytest.raises(ValidationError):
            Button(style="warning")

    def test_effective_description_style(self):
        """Test that an unspecified description style renders as code."""
        assert Button().effective_description_style == ButtonDescriptionStyle.CODE
        assert (
            Button(description_style=ButtonDescriptionStyle.BOLD).effective_description_style
            == ButtonDescriptionStyle.BOLD
        )
