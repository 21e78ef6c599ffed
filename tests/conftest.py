"""Pytest configuration and shared fixtures."""
from datetime import datetime, timezone

import pytest

from pyinteract.message import (
    BulletList,
    ButtonBuilder,
    ButtonStyle,
    ContextItem,
    DividerStyle,
    LabelInput,
    Message,
    MultiSelect,
    OptionGroup,
    OptionItem,
    Section,
    Select,
    Selects,
    SelectType,
    TextField,
)


@pytest.fixture
def builder():
    """Return a button builder."""
    return ButtonBuilder()


@pytest.fixture
def sample_message(builder):
    """Return a message using every kind of section element."""
    option = OptionItem(name="default", value="ns-default")
    return Message(
        timestamp=datetime(2024, 5, 1, 10, 30, tzinfo=timezone.utc),
        user_handle="@alice",
        sections=[
            Section(
                style={"divider": DividerStyle.NONE},
                header="Pod restarted",
                description="Namespace default",
                body={"code_block": "kubectl get pods"},
                buttons=[
                    builder.for_command_with_desc_cmd("Logs", "logs pod/web"),
                    builder.for_url("Docs", "https://example.com/docs"),
                    builder.for_command_without_desc("Delete", "delete pod/web", ButtonStyle.DANGER),
                ],
                selects=Selects(
                    id="ns-select",
                    items=[
                        Select(
                            type=SelectType.STATIC,
                            name="Namespace",
                            command="{{BotName}} set ns",
                            option_groups=[OptionGroup(name="Namespaces", options=[option])],
                            initial_option=option,
                        )
                    ],
                ),
                multi_select=MultiSelect(
                    name="Events",
                    command="{{BotName}} filter",
                    options=[option],
                    initial_options=[option],
                ),
                text_fields=[TextField(key="Kind", value="Pod")],
                bullet_lists=[BulletList(title="Reasons", items=["OOMKilled"])],
                context=[ContextItem(text="Sent by {{BotName}}")],
            )
        ],
        plaintext_inputs=[LabelInput(command="{{BotName}} exec", placeholder="command")],
    )


@pytest.fixture
def sample_yaml():
    """Return a YAML message document written by hand."""
    return """\
type: threadMessage
baseBody:
  plaintext: Hello
sections:
  - style:
      dividerStyle: none
    base:
      header: Status
      body:
        codeBlock: all good
    buttons:
      - name: Refresh
        command: "{{BotName}} status"
        style: primary
userHandle: "@bob"
"""
