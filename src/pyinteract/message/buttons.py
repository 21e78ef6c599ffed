"""Builder for button elements.

Hides the convention that commands are prefixed with the bot name
placeholder, which renderers later replace with the real invocation prefix.
"""

from ..config import BOT_NAME_PLACEHOLDER
from .models import Button, ButtonDescriptionStyle, ButtonStyle


class ButtonBuilder:
    """Simplified way to construct Button models."""

    def for_command_with_desc_cmd(
        self,
        name: str,
        cmd: str,
        style: ButtonStyle = ButtonStyle.DEFAULT
    ) -> Button:
        """Return command button where description and command are the same."""
        return self._command_with_cmd_desc(name, cmd, cmd, style)

    def for_command_with_bold_desc(
        self,
        name: str,
        desc: str,
        cmd: str,
        style: ButtonStyle = ButtonStyle.DEFAULT
    ) -> Button:
        """Return command button where description and command are different."""
        return self._command_with_desc(name, cmd, desc, style, ButtonDescriptionStyle.BOLD)

    def for_command_without_desc(
        self,
        name: str,
        cmd: str,
        style: ButtonStyle = ButtonStyle.DEFAULT
    ) -> Button:
        """Return command button without description."""
        return Button(name=name, command=_with_placeholder(cmd), style=style)

    def for_command(
        self,
        name: str,
        cmd: str,
        desc: str,
        style: ButtonStyle = ButtonStyle.DEFAULT
    ) -> Button:
        """Return command button with description in a code block.

        For displaying the description in bold, use for_command_with_bold_desc.
        """
        return self._command_with_cmd_desc(name, cmd, desc, style)

    def for_url(
        self,
        name: str,
        url: str,
        style: ButtonStyle = ButtonStyle.DEFAULT
    ) -> Button:
        """Return link button."""
        return Button(name=name, url=url, style=style)

    def for_url_with_bold_desc(
        self,
        name: str,
        desc: str,
        url: str,
        style: ButtonStyle = ButtonStyle.DEFAULT
    ) -> Button:
        """Return link button with bold description."""
        return self.for_url(name, url, style).model_copy(
            update={
                "description": desc,
                "description_style": ButtonDescriptionStyle.BOLD,
            }
        )

    def for_url_with_text_desc(
        self,
        name: str,
        desc: str,
        url: str,
        style: ButtonStyle = ButtonStyle.DEFAULT
    ) -> Button:
        """Return link button with plaintext description."""
        return self.for_url(name, url, style).model_copy(
            update={
                "description": desc,
                "description_style": ButtonDescriptionStyle.TEXT,
            }
        )

    def description_url(
        self,
        name: str,
        cmd: str,
        url: str,
        style: ButtonStyle = ButtonStyle.DEFAULT
    ) -> Button:
        """Return link button described by the command it corresponds to."""
        return Button(
            name=name,
            description=_with_placeholder(cmd),
            url=url,
            style=style,
        )

    def _command_with_cmd_desc(
        self,
        name: str,
        cmd: str,
        desc: str,
        style: ButtonStyle
    ) -> Button:
        return self._command_with_desc(
            name, cmd, _with_placeholder(desc), style, ButtonDescriptionStyle.CODE
        )

    def _command_with_desc(
        self,
        name: str,
        cmd: str,
        desc: str,
        style: ButtonStyle,
        desc_style: ButtonDescriptionStyle
    ) -> Button:
        return Button(
            name=name,
            command=_with_placeholder(cmd),
            description=desc,
            description_style=desc_style,
            style=style,
        )


def _with_placeholder(text: str) -> str:
    return f"{BOT_NAME_PLACEHOLDER} {text}"
