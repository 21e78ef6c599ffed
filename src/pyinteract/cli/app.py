"""Main CLI application using Typer."""
import logging
from enum import Enum
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from ..codec import MessageCodec, codec_for_path, create_codec
from ..message import (
    Button,
    ButtonBuilder,
    ButtonStyle,
    Message,
    are_items_defined,
    are_options_defined,
    buttons_with_description,
    buttons_without_description,
    is_context_defined,
    replace_bot_name_placeholder,
)

# Load environment variables
load_dotenv()

# Create Typer app
app = typer.Typer(
    name="pyinteract",
    help="Inspect, convert and preview interactive chat messages",
    no_args_is_help=True,
    add_completion=True,
)

# Console for rich output
console = Console()


class OutputFormat(str, Enum):
    """Message document formats."""

    JSON = "json"
    YAML = "yaml"


class ButtonKind(str, Enum):
    """Button builder operations exposed on the command line."""

    COMMAND = "command"
    COMMAND_DESC_CMD = "command-desc-cmd"
    COMMAND_BOLD_DESC = "command-bold-desc"
    COMMAND_NO_DESC = "command-no-desc"
    URL = "url"
    URL_BOLD_DESC = "url-bold-desc"
    URL_TEXT_DESC = "url-text-desc"
    DESCRIPTION_URL = "description-url"


@app.callback()
def setup(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug logs"
    )
):
    """Configure logging for all commands."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        )


def _load(source: Path) -> Message:
    """Read a message document, exiting with an error on failure."""
    try:
        codec = codec_for_path(source)
        return codec.decode(source.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        # MessageDecodeError is a ValueError
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)


def _output_codec(fmt: OutputFormat) -> MessageCodec:
    """Create a codec for terminal output, pretty-printing JSON."""
    if fmt == OutputFormat.JSON:
        return create_codec(fmt.value, indent=2)
    return create_codec(fmt.value)


@app.command()
def convert(
    source: Path = typer.Argument(
        ...,
        help="Message file (.json, .yaml or .yml)",
        exists=True,
        dir_okay=False,
    ),
    to: OutputFormat = typer.Option(
        OutputFormat.JSON,
        "--to",
        "-t",
        help="Output format"
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Write to file instead of stdout"
    ),
    bot_name: str | None = typer.Option(
        None,
        "--bot-name",
        "-b",
        help="Replace the bot name placeholder with this prefix"
    ),
    render_bot_name: bool = typer.Option(
        False,
        "--render-bot-name",
        help="Replace the bot name placeholder with the configured prefix"
    )
):
    """Convert a message between JSON and YAML."""
    message = _load(source)

    if bot_name is not None or render_bot_name:
        message = replace_bot_name_placeholder(message, bot_name)

    codec = _output_codec(to)
    document = codec.encode(message).rstrip("\n")

    if output:
        try:
            output.write_text(document + "\n", encoding="utf-8")
        except OSError as e:
            console.print(f"[red]Error: {escape(str(e))}[/red]")
            raise typer.Exit(code=1)
        console.print(f"[green]Wrote {to.value} message to {output}[/green]")
        return

    typer.echo(document)


@app.command()
def inspect(
    source: Path = typer.Argument(
        ...,
        help="Message file (.json, .yaml or .yml)",
        exists=True,
        dir_okay=False,
    )
):
    """Show what a renderer would see in a message."""
    message = _load(source)

    summary = Table(show_header=True, header_style="bold cyan", title="Message")
    summary.add_column("Check", style="cyan")
    summary.add_column("Value", style="green")
    summary.add_row("type", message.type.value or "default")
    summary.add_row("empty", str(message.is_empty()))
    summary.add_row("base body", str(message.has_base_body()))
    summary.add_row("sections", str(len(message.sections)))
    summary.add_row("inputs", str(len(message.plaintext_inputs)))
    summary.add_row("timestamp", message.timestamp.isoformat() if message.timestamp else "-")
    console.print(summary)

    if not message.has_sections():
        return

    sections = Table(show_header=True, header_style="bold cyan", title="Sections")
    sections.add_column("#", style="dim", width=3)
    sections.add_column("Header", style="cyan")
    sections.add_column("Buttons (desc/plain)", style="yellow")
    sections.add_column("Selects", style="green")
    sections.add_column("Multi-select", style="green")
    sections.add_column("Bullets", style="green")
    sections.add_column("Context", style="green")

    for i, section in enumerate(message.sections, 1):
        with_desc = buttons_with_description(section.buttons)
        without_desc = buttons_without_description(section.buttons)
        sections.add_row(
            str(i),
            section.header or "-",
            f"{len(with_desc)}/{len(without_desc)}",
            str(are_options_defined(section.selects)),
            str(are_options_defined(section.multi_select)),
            str(are_items_defined(section.bullet_lists)),
            str(is_context_defined(section.context)),
        )
    console.print(sections)


@app.command()
def button(
    kind: ButtonKind = typer.Argument(..., help="Builder operation to use"),
    name: str = typer.Argument(..., help="Button display name"),
    cmd: str = typer.Option("", "--cmd", "-c", help="Command text"),
    desc: str = typer.Option("", "--desc", "-d", help="Description text"),
    url: str = typer.Option("", "--url", "-u", help="Link target"),
    style: ButtonStyle = typer.Option(
        ButtonStyle.DEFAULT,
        "--style",
        "-s",
        help="Button style: primary or danger (default when omitted)"
    ),
    fmt: OutputFormat = typer.Option(
        OutputFormat.JSON,
        "--format",
        "-f",
        help="Output format"
    )
):
    """Preview the button produced by a builder operation."""
    built = build_button(kind, name, cmd=cmd, desc=desc, url=url, style=style)
    codec = _output_codec(fmt)
    document = codec.encode(built).rstrip("\n")
    typer.echo(document)


def build_button(
    kind: ButtonKind,
    name: str,
    cmd: str = "",
    desc: str = "",
    url: str = "",
    style: ButtonStyle = ButtonStyle.DEFAULT
) -> Button:
    """Dispatch to the ButtonBuilder operation named by kind."""
    builder = ButtonBuilder()
    operations = {
        ButtonKind.COMMAND: lambda: builder.for_command(name, cmd, desc, style),
        ButtonKind.COMMAND_DESC_CMD: lambda: builder.for_command_with_desc_cmd(name, cmd, style),
        ButtonKind.COMMAND_BOLD_DESC: lambda: builder.for_command_with_bold_desc(name, desc, cmd, style),
        ButtonKind.COMMAND_NO_DESC: lambda: builder.for_command_without_desc(name, cmd, style),
        ButtonKind.URL: lambda: builder.for_url(name, url, style),
        ButtonKind.URL_BOLD_DESC: lambda: builder.for_url_with_bold_desc(name, desc, url, style),
        ButtonKind.URL_TEXT_DESC: lambda: builder.for_url_with_text_desc(name, desc, url, style),
        ButtonKind.DESCRIPTION_URL: lambda: builder.description_url(name, cmd, url, style),
    }
    return operations[kind]()


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
