"""Keymap parsing, validation and display commands."""

import json
import logging
from collections import Counter
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from zmkview.cli.decorators import handle_errors
from zmkview.cli.helpers import (
    print_error_message,
    print_list_item,
    print_success_message,
)
from zmkview.keymap import (
    CORNE_42,
    KeymapConfig,
    ZmkKeymapParser,
    get_key_id,
    get_supported_bindings,
)


logger = logging.getLogger(__name__)

KeymapFileArgument = Annotated[
    Path,
    typer.Argument(
        help="Path to ZMK keymap file (.keymap / .dtsi)",
        file_okay=True,
        dir_okay=False,
    ),
]


def _create_parser(ctx: typer.Context) -> ZmkKeymapParser:
    """Build a parser using the metadata defaults from the user config."""
    metadata = ctx.obj.user_config.keymap_metadata(CORNE_42.total_keys)
    return ZmkKeymapParser(metadata=metadata)


def _use_emoji(ctx: typer.Context) -> bool:
    return bool(ctx.obj.use_emoji) if ctx.obj else True


def build_layer_table(keymap: KeymapConfig, layer_id: str) -> Table:
    """Render one layer as a rows x columns grid of key labels."""
    layer = keymap.get_layer(layer_id)
    if layer is None:
        raise typer.BadParameter(f"Layer {layer_id!r} not found")

    table = Table(
        title=Text(f"Layer {layer.id}: {layer.name}"), show_lines=True
    )
    table.add_column("")
    for col in range(CORNE_42.columns):
        table.add_column(f"C{col}", justify="center")

    for row in range(CORNE_42.rows):
        cells = []
        for col in range(CORNE_42.columns):
            binding = layer.keys.get(get_key_id(layer.id, row, col))
            cells.append(Text(binding.display_label if binding else ""))
        table.add_row(f"R{row}", *cells)
    return table


@handle_errors
def parse(
    ctx: typer.Context,
    keymap_file: KeymapFileArgument,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write JSON to this file"),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text or json"),
    ] = "text",
) -> None:
    """Parse a ZMK keymap file into layers of key bindings.

    Examples:
        zmkview parse corne.keymap
        zmkview parse corne.keymap --format json -o corne.json
    """
    if output_format not in ("text", "json"):
        raise typer.BadParameter("Format must be 'text' or 'json'")

    keymap = _create_parser(ctx).parse_path(keymap_file)
    logger.info("Parsed %s: %d layers", keymap_file, len(keymap.layers))

    if output is not None:
        output.write_text(
            json.dumps(keymap.to_dict(), indent=2, ensure_ascii=False) + "\n",
            encoding="utf-8",
        )
        print_success_message(
            f"Wrote {len(keymap.layers)} layers to {output}", use_emoji=_use_emoji(ctx)
        )
        return

    if output_format == "json":
        print(json.dumps(keymap.to_dict(), indent=2, ensure_ascii=False))
        return

    console = Console()
    table = Table(title=Text(keymap.metadata.name))
    table.add_column("ID", justify="right")
    table.add_column("Name")
    table.add_column("Keys", justify="right")
    table.add_column("Types")
    for layer in keymap.layers:
        types = Counter(str(binding.type) for binding in layer.keys.values())
        table.add_row(
            layer.id,
            Text(layer.name),
            str(len(layer.keys)),
            ", ".join(f"{name}={count}" for name, count in sorted(types.items())),
        )
    console.print(table)


@handle_errors
def validate(ctx: typer.Context, keymap_file: KeymapFileArgument) -> None:
    """Check a keymap file and list every structural problem found."""
    result = _create_parser(ctx).validate_path(keymap_file)
    use_emoji = _use_emoji(ctx)

    if result.valid:
        print_success_message(f"{keymap_file} is a valid keymap", use_emoji=use_emoji)
        return

    print_error_message(
        f"{keymap_file} has {len(result.errors)} problem(s)", use_emoji=use_emoji
    )
    for error in result.errors:
        print_list_item(error)
    raise typer.Exit(1)


@handle_errors
def show(
    ctx: typer.Context,
    keymap_file: KeymapFileArgument,
    layer: Annotated[
        str,
        typer.Option("--layer", "-l", help="Layer id to display"),
    ] = "0",
) -> None:
    """Display one layer of a keymap as a key grid."""
    keymap = _create_parser(ctx).parse_path(keymap_file)
    Console().print(build_layer_table(keymap, layer))


def bindings() -> None:
    """List the supported ZMK binding syntaxes."""
    for description in get_supported_bindings():
        print_list_item(description)


def register_commands(app: typer.Typer) -> None:
    """Register keymap commands with the main app."""
    app.command(name="parse")(parse)
    app.command(name="validate")(validate)
    app.command(name="show")(show)
    app.command(name="bindings")(bindings)
