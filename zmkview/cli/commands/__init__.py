"""CLI command registration."""

import typer

from .keymap import register_commands as register_keymap_commands


def register_all_commands(app: typer.Typer) -> None:
    """Register all CLI commands with the main app."""
    register_keymap_commands(app)


__all__ = ["register_all_commands"]
