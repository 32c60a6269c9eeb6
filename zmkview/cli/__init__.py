"""CLI package for zmkview."""

from zmkview.cli.app import app, main
from zmkview.cli.commands import register_all_commands


register_all_commands(app)

__all__ = ["app", "main"]
