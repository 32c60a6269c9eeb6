"""CLI helper utilities."""

from .output import (
    ThemedConsole,
    get_themed_console,
    print_error_message,
    print_list_item,
    print_success_message,
)


__all__ = [
    "ThemedConsole",
    "get_themed_console",
    "print_error_message",
    "print_list_item",
    "print_success_message",
]
