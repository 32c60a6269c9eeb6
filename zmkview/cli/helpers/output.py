"""Themed console output helpers for CLI commands."""

from rich.console import Console
from rich.theme import Theme


ZMKVIEW_THEME = Theme(
    {
        "success": "bold green",
        "error": "bold red",
    }
)

ICONS = {
    "emoji": {"SUCCESS": "✅", "ERROR": "❌"},
    "text": {"SUCCESS": "[OK]", "ERROR": "[ERROR]"},
}


class ThemedConsole:
    """Console wrapper with the zmkview theme applied."""

    def __init__(self, use_emoji: bool = True) -> None:
        self.console = Console(theme=ZMKVIEW_THEME)
        self.icons = ICONS["emoji" if use_emoji else "text"]

    def _print(self, icon: str, message: str, style: str) -> None:
        # Messages carry file paths and key labels such as "[", not markup
        self.console.print(f"{self.icons[icon]} {message}", style=style, markup=False)

    def print_success(self, message: str) -> None:
        self._print("SUCCESS", message, "success")

    def print_error(self, message: str) -> None:
        self._print("ERROR", message, "error")


def get_themed_console(use_emoji: bool = True) -> ThemedConsole:
    """Create a themed console bound to the current stdout."""
    return ThemedConsole(use_emoji=use_emoji)


def print_success_message(message: str, use_emoji: bool = True) -> None:
    """Print a success message with a checkmark.

    Args:
        message: The message to print
        use_emoji: Whether to use emoji icons (default: True)
    """
    get_themed_console(use_emoji=use_emoji).print_success(message)


def print_error_message(message: str, use_emoji: bool = True) -> None:
    """Print an error message with an X symbol.

    Args:
        message: The message to print
        use_emoji: Whether to use emoji icons (default: True)
    """
    get_themed_console(use_emoji=use_emoji).print_error(message)


def print_list_item(item: str) -> None:
    """Print a bulleted list item."""
    Console(theme=ZMKVIEW_THEME).print(f"  • {item}", markup=False)
