"""Main CLI application for zmkview."""

import logging
import sys
from importlib.metadata import distribution
from typing import Annotated

import typer

from zmkview.cli.decorators import print_stack_trace_if_verbose
from zmkview.config.user_config import UserConfig, create_user_config
from zmkview.core.errors import ConfigError
from zmkview.core.logging import setup_logging


__all__ = ["AppContext", "app", "main", "__version__"]


__version__ = distribution("zmkview").version

logger = logging.getLogger(__name__)


class AppContext:
    """Application context for storing shared state."""

    def __init__(
        self,
        verbose: int = 0,
        log_file: str | None = None,
        config_file: str | None = None,
        no_emoji: bool = False,
    ):
        """Initialize AppContext.

        Args:
            verbose: Verbosity level
            log_file: Path to log file
            config_file: Path to configuration file
            no_emoji: Whether to disable emoji icons
        """
        self.verbose = verbose
        self.log_file = log_file
        self.config_file = config_file
        self.no_emoji = no_emoji
        self.user_config: UserConfig = create_user_config(cli_config_path=config_file)

    @property
    def use_emoji(self) -> bool:
        return not self.no_emoji

    @property
    def log_level(self) -> str:
        """Log level from CLI verbosity, falling back to the user config."""
        if self.verbose >= 2:
            return "DEBUG"
        if self.verbose == 1:
            return "INFO"
        return self.user_config.data.log_level


app = typer.Typer(
    name="zmkview",
    help=f"""zmkview ZMK Keymap Viewer v{__version__}

Parses ZMK .keymap files into per-layer key bindings for a 42-key
split keyboard.

Common workflows:
  • Check a keymap:   zmkview validate corne.keymap
  • Export as JSON:   zmkview parse corne.keymap --format json -o corne.json
  • Show a layer:     zmkview show corne.keymap --layer 1""",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: Annotated[
        int,
        typer.Option(
            "-v",
            "--verbose",
            count=True,
            help="Increase verbosity (-v=INFO, -vv=DEBUG)",
        ),
    ] = 0,
    log_file: Annotated[
        str | None, typer.Option("--log-file", help="Log to file")
    ] = None,
    config_file: Annotated[
        str | None,
        typer.Option("-c", "--config", help="Path to configuration file"),
    ] = None,
    no_emoji: Annotated[
        bool,
        typer.Option("--no-emoji", help="Disable emoji icons in output"),
    ] = False,
    version: Annotated[
        bool, typer.Option("--version", help="Show version and exit")
    ] = False,
) -> None:
    """zmkview ZMK Keymap Viewer."""
    if version:
        print(f"zmkview v{__version__}")
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        print(ctx.get_help())
        raise typer.Exit()

    try:
        app_context = AppContext(
            verbose=verbose,
            log_file=log_file,
            config_file=config_file,
            no_emoji=no_emoji,
        )
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        raise typer.Exit(1) from e
    ctx.obj = app_context

    config = app_context.user_config.data
    setup_logging(
        json_logs=config.json_logs,
        log_level_name=app_context.log_level,
        log_file=log_file or (str(config.log_file) if config.log_file else None),
    )


def main() -> int:
    """Main CLI entry point."""
    try:
        app()
        exit_code = 0
    except SystemExit as e:
        exit_code = e.code if isinstance(e.code, int) else 0
    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        print_stack_trace_if_verbose()
        exit_code = 1
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
