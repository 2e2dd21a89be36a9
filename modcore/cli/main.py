"""Main CLI application for modcore."""

import logging

import typer
from rich.logging import RichHandler

from modcore.cli.commands import config, items
from modcore.settings import get_settings

# Create main app
app = typer.Typer(
    name="modcore",
    help="Config and item reference tools for mods",
    add_completion=False,
)

# Add sub-commands
app.add_typer(items.app, name="items")
app.add_typer(config.app, name="config")


def configure_logging(level: str) -> None:
    """Send log records to the console through rich."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)],
        force=True,
    )


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output"),
) -> None:
    """modcore - config handler and item reference tools."""
    configure_logging("DEBUG" if verbose else get_settings().log_level)


if __name__ == "__main__":
    app()
