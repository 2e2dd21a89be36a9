"""Config file commands."""

from pathlib import Path

import typer
from sqlalchemy.exc import SQLAlchemyError

from modcore.cli.display import display_config_category, display_error, display_info
from modcore.config.configuration import Configuration
from modcore.config.exceptions import ConfigError
from modcore.settings import get_settings

app = typer.Typer(help="Inspect mod config files")


@app.command()
def show(
    path: Path = typer.Argument(..., help="Config database file"),
    section: str = typer.Option(None, "--section", "-s", help="Only show this section"),
) -> None:
    """Show the sections and properties stored in a config file."""
    if not path.exists():
        display_error(f"Config file {path} does not exist")
        raise typer.Exit(1)

    try:
        config = Configuration(path, echo=get_settings().debug, read_only=True)
    except ConfigError as e:
        display_error(str(e))
        raise typer.Exit(1)
    except SQLAlchemyError:
        display_error(f"Config file {path} is not a readable database")
        raise typer.Exit(1)

    try:
        names = config.category_names()
        if section is not None:
            if not config.has_category(section):
                display_error(f"Section {section} does not exist!")
                raise typer.Exit(1)
            names = [section.lower()]

        if not names:
            display_info("No sections found.")
        for name in names:
            display_config_category(config.get_category(name))
    except SQLAlchemyError:
        display_error(f"Config file {path} is not a readable database")
        raise typer.Exit(1)
    finally:
        config.close()


@app.command("list")
def list_configs(
    directory: Path = typer.Option(None, "--dir", "-d", help="Config directory"),
) -> None:
    """List config files in the config directory."""
    directory = directory or get_settings().config_dir
    files = sorted(directory.glob("*.cfg.db")) if directory.is_dir() else []
    if not files:
        display_info(f"No config files in {directory}")
        return
    for file in files:
        typer.echo(f"{file.name.removesuffix('.cfg.db')}\t{file}")
