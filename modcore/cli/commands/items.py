"""Item reference commands."""

import typer

from modcore.cli.display import console, display_error, display_info, display_item_stack
from modcore.items import (
    ItemParseError,
    default_codec,
    item_registry,
    register_vanilla,
)

app = typer.Typer(help="Parse and format item reference strings")


@app.command()
def parse(
    reference: str = typer.Argument(..., help="Reference like minecraft:stick;0#5"),
    force: bool = typer.Option(
        False, "--force", "-f", help="Resolve ore names to their first item"
    ),
) -> None:
    """Parse an item reference string."""
    register_vanilla()
    try:
        if "#" in reference:
            result = default_codec.parse_item_stack(reference)
        else:
            result = default_codec.parse_recipe_item(reference, force_item_stack=force)
    except ItemParseError as e:
        display_error(str(e))
        raise typer.Exit(1)

    if result is None:
        display_info("null (no item)")
    elif isinstance(result, str):
        display_info(f"Ore dictionary name: {result}")
    else:
        display_item_stack(result, item_registry.get_name(result.item))


@app.command("format")
def format_reference(
    reference: str = typer.Argument(..., help="Reference to normalize"),
    damage: bool = typer.Option(True, "--damage/--no-damage", help="Include damage"),
    size: bool = typer.Option(True, "--size/--no-size", help="Include stack size"),
) -> None:
    """Normalize an item reference to name;damage#size."""
    register_vanilla()
    try:
        stack = default_codec.parse_item_stack(reference)
    except ItemParseError as e:
        display_error(str(e))
        raise typer.Exit(1)

    if stack is None:
        display_info("null (no item)")
        return
    console.print(default_codec.item_stack_to_string(stack, damage, size), markup=False, soft_wrap=True)
