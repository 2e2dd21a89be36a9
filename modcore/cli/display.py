"""Rich display helpers for CLI output."""

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from modcore.config.models import ConfigCategory
from modcore.items.types import ItemStack


# Shared console instance
console = Console()


def display_error(message: str) -> None:
    """Display error message.

    Args:
        message: Error message.
    """
    console.print(f"[bold red]Error:[/bold red] {escape(message)}", soft_wrap=True)


def display_success(message: str) -> None:
    console.print(f"[bold green]{escape(message)}[/bold green]", soft_wrap=True)


def display_info(message: str) -> None:
    console.print(f"[dim]{escape(message)}[/dim]", soft_wrap=True)


def display_item_stack(stack: ItemStack, registry_name: str | None) -> None:
    """Display a parsed item stack.

    Args:
        stack: The stack to show.
        registry_name: Registry name of the stack's item.
    """
    table = Table(title="Item Stack", box=box.ROUNDED)
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Type", style="white")
    table.add_column("Damage", justify="right", style="yellow")
    table.add_column("Size", justify="right", style="green")
    table.add_column("Max", justify="right", style="dim")

    damage = "[magenta]any[/magenta]" if stack.is_wildcard else str(stack.damage)
    table.add_row(
        escape(registry_name or "?"),
        type(stack.item).__name__,
        damage,
        str(stack.stack_size),
        str(stack.max_stack_size),
    )

    console.print(table)


def display_config_category(category: ConfigCategory) -> None:
    """Display every property in a config category.

    Args:
        category: Category to show.
    """
    if not category.properties:
        console.print(f"[dim]Section '{escape(category.name)}' is empty.[/dim]")
        return

    title = category.name if not category.comment else f"{category.name} - {category.comment}"
    table = Table(title=escape(title), box=box.ROUNDED)
    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("Type", style="blue")
    table.add_column("Value", style="white")
    table.add_column("Default", style="dim")
    table.add_column("Bounds", style="yellow")
    table.add_column("Restart", style="red")

    for prop in category.properties:
        bounds = "-"
        if prop.min_value is not None or prop.max_value is not None:
            bounds = f"{_format_number(prop.min_value)}..{_format_number(prop.max_value)}"

        restart = "-"
        if prop.requires_game_restart:
            restart = "game"
        elif prop.requires_world_restart:
            restart = "world"

        table.add_row(
            escape(prop.key),
            prop.kind.value,
            escape(repr(prop.value)),
            escape(repr(prop.default)),
            bounds,
            restart,
        )

    console.print(table)


def _format_number(value: float | None) -> str:
    if value is None:
        return "?"
    return str(int(value)) if value.is_integer() else str(value)
