"""Item reference string codec.

Parses and writes the compact item reference grammar used in recipes and
config files:

    <name>[;<damage>][#<size>]

`name` is an ore dictionary name or an item registry name. A missing damage
means WILDCARD_VALUE; a missing size means 1. The literal string "null"
stands for no item.
"""

import re

from modcore.items.registry import (
    ItemRegistry,
    OreDictionary,
    item_registry,
    ore_dictionary,
)
from modcore.items.types import WILDCARD_VALUE, Block, Item, ItemStack


class ItemParseError(ValueError):
    """Error parsing an item reference string."""

    pass


GRAMMAR_HINT = (
    "Strings should be either an oredict name, "
    "or in the format objectname;damage (damage is optional)"
)

NULL_REFERENCE = "null"

DAMAGE_PATTERN = re.compile(r"[0-9]+")
SIZE_PATTERN = re.compile(r"[+-]?[0-9]+")


class ItemCodec:
    """Converts between item reference strings and item stacks."""

    def __init__(
        self,
        registry: ItemRegistry | None = None,
        ores: OreDictionary | None = None,
    ) -> None:
        self.registry = registry if registry is not None else item_registry
        self.ores = ores if ores is not None else ore_dictionary

    def parse_recipe_item(
        self, string: str, force_item_stack: bool = False
    ) -> ItemStack | str | None:
        """Parse a recipe item reference.

        Args:
            string: Reference in the form name[;damage].
            force_item_stack: Resolve ore names to the first registered stack
                instead of returning the ore name.

        Returns:
            None for "null", the ore name for ore references (unless forced),
            otherwise a one-item ItemStack.

        Raises:
            ItemParseError: If the damage is not a non-negative integer or the
                name is not a registered item, block or stack.

        Examples:
            >>> codec.parse_recipe_item("minecraft:stick;0")
            ItemStack(item=Item(unlocalized_name='item.stick', ...), stack_size=1, damage=0)
            >>> codec.parse_recipe_item("stickWood")
            'stickWood'
        """
        if string == NULL_REFERENCE:
            return None

        ores = self.ores.get_ores(string)
        if ores:
            if not force_item_stack:
                return string
            # First registered entry wins
            stack = ores[0].copy()
            stack.stack_size = 1
            return stack

        info = _split_segments(string)
        damage = WILDCARD_VALUE
        if len(info) > 1:
            damage = _parse_damage(info[1])

        target = self.registry.get_object(info[0]) if info[0] else None

        if isinstance(target, (Item, Block)):
            return ItemStack(item=target, stack_size=1, damage=damage)
        if isinstance(target, ItemStack):
            stack = target.copy()
            stack.set_item_damage(damage)
            return stack

        raise ItemParseError(f"{string} is not a valid string. {GRAMMAR_HINT}")

    def parse_item_stack(self, string: str) -> ItemStack | None:
        """Parse an item reference with an optional #size suffix.

        Ore names resolve to their first registered stack. The size is
        clamped to [1, max stack size].

        Raises:
            ItemParseError: If the size suffix is not an integer, or the rest
                of the string does not parse.

        Examples:
            >>> codec.parse_item_stack("minecraft:stick#5")
            ItemStack(item=Item(unlocalized_name='item.stick', ...), stack_size=5, damage=32767)
        """
        size = 1
        idx = string.find("#")

        if idx != -1:
            num = string[idx + 1 :]
            if not SIZE_PATTERN.fullmatch(num):
                raise ItemParseError(f"{num} is not a valid stack size")
            size = int(num)
            string = string[:idx]

        stack = self.parse_recipe_item(string, force_item_stack=True)
        if stack is None:
            return None
        stack.stack_size = max(1, min(stack.max_stack_size, size))
        return stack

    def item_stack_to_string(
        self, stack: ItemStack | None, damage: bool, size: bool
    ) -> str | None:
        """Get the reference string for a stack.

        Ore names are never produced.

        Args:
            stack: The stack to write.
            damage: Include ";damage".
            size: Include "#size".

        Returns:
            A string that parse_item_stack() turns back into an equal stack,
            or None for no stack.

        Raises:
            ValueError: If the stack's item is not registered.
        """
        if stack is None:
            return None

        base = self.registry.get_name(stack.item)
        if base is None:
            raise ValueError(f"{stack.item} is not registered in the item registry")

        if damage:
            base += f";{stack.damage}"

        if size:
            base += f"#{stack.stack_size}"

        return base


def _split_segments(string: str) -> list[str]:
    # Trailing empty segments are dropped: "stick;" is just "stick"
    info = string.split(";")
    while len(info) > 1 and not info[-1]:
        info.pop()
    return info


def _parse_damage(fragment: str) -> int:
    if not DAMAGE_PATTERN.fullmatch(fragment):
        raise ItemParseError(f"{fragment} is not a valid damage value")
    return int(fragment)


# Codec over the process-wide registries
default_codec = ItemCodec()


def parse_recipe_item(string: str, force_item_stack: bool = False) -> ItemStack | str | None:
    """Parse a recipe item reference with the global registries."""
    return default_codec.parse_recipe_item(string, force_item_stack)


def parse_item_stack(string: str) -> ItemStack | None:
    """Parse a sized item reference with the global registries."""
    return default_codec.parse_item_stack(string)


def item_stack_to_string(stack: ItemStack | None, damage: bool, size: bool) -> str | None:
    """Get the reference string for a stack with the global registries."""
    return default_codec.item_stack_to_string(stack, damage, size)
