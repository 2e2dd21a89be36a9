"""Items, registries and the item reference codec.

Usage:
    >>> from modcore.items import parse_item_stack, item_stack_to_string
    >>> stack = parse_item_stack("minecraft:stick;2#3")
    >>> item_stack_to_string(stack, damage=True, size=True)
    'minecraft:stick;2#3'
"""

# Types
from modcore.items.types import (
    DEFAULT_MAX_STACK_SIZE,
    WILDCARD_VALUE,
    Block,
    Item,
    ItemStack,
)

# Registries
from modcore.items.registry import (
    ItemRegistry,
    OreDictionary,
    ensure_namespaced,
    item_registry,
    ore_dictionary,
)

# Codec
from modcore.items.codec import (
    ItemCodec,
    ItemParseError,
    default_codec,
    item_stack_to_string,
    parse_item_stack,
    parse_recipe_item,
)

# Built-ins
from modcore.items.vanilla import register_vanilla

# Serialization
from modcore.items.serialization import (
    ItemStackField,
    RecipeItemField,
    dump_json,
    load_json,
)

__all__ = [
    # Types
    "DEFAULT_MAX_STACK_SIZE",
    "WILDCARD_VALUE",
    "Block",
    "Item",
    "ItemStack",
    # Registries
    "ItemRegistry",
    "OreDictionary",
    "ensure_namespaced",
    "item_registry",
    "ore_dictionary",
    # Codec
    "ItemCodec",
    "ItemParseError",
    "default_codec",
    "item_stack_to_string",
    "parse_item_stack",
    "parse_recipe_item",
    # Built-ins
    "register_vanilla",
    # Serialization
    "ItemStackField",
    "RecipeItemField",
    "dump_json",
    "load_json",
]
