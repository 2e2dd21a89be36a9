"""Item registry and ore dictionary.

The item registry maps namespaced names ("minecraft:stick") to registry
objects and back. The ore dictionary is an alias table: one name maps to
any number of item stacks ("ingotIron" -> every iron ingot from every mod).
"""

import logging
from typing import Any

from modcore.items.types import WILDCARD_VALUE, Block, Item, ItemStack

logger = logging.getLogger(__name__)

DEFAULT_NAMESPACE = "minecraft"


def ensure_namespaced(name: str) -> str:
    """Add the default namespace to names that have none.

    Examples:
        >>> ensure_namespaced("stick")
        'minecraft:stick'
        >>> ensure_namespaced("mymod:gear")
        'mymod:gear'
    """
    return name if ":" in name else f"{DEFAULT_NAMESPACE}:{name}"


class ItemRegistry:
    """Name <-> object lookup for items, blocks and pre-built stacks."""

    def __init__(self) -> None:
        self._objects: dict[str, Any] = {}

    def register(self, name: str, obj: Any) -> Any:
        """Register an object under a name.

        Args:
            name: Registry name; gets the default namespace if it has none.
            obj: Usually an Item, Block or ItemStack.

        Returns:
            The registered object.

        Raises:
            ValueError: If the name is already taken.
        """
        name = ensure_namespaced(name)
        if name in self._objects:
            raise ValueError(f"Registry name {name} is already registered")
        self._objects[name] = obj
        logger.debug(f"Registered {name}")
        return obj

    def get_object(self, name: str) -> Any | None:
        return self._objects.get(ensure_namespaced(name))

    def get_name(self, obj: Any) -> str | None:
        """Get the registry name of an object, or None if unregistered."""
        for name, registered in self._objects.items():
            if registered is obj:
                return name
        # Frozen items and blocks compare by value
        if isinstance(obj, (Item, Block)):
            for name, registered in self._objects.items():
                if registered == obj:
                    return name
        return None

    def names(self) -> list[str]:
        return list(self._objects)

    def clear(self) -> None:
        self._objects.clear()

    def __contains__(self, name: str) -> bool:
        return ensure_namespaced(name) in self._objects

    def __len__(self) -> int:
        return len(self._objects)


class OreDictionary:
    """Alias table from ore names to item stacks."""

    def __init__(self) -> None:
        self._ores: dict[str, list[ItemStack]] = {}

    def register_ore(self, name: str, ore: Item | Block | ItemStack) -> None:
        """Add an entry under an ore name.

        Items and blocks are registered as one-item stacks with wildcard
        damage; stacks are copied.
        """
        if isinstance(ore, ItemStack):
            stack = ore.copy()
        else:
            stack = ItemStack(item=ore, stack_size=1, damage=WILDCARD_VALUE)
        self._ores.setdefault(name, []).append(stack)

    def get_ores(self, name: str) -> list[ItemStack]:
        """Get every stack registered under an ore name, in registration order."""
        return list(self._ores.get(name, []))

    def get_ore_names(self) -> list[str]:
        return list(self._ores)

    def clear(self) -> None:
        self._ores.clear()


# Process-wide registries used by the module-level codec functions
item_registry = ItemRegistry()
ore_dictionary = OreDictionary()
