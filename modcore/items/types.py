"""Item type definitions.

Items and blocks are immutable registry objects; an ItemStack is a mutable
amount of one of them with a damage (metadata) value.
"""

from dataclasses import dataclass

# Damage value meaning "any damage"
WILDCARD_VALUE = 32767

DEFAULT_MAX_STACK_SIZE = 64


@dataclass(frozen=True)
class Item:
    """An item type.

    Attributes:
        unlocalized_name: Translation key for the item name.
        max_stack_size: Largest stack this item can form.
    """

    unlocalized_name: str
    max_stack_size: int = DEFAULT_MAX_STACK_SIZE


@dataclass(frozen=True)
class Block:
    """A block type. Stacks of a block use the block itself as their item.

    Attributes:
        unlocalized_name: Translation key for the block name.
        max_stack_size: Largest stack the block's item form can make.
    """

    unlocalized_name: str
    max_stack_size: int = DEFAULT_MAX_STACK_SIZE


@dataclass
class ItemStack:
    """A stack of items.

    Attributes:
        item: The item (or block) in the stack.
        stack_size: Number of items.
        damage: Damage or metadata value, WILDCARD_VALUE for any.
    """

    item: Item | Block
    stack_size: int = 1
    damage: int = 0

    @property
    def max_stack_size(self) -> int:
        return self.item.max_stack_size

    @property
    def is_wildcard(self) -> bool:
        return self.damage == WILDCARD_VALUE

    def set_item_damage(self, damage: int) -> None:
        self.damage = damage

    def copy(self) -> "ItemStack":
        return ItemStack(item=self.item, stack_size=self.stack_size, damage=self.damage)
