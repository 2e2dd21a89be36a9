"""Built-in vanilla items, blocks and ore names.

Used by the CLI and handy for tests; mods register their own objects on top.
"""

from modcore.items.registry import (
    ItemRegistry,
    OreDictionary,
    item_registry,
    ore_dictionary,
)
from modcore.items.types import Block, Item, ItemStack

# name -> (unlocalized name, max stack size)
VANILLA_ITEMS: dict[str, tuple[str, int]] = {
    "stick": ("item.stick", 64),
    "iron_ingot": ("item.ingotIron", 64),
    "gold_ingot": ("item.ingotGold", 64),
    "diamond": ("item.diamond", 64),
    "dye": ("item.dyePowder", 64),
    "ender_pearl": ("item.enderPearl", 16),
    "snowball": ("item.snowball", 16),
    "diamond_sword": ("item.swordDiamond", 1),
}

VANILLA_BLOCKS: dict[str, tuple[str, int]] = {
    "stone": ("tile.stone", 64),
    "planks": ("tile.wood", 64),
    "log": ("tile.log", 64),
    "wool": ("tile.cloth", 64),
}

# ore name -> registry names
VANILLA_ORES: dict[str, list[str]] = {
    "stickWood": ["stick"],
    "ingotIron": ["iron_ingot"],
    "ingotGold": ["gold_ingot"],
    "gemDiamond": ["diamond"],
    "plankWood": ["planks"],
    "logWood": ["log"],
}


def register_vanilla(
    registry: ItemRegistry | None = None, ores: OreDictionary | None = None
) -> None:
    """Register vanilla objects and ore names.

    Safe to call more than once: names already present are skipped.
    """
    registry = registry if registry is not None else item_registry
    ores = ores if ores is not None else ore_dictionary

    for name, (unlocalized, max_size) in VANILLA_ITEMS.items():
        if name not in registry:
            registry.register(name, Item(unlocalized, max_size))
    for name, (unlocalized, max_size) in VANILLA_BLOCKS.items():
        if name not in registry:
            registry.register(name, Block(unlocalized, max_size))

    # Pre-built stack: lapis is blue dye
    if "lapis_lazuli" not in registry:
        registry.register("lapis_lazuli", ItemStack(registry.get_object("dye"), damage=4))

    known = set(ores.get_ore_names())
    for ore_name, names in VANILLA_ORES.items():
        if ore_name in known:
            continue
        for name in names:
            ores.register_ore(ore_name, registry.get_object(name))

