"""Utility layer for game mod frameworks.

Provides typed config handlers and an item reference codec.

Usage:
    >>> from modcore import ModCore
    >>> from modcore.items import parse_item_stack
    >>> core = ModCore()
    >>> core.register_config(MyConfigHandler("mymod"))
    >>> core.initialize_configs()
    >>> stack = parse_item_stack("minecraft:stick;0#5")
"""

from modcore.core import ModCore

__all__ = ["ModCore"]
