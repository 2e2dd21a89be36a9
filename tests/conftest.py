"""Core test fixtures for modcore tests."""

import pytest

from modcore.config.configuration import Configuration
from modcore.items.codec import ItemCodec
from modcore.items.registry import ItemRegistry, OreDictionary, item_registry, ore_dictionary
from modcore.items.vanilla import register_vanilla
from tests.factories import SampleConfigHandler


@pytest.fixture
def config() -> Configuration:
    """Create an in-memory config backend."""
    configuration = Configuration()
    yield configuration
    configuration.close()


@pytest.fixture
def config_path(tmp_path):
    """Path for a config database file in a temp dir."""
    return tmp_path / "config" / "testmod.cfg.db"


@pytest.fixture
def handler() -> SampleConfigHandler:
    """Create an initialized in-memory handler with 'general' and 'client' sections."""
    config_handler = SampleConfigHandler("testmod")
    config_handler.initialize(None)
    yield config_handler
    config_handler.close()


@pytest.fixture
def registry() -> ItemRegistry:
    """Create an item registry with the vanilla objects."""
    item_reg = ItemRegistry()
    register_vanilla(item_reg, OreDictionary())
    return item_reg


@pytest.fixture
def ores(registry: ItemRegistry) -> OreDictionary:
    """Create an ore dictionary with the vanilla ore names."""
    ore_dict = OreDictionary()
    register_vanilla(registry, ore_dict)
    return ore_dict


@pytest.fixture
def codec(registry: ItemRegistry, ores: OreDictionary) -> ItemCodec:
    """Create a codec over isolated registries."""
    return ItemCodec(registry, ores)


@pytest.fixture
def global_registries():
    """Fill the process-wide registries with vanilla objects, cleared afterwards."""
    item_registry.clear()
    ore_dictionary.clear()
    register_vanilla()
    yield item_registry, ore_dictionary
    item_registry.clear()
    ore_dictionary.clear()
