"""Tests for the ModCore composition root."""

from unittest.mock import MagicMock

import pytest

from modcore.core import ModCore
from modcore.events.bus import EventBus
from modcore.settings import Settings
from tests.factories import SampleConfigHandler


@pytest.fixture
def core(tmp_path) -> ModCore:
    """Create a ModCore writing configs under a temp dir."""
    mod_core = ModCore(settings=Settings(_env_file=None, config_dir=tmp_path / "config"))
    yield mod_core
    mod_core.shutdown()


class TestRegistration:
    """Tests for registering config handlers."""

    def test_register_adds_to_bus(self, core: ModCore):
        config_handler = core.register_config(SampleConfigHandler("a"))
        assert config_handler in core.bus.listeners
        assert core.configs == [config_handler]

    def test_register_twice_is_noop(self, core: ModCore):
        config_handler = SampleConfigHandler("a")
        core.register_config(config_handler)
        core.register_config(config_handler)
        assert core.configs == [config_handler]
        assert len(core.bus.listeners) == 1

    def test_constructing_handler_registers_nothing(self, core: ModCore):
        """Handlers only join the bus through register_config()."""
        SampleConfigHandler("a")
        assert core.bus.listeners == []

    def test_get_configs_by_mod_id(self, core: ModCore):
        a = core.register_config(SampleConfigHandler("a"))
        core.register_config(SampleConfigHandler("b"))
        assert core.get_configs("a") == [a]

    def test_custom_bus(self, tmp_path):
        bus = EventBus()
        mod_core = ModCore(settings=Settings(_env_file=None, config_dir=tmp_path), bus=bus)
        assert mod_core.bus is bus


class TestLifecycle:
    """Tests for initializing and reloading registered handlers."""

    def test_initialize_configs_uses_config_dir(self, core: ModCore, tmp_path):
        config_handler = core.register_config(SampleConfigHandler("testmod"))

        core.initialize_configs()

        assert config_handler.config.path == tmp_path / "config" / "testmod.cfg.db"
        assert config_handler.config.path.exists()

    def test_init_and_post_init_hooks(self, core: ModCore):
        config_handler = core.register_config(SampleConfigHandler("testmod"))
        core.initialize_configs()
        config_handler.calls.clear()

        core.init()
        core.post_init()

        assert config_handler.calls == ["init_hook", "post_init_hook"]

    def test_reload_configs_success(self, core: ModCore):
        config_handler = core.register_config(SampleConfigHandler("testmod"))
        core.initialize_configs()
        config_handler.calls.clear()

        assert core.reload_configs("testmod") is True
        assert config_handler.calls == ["reload_ingame", "init_hook", "post_init_hook"]

    def test_reload_configs_unknown_mod(self, core: ModCore, caplog):
        core.register_config(SampleConfigHandler("testmod"))
        core.initialize_configs()

        with caplog.at_level("WARNING", logger="modcore.core"):
            assert core.reload_configs("othermod") is False
        assert "othermod" in caplog.text

    def test_reload_skips_hooks_when_disabled(self, core: ModCore):
        config_handler = SampleConfigHandler("testmod")
        config_handler.should_hook_on_reload = MagicMock(return_value=False)
        core.register_config(config_handler)
        core.initialize_configs()
        config_handler.calls.clear()

        core.reload_configs("testmod")

        assert config_handler.calls == ["reload_ingame"]

    def test_notify_config_changed(self, core: ModCore):
        config_handler = core.register_config(SampleConfigHandler("testmod"))
        core.initialize_configs()
        config_handler.calls.clear()

        core.notify_config_changed("testmod")

        assert config_handler.calls == [
            "reload_non_ingame",
            "reload_ingame",
            "init_hook",
            "post_init_hook",
        ]
