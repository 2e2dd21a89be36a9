"""ModCore composition root.

Owns the event bus and every registered config handler. Registration is
explicit: handlers are created by the caller and passed to register_config().
"""

import logging

from modcore.config.handler import ConfigHandler
from modcore.events.bus import EventBus
from modcore.events.events import ConfigChangedEvent, ConfigFileChangedEvent
from modcore.settings import Settings, get_settings

logger = logging.getLogger(__name__)


class ModCore:
    """Wires config handlers to the event bus and drives their lifecycle."""

    def __init__(self, settings: Settings | None = None, bus: EventBus | None = None) -> None:
        """Initialize the core.

        Args:
            settings: Settings to use; defaults to the cached global settings.
            bus: Event bus to register handlers on; a new one by default.
        """
        self.settings = settings or get_settings()
        self.bus = bus or EventBus()
        self.configs: list[ConfigHandler] = []

    def register_config(self, handler: ConfigHandler) -> ConfigHandler:
        """Register a config handler for events and lifecycle calls."""
        if handler in self.configs:
            return handler
        self.bus.register(handler)
        self.configs.append(handler)
        logger.debug(f"Registered config handler for {handler.mod_id}")
        return handler

    def get_configs(self, mod_id: str) -> list[ConfigHandler]:
        return [handler for handler in self.configs if handler.mod_id == mod_id]

    def initialize_configs(self) -> None:
        """Open every handler's config file under the configured directory."""
        for handler in self.configs:
            path = self.settings.config_path(handler.mod_id)
            logger.info(f"Loading config for {handler.mod_id} from {path}")
            handler.initialize(path, echo=self.settings.debug)

    def init(self) -> None:
        for handler in self.configs:
            handler.init_hook()

    def post_init(self) -> None:
        for handler in self.configs:
            handler.post_init_hook()

    def notify_config_changed(self, mod_id: str) -> None:
        """Tell a mod's handlers that values were edited in-game."""
        self.bus.post(ConfigChangedEvent(mod_id=mod_id))
        self._run_reload_hooks(mod_id)

    def reload_configs(self, mod_id: str) -> bool:
        """Re-read a mod's config files from disk.

        Returns:
            True if at least one handler reloaded the config.
        """
        event = self.bus.post(ConfigFileChangedEvent(mod_id=mod_id))
        if event.successful:
            self._run_reload_hooks(mod_id)
        else:
            logger.warning(f"No config handler reloaded configs for modid: {mod_id}")
        return event.successful

    def shutdown(self) -> None:
        for handler in self.configs:
            handler.close()

    def _run_reload_hooks(self, mod_id: str) -> None:
        for handler in self.get_configs(mod_id):
            if handler.should_hook_on_reload():
                handler.init_hook()
                handler.post_init_hook()
