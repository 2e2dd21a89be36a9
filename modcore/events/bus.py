"""Config event listener protocol and the synchronous event bus.

The ConfigListener protocol defines the interface for receiving config
events. Config handlers implement it; the bus dispatches to every
registered listener in registration order.
"""

import logging
from typing import Protocol, runtime_checkable

from modcore.events.events import ConfigChangedEvent, ConfigFileChangedEvent

logger = logging.getLogger(__name__)


@runtime_checkable
class ConfigListener(Protocol):
    """Protocol for config event listeners."""

    def on_config_changed(self, event: ConfigChangedEvent) -> None:
        """Called when config values were changed in-game."""
        ...

    def on_config_file_changed(self, event: ConfigFileChangedEvent) -> None:
        """Called when a config file changed on disk."""
        ...


class EventBus:
    """Dispatches config events to registered listeners.

    Dispatch is synchronous and single-threaded; listener exceptions
    propagate to the poster.
    """

    def __init__(self) -> None:
        self.listeners: list[ConfigListener] = []

    def register(self, listener: ConfigListener) -> None:
        """Register a listener. Registering the same listener twice is a no-op."""
        if any(existing is listener for existing in self.listeners):
            return
        self.listeners.append(listener)

    def unregister(self, listener: ConfigListener) -> None:
        self.listeners = [existing for existing in self.listeners if existing is not listener]

    def post(
        self, event: ConfigChangedEvent | ConfigFileChangedEvent
    ) -> ConfigChangedEvent | ConfigFileChangedEvent:
        """Dispatch an event to all listeners and return it."""
        logger.debug(f"Posting {type(event).__name__} for {event.mod_id}")
        for listener in self.listeners:
            if isinstance(event, ConfigFileChangedEvent):
                listener.on_config_file_changed(event)
            else:
                listener.on_config_changed(event)
        return event
