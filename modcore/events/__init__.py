"""Config events and the event bus."""

from modcore.events.events import ConfigChangedEvent, ConfigFileChangedEvent
from modcore.events.bus import ConfigListener, EventBus

__all__ = [
    # Events
    "ConfigChangedEvent",
    "ConfigFileChangedEvent",
    # Bus
    "ConfigListener",
    "EventBus",
]
