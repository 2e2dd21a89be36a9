"""Event dataclasses posted on the mod event bus."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class ConfigChangedEvent:
    """Posted after a mod's config values were edited in-game."""

    mod_id: str
    timestamp: datetime = field(default_factory=datetime.now)


@dataclass
class ConfigFileChangedEvent:
    """Posted when a mod's config file changed on disk and should be re-read.

    Listeners that handle the event mark it with set_successful() so the
    sender can report whether any handler picked it up.
    """

    mod_id: str
    successful: bool = False
    timestamp: datetime = field(default_factory=datetime.now)

    def set_successful(self) -> None:
        self.successful = True
