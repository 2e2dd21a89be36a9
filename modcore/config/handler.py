"""Abstract config handler.

A ConfigHandler owns one Configuration for one mod. Subclasses add their
sections in init() and read their values in the two reload methods:

    class MyConfig(ConfigHandler):
        def init(self) -> None:
            self.add_section("general", comment="General settings")

        def reload_non_ingame_configs(self) -> None:
            self.max_things = self.get_value("maxThings", 5, bound=Bound.of(1, 10))

        def reload_ingame_configs(self) -> None:
            self.speed = self.get_value("speed", Single(1.5))
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, TypeVar

from modcore.config.configuration import Configuration
from modcore.config.exceptions import (
    ConfigError,
    NoActiveSectionError,
    SectionNotFoundError,
)
from modcore.config.models import ConfigCategory, ConfigProperty
from modcore.config.values import Bound, RestartRequirement, Single, ValueKind
from modcore.events.events import ConfigChangedEvent, ConfigFileChangedEvent

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Section:
    """A section in a config handler.

    Attributes:
        name: Section name, matched case-insensitively.
        lang: Language key for the section title ("section." + lang key).
        comment: Optional comment written to the config.
    """

    name: str
    lang: str
    comment: str | None = None

    @property
    def lc(self) -> str:
        return self.name.lower()


# Reads a property as each value kind
_READERS: dict[ValueKind, Callable[[ConfigProperty], Any]] = {
    ValueKind.INTEGER: lambda prop: prop.get_int(),
    ValueKind.BOOLEAN: lambda prop: prop.get_boolean(),
    ValueKind.STRING: lambda prop: prop.get_string(),
    ValueKind.INTEGER_LIST: lambda prop: prop.get_int_list(),
    ValueKind.STRING_LIST: lambda prop: prop.get_string_list(),
    ValueKind.SINGLE: lambda prop: Single(prop.get_double()),
    ValueKind.DOUBLE: lambda prop: prop.get_double(),
}


class ConfigHandler(ABC):
    """Base class for mod config handlers.

    Handlers do not register themselves anywhere; pass them to
    ModCore.register_config() to receive config events.
    """

    def __init__(self, mod_id: str) -> None:
        self._mod_id = mod_id
        self._config: Configuration | None = None
        self._sections: list[Section] = []
        self._active_section: Section | None = None

    @property
    def mod_id(self) -> str:
        return self._mod_id

    @property
    def config(self) -> Configuration:
        if self._config is None:
            raise ConfigError(f"Config handler for {self._mod_id} is not initialized")
        return self._config

    @property
    def sections(self) -> tuple[Section, ...]:
        return tuple(self._sections)

    @property
    def active_section(self) -> Section | None:
        return self._active_section

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def initialize(self, path: Path | str | None, echo: bool = False) -> None:
        """Open the config file, set up sections and read every value.

        Args:
            path: Config database file. None keeps the config in memory.
            echo: Log SQL issued by the backend.
        """
        self._config = Configuration(path, echo=echo)
        self.init()
        self._reload_all_configs()
        self.save_config_file()

    def load_config_file(self) -> None:
        self.config.load()

    def save_config_file(self) -> None:
        """Save the config, but only if something changed."""
        if self.config.has_changed():
            self.config.save()

    def close(self) -> None:
        if self._config is not None:
            self._config.close()
            self._config = None

    def on_config_changed(self, event: ConfigChangedEvent) -> None:
        if event.mod_id == self._mod_id:
            logger.info(f"Reloading all configs for modid: {self._mod_id}")
            self._reload_all_configs()
            self.save_config_file()

    def on_config_file_changed(self, event: ConfigFileChangedEvent) -> None:
        if event.mod_id == self._mod_id:
            logger.info(f"Reloading ingame configs for modid: {self._mod_id}")
            self.load_config_file()
            self.reload_ingame_configs()
            event.set_successful()
            self.save_config_file()

    def _reload_all_configs(self) -> None:
        self.reload_non_ingame_configs()
        self.reload_ingame_configs()

    @abstractmethod
    def init(self) -> None:
        """Called after the config is loaded, before values are read.

        Add sections and do other setup here.
        """

    @abstractmethod
    def reload_non_ingame_configs(self) -> None:
        """Refresh values that can only be loaded when NOT in-game.

        reload_ingame_configs() is called right after this one; do not read
        the same values in both.
        """

    @abstractmethod
    def reload_ingame_configs(self) -> None:
        """Refresh values that can be changed while in-game."""

    def should_hook_on_reload(self) -> bool:
        """Whether init_hook() and post_init_hook() also run on config reloads."""
        return True

    def init_hook(self) -> None:
        pass

    def post_init_hook(self) -> None:
        pass

    def get_category(self, name: str) -> ConfigCategory:
        return self.config.get_category(name)

    # =========================================================================
    # Sections
    # =========================================================================

    def add_section(
        self, name: str, lang_key: str | None = None, comment: str | None = None
    ) -> Section:
        """Add a section to the config.

        The first section added becomes the active one.

        Args:
            name: Section name. Also the language key if none is given.
            lang_key: Language key for the section title in a config GUI.
            comment: Section comment.

        Returns:
            The new Section.
        """
        section = Section(name=name, lang=f"section.{lang_key or name}", comment=comment)

        if self._active_section is None and not self._sections:
            self._active_section = section

        if comment is not None:
            self.config.add_category_comment(name, comment)

        self._sections.append(section)
        return section

    def activate_section(self, section: Section | str) -> None:
        """Make a section the active one.

        Raises:
            SectionNotFoundError: If a name is given and no section has it.
        """
        if isinstance(section, str):
            found = self.get_section_by_name(section)
            if found is None:
                raise SectionNotFoundError(section)
            section = found
        self._active_section = section

    def get_section_by_name(self, name: str) -> Section | None:
        """Find a section by name, ignoring case."""
        for section in self._sections:
            if section.lc == name.lower():
                return section
        return None

    # =========================================================================
    # Values
    # =========================================================================

    def get_value(
        self,
        key: str,
        default: T,
        comment: str | None = None,
        restart: RestartRequirement = RestartRequirement.NONE,
        bound: Bound | None = None,
        section: Section | str | None = None,
    ) -> T:
        """Get a value from this config handler, creating it if needed.

        Args:
            key: Name of the key for this property.
            default: Default value; its type decides the value type.
            comment: Comment to put on the property.
            restart: Restart requirement of the property.
            bound: Bounds to set on a numeric property.
            section: Section to read from instead of the active one.

        Returns:
            The value of the property, of the same type as `default`.

        Raises:
            UnsupportedValueTypeError: If default is not a config value type.
            NoActiveSectionError: If there is no active section.
        """
        prop = self.get_property(key, default, restart, section=section)
        prop.comment = comment
        return self._read(prop, default, bound)

    def read_property(self, prop: ConfigProperty, default: T, bound: Bound | None = None) -> T:
        """Get a value from an existing property.

        Raises:
            UnsupportedValueTypeError: If default is not a config value type.
            NoActiveSectionError: If there is no active section.
        """
        self._check_initialized()
        return self._read(prop, default, bound)

    def _read(self, prop: ConfigProperty, default: T, bound: Bound | None) -> T:
        kind = ValueKind.of(default, prop.key)

        if bound is not None:
            self._set_bounds(prop, bound, kind)

        return _READERS[kind](prop)

    def get_property(
        self,
        key: str,
        default: Any,
        restart: RestartRequirement = RestartRequirement.NONE,
        section: Section | str | None = None,
    ) -> ConfigProperty:
        """Get a property from this config handler, creating it if needed.

        Raises:
            UnsupportedValueTypeError: If default is not a config value type.
            NoActiveSectionError: If there is no active section.
        """
        target = self._resolve_section(section)
        kind = ValueKind.of(default, key)
        prop = self.config.get(target.name, key, default, kind)
        return restart.apply(prop)

    def _resolve_section(self, section: Section | str | None) -> Section:
        if section is None:
            return self._check_initialized()
        if isinstance(section, str):
            found = self.get_section_by_name(section)
            if found is None:
                raise SectionNotFoundError(section)
            return found
        return section

    def _check_initialized(self) -> Section:
        if self._active_section is None:
            raise NoActiveSectionError()
        return self._active_section

    def _set_bounds(self, prop: ConfigProperty, bound: Bound, kind: ValueKind) -> None:
        if not bound.accepts(kind):
            logger.warning(
                f"Tried to set bounds {bound.min!r}..{bound.max!r} on property "
                f"'{prop.key}' of type {kind.value}; only int bounds on int values "
                "and float bounds on float values are supported. Ignoring bounds.",
                stack_info=True,
            )
            return
        prop.set_min_value(bound.min)
        prop.set_max_value(bound.max)
