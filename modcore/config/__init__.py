"""Config handlers for mods.

Usage:
    >>> from modcore.config import ConfigHandler, Bound, RestartRequirement
    >>> value = handler.get_value("maxThings", 5, bound=Bound.of(1, 10))
"""

# Values
from modcore.config.values import (
    Bound,
    RestartRequirement,
    Single,
    ValueKind,
    narrow_to_single,
)

# Errors
from modcore.config.exceptions import (
    ConfigError,
    NoActiveSectionError,
    SectionNotFoundError,
    UnsupportedValueTypeError,
)

# Backend
from modcore.config.models import ConfigCategory, ConfigProperty
from modcore.config.configuration import Configuration

# Handler
from modcore.config.handler import ConfigHandler, Section

__all__ = [
    # Values
    "Bound",
    "RestartRequirement",
    "Single",
    "ValueKind",
    "narrow_to_single",
    # Errors
    "ConfigError",
    "NoActiveSectionError",
    "SectionNotFoundError",
    "UnsupportedValueTypeError",
    # Backend
    "ConfigCategory",
    "ConfigProperty",
    "Configuration",
    # Handler
    "ConfigHandler",
    "Section",
]
