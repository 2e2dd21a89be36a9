"""Config value kinds, restart requirements and bounds.

The set of value kinds is closed: every default passed to a config handler is
classified once by ValueKind.of() and all readers dispatch on the result.
"""

import math
import struct
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Generic, TypeVar

from modcore.config.exceptions import UnsupportedValueTypeError

if TYPE_CHECKING:
    from modcore.config.models import ConfigProperty


T = TypeVar("T")

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


def narrow_to_single(value: float) -> float:
    """Round a double to the nearest 32-bit float.

    Values too large for single precision become signed infinity, the same
    as a C or Java float cast.
    """
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


class Single(float):
    """A float held at 32-bit precision.

    Pass a Single as a default to get a single-precision config value.
    The backend stores it as a double and it is narrowed again on read.
    """

    def __new__(cls, value: float = 0.0) -> "Single":
        return super().__new__(cls, narrow_to_single(float(value)))

    def __repr__(self) -> str:
        return f"Single({float(self)!r})"


class ValueKind(str, Enum):
    """Kind of value stored in a config property."""

    INTEGER = "integer"
    BOOLEAN = "boolean"
    STRING = "string"
    INTEGER_LIST = "integer_list"
    STRING_LIST = "string_list"
    SINGLE = "single"
    DOUBLE = "double"

    @property
    def storage_kind(self) -> "ValueKind":
        """Kind the backend persists this as (there is no float column)."""
        if self is ValueKind.SINGLE:
            return ValueKind.DOUBLE
        return self

    @property
    def is_numeric(self) -> bool:
        return self in (ValueKind.INTEGER, ValueKind.SINGLE, ValueKind.DOUBLE)

    @classmethod
    def of(cls, value: object, key: str | None = None) -> "ValueKind":
        """Classify a default value.

        Args:
            value: The default value supplied by the caller.
            key: Property key, used in the error message.

        Returns:
            The matching ValueKind.

        Raises:
            UnsupportedValueTypeError: If value is not a config value type.
        """
        # bool before int, Single before float: both are subclasses
        if isinstance(value, bool):
            return cls.BOOLEAN
        if isinstance(value, int):
            if not INT32_MIN <= value <= INT32_MAX:
                raise UnsupportedValueTypeError(value, key)
            return cls.INTEGER
        if isinstance(value, Single):
            return cls.SINGLE
        if isinstance(value, float):
            return cls.DOUBLE
        if isinstance(value, str):
            return cls.STRING
        if isinstance(value, (list, tuple)):
            if all(isinstance(v, str) for v in value):
                return cls.STRING_LIST
            if all(
                isinstance(v, int) and not isinstance(v, bool) and INT32_MIN <= v <= INT32_MAX
                for v in value
            ):
                return cls.INTEGER_LIST
        raise UnsupportedValueTypeError(value, key)


class RestartRequirement(str, Enum):
    """What has to restart before a changed property takes effect."""

    NONE = "none"
    REQUIRES_WORLD_RESTART = "requires_world_restart"
    # Implies REQUIRES_WORLD_RESTART
    REQUIRES_GAME_RESTART = "requires_game_restart"

    def apply(self, prop: "ConfigProperty") -> "ConfigProperty":
        """Flag the property with this requirement. NONE leaves it untouched."""
        if self is RestartRequirement.REQUIRES_GAME_RESTART:
            prop.set_requires_game_restart(True)
        elif self is RestartRequirement.REQUIRES_WORLD_RESTART:
            prop.set_requires_world_restart(True)
        return prop


@dataclass(frozen=True)
class Bound(Generic[T]):
    """Inclusive bounds limit on a numeric property.

    Attributes:
        min: Lowest allowed value.
        max: Highest allowed value.
    """

    min: T
    max: T

    @classmethod
    def of(cls, min: T, max: T) -> "Bound[T]":
        return cls(min, max)

    @property
    def kind(self) -> ValueKind | None:
        """INTEGER or DOUBLE for numeric bounds, None for anything else."""
        values = (self.min, self.max)
        if all(isinstance(v, int) and not isinstance(v, bool) for v in values):
            return ValueKind.INTEGER
        if all(isinstance(v, float) for v in values):
            return ValueKind.DOUBLE
        return None

    def accepts(self, kind: ValueKind) -> bool:
        """Check whether this bound can be applied to a value of `kind`."""
        if self.kind is ValueKind.INTEGER:
            return kind is ValueKind.INTEGER
        if self.kind is ValueKind.DOUBLE:
            return kind in (ValueKind.SINGLE, ValueKind.DOUBLE)
        return False
