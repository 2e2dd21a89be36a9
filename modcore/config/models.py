"""Config category and property models."""

from typing import Any

from sqlalchemy import (
    JSON,
    Boolean,
    Enum,
    Float,
    ForeignKey,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

from modcore.config.values import INT32_MAX, INT32_MIN, ValueKind


class Base(DeclarativeBase):
    """Base class for config backend models."""

    pass


class ConfigCategory(Base):
    """A category of properties in a config file."""

    __tablename__ = "config_categories"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        unique=True,
        comment="Lower-cased category name",
    )
    comment: Mapped[str | None] = mapped_column(Text, nullable=True)

    properties: Mapped[list["ConfigProperty"]] = relationship(
        back_populates="category",
        cascade="all, delete-orphan",
        order_by="ConfigProperty.id",
    )

    def get(self, key: str) -> "ConfigProperty | None":
        """Get a property by key, or None."""
        for prop in self.properties:
            if prop.key == key:
                return prop
        return None

    def keys(self) -> list[str]:
        return [prop.key for prop in self.properties]

    def __repr__(self) -> str:
        return f"<ConfigCategory {self.name} ({len(self.properties)} properties)>"


class ConfigProperty(Base):
    """A single typed, persisted config entry.

    Values are stored as JSON. The typed getters coerce whatever is stored
    and fall back to the default when it cannot be read as that type.
    """

    __tablename__ = "config_properties"
    __table_args__ = (
        UniqueConstraint("category_id", "key", name="uq_config_property_key"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    category_id: Mapped[int] = mapped_column(
        ForeignKey("config_categories.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    key: Mapped[str] = mapped_column(String(200), nullable=False)
    kind: Mapped[ValueKind] = mapped_column(
        Enum(ValueKind, values_callable=lambda obj: [e.value for e in obj]),
        nullable=False,
    )
    value: Mapped[Any] = mapped_column(JSON, nullable=True)
    default: Mapped[Any] = mapped_column(JSON, nullable=True)
    comment: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Bounds are metadata for whatever edits the value; reads do not clamp
    min_value: Mapped[float | None] = mapped_column(Float, nullable=True)
    max_value: Mapped[float | None] = mapped_column(Float, nullable=True)

    requires_world_restart: Mapped[bool] = mapped_column(
        Boolean, default=False, nullable=False
    )
    requires_game_restart: Mapped[bool] = mapped_column(
        Boolean, default=False, nullable=False
    )

    category: Mapped[ConfigCategory] = relationship(back_populates="properties")

    def __repr__(self) -> str:
        return f"<ConfigProperty {self.key}={self.value!r} ({self.kind.value})>"

    # =========================================================================
    # Flags and bounds
    # =========================================================================

    def set_requires_world_restart(self, flag: bool) -> None:
        self.requires_world_restart = flag

    def set_requires_game_restart(self, flag: bool) -> None:
        """Game restart also implies a world restart."""
        self.requires_game_restart = flag
        self.requires_world_restart = bool(self.requires_world_restart) or flag

    def set_min_value(self, value: float) -> None:
        self.min_value = float(value)

    def set_max_value(self, value: float) -> None:
        self.max_value = float(value)

    # =========================================================================
    # Typed getters
    # =========================================================================

    def get_int(self) -> int:
        result = _as_int(self.value)
        return result if result is not None else _as_int(self.default) or 0

    def get_boolean(self) -> bool:
        result = _as_bool(self.value)
        return result if result is not None else bool(_as_bool(self.default))

    def get_string(self) -> str:
        result = _as_text(self.value)
        return result if result is not None else _as_text(self.default) or ""

    def get_double(self) -> float:
        result = _as_float(self.value)
        return result if result is not None else _as_float(self.default) or 0.0

    def get_int_list(self) -> list[int]:
        """Get the list of ints, skipping entries that are not ints."""
        if not isinstance(self.value, list):
            return list(self.default or [])
        return [n for n in (_as_int(v) for v in self.value) if n is not None]

    def get_string_list(self) -> list[str]:
        if not isinstance(self.value, list):
            return list(self.default or [])
        return [t for t in (_as_text(v) for v in self.value) if t is not None]

    def set_value(self, value: Any) -> None:
        """Replace the stored value."""
        self.value = list(value) if isinstance(value, (list, tuple)) else value


def _as_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        try:
            value = int(value.strip())
        except ValueError:
            return None
    if isinstance(value, int) and INT32_MIN <= value <= INT32_MAX:
        return value
    return None


def _as_bool(value: Any) -> bool | None:
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in ("true", "false"):
        return value.strip().lower() == "true"
    return None


def _as_float(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            return None
    return None


def _as_text(value: Any) -> str | None:
    if value is None or isinstance(value, (list, dict)):
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
