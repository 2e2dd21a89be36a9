"""Config persistence backend.

Stores categories and properties in a SQLite database through SQLAlchemy.
One Configuration owns one engine and one long-lived session; nothing is
written until save() is called.
"""

import logging
from pathlib import Path
from typing import Any

from sqlalchemy import create_engine, event, inspect, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from modcore.config.exceptions import ConfigError
from modcore.config.models import Base, ConfigCategory, ConfigProperty
from modcore.config.values import ValueKind

logger = logging.getLogger(__name__)


class Configuration:
    """A config file: categories of typed properties.

    Category names are case-insensitive and stored lower-cased.
    """

    def __init__(
        self,
        path: Path | str | None = None,
        echo: bool = False,
        read_only: bool = False,
    ) -> None:
        """Open (or create) a config database.

        Args:
            path: Database file. None keeps everything in memory.
            echo: Log every SQL statement.
            read_only: Open an existing config without creating tables or
                directories. save() is refused.

        Raises:
            ConfigError: In read-only mode, if the file holds no config tables.
            SQLAlchemyError: If the file is not a SQLite database.
        """
        self.path = Path(path) if path is not None else None
        self.read_only = read_only
        if self.path is not None:
            if not read_only:
                self.path.parent.mkdir(parents=True, exist_ok=True)
            url = f"sqlite:///{self.path}"
        else:
            url = "sqlite://"

        self.engine = create_engine(url, echo=echo)

        @event.listens_for(self.engine, "connect")
        def set_sqlite_pragma(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

        self._session: Session = sessionmaker(
            bind=self.engine,
            autoflush=False,
            expire_on_commit=False,
        )()
        self._categories: dict[str, ConfigCategory] = {}
        try:
            if read_only:
                if not inspect(self.engine).has_table(ConfigCategory.__tablename__):
                    raise ConfigError(f"{self._where} is not a config file")
            else:
                Base.metadata.create_all(bind=self.engine)
            self.load()
        except (ConfigError, SQLAlchemyError):
            self.close()
            raise

    # =========================================================================
    # Persistence
    # =========================================================================

    def load(self) -> None:
        """Re-read every category from disk, dropping unsaved changes."""
        self._session.rollback()
        self._session.expire_all()
        categories = self._session.scalars(select(ConfigCategory)).all()
        self._categories = {category.name: category for category in categories}
        logger.debug(f"Loaded {len(self._categories)} config categories from {self._where}")

    def save(self) -> None:
        """Write all pending changes."""
        if self.read_only:
            raise ConfigError(f"{self._where} was opened read-only")
        self._session.commit()
        logger.debug(f"Saved config to {self._where}")

    def has_changed(self) -> bool:
        """Check for changes made since the last load or save."""
        if self._session.new or self._session.deleted:
            return True
        return any(self._session.is_modified(obj) for obj in self._session.dirty)

    def close(self) -> None:
        self._session.close()
        self.engine.dispose()

    @property
    def _where(self) -> str:
        return str(self.path) if self.path is not None else "memory"

    # =========================================================================
    # Categories
    # =========================================================================

    def get_category(self, name: str) -> ConfigCategory:
        """Get a category by name, creating it if missing."""
        name = name.lower()
        category = self._categories.get(name)
        if category is None:
            category = ConfigCategory(name=name)
            self._session.add(category)
            self._categories[name] = category
        return category

    def has_category(self, name: str) -> bool:
        return name.lower() in self._categories

    def category_names(self) -> list[str]:
        return list(self._categories)

    def add_category_comment(self, name: str, comment: str) -> None:
        self.get_category(name).comment = comment

    # =========================================================================
    # Properties
    # =========================================================================

    def get(self, category: str, key: str, default: Any, kind: ValueKind) -> ConfigProperty:
        """Get a property, creating it with `default` if it does not exist.

        An existing property keeps its value; only its default is updated.

        Args:
            category: Category name (case-insensitive).
            key: Property key within the category.
            default: Value for a new property and fallback for bad reads.
            kind: Storage kind of the property.

        Returns:
            The property.
        """
        stored_default = _encode(default)
        owner = self.get_category(category)
        prop = owner.get(key)
        if prop is None:
            prop = ConfigProperty(
                key=key,
                kind=kind.storage_kind,
                value=stored_default,
                default=stored_default,
                requires_world_restart=False,
                requires_game_restart=False,
            )
            owner.properties.append(prop)
            logger.debug(f"Created config property {owner.name}.{key} = {stored_default!r}")
        else:
            prop.default = stored_default
        return prop


def _encode(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return list(value)
    if isinstance(value, float):
        # Single values are stored as plain doubles
        return float(value)
    return value
