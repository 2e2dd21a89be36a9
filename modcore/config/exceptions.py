"""Config handler exception definitions.

Every error here is a programmer error: it is raised immediately and never
partially applied.
"""


class ConfigError(Exception):
    """Base exception for config handler operations."""

    pass


class NoActiveSectionError(ConfigError, RuntimeError):
    """A value was requested before any section was active."""

    def __init__(self, message: str = "No section is active!") -> None:
        super().__init__(message)


class SectionNotFoundError(ConfigError, KeyError):
    """A section name was not registered with the handler.

    Attributes:
        section_name: The name that failed to match.
    """

    def __init__(self, section_name: str) -> None:
        super().__init__(f"Section {section_name} does not exist!")
        self.section_name = section_name

    def __str__(self) -> str:
        # KeyError quotes its argument otherwise
        return self.args[0]


class UnsupportedValueTypeError(ConfigError, ValueError):
    """The default value is not one of the supported config value types.

    Attributes:
        key: Property key being resolved, if known.
        value: The offending default value.
    """

    def __init__(self, value: object, key: str | None = None) -> None:
        where = f" for key '{key}'" if key else ""
        super().__init__(
            f"Default value{where} is not a config value type: "
            f"{type(value).__name__} ({value!r})"
        )
        self.key = key
        self.value = value
