import logging
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)


class PropertiesMode(Enum):
    """Whether property-like identifiers are checked at all."""

    ALWAYS = "always"
    NEVER = "never"


class PropertiesStyle(Enum):
    """Casing required of property-like identifiers."""

    ALL = "all"
    LOWER = "lower"
    UPPER = "upper"


OPTION_KEYS = {"ignoreDestructuring", "propertiesMode", "propertiesStyle"}


@dataclass(frozen=True)
class RuleOptions:
    ignore_destructuring: bool = False
    properties: PropertiesMode = PropertiesMode.ALWAYS
    properties_style: PropertiesStyle = PropertiesStyle.ALL

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any] | None) -> "RuleOptions":
        """Build options from the camelCase keys used in configuration files.

        Args:
            mapping: Raw option values, e.g. ``{"propertiesMode": "never"}``.

        Returns:
            RuleOptions: Validated options with defaults filled in.

        Raises:
            ValueError: On unknown keys, a non-boolean ``ignoreDestructuring``
                or an unknown ``propertiesStyle``.
        """
        if not mapping:
            return cls()

        unknown = set(mapping) - OPTION_KEYS
        if unknown:
            msg = f"Unknown camelcase option(s): {', '.join(sorted(unknown))}"
            raise ValueError(msg)

        ignore_destructuring = mapping.get("ignoreDestructuring", False)
        if not isinstance(ignore_destructuring, bool):
            msg = f"ignoreDestructuring must be a boolean, got {ignore_destructuring!r}"
            raise ValueError(msg)

        return cls(
            ignore_destructuring=ignore_destructuring,
            properties=parse_properties_mode(mapping.get("propertiesMode")),
            properties_style=parse_properties_style(mapping.get("propertiesStyle")),
        )


def parse_properties_mode(value: Any) -> PropertiesMode:
    # Anything but "always"/"never" degrades to the default.
    try:
        return PropertiesMode(value)
    except ValueError:
        if value is not None:
            logger.debug("Unrecognised propertiesMode %r, using 'always'", value)
        return PropertiesMode.ALWAYS


def parse_properties_style(value: Any) -> PropertiesStyle:
    if value is None:
        return PropertiesStyle.ALL
    try:
        return PropertiesStyle(value)
    except ValueError as e:
        allowed = ", ".join(style.value for style in PropertiesStyle)
        msg = f"propertiesStyle must be one of {allowed}, got {value!r}"
        raise ValueError(msg) from e
