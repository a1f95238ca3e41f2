import re

from .options import PropertiesStyle

SEPARATOR = "_"

NAMING_PATTERNS = {
    "UpperCamelCase": re.compile(r"^[A-Z$][a-zA-Z0-9$]*"),
    "lowerCamelCase": re.compile(r"^[a-z$][a-zA-Z0-9$]*"),
}


def strip_separators(name: str) -> str:
    """Drop leading and trailing underscores, which mark visibility rather than casing."""
    return name.strip(SEPARATOR)


def is_all_caps(name: str) -> bool:
    return name == name.upper()


def is_camel_case(name: str) -> bool:
    """Check if a name is camel case (no separator) or constant-style all caps."""
    return is_all_caps(name) or SEPARATOR not in name


def is_upper_camel_case(name: str) -> bool:
    # Only the leading character is decisive.
    return is_all_caps(name) or bool(NAMING_PATTERNS["UpperCamelCase"].match(name))


def is_lower_camel_case(name: str) -> bool:
    return is_all_caps(name) or bool(NAMING_PATTERNS["lowerCamelCase"].match(name))


def is_valid_property_name(name: str, style: PropertiesStyle) -> bool:
    """Check a property-like name against the configured properties style.

    Args:
        name (str): Name with separators already stripped.
        style (PropertiesStyle): Required casing.

    Returns:
        bool: True if the name satisfies the style.
    """
    if style is PropertiesStyle.UPPER:
        return is_upper_camel_case(name)
    if style is PropertiesStyle.LOWER:
        return is_lower_camel_case(name)
    return is_camel_case(name)
