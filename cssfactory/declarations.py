from __future__ import annotations
import re
from collections.abc import Mapping
from typing import Any

__all__ = ["property_name", "property_value", "declarations"]

UPPERCASE = re.compile(r"[A-Z]")

def property_name(key: str) -> str:
    """Convert a camel case property name to its kebab case CSS name.

    Every uppercase letter is hyphenated, so vendor prefixed names such as
    `WebkitTransition` become `-webkit-transition`.
    """
    return UPPERCASE.sub(lambda match: f"-{match.group(0).lower()}", key)

def property_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)

def declarations(properties: Mapping[str, Any] | None = None, **keywords: Any) -> str:
    """Render declarations as `<prop>: <value>;` lines in iteration order.

    Keyword names may use `_` in place of `-` since python identifiers can't contain hyphens.

    # Args
        properties (Mapping[str, Any] | None): Property names mapped to their values.
        **keywords (Any): Additional properties rendered after `properties`.
    """
    items = list((properties or {}).items())
    items.extend((key.replace("_", "-"), value) for key, value in keywords.items())
    return "".join(
        f"{property_name(key)}: {property_value(value)};\n" for key, value in items
    )
