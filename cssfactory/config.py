from __future__ import annotations
from collections.abc import Callable
from typing import TypedDict

from cssfactory.errors import OptionsError

__all__ = ["Options", "OptionalOptions", "DEFAULTS", "default_options"]

def class_name(kind: type) -> str:
    """Name used as the class selector for a type."""
    return kind.__name__

class Options(TypedDict):
    clear_on_reset: bool
    emit_custom_properties: bool
    class_name: Callable[[type], str]

class OptionalOptions(TypedDict, total=False):
    clear_on_reset: bool
    emit_custom_properties: bool
    class_name: Callable[[type], str]

DEFAULTS: Options = {
    "clear_on_reset": False,
    "emit_custom_properties": False,
    "class_name": class_name,
}

def default_options(origin: OptionalOptions | dict | None = None) -> Options:
    """Fill in every option missing from `origin`.

    Raises `OptionsError` for unknown keys.
    """
    origin = dict(origin or {})
    unknown = set(origin) - set(DEFAULTS)
    if len(unknown) > 0:
        raise OptionsError(sorted(unknown))

    for key, value in DEFAULTS.items():
        origin[key] = origin.get(key, value)
    return origin
