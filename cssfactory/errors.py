"""Error types raised while building a style sheet."""

from __future__ import annotations

__all__ = [
    "StyleSheetError",
    "IncompleteSelectorError",
    "UndefinedReferenceError",
    "MissingGeneratorError",
    "OptionsError",
]

class StyleSheetError(Exception):
    """Base class for every error raised by the factory DSL."""

class IncompleteSelectorError(StyleSheetError):
    """Raised when rules are written for a selector that still awaits a target."""

    def __init__(self, selector: str, message: str | None = None):
        self.selector = selector
        super().__init__(
            message or f"Cannot write rules for incomplete selector {selector!r}"
        )

class UndefinedReferenceError(StyleSheetError, NameError):
    """Raised when a custom property is referenced outside of its scope chain."""

    def __init__(self, name: str):
        # NameError.__init__ resets `name` unless it is passed as a keyword
        super().__init__(f"{name} is not defined", name=name)

class MissingGeneratorError(StyleSheetError, TypeError):
    """Raised when an entry point is called without a usable generator."""

    def __init__(self, message: str = "You must provide a valid CSS generator"):
        super().__init__(message)

class OptionsError(StyleSheetError, TypeError):
    """Raised when a factory is given options it doesn't know."""

    def __init__(self, unknown: list[str]):
        self.unknown = unknown
        super().__init__(f"Unknown style sheet option(s): {', '.join(unknown)}")
