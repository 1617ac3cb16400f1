from __future__ import annotations
from typing import Any, overload

from cssfactory.config import DEFAULTS, OptionalOptions, Options, default_options
from cssfactory.css.tokens import Combinator
from cssfactory.declarations import declarations, property_name, property_value
from cssfactory.errors import (
    IncompleteSelectorError,
    MissingGeneratorError,
    OptionsError,
    StyleSheetError,
    UndefinedReferenceError,
)
from cssfactory.factory import GenerateRules, StyleSheetFactory, build, rebuild, serialize
from cssfactory.host import StyleSheetRegistry, registry
from cssfactory.selectors import SHORTCUTS, Selectors, Shortcut

__version__ = "0.1.0"

__all__ = [
    "create_style_sheet",
    "StyleSheetFactory",
    "GenerateRules",
    "build",
    "rebuild",
    "serialize",
    "StyleSheetRegistry",
    "registry",
    "Combinator",
    "Selectors",
    "Shortcut",
    "SHORTCUTS",
    "declarations",
    "property_name",
    "property_value",
    "Options",
    "OptionalOptions",
    "DEFAULTS",
    "default_options",
    "StyleSheetError",
    "IncompleteSelectorError",
    "UndefinedReferenceError",
    "MissingGeneratorError",
    "OptionsError",
]

""" # Usage

+ `create_style_sheet(generate)` builds a standalone style sheet.
+ `create_style_sheet(host, generate)` builds the host's style sheet, or resets the
  one already built for it (rules accumulate unless `clear_on_reset` is set).
+ Every generator receives the factory for the selected rule set:

    def generate(css: StyleSheetFactory):
        css.define("accent", "rebeccapurple")
        css.select("button", lambda button: button.assign({"backgroundColor": button.var("accent")}))
"""

@overload
def create_style_sheet(generate: GenerateRules, /, *, host: Any = None, **options: Any) -> str: ...
@overload
def create_style_sheet(host: Any, generate: GenerateRules, /, **options: Any) -> str: ...
def create_style_sheet(
    host_or_generate: Any, generate: GenerateRules | None = None, /, *, host: Any = None, **options: Any
) -> str:
    """Create a CSS string from the factory DSL.

    With a single positional argument, any callable is taken to be the generator.
    Hosts which are themselves callable (classes, objects with `__call__`) must be
    passed with the `host` keyword: `create_style_sheet(generate, host=widget)`.

    # Args
        host_or_generate (Any | GenerateRules): Object which will host the resulting style sheet,
            or the generator when the style sheet has no host or `host` is given.
        generate (GenerateRules | None): Function which exposes the factory DSL. Required with a
            positional host.
        host (Any): Object which will host the resulting style sheet.
        **options (Any): Factory options, see `cssfactory.config.Options`.
    """
    if host is not None:
        if generate is not None:
            raise StyleSheetError("Pass the host either positionally or with the `host` keyword, not both")
        return registry.render(host, host_or_generate, **options)

    if generate is None and callable(host_or_generate):
        return serialize(build(Combinator.Root.value, host_or_generate, **options))

    if generate is None:
        raise MissingGeneratorError()

    return registry.render(host_or_generate, generate, **options)
