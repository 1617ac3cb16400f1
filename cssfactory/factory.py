"""Nested selector DSL.

A `StyleSheetFactory` is one rule set: the full selector it applies to, the
rules written for it, the custom properties it defines and the rule sets
nested beneath it. Every nested rule set is created and populated by a
generator function the moment it is selected.

```python
css = build("", lambda css: css.select("button", lambda button: (
    button.write("color:red;\\n"),
    button.select_hover(lambda hover: hover.write("opacity:.5;\\n")),
)))
str(css) == "button {\\ncolor:red;\\n}\\nbutton:hover {\\nopacity:.5;\\n}\\n"
```
"""

from __future__ import annotations
import logging
import weakref
from collections.abc import Callable, Iterator, Mapping
from types import MappingProxyType
from typing import Any
from typing_extensions import TypeAliasType

from cssfactory.config import OptionalOptions, Options, default_options
from cssfactory.css.tokens import Combinator
from cssfactory.declarations import declarations, property_value
from cssfactory.errors import (
    IncompleteSelectorError,
    MissingGeneratorError,
    UndefinedReferenceError,
)
from cssfactory.selectors import Selectors

__all__ = ["GenerateRules", "StyleSheetFactory", "build", "rebuild", "serialize"]

logger = logging.getLogger(__name__)

GenerateRules = TypeAliasType("GenerateRules", Callable[["StyleSheetFactory"], None])

def _reference(value: Any) -> Callable[[], Any] | None:
    """Weak reference to `value` when it supports one, otherwise a plain getter."""
    if value is None:
        return None
    try:
        return weakref.ref(value)
    except TypeError:
        return lambda: value

def _require(generate: Any):
    if generate is None or not callable(generate):
        raise MissingGeneratorError()

class StyleSheetFactory(Selectors):
    """A CSS rule set and the rule sets nested within it.

    Args
        selector (str): Full selector from the style sheet root to this rule set.
        generate (GenerateRules): Populates the factory. Called once before the constructor returns.
        host (Any): Object which will host the resulting style sheet. Held weakly when possible.
        options (OptionalOptions | None): Factory options. Children share their root's options.
        parent (StyleSheetFactory | None): Rule set this one is nested in.
    """

    __slots__ = (
        "_selector_",
        "_value_",
        "_children_",
        "_scope_",
        "_parent_",
        "_host_",
        "_options_",
        "__weakref__",
    )

    def __init__(
        self,
        selector: str,
        generate: GenerateRules,
        host: Any = None,
        *,
        options: OptionalOptions | None = None,
        parent: StyleSheetFactory | None = None,
    ) -> None:
        _require(generate)

        self._selector_ = selector
        self._value_ = ""
        self._children_: list[StyleSheetFactory] = []
        self._scope_: dict[str, str] = {}
        self._parent_ = weakref.ref(parent) if parent is not None else None
        self._host_ = _reference(host)
        self._options_: Options = (
            parent._options_ if parent is not None else default_options(options)
        )

        logger.debug("Generating rules for %r", selector)
        generate(self)

    @property
    def selector(self) -> str:
        """Full selector this rule set applies to."""
        return self._selector_

    @property
    def value(self) -> str:
        """Rules written directly for this selector."""
        return self._value_

    @property
    def children(self) -> tuple[StyleSheetFactory, ...]:
        """Nested rule sets in the order they were selected."""
        return tuple(self._children_)

    @property
    def scope(self) -> Mapping[str, str]:
        """Custom properties defined on this rule set, excluding its ancestors."""
        return MappingProxyType(self._scope_)

    @property
    def parent(self) -> StyleSheetFactory | None:
        return self._parent_() if self._parent_ is not None else None

    @property
    def host(self) -> Any:
        """The hosting object of the root rule set, if it is still alive."""
        if self._host_ is not None:
            return self._host_()
        parent = self.parent
        return parent.host if parent is not None else None

    @property
    def options(self) -> Options:
        return self._options_

    @property
    def incomplete(self) -> bool:
        """Whether the selector ends with a bare descendant combinator."""
        return Combinator.Descendant.terminates(self._selector_)

    def reset(self, generate: GenerateRules) -> StyleSheetFactory:
        """Run a new generator against this factory.

        Existing rules, children and custom properties are kept unless the
        `clear_on_reset` option is set.
        """
        _require(generate)

        if self._options_["clear_on_reset"]:
            self._value_ = ""
            self._children_.clear()
            self._scope_.clear()

        logger.debug("Resetting rules for %r", self._selector_)
        generate(self)
        return self

    def assign(self, properties: Mapping[str, Any] | None = None, /, **keywords: Any):
        """Convert a mapping of camel case properties into declarations and write them."""
        self.write(declarations(properties, **keywords))

    def define(self, name: str, value: Any):
        """Define a custom CSS property visible to this rule set and everything nested in it.

        # Args
            name (str): Name of the custom property, without the leading `--`.
            value (Any): Value to be serialized for CSS.
        """
        self._scope_[name] = property_value(value)

    def check_reference_by_name(self, name: str) -> bool:
        """Whether a custom property is defined on this rule set or any of its ancestors."""
        if name in self._scope_:
            return True
        parent = self.parent
        return parent is not None and parent.check_reference_by_name(name)

    def var(self, name: str) -> str:
        """Reference a custom property that is visible from this rule set.

        Raises
            UndefinedReferenceError: If no ancestor, including this one, defines `name`.
        """
        if not self.check_reference_by_name(name):
            raise UndefinedReferenceError(name)
        return f"var(--{name})"

    def write(self, value: str):
        """Append raw CSS content to the rules of this selector.

        Raises
            IncompleteSelectorError: If the selector still awaits a target.
        """
        if self.incomplete:
            raise IncompleteSelectorError(self._selector_)
        self._value_ += value

    def select(self, selector: str, generate: GenerateRules | None = None) -> str:
        """Create a nested rule set for `selector` appended to this selector.

        Without a generator nothing is created. The selector is always returned so it
        can be reused in other selections such as `select_not`.
        """
        if generate is not None:
            self._children_.append(
                StyleSheetFactory(self._selector_ + selector, generate, parent=self)
            )
        return selector

    def rules(self) -> Iterator[str]:
        """Lazily yield each non empty rule block, depth first, in selection order."""
        body = self._value_
        # incomplete selectors take no rule text, custom properties included
        if (
            self._options_["emit_custom_properties"]
            and len(self._scope_) > 0
            and not self.incomplete
        ):
            body = (
                "".join(f"--{name}: {value};\n" for name, value in self._scope_.items())
                + body
            )

        if body != "":
            yield f"{self._selector_} {{\n{body}}}\n"

        for child in self._children_:
            yield from child.rules()

    def __iter__(self) -> Iterator[str]:
        return self.rules()

    def __repr__(self) -> str:
        return (
            f"StyleSheetFactory({self._selector_!r}, "
            f"scope={self._scope_!r}, children={len(self._children_)})"
        )

    def __str__(self) -> str:
        return serialize(self)

def build(
    selector: str, generate: GenerateRules, host: Any = None, **options: Any
) -> StyleSheetFactory:
    """Construct a fresh tree of rule sets rooted at `selector`."""
    return StyleSheetFactory(selector, generate, host, options=options)

def rebuild(factory: StyleSheetFactory, generate: GenerateRules) -> StyleSheetFactory:
    """Run `generate` again against an existing root. See `StyleSheetFactory.reset`."""
    return factory.reset(generate)

def serialize(factory: StyleSheetFactory) -> str:
    """Render a tree of rule sets into CSS text."""
    return "".join(factory.rules())
