"""Named selector shortcuts.

References:
    - [pseudo classes](https://developer.mozilla.org/en-US/docs/Web/CSS/Pseudo-classes)
    - [pseudo elements](https://developer.mozilla.org/en-US/docs/Web/CSS/Pseudo-elements)
    - [combinators](https://developer.mozilla.org/en-US/docs/Learn/CSS/Building_blocks/Selectors/Combinators)

Every shortcut is `select_pseudo_class(token)` or `select_pseudo_element(token)`
where the token may take a single value (`nth-child({})`) or a selector list
joined with `, ` (`is({})`). The methods are generated from `SHORTCUTS`.
"""

from __future__ import annotations
from abc import abstractmethod
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Literal, NamedTuple

from cssfactory.css.tokens import Combinator

if TYPE_CHECKING:
    from cssfactory.factory import GenerateRules

__all__ = ["Shortcut", "SHORTCUTS", "Selectors"]

Argument = Literal["none", "value", "selectors"]

class Shortcut(NamedTuple):
    name: str
    combinator: Combinator
    token: str
    argument: Argument = "none"

    def format(self, argument: str | int | Iterable[str] | None = None) -> str:
        if self.argument == "value":
            return self.token.format(argument)
        elif self.argument == "selectors":
            if isinstance(argument, str):
                return self.token.format(argument)
            return self.token.format(", ".join(argument or ()))
        return self.token

PC = Combinator.PseudoClass
PE = Combinator.PseudoElement

SHORTCUTS: list[Shortcut] = [
    Shortcut("active", PC, "active"),
    Shortcut("after", PE, "after"),
    Shortcut("any_link", PC, "any-link"),
    Shortcut("backdrop", PE, "backdrop"),
    Shortcut("before", PE, "before"),
    Shortcut("blank", PC, "blank"),
    Shortcut("checked", PC, "checked"),
    Shortcut("cue", PE, "cue"),
    Shortcut("cue_region", PE, "cue-region"),
    Shortcut("current_timed", PC, "current({})", "selectors"),
    Shortcut("default", PC, "default"),
    Shortcut("defined", PC, "defined"),
    Shortcut("dir", PC, "dir({})", "value"),
    Shortcut("disabled", PC, "disabled"),
    Shortcut("empty", PC, "empty"),
    Shortcut("enabled", PC, "enabled"),
    Shortcut("file_selector_button", PE, "file-selector-button"),
    Shortcut("first_letter", PE, "first-letter"),
    Shortcut("first_line", PE, "first-line"),
    Shortcut("first_page", PC, "first"),
    Shortcut("first_child", PC, "first-child"),
    Shortcut("first_of_type", PC, "first-of-type"),
    Shortcut("focus", PC, "focus"),
    Shortcut("focus_visible", PC, "focus-visible"),
    Shortcut("focus_within", PC, "focus-within"),
    Shortcut("fullscreen", PC, "fullscreen"),
    Shortcut("future_timed", PC, "future({})", "selectors"),
    Shortcut("grammar_error", PE, "grammar-error"),
    Shortcut("has", PC, "has({})", "selectors"),
    Shortcut("host", PC, "host"),
    Shortcut("host_context", PC, "host-context({})", "selectors"),
    Shortcut("host_is", PC, "host({})", "selectors"),
    Shortcut("hover", PC, "hover"),
    Shortcut("indeterminate", PC, "indeterminate"),
    Shortcut("in_range", PC, "in-range"),
    Shortcut("invalid", PC, "invalid"),
    Shortcut("is", PC, "is({})", "selectors"),
    Shortcut("lang", PC, "lang({})", "value"),
    Shortcut("last_child", PC, "last-child"),
    Shortcut("last_of_type", PC, "last-of-type"),
    Shortcut("left_hand_page", PC, "left"),
    Shortcut("link", PC, "link"),
    Shortcut("local_link", PC, "local-link"),
    Shortcut("marker", PE, "marker"),
    Shortcut("not", PC, "not({})", "selectors"),
    Shortcut("nth_child", PC, "nth-child({})", "value"),
    Shortcut("nth_column", PC, "nth-col({})", "value"),
    Shortcut("nth_of_type", PC, "nth-of-type({})", "value"),
    Shortcut("nth_last_child", PC, "nth-last-child({})", "value"),
    Shortcut("nth_last_column", PC, "nth-last-col({})", "value"),
    Shortcut("nth_last_of_type", PC, "nth-last-of-type({})", "value"),
    Shortcut("only_child", PC, "only-child"),
    Shortcut("only_of_type", PC, "only-of-type"),
    Shortcut("optional", PC, "optional"),
    Shortcut("out_of_range", PC, "out-of-range"),
    Shortcut("part", PE, "part({})", "value"),
    Shortcut("past_timed", PC, "past"),
    Shortcut("paused", PC, "paused"),
    Shortcut("picture_in_picture", PC, "picture-in-picture"),
    Shortcut("placeholder", PE, "placeholder"),
    Shortcut("placeholder_shown", PC, "placeholder-shown"),
    Shortcut("playing", PC, "playing"),
    Shortcut("read_only", PC, "read-only"),
    Shortcut("read_write", PC, "read-write"),
    Shortcut("required", PC, "required"),
    Shortcut("right_hand_page", PC, "right"),
    Shortcut("root", PC, "root"),
    Shortcut("selection", PE, "selection"),
    Shortcut("slotted", PE, "slotted({})", "selectors"),
    Shortcut("scope", PC, "scope"),
    Shortcut("spelling_error", PE, "spelling-error"),
    Shortcut("state", PC, "state({})", "value"),
    Shortcut("target", PC, "target"),
    Shortcut("target_within", PC, "target-within"),
    Shortcut("user_invalid", PC, "user-invalid"),
    Shortcut("valid", PC, "valid"),
    Shortcut("visited", PC, "visited"),
    Shortcut("where", PC, "where({})", "selectors"),
]

class Selectors:
    """Selection helpers shared by every rule set. Requires a `select` method."""

    __slots__ = ()

    @abstractmethod
    def select(self, selector: str, generate: GenerateRules | None = None) -> str:
        return NotImplementedError

    def select_pseudo_class(self, state: str, generate: GenerateRules | None = None) -> str:
        return self.select(Combinator.PseudoClass.join(state), generate)

    def select_pseudo_element(self, element: str, generate: GenerateRules | None = None) -> str:
        return self.select(Combinator.PseudoElement.join(element), generate)

    def select_class(self, kind: type, generate: GenerateRules | None = None) -> str:
        """Select elements which implement the specified class.

        The class name is resolved with the `class_name` option.
        """
        return self.select_class_name(self.options["class_name"](kind), generate)

    def select_class_name(self, class_name: str, generate: GenerateRules | None = None) -> str:
        """Select elements whose class lists include the specified name."""
        return self.select(Combinator.Class.join(class_name), generate)

    def select_id(self, id: str, generate: GenerateRules | None = None) -> str:
        """Select the element whose id matches the specified id."""
        return self.select(Combinator.Id.join(id), generate)

    def select_descendant(self, generate: GenerateRules | None = None) -> str:
        """Start a descendant selection. Rules can't be written until a target is selected."""
        return self.select(Combinator.Descendant.join(), generate)

    def select_child(self, selector: str, generate: GenerateRules | None = None) -> str:
        return self.select(Combinator.Child.join(selector), generate)

    def select_adjacent(self, selector: str, generate: GenerateRules | None = None) -> str:
        return self.select(Combinator.Adjacent.join(selector), generate)

    def select_sibling(self, selector: str, generate: GenerateRules | None = None) -> str:
        return self.select(Combinator.Sibling.join(selector), generate)

def _shortcut(shortcut: Shortcut) -> Callable[..., str]:
    if shortcut.argument == "none":
        def method(self, generate=None):
            return self.select(shortcut.combinator.join(shortcut.format()), generate)
    else:
        def method(self, argument, generate=None):
            return self.select(shortcut.combinator.join(shortcut.format(argument)), generate)

    method.__name__ = f"select_{shortcut.name}"
    method.__qualname__ = f"Selectors.{method.__name__}"
    method.__doc__ = f"Select `{shortcut.combinator.join(shortcut.token)}`."
    return method

for _item in SHORTCUTS:
    setattr(Selectors, f"select_{_item.name}", _shortcut(_item))
del _item
