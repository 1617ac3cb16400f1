from __future__ import annotations
from enum import Enum

__all__ = ["Combinator"]

class Combinator(Enum):
    """Tokens used to join a selector fragment onto its parent's selector."""

    Adjacent = "+"
    Child = ">"
    Class = "."
    Descendant = " "
    Id = "#"
    Root = ""
    PseudoElement = "::"
    PseudoClass = ":"
    Sibling = "~"

    def join(self, payload: str = "") -> str:
        """The fragment `<token><payload>`."""
        return f"{self.value}{payload}"

    def terminates(self, selector: str) -> bool:
        """Whether the selector ends with this combinator's token."""
        return self.value != "" and selector.endswith(self.value)

    def __repr__(self) -> str:
        return f"Combinator.{self.name}({self.value!r})"

    def __str__(self) -> str:
        return self.value
