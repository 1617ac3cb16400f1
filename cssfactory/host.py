from __future__ import annotations
import logging
import weakref
from typing import Any

from cssfactory.css.tokens import Combinator
from cssfactory.errors import MissingGeneratorError
from cssfactory.factory import GenerateRules, StyleSheetFactory, build, rebuild, serialize

__all__ = ["StyleSheetRegistry", "registry"]

logger = logging.getLogger(__name__)

class StyleSheetRegistry:
    """The style sheet most recently built for each host.

    Hosts are held weakly: an entry disappears once its host is garbage collected.
    Hosts must therefore be hashable and support weak references.
    """

    __slots__ = ("_sheets_",)

    def __init__(self) -> None:
        self._sheets_: weakref.WeakKeyDictionary[Any, StyleSheetFactory] = weakref.WeakKeyDictionary()

    def get(self, host: Any) -> StyleSheetFactory | None:
        return self._sheets_.get(host)

    def get_or_build(self, host: Any, generate: GenerateRules, **options: Any) -> StyleSheetFactory:
        """Reset the host's existing style sheet with `generate`, or build a new one.

        Options only apply when a new style sheet is built.
        """
        if generate is None or not callable(generate):
            raise MissingGeneratorError()

        if (sheet := self._sheets_.get(host)) is not None:
            logger.debug("Resetting style sheet for %r", host)
            return rebuild(sheet, generate)

        logger.debug("Building style sheet for %r", host)
        sheet = build(Combinator.Root.value, generate, host, **options)
        self._sheets_[host] = sheet
        return sheet

    def render(self, host: Any, generate: GenerateRules, **options: Any) -> str:
        return serialize(self.get_or_build(host, generate, **options))

    def release(self, host: Any) -> StyleSheetFactory | None:
        """Forget the style sheet built for `host`, returning it if there was one."""
        logger.debug("Releasing style sheet for %r", host)
        return self._sheets_.pop(host, None)

    def clear(self):
        self._sheets_.clear()

    def __contains__(self, host: Any) -> bool:
        return host in self._sheets_

    def __len__(self) -> int:
        return len(self._sheets_)

    def __repr__(self) -> str:
        return f"StyleSheetRegistry(hosts={len(self)})"

registry = StyleSheetRegistry()
