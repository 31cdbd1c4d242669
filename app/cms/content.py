from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from app.cms.editor import Editable

logger = logging.getLogger(__name__)

NEW_ITEM_ID = -1


@dataclass
class Item(Editable):
    """
    System fields shared by every content type. Subclasses add their own
    fields and implement marshal_editor().
    """

    id: int = NEW_ITEM_ID
    uuid: str = ""
    slug: str = ""
    timestamp: int = 0  # ms since epoch
    updated: int = 0  # ms since epoch


Factory = Callable[[], Editable]
Loader = Callable[[int, str], Editable | None]


class UnknownContentType(KeyError):
    pass


@dataclass
class _Entry:
    factory: Factory
    loader: Loader | None = None


class ContentRegistry:
    """
    Maps content type names to constructors (and optional loaders).
    Persistence belongs to the host application: a loader receives
    (item_id, status) and returns the item or None.
    """

    def __init__(self) -> None:
        self._types: dict[str, _Entry] = {}

    def register(self, name: str, factory: Factory, loader: Loader | None = None) -> None:
        name = (name or "").strip()
        if not name:
            raise ValueError("content type name is required")
        if name in self._types:
            logger.warning("Content type %s registered twice; replacing", name)
        self._types[name] = _Entry(factory=factory, loader=loader)

    def names(self) -> list[str]:
        return sorted(self._types)

    def _entry(self, name: str) -> _Entry:
        try:
            return self._types[name]
        except KeyError:
            raise UnknownContentType(name) from None

    def new(self, name: str) -> Editable:
        return self._entry(name).factory()

    def load(self, name: str, item_id: int, status: str = "") -> Any:
        entry = self._entry(name)
        if item_id == NEW_ITEM_ID:
            return entry.factory()
        if entry.loader is None:
            return None
        return entry.loader(item_id, status)
