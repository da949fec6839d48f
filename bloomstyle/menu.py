"""Menus built from items, separators and submenus."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import Callable, Iterator, Optional, Union

__all__ = ["Separator", "MenuItem", "Menu", "MenuEntry"]

_ids = itertools.count()


@dataclass(frozen=True)
class Separator:
    """A separator line between menu entries."""


@dataclass(eq=False)
class MenuItem:
    """A single clickable entry; each item gets a unique id."""

    title: str
    selected: Optional[bool] = None
    enabled: bool = True
    action: Optional[Callable[[], None]] = None
    id: int = field(default_factory=lambda: next(_ids), init=False)

    def with_action(self, action: Callable[[], None]) -> MenuItem:
        """Set the callback run when the item is chosen."""
        if not callable(action):
            raise TypeError("action must be callable")
        self.action = action
        return self

    def with_enabled(self, enabled: bool) -> MenuItem:
        self.enabled = enabled
        return self


MenuEntry = Union[Separator, MenuItem, "Menu"]


@dataclass(eq=False)
class Menu:
    """A menu or submenu holding an ordered list of entries."""

    item: MenuItem
    popup: bool = False
    children: list = field(default_factory=list)

    def __init__(self, title: str) -> None:
        self.item = MenuItem(title)
        self.popup = False
        self.children = []

    @property
    def title(self) -> str:
        return self.item.title

    @property
    def enabled(self) -> bool:
        return self.item.enabled

    def __iter__(self) -> Iterator[MenuEntry]:
        return iter(self.children)

    def __len__(self) -> int:
        return len(self.children)

    def entry(self, entry: MenuEntry) -> Menu:
        """Append an item, submenu or separator and return this menu."""
        if not isinstance(entry, (Separator, MenuItem, Menu)):
            raise TypeError(f"not a menu entry: {type(entry).__name__}")
        self.children.append(entry)
        return self

    def separator(self) -> Menu:
        """Append a separator and return this menu."""
        return self.entry(Separator())

    def as_popup(self) -> Menu:
        """Mark this menu as a popup menu and return it."""
        self.popup = True
        return self