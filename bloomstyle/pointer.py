"""Pointer buttons, keyboard modifiers and pointer events."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, Flag, auto

__all__ = [
    "PointerButton",
    "Modifiers",
    "PointerWheelEvent",
    "PointerInputEvent",
    "PointerMoveEvent",
]

Point = tuple[float, float]
Vec2 = tuple[float, float]


class PointerButton(Enum):
    """A pointer button."""

    PRIMARY = "primary"
    SECONDARY = "secondary"
    AUXILIARY = "auxiliary"
    X1 = "x1"
    X2 = "x2"
    NONE = "none"

    @classmethod
    def from_mouse_button(cls, name: str) -> PointerButton:
        """Map a mouse button name (left, right, middle, back, forward) to a button."""
        return _MOUSE_BUTTONS.get(name.lower(), cls.NONE)

    def is_primary(self) -> bool:
        return self is PointerButton.PRIMARY

    def is_secondary(self) -> bool:
        return self is PointerButton.SECONDARY

    def is_auxiliary(self) -> bool:
        return self is PointerButton.AUXILIARY

    def is_x1(self) -> bool:
        return self is PointerButton.X1

    def is_x2(self) -> bool:
        return self is PointerButton.X2


_MOUSE_BUTTONS = {
    "left": PointerButton.PRIMARY,
    "right": PointerButton.SECONDARY,
    "middle": PointerButton.AUXILIARY,
    "back": PointerButton.X1,
    "forward": PointerButton.X2,
}


class Modifiers(Flag):
    """Keyboard modifiers held during a pointer event."""

    SHIFT = auto()
    CONTROL = auto()
    ALT = auto()
    SUPER = auto()


@dataclass(frozen=True)
class PointerWheelEvent:
    pos: Point
    delta: Vec2
    modifiers: Modifiers = field(default_factory=lambda: Modifiers(0))


@dataclass(frozen=True)
class PointerInputEvent:
    pos: Point
    button: PointerButton
    modifiers: Modifiers = field(default_factory=lambda: Modifiers(0))
    count: int = 1

    def __post_init__(self) -> None:
        if not 0 <= self.count <= 255:
            raise ValueError(f"click count out of range: {self.count}")


@dataclass(frozen=True)
class PointerMoveEvent:
    pos: Point
    modifiers: Modifiers = field(default_factory=lambda: Modifiers(0))