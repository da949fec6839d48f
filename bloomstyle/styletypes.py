"""Value types used by styles: style values, colours, shadows and layout enums."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, ClassVar, Generic, TypeVar

from .unit import LengthPercentage, LengthUnit

__all__ = [
    "StyleSelector",
    "TextOverflow",
    "CursorStyle",
    "Color",
    "BoxShadow",
    "StyleValueKind",
    "StyleValue",
    "Display",
    "Position",
    "FlexDirection",
    "FlexWrap",
    "AlignItems",
    "AlignContent",
    "JustifyContent",
    "Weight",
    "FontStyle",
    "LineHeight",
    "GapSize",
]

T = TypeVar("T")
U = TypeVar("U")


class StyleSelector(Enum):
    """An interaction state that an overriding style applies to."""

    HOVER = "hover"
    FOCUS = "focus"
    FOCUS_VISIBLE = "focus_visible"
    DISABLED = "disabled"
    ACTIVE = "active"
    DRAGGING = "dragging"


class TextOverflow(Enum):
    WRAP = "wrap"
    CLIP = "clip"
    ELLIPSIS = "ellipsis"


class CursorStyle(Enum):
    DEFAULT = "default"
    POINTER = "pointer"
    TEXT = "text"
    COL_RESIZE = "col_resize"
    ROW_RESIZE = "row_resize"
    W_RESIZE = "w_resize"
    E_RESIZE = "e_resize"
    S_RESIZE = "s_resize"
    N_RESIZE = "n_resize"
    NW_RESIZE = "nw_resize"
    NE_RESIZE = "ne_resize"
    SW_RESIZE = "sw_resize"
    SE_RESIZE = "se_resize"
    NESW_RESIZE = "nesw_resize"
    NWSE_RESIZE = "nwse_resize"


def _check_byte(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int")
    if not 0 <= value <= 255:
        raise ValueError(f"{name} out of range: {value}")


@dataclass(frozen=True)
class Color:
    """An 8-bit-per-channel RGBA colour."""

    r: int
    g: int
    b: int
    a: int = 255

    BLACK: ClassVar[Color]
    WHITE: ClassVar[Color]
    TRANSPARENT: ClassVar[Color]

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            _check_byte(name, getattr(self, name))

    def with_alpha(self, a: int) -> Color:
        """The same colour with a different alpha channel."""
        return Color(self.r, self.g, self.b, a)


Color.BLACK = Color(0, 0, 0)
Color.WHITE = Color(255, 255, 255)
Color.TRANSPARENT = Color(0, 0, 0, 0)


@dataclass(frozen=True)
class BoxShadow:
    blur_radius: float = 0.0
    color: Color = field(default_factory=lambda: Color.BLACK)
    spread: float = 0.0
    h_offset: float = 0.0
    v_offset: float = 0.0


class StyleValueKind(Enum):
    VAL = "val"
    UNSET = "unset"
    BASE = "base"


@dataclass(frozen=True)
class StyleValue(Generic[T]):
    """The value of one style property.

    ``VAL`` holds a value; ``UNSET`` falls back to the underlying computed
    style; ``BASE`` keeps whatever the style below it has.
    """

    kind: StyleValueKind = StyleValueKind.BASE
    value: T | None = None

    UNSET: ClassVar[StyleValue]
    BASE: ClassVar[StyleValue]

    def __post_init__(self) -> None:
        if self.kind is not StyleValueKind.VAL and self.value is not None:
            raise ValueError(f"a {self.kind.value} style value holds no value")

    @classmethod
    def val(cls, value: T) -> StyleValue[T]:
        """A style value that holds ``value``."""
        return cls(StyleValueKind.VAL, value)

    def is_val(self) -> bool:
        return self.kind is StyleValueKind.VAL

    @property
    def is_unset(self) -> bool:
        return self.kind is StyleValueKind.UNSET

    @property
    def is_base(self) -> bool:
        return self.kind is StyleValueKind.BASE

    def map(self, f: Callable[[T], U]) -> StyleValue[U]:
        """Apply ``f`` to a held value; unset and base pass through."""
        if self.kind is StyleValueKind.VAL:
            return StyleValue.val(f(self.value))  # type: ignore[arg-type]
        return self  # type: ignore[return-value]

    def unwrap_or(self, default: T) -> T:
        if self.kind is StyleValueKind.VAL:
            return self.value  # type: ignore[return-value]
        return default

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        if self.kind is StyleValueKind.VAL:
            return self.value  # type: ignore[return-value]
        return f()


StyleValue.UNSET = StyleValue(StyleValueKind.UNSET)
StyleValue.BASE = StyleValue(StyleValueKind.BASE)


class Display(Enum):
    FLEX = "flex"
    GRID = "grid"
    NONE = "none"


class Position(Enum):
    RELATIVE = "relative"
    ABSOLUTE = "absolute"


class FlexDirection(Enum):
    ROW = "row"
    COLUMN = "column"
    ROW_REVERSE = "row_reverse"
    COLUMN_REVERSE = "column_reverse"


class FlexWrap(Enum):
    NO_WRAP = "no_wrap"
    WRAP = "wrap"
    WRAP_REVERSE = "wrap_reverse"


class AlignItems(Enum):
    START = "start"
    END = "end"
    FLEX_START = "flex_start"
    FLEX_END = "flex_end"
    CENTER = "center"
    BASELINE = "baseline"
    STRETCH = "stretch"


class AlignContent(Enum):
    START = "start"
    END = "end"
    FLEX_START = "flex_start"
    FLEX_END = "flex_end"
    CENTER = "center"
    STRETCH = "stretch"
    SPACE_BETWEEN = "space_between"
    SPACE_EVENLY = "space_evenly"
    SPACE_AROUND = "space_around"


class JustifyContent(Enum):
    START = "start"
    END = "end"
    FLEX_START = "flex_start"
    FLEX_END = "flex_end"
    CENTER = "center"
    STRETCH = "stretch"
    SPACE_BETWEEN = "space_between"
    SPACE_EVENLY = "space_evenly"
    SPACE_AROUND = "space_around"


@dataclass(frozen=True, order=True)
class Weight:
    """A font weight, where 400 is normal and 700 is bold."""

    value: int

    THIN: ClassVar[Weight]
    EXTRA_LIGHT: ClassVar[Weight]
    LIGHT: ClassVar[Weight]
    NORMAL: ClassVar[Weight]
    MEDIUM: ClassVar[Weight]
    SEMIBOLD: ClassVar[Weight]
    BOLD: ClassVar[Weight]
    EXTRA_BOLD: ClassVar[Weight]
    BLACK: ClassVar[Weight]

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError("font weight must be an int")
        if not 0 <= self.value <= 0xFFFF:
            raise ValueError(f"font weight out of range: {self.value}")


Weight.THIN = Weight(100)
Weight.EXTRA_LIGHT = Weight(200)
Weight.LIGHT = Weight(300)
Weight.NORMAL = Weight(400)
Weight.MEDIUM = Weight(500)
Weight.SEMIBOLD = Weight(600)
Weight.BOLD = Weight(700)
Weight.EXTRA_BOLD = Weight(800)
Weight.BLACK = Weight(900)


class FontStyle(Enum):
    NORMAL = "normal"
    ITALIC = "italic"
    OBLIQUE = "oblique"


@dataclass(frozen=True)
class LineHeight:
    """A line height: a multiple of the font size, or pixels when ``is_px``."""

    value: float
    is_px: bool = False

    @classmethod
    def normal(cls, value: float) -> LineHeight:
        return cls(float(value))

    @classmethod
    def px(cls, value: float) -> LineHeight:
        return cls(float(value), is_px=True)


def _zero_length() -> LengthPercentage:
    return LengthPercentage(LengthUnit.POINTS, 0.0)


@dataclass(frozen=True)
class GapSize:
    """The gap between rows and columns of a layout."""

    width: LengthPercentage = field(default_factory=_zero_length)
    height: LengthPercentage = field(default_factory=_zero_length)

    @classmethod
    def zero(cls) -> GapSize:
        return cls()