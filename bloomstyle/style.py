"""Styles whose properties fall back to a computed style, and how they combine."""

from __future__ import annotations

import dataclasses
import functools
from dataclasses import dataclass, field
from typing import Any, Callable, ClassVar, Generic, Iterable, Optional, TypeVar

from .styletypes import (
    AlignContent,
    AlignItems,
    BoxShadow,
    Color,
    CursorStyle,
    Display,
    FlexDirection,
    FlexWrap,
    FontStyle,
    GapSize,
    JustifyContent,
    LineHeight,
    Position,
    StyleValue,
    TextOverflow,
    Weight,
)
from .unit import (
    Dimension,
    LengthPercentage,
    LengthPercentageAuto,
    LengthUnit,
    Px,
    PxPct,
    PxPctAuto,
    _f32,
    pct,
    to_px,
    to_px_pct,
    to_px_pct_auto,
)

__all__ = ["ComputedStyle", "LayoutRect", "LayoutStyle", "Style"]

T = TypeVar("T")


@dataclass(frozen=True)
class ComputedStyle:
    """A style with definite values for most fields."""

    display: Display = Display.FLEX
    position: Position = Position.RELATIVE
    width: PxPctAuto = field(default_factory=PxPctAuto)
    height: PxPctAuto = field(default_factory=PxPctAuto)
    min_width: PxPctAuto = field(default_factory=PxPctAuto)
    min_height: PxPctAuto = field(default_factory=PxPctAuto)
    max_width: PxPctAuto = field(default_factory=PxPctAuto)
    max_height: PxPctAuto = field(default_factory=PxPctAuto)
    flex_direction: FlexDirection = FlexDirection.ROW
    flex_wrap: FlexWrap = FlexWrap.NO_WRAP
    flex_grow: float = 0.0
    flex_shrink: float = 1.0
    flex_basis: PxPctAuto = field(default_factory=PxPctAuto)
    justify_content: Optional[JustifyContent] = None
    justify_self: Optional[AlignItems] = None
    align_items: Optional[AlignItems] = None
    align_content: Optional[AlignContent] = None
    align_self: Optional[AlignItems] = None
    border_left: Px = Px(0.0)
    border_top: Px = Px(0.0)
    border_right: Px = Px(0.0)
    border_bottom: Px = Px(0.0)
    border_radius: Px = Px(0.0)
    outline_color: Color = field(default_factory=lambda: Color.TRANSPARENT)
    outline: Px = Px(0.0)
    border_color: Color = field(default_factory=lambda: Color.BLACK)
    padding_left: PxPct = PxPct(0.0)
    padding_top: PxPct = PxPct(0.0)
    padding_right: PxPct = PxPct(0.0)
    padding_bottom: PxPct = PxPct(0.0)
    margin_left: PxPctAuto = PxPctAuto(0.0)
    margin_top: PxPctAuto = PxPctAuto(0.0)
    margin_right: PxPctAuto = PxPctAuto(0.0)
    margin_bottom: PxPctAuto = PxPctAuto(0.0)
    inset_left: PxPctAuto = field(default_factory=PxPctAuto)
    inset_top: PxPctAuto = field(default_factory=PxPctAuto)
    inset_right: PxPctAuto = field(default_factory=PxPctAuto)
    inset_bottom: PxPctAuto = field(default_factory=PxPctAuto)
    z_index: Optional[int] = None
    cursor: Optional[CursorStyle] = None
    color: Optional[Color] = None
    background: Optional[Color] = None
    box_shadow: Optional[BoxShadow] = None
    scroll_bar_color: Optional[Color] = None
    scroll_bar_rounded: Optional[bool] = None
    scroll_bar_thickness: Optional[Px] = None
    scroll_bar_edge_width: Optional[Px] = None
    font_size: Optional[float] = None
    font_family: Optional[str] = None
    font_weight: Optional[Weight] = None
    font_style: Optional[FontStyle] = None
    cursor_color: Optional[Color] = None
    text_overflow: TextOverflow = TextOverflow.WRAP
    line_height: Optional[LineHeight] = None
    aspect_ratio: Optional[float] = None
    gap: GapSize = field(default_factory=GapSize.zero)

    def to_layout_style(self) -> LayoutStyle:
        """The layout engine's view of this style."""
        return LayoutStyle(
            display=self.display,
            position=self.position,
            width=self.width.to_dimension(),
            height=self.height.to_dimension(),
            min_width=self.min_width.to_dimension(),
            min_height=self.min_height.to_dimension(),
            max_width=self.max_width.to_dimension(),
            max_height=self.max_height.to_dimension(),
            flex_direction=self.flex_direction,
            flex_grow=self.flex_grow,
            flex_shrink=self.flex_shrink,
            flex_basis=self.flex_basis.to_dimension(),
            flex_wrap=self.flex_wrap,
            justify_content=self.justify_content,
            justify_self=self.justify_self,
            align_items=self.align_items,
            align_content=self.align_content,
            align_self=self.align_self,
            aspect_ratio=self.aspect_ratio,
            border=LayoutRect(
                *(
                    LengthPercentage(LengthUnit.POINTS, _f32(side.value))
                    for side in (
                        self.border_left,
                        self.border_top,
                        self.border_right,
                        self.border_bottom,
                    )
                )
            ),
            padding=LayoutRect(
                *(
                    side.to_length_percentage()
                    for side in (
                        self.padding_left,
                        self.padding_top,
                        self.padding_right,
                        self.padding_bottom,
                    )
                )
            ),
            margin=LayoutRect(
                *(
                    side.to_length_percentage_auto()
                    for side in (
                        self.margin_left,
                        self.margin_top,
                        self.margin_right,
                        self.margin_bottom,
                    )
                )
            ),
            inset=LayoutRect(
                *(
                    side.to_length_percentage_auto()
                    for side in (
                        self.inset_left,
                        self.inset_top,
                        self.inset_right,
                        self.inset_bottom,
                    )
                )
            ),
            gap=self.gap,
        )


@dataclass(frozen=True)
class LayoutRect(Generic[T]):
    """Four values, one per side."""

    left: T
    top: T
    right: T
    bottom: T


@dataclass(frozen=True)
class LayoutStyle:
    """The layout properties handed to the layout engine."""

    display: Display
    position: Position
    width: Dimension
    height: Dimension
    min_width: Dimension
    min_height: Dimension
    max_width: Dimension
    max_height: Dimension
    flex_direction: FlexDirection
    flex_grow: float
    flex_shrink: float
    flex_basis: Dimension
    flex_wrap: FlexWrap
    justify_content: Optional[JustifyContent]
    justify_self: Optional[AlignItems]
    align_items: Optional[AlignItems]
    align_content: Optional[AlignContent]
    align_self: Optional[AlignItems]
    aspect_ratio: Optional[float]
    border: LayoutRect[LengthPercentage]
    padding: LayoutRect[LengthPercentage]
    margin: LayoutRect[LengthPercentageAuto]
    inset: LayoutRect[LengthPercentageAuto]
    gap: GapSize


_FIELDS = tuple(f.name for f in dataclasses.fields(ComputedStyle))


def _instance_of(cls: type) -> Callable[[Any], Any]:
    def check(value: Any) -> Any:
        if not isinstance(value, cls):
            raise TypeError(f"expected {cls.__name__}, got {type(value).__name__}")
        return value

    return check


def _optional(convert: Callable[[Any], Any]) -> Callable[[Any], Any]:
    def check(value: Any) -> Any:
        return None if value is None else convert(value)

    return check


def _float(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"expected a number, got {type(value).__name__}")
    return float(value)


def _int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an int, got {type(value).__name__}")
    return value


def _to_style_value(value: Any, convert: Callable[[Any], Any]) -> StyleValue:
    if isinstance(value, StyleValue):
        return value.map(convert)
    return StyleValue.val(convert(value))


_DISPLAY = _instance_of(Display)
_POSITION = _instance_of(Position)
_FLEX_DIRECTION = _instance_of(FlexDirection)
_FLEX_WRAP = _instance_of(FlexWrap)
_JUSTIFY_CONTENT = _optional(_instance_of(JustifyContent))
_ALIGN_ITEMS = _optional(_instance_of(AlignItems))
_ALIGN_CONTENT = _optional(_instance_of(AlignContent))
_COLOR = _instance_of(Color)
_TEXT_OVERFLOW = _instance_of(TextOverflow)
_ASPECT_RATIO = _optional(_float)
_GAP = _instance_of(GapSize)


class Style:
    """A style whose properties are style values over a computed style.

    Styles are immutable; every builder returns a new style.
    """

    __slots__ = ("_values",)

    BASE: ClassVar[Style]
    UNSET: ClassVar[Style]

    def __init__(self, **values: StyleValue) -> None:
        self._values: dict[str, StyleValue] = dict.fromkeys(_FIELDS, StyleValue.BASE)
        for name, value in values.items():
            self._check(name, value)
            self._values[name] = value

    @staticmethod
    def _check(name: str, value: Any) -> None:
        if name not in _FIELDS:
            raise KeyError(name)
        if not isinstance(value, StyleValue):
            raise TypeError(f"{name} must be a StyleValue")

    def _with(self, **changes: StyleValue) -> Style:
        new = Style()
        new._values = {**self._values, **changes}
        return new

    def _set(self, name: str, convert: Callable[[Any], Any], value: Any) -> Style:
        return self._with(**{name: StyleValue.val(convert(value))})

    def __getitem__(self, name: str) -> StyleValue:
        return self._values[name]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Style):
            return NotImplemented
        return self._values == other._values

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        set_values = ", ".join(
            f"{name}={value!r}" for name, value in self._values.items() if not value.is_base
        )
        return f"Style({set_values})"

    def set_value(self, name: str, value: StyleValue) -> Style:
        """Set property ``name`` to a style value directly."""
        self._check(name, value)
        return self._with(**{name: value})

    def compute(self, underlying: ComputedStyle) -> ComputedStyle:
        """Resolve into a computed style, taking missing values from ``underlying``."""
        overrides = {
            name: value.value for name, value in self._values.items() if value.is_val()
        }
        return dataclasses.replace(underlying, **overrides)

    def apply(self, over: Style) -> Style:
        """Apply ``over`` on top of this style.

        A value overrides, unset unsets, and base keeps what this style has.
        """
        new = Style()
        new._values = {
            name: mine if over._values[name].is_base else over._values[name]
            for name, mine in self._values.items()
        }
        return new

    def apply_overriding_styles(self, overrides: Iterable[Style]) -> Style:
        """Apply several styles in turn; later ones take precedence."""
        return functools.reduce(Style.apply, overrides, self)

    def display(self, value: Any) -> Style:
        return self._set("display", _DISPLAY, value)

    def position(self, value: Any) -> Style:
        return self._set("position", _POSITION, value)

    def width(self, value: Any) -> Style:
        return self._set("width", to_px_pct_auto, value)

    def height(self, value: Any) -> Style:
        return self._set("height", to_px_pct_auto, value)

    def min_width(self, value: Any) -> Style:
        return self._set("min_width", to_px_pct_auto, value)

    def min_height(self, value: Any) -> Style:
        return self._set("min_height", to_px_pct_auto, value)

    def max_width(self, value: Any) -> Style:
        return self._set("max_width", to_px_pct_auto, value)

    def max_height(self, value: Any) -> Style:
        return self._set("max_height", to_px_pct_auto, value)

    def flex_direction(self, value: Any) -> Style:
        return self._set("flex_direction", _FLEX_DIRECTION, value)

    def flex_wrap(self, value: Any) -> Style:
        return self._set("flex_wrap", _FLEX_WRAP, value)

    def flex_grow(self, value: Any) -> Style:
        return self._set("flex_grow", _float, value)

    def flex_shrink(self, value: Any) -> Style:
        return self._set("flex_shrink", _float, value)

    def flex_basis(self, value: Any) -> Style:
        return self._set("flex_basis", to_px_pct_auto, value)

    def justify_content(self, value: Any) -> Style:
        return self._set("justify_content", _JUSTIFY_CONTENT, value)

    def justify_self(self, value: Any) -> Style:
        return self._set("justify_self", _ALIGN_ITEMS, value)

    def align_items(self, value: Any) -> Style:
        return self._set("align_items", _ALIGN_ITEMS, value)

    def align_content(self, value: Any) -> Style:
        return self._set("align_content", _ALIGN_CONTENT, value)

    def align_self(self, value: Any) -> Style:
        return self._set("align_self", _ALIGN_ITEMS, value)

    def border_left(self, value: Any) -> Style:
        return self._set("border_left", to_px, value)

    def border_top(self, value: Any) -> Style:
        return self._set("border_top", to_px, value)

    def border_right(self, value: Any) -> Style:
        return self._set("border_right", to_px, value)

    def border_bottom(self, value: Any) -> Style:
        return self._set("border_bottom", to_px, value)

    def border_radius(self, value: Any) -> Style:
        return self._set("border_radius", to_px, value)

    def outline_color(self, value: Any) -> Style:
        return self._set("outline_color", _COLOR, value)

    def outline(self, value: Any) -> Style:
        return self._set("outline", to_px, value)

    def border_color(self, value: Any) -> Style:
        return self._set("border_color", _COLOR, value)

    def padding_left(self, value: Any) -> Style:
        return self._set("padding_left", to_px_pct, value)

    def padding_top(self, value: Any) -> Style:
        return self._set("padding_top", to_px_pct, value)

    def padding_right(self, value: Any) -> Style:
        return self._set("padding_right", to_px_pct, value)

    def padding_bottom(self, value: Any) -> Style:
        return self._set("padding_bottom", to_px_pct, value)

    def margin_left(self, value: Any) -> Style:
        return self._set("margin_left", to_px_pct_auto, value)

    def margin_top(self, value: Any) -> Style:
        return self._set("margin_top", to_px_pct_auto, value)

    def margin_right(self, value: Any) -> Style:
        return self._set("margin_right", to_px_pct_auto, value)

    def margin_bottom(self, value: Any) -> Style:
        return self._set("margin_bottom", to_px_pct_auto, value)

    def inset_left(self, value: Any) -> Style:
        return self._set("inset_left", to_px_pct_auto, value)

    def inset_top(self, value: Any) -> Style:
        return self._set("inset_top", to_px_pct_auto, value)

    def inset_right(self, value: Any) -> Style:
        return self._set("inset_right", to_px_pct_auto, value)

    def inset_bottom(self, value: Any) -> Style:
        return self._set("inset_bottom", to_px_pct_auto, value)

    def text_overflow(self, value: Any) -> Style:
        return self._set("text_overflow", _TEXT_OVERFLOW, value)

    def aspect_ratio(self, value: Any) -> Style:
        return self._set("aspect_ratio", _ASPECT_RATIO, value)

    def gap(self, value: Any) -> Style:
        return self._set("gap", _GAP, value)

    def width_full(self) -> Style:
        return self.width_pct(100.0)

    def width_pct(self, width: float) -> Style:
        return self.width(pct(width))

    def height_full(self) -> Style:
        return self.height_pct(100.0)

    def height_pct(self, height: float) -> Style:
        return self.height(pct(height))

    def size(self, width: Any, height: Any) -> Style:
        return self.width(width).height(height)

    def size_full(self) -> Style:
        return self.size_pct(100.0, 100.0)

    def size_pct(self, width: float, height: float) -> Style:
        return self.width(pct(width)).height(pct(height))

    def min_width_full(self) -> Style:
        return self.min_width_pct(100.0)

    def min_width_pct(self, min_width: float) -> Style:
        return self.min_width(pct(min_width))

    def min_height_full(self) -> Style:
        return self.min_height_pct(100.0)

    def min_height_pct(self, min_height: float) -> Style:
        return self.min_height(pct(min_height))

    def min_size_full(self) -> Style:
        return self.min_size_pct(100.0, 100.0)

    def min_size(self, min_width: Any, min_height: Any) -> Style:
        return self.min_width(min_width).min_height(min_height)

    def min_size_pct(self, min_width: float, min_height: float) -> Style:
        return self.min_size(pct(min_width), pct(min_height))

    def max_width_full(self) -> Style:
        return self.max_width_pct(100.0)

    def max_width_pct(self, max_width: float) -> Style:
        return self.max_width(pct(max_width))

    def max_height_full(self) -> Style:
        return self.max_height_pct(100.0)

    def max_height_pct(self, max_height: float) -> Style:
        return self.max_height(pct(max_height))

    def max_size(self, max_width: Any, max_height: Any) -> Style:
        return self.max_width(max_width).max_height(max_height)

    def max_size_full(self) -> Style:
        return self.max_size_pct(100.0, 100.0)

    def max_size_pct(self, max_width: float, max_height: float) -> Style:
        return self.max_size(pct(max_width), pct(max_height))

    def border(self, border: Any) -> Style:
        border = to_px(border)
        return self.border_left(border).border_top(border).border_right(border).border_bottom(border)

    def border_horiz(self, border: Any) -> Style:
        """Set the left and right borders."""
        border = to_px(border)
        return self.border_left(border).border_right(border)

    def border_vert(self, border: Any) -> Style:
        """Set the top and bottom borders."""
        border = to_px(border)
        return self.border_top(border).border_bottom(border)

    def padding_left_pct(self, padding: float) -> Style:
        return self.padding_left(pct(padding))

    def padding_right_pct(self, padding: float) -> Style:
        return self.padding_right(pct(padding))

    def padding_top_pct(self, padding: float) -> Style:
        return self.padding_top(pct(padding))

    def padding_bottom_pct(self, padding: float) -> Style:
        return self.padding_bottom(pct(padding))

    def padding(self, padding: Any) -> Style:
        """Set the padding on every side."""
        padding = to_px_pct(padding)
        return (
            self.padding_left(padding)
            .padding_top(padding)
            .padding_right(padding)
            .padding_bottom(padding)
        )

    def padding_pct(self, padding: float) -> Style:
        return self.padding(pct(padding))

    def padding_horiz(self, padding: Any) -> Style:
        """Set the left and right padding."""
        padding = to_px_pct(padding)
        return self.padding_left(padding).padding_right(padding)

    def padding_horiz_pct(self, padding: float) -> Style:
        return self.padding_horiz(pct(padding))

    def padding_vert(self, padding: Any) -> Style:
        """Set the top and bottom padding."""
        padding = to_px_pct(padding)
        return self.padding_top(padding).padding_bottom(padding)

    def padding_vert_pct(self, padding: float) -> Style:
        return self.padding_vert(pct(padding))

    def margin_left_pct(self, margin: float) -> Style:
        return self.margin_left(pct(margin))

    def margin_right_pct(self, margin: float) -> Style:
        return self.margin_right(pct(margin))

    def margin_top_pct(self, margin: float) -> Style:
        return self.margin_top(pct(margin))

    def margin_bottom_pct(self, margin: float) -> Style:
        return self.margin_bottom(pct(margin))

    def margin(self, margin: Any) -> Style:
        margin = to_px_pct_auto(margin)
        return (
            self.margin_left(margin)
            .margin_top(margin)
            .margin_right(margin)
            .margin_bottom(margin)
        )

    def margin_pct(self, margin: float) -> Style:
        return self.margin(pct(margin))

    def margin_horiz(self, margin: Any) -> Style:
        """Set the left and right margins."""
        margin = to_px_pct_auto(margin)
        return self.margin_left(margin).margin_right(margin)

    def margin_horiz_pct(self, margin: float) -> Style:
        return self.margin_horiz(pct(margin))

    def margin_vert(self, margin: Any) -> Style:
        """Set the top and bottom margins."""
        margin = to_px_pct_auto(margin)
        return self.margin_top(margin).margin_bottom(margin)

    def margin_vert_pct(self, margin: float) -> Style:
        return self.margin_vert(pct(margin))

    def inset_left_pct(self, inset: float) -> Style:
        return self.inset_left(pct(inset))

    def inset_right_pct(self, inset: float) -> Style:
        return self.inset_right(pct(inset))

    def inset_top_pct(self, inset: float) -> Style:
        return self.inset_top(pct(inset))

    def inset_bottom_pct(self, inset: float) -> Style:
        return self.inset_bottom(pct(inset))

    def inset(self, inset: Any) -> Style:
        inset = to_px_pct_auto(inset)
        return self.inset_left(inset).inset_top(inset).inset_right(inset).inset_bottom(inset)

    def inset_pct(self, inset: float) -> Style:
        return self.inset(pct(inset))

    def cursor(self, cursor: Any) -> Style:
        return self._with(cursor=_to_style_value(cursor, _instance_of(CursorStyle)))

    def color(self, color: Any) -> Style:
        return self._with(color=_to_style_value(color, _COLOR))

    def background(self, color: Any) -> Style:
        return self._with(background=_to_style_value(color, _COLOR))

    def _box_shadow(self, **changes: Any) -> Style:
        current = self._values["box_shadow"]
        if current.is_val() and current.value is not None:
            shadow = dataclasses.replace(current.value, **changes)
        else:
            shadow = BoxShadow(**changes)
        return self._with(box_shadow=StyleValue.val(shadow))

    def box_shadow_blur(self, blur_radius: float) -> Style:
        return self._box_shadow(blur_radius=_float(blur_radius))

    def box_shadow_color(self, color: Color) -> Style:
        return self._box_shadow(color=_COLOR(color))

    def box_shadow_spread(self, spread: float) -> Style:
        return self._box_shadow(spread=_float(spread))

    def box_shadow_h_offset(self, h_offset: float) -> Style:
        return self._box_shadow(h_offset=_float(h_offset))

    def box_shadow_v_offset(self, v_offset: float) -> Style:
        return self._box_shadow(v_offset=_float(v_offset))

    def scroll_bar_color(self, color: Any) -> Style:
        return self._with(scroll_bar_color=_to_style_value(color, _COLOR))

    def scroll_bar_rounded(self, rounded: Any) -> Style:
        return self._with(scroll_bar_rounded=_to_style_value(rounded, _instance_of(bool)))

    def scroll_bar_thickness(self, thickness: Any) -> Style:
        return self._with(scroll_bar_thickness=StyleValue.val(to_px(thickness)))

    def scroll_bar_edge_width(self, edge_width: Any) -> Style:
        return self._with(scroll_bar_edge_width=StyleValue.val(to_px(edge_width)))

    def font_size(self, size: Any) -> Style:
        return self._with(font_size=_to_style_value(size, _float))

    def font_family(self, family: Any) -> Style:
        return self._with(font_family=_to_style_value(family, _instance_of(str)))

    def font_weight(self, weight: Any) -> Style:
        return self._with(font_weight=_to_style_value(weight, _instance_of(Weight)))

    def font_bold(self) -> Style:
        return self.font_weight(Weight.BOLD)

    def font_style(self, style: Any) -> Style:
        return self._with(font_style=_to_style_value(style, _instance_of(FontStyle)))

    def cursor_color(self, color: Any) -> Style:
        return self._with(cursor_color=_to_style_value(color, _COLOR))

    def line_height(self, normal: float) -> Style:
        """Set the line height as a multiple of the font size."""
        return self._with(line_height=StyleValue.val(LineHeight.normal(_float(normal))))

    def text_ellipsis(self) -> Style:
        return self.text_overflow(TextOverflow.ELLIPSIS)

    def text_clip(self) -> Style:
        return self.text_overflow(TextOverflow.CLIP)

    def absolute(self) -> Style:
        return self.position(Position.ABSOLUTE)

    def items_start(self) -> Style:
        return self.align_items(AlignItems.FLEX_START)

    def items_center(self) -> Style:
        """Centre along the cross axis."""
        return self.align_items(AlignItems.CENTER)

    def items_end(self) -> Style:
        return self.align_items(AlignItems.FLEX_END)

    def justify_center(self) -> Style:
        """Centre along the main axis."""
        return self.justify_content(JustifyContent.CENTER)

    def justify_end(self) -> Style:
        return self.justify_content(JustifyContent.FLEX_END)

    def justify_start(self) -> Style:
        return self.justify_content(JustifyContent.FLEX_START)

    def justify_between(self) -> Style:
        return self.justify_content(JustifyContent.SPACE_BETWEEN)

    def hide(self) -> Style:
        return self.display(Display.NONE)

    def flex(self) -> Style:
        return self.display(Display.FLEX)

    def flex_row(self) -> Style:
        return self.flex_direction(FlexDirection.ROW)

    def flex_col(self) -> Style:
        return self.flex_direction(FlexDirection.COLUMN)

    def z_index(self, z_index: int) -> Style:
        return self._with(z_index=StyleValue.val(_int(z_index)))

    def apply_opt(self, opt: Optional[T], f: Callable[[Style, T], Style]) -> Style:
        """Apply ``f(self, opt)`` when ``opt`` is not None."""
        return self if opt is None else f(self, opt)

    def apply_if(self, cond: bool, f: Callable[[Style], Style]) -> Style:
        """Apply ``f(self)`` when ``cond`` holds."""
        return f(self) if cond else self


Style.BASE = Style()
Style.UNSET = Style(**dict.fromkeys(_FIELDS, StyleValue.UNSET))