import pytest

from bloomstyle.style import ComputedStyle, LayoutRect, Style
from bloomstyle.styletypes import (
    AlignItems,
    BoxShadow,
    Color,
    CursorStyle,
    Display,
    FlexDirection,
    JustifyContent,
    LineHeight,
    Position,
    StyleValue,
    TextOverflow,
    Weight,
)
from bloomstyle.unit import (
    Dimension,
    LengthPercentage,
    LengthPercentageAuto,
    LengthUnit,
    Px,
    PxPct,
    PxPctAuto,
    pct,
)


def test_style_override_val_wins():
    style = Style.BASE.padding_left(32.0).apply(Style.BASE.padding_left(64.0))
    assert style["padding_left"] == StyleValue.val(PxPct(64.0))


def test_style_override_base_keeps():
    style1 = Style.BASE.padding_left(32.0).padding_bottom(45.0)
    style2 = Style.BASE.padding_left(64.0).set_value("padding_bottom", StyleValue.BASE)
    style = style1.apply(style2)
    assert style["padding_left"] == StyleValue.val(PxPct(64.0))
    assert style["padding_bottom"] == StyleValue.val(PxPct(45.0))


def test_style_override_unset_unsets():
    style1 = Style.BASE.padding_left(32.0).padding_bottom(45.0)
    style2 = Style.BASE.padding_left(64.0).set_value("padding_bottom", StyleValue.UNSET)
    style = style1.apply(style2)
    assert style["padding_left"] == StyleValue.val(PxPct(64.0))
    assert style["padding_bottom"] == StyleValue.UNSET


def test_overriding_styles_base_after_unset():
    style1 = Style.BASE.padding_left(32.0).padding_bottom(45.0)
    style2 = Style.BASE.padding_left(64.0).set_value("padding_bottom", StyleValue.UNSET)
    style3 = Style.BASE.set_value("padding_bottom", StyleValue.BASE)
    style = style1.apply_overriding_styles(iter([style2, style3]))
    assert style["padding_left"] == StyleValue.val(PxPct(64.0))
    assert style["padding_bottom"] == StyleValue.UNSET


def test_overriding_styles_val_after_unset():
    style1 = Style.BASE.padding_left(32.0).padding_bottom(45.0)
    style2 = Style.BASE.padding_left(64.0).set_value("padding_bottom", StyleValue.UNSET)
    style3 = Style.BASE.padding_bottom(100.0)
    style = style1.apply_overriding_styles([style2, style3])
    assert style["padding_left"] == StyleValue.val(PxPct(64.0))
    assert style["padding_bottom"] == StyleValue.val(PxPct(100.0))


def test_apply_base_over_unset_stays_unset():
    style = Style.UNSET.apply(Style.BASE)
    assert style["width"] == StyleValue.UNSET
    assert style == Style.UNSET


def test_builders_return_new_style():
    original = Style.BASE
    changed = original.width(10)
    assert original["width"] == StyleValue.BASE
    assert changed["width"] == StyleValue.val(PxPctAuto(10.0))


def test_compute_uses_underlying_for_missing():
    underlying = ComputedStyle(flex_grow=2.0)
    computed = Style.BASE.padding(5).set_value("flex_grow", StyleValue.UNSET).compute(underlying)
    assert computed.padding_top == PxPct(5.0)
    assert computed.flex_grow == 2.0
    assert computed.display is Display.FLEX


def test_compute_defaults():
    computed = Style.BASE.compute(ComputedStyle())
    assert computed == ComputedStyle()
    assert computed.flex_shrink == 1.0
    assert computed.margin_left == PxPctAuto(0.0)
    assert computed.width.is_auto
    assert computed.text_overflow is TextOverflow.WRAP


def test_width_full_is_hundred_percent():
    style = Style.BASE.width_full().height_pct(50)
    assert style["width"] == StyleValue.val(PxPctAuto(100.0, percent=True))
    assert style["height"] == StyleValue.val(PxPctAuto(50.0, percent=True))


def test_size_helpers():
    style = Style.BASE.size(10, pct(20)).min_size_full().max_size_pct(30, 40)
    assert style["width"] == StyleValue.val(PxPctAuto(10.0))
    assert style["height"] == StyleValue.val(PxPctAuto(20.0, percent=True))
    assert style["min_height"] == StyleValue.val(PxPctAuto(100.0, percent=True))
    assert style["max_width"] == StyleValue.val(PxPctAuto(30.0, percent=True))
    assert style["max_height"] == StyleValue.val(PxPctAuto(40.0, percent=True))


def test_border_helpers():
    style = Style.BASE.border(2).border_horiz(Px(3.0))
    assert style["border_left"] == StyleValue.val(Px(3.0))
    assert style["border_right"] == StyleValue.val(Px(3.0))
    assert style["border_top"] == StyleValue.val(Px(2.0))
    vert = Style.BASE.border_vert(4)
    assert vert["border_bottom"] == StyleValue.val(Px(4.0))
    assert vert["border_left"] == StyleValue.BASE


def test_padding_and_margin_helpers():
    style = Style.BASE.padding_horiz_pct(10).padding_vert(3).margin_vert_pct(5).margin_horiz(7)
    assert style["padding_left"] == StyleValue.val(PxPct(10.0, percent=True))
    assert style["padding_top"] == StyleValue.val(PxPct(3.0))
    assert style["margin_top"] == StyleValue.val(PxPctAuto(5.0, percent=True))
    assert style["margin_right"] == StyleValue.val(PxPctAuto(7.0))


def test_inset_helpers():
    style = Style.BASE.inset_pct(25).inset_left(1)
    assert style["inset_left"] == StyleValue.val(PxPctAuto(1.0))
    assert style["inset_bottom"] == StyleValue.val(PxPctAuto(25.0, percent=True))


def test_box_shadow_builders_update_existing():
    style = Style.BASE.box_shadow_blur(4).box_shadow_spread(2).box_shadow_color(Color.WHITE)
    shadow = style["box_shadow"].value
    assert shadow == BoxShadow(blur_radius=4.0, spread=2.0, color=Color.WHITE)


def test_box_shadow_defaults_when_new():
    style = Style.BASE.box_shadow_v_offset(3)
    assert style["box_shadow"] == StyleValue.val(BoxShadow(v_offset=3.0))
    assert style["box_shadow"].value.color == Color.BLACK


def test_optional_builders():
    red = Color(255, 0, 0)
    style = (
        Style.BASE.color(red)
        .background(StyleValue.UNSET)
        .cursor(CursorStyle.POINTER)
        .font_bold()
        .font_size(14)
        .line_height(1.5)
        .z_index(3)
        .scroll_bar_thickness(6)
    )
    assert style["color"] == StyleValue.val(red)
    assert style["background"] == StyleValue.UNSET
    assert style["cursor"] == StyleValue.val(CursorStyle.POINTER)
    assert style["font_weight"] == StyleValue.val(Weight.BOLD)
    assert style["font_size"] == StyleValue.val(14.0)
    assert style["line_height"] == StyleValue.val(LineHeight(1.5))
    assert style["z_index"] == StyleValue.val(3)
    assert style["scroll_bar_thickness"] == StyleValue.val(Px(6.0))


def test_alignment_shortcuts():
    style = Style.BASE.items_center().justify_between().absolute().flex_col().text_ellipsis()
    assert style["align_items"] == StyleValue.val(AlignItems.CENTER)
    assert style["justify_content"] == StyleValue.val(JustifyContent.SPACE_BETWEEN)
    assert style["position"] == StyleValue.val(Position.ABSOLUTE)
    assert style["flex_direction"] == StyleValue.val(FlexDirection.COLUMN)
    assert style["text_overflow"] == StyleValue.val(TextOverflow.ELLIPSIS)
    assert Style.BASE.hide()["display"] == StyleValue.val(Display.NONE)


def test_apply_opt_and_apply_if():
    style = (
        Style.BASE.apply_opt(5.0, Style.padding)
        .apply_opt(None, Style.margin)
        .apply_if(True, lambda s: s.border_left(1))
        .apply_if(False, lambda s: s.border_right(1))
    )
    assert style["padding_left"] == StyleValue.val(PxPct(5.0))
    assert style["margin_left"] == StyleValue.BASE
    assert style["border_left"] == StyleValue.val(Px(1.0))
    assert style["border_right"] == StyleValue.BASE


def test_to_layout_style():
    computed = Style.BASE.width(50).height_full().border(2).padding_pct(50).compute(ComputedStyle())
    layout = computed.to_layout_style()
    assert layout.width == Dimension(LengthUnit.POINTS, 50.0)
    assert layout.height == Dimension(LengthUnit.PERCENT, 1.0)
    assert layout.border.top == LengthPercentage(LengthUnit.POINTS, 2.0)
    assert layout.padding == LayoutRect(*[LengthPercentage(LengthUnit.PERCENT, 0.5)] * 4)
    assert layout.margin.left == LengthPercentageAuto(LengthUnit.POINTS, 0.0)
    assert layout.inset.right == LengthPercentageAuto(LengthUnit.AUTO)
    assert layout.flex_shrink == 1.0


def test_unknown_property_raises():
    with pytest.raises(KeyError):
        Style.BASE["colour"]
    with pytest.raises(KeyError):
        Style.BASE.set_value("colour", StyleValue.UNSET)


def test_set_value_requires_style_value():
    with pytest.raises(TypeError):
        Style.BASE.set_value("width", 10)


def test_wrong_type_rejected():
    with pytest.raises(TypeError):
        Style.BASE.display("flex")
    with pytest.raises(TypeError):
        Style.BASE.z_index(1.5)