import dataclasses

import pytest

from bloomstyle.styletypes import (
    BoxShadow,
    Color,
    GapSize,
    LineHeight,
    StyleValue,
    StyleValueKind,
    Weight,
)
from bloomstyle.unit import LengthPercentage, LengthUnit


def test_default_style_value_is_base():
    assert StyleValue() == StyleValue.BASE
    assert StyleValue().is_base


def test_val_holds_value():
    sv = StyleValue.val("x")
    assert sv.is_val()
    assert sv.value == "x"
    assert sv.kind is StyleValueKind.VAL


def test_unset_and_base_are_not_val():
    assert not StyleValue.UNSET.is_val()
    assert not StyleValue.BASE.is_val()
    assert StyleValue.UNSET.is_unset


def test_map_on_val():
    assert StyleValue.val(3).map(lambda _: "mapped") == StyleValue.val("mapped")


@pytest.mark.parametrize("sv", [StyleValue.UNSET, StyleValue.BASE])
def test_map_passes_through_non_values(sv):
    calls = []
    assert sv.map(calls.append) == sv
    assert calls == []


def test_unwrap_or():
    assert StyleValue.val("a").unwrap_or("b") == "a"
    assert StyleValue.UNSET.unwrap_or("b") == "b"
    assert StyleValue.BASE.unwrap_or("b") == "b"


def test_unwrap_or_else_only_calls_when_needed():
    calls = []

    def fallback():
        calls.append(1)
        return "fb"

    assert StyleValue.val("a").unwrap_or_else(fallback) == "a"
    assert calls == []
    assert StyleValue.UNSET.unwrap_or_else(fallback) == "fb"
    assert StyleValue.BASE.unwrap_or_else(fallback) == "fb"
    assert len(calls) == 2


def test_non_val_cannot_hold_value():
    with pytest.raises(ValueError):
        StyleValue(StyleValueKind.UNSET, 5)


def test_box_shadow_defaults():
    shadow = BoxShadow()
    assert shadow.color == Color.BLACK
    assert (shadow.blur_radius, shadow.spread, shadow.h_offset, shadow.v_offset) == (
        0.0,
        0.0,
        0.0,
        0.0,
    )


def test_box_shadow_replace_keeps_other_fields():
    shadow = dataclasses.replace(BoxShadow(spread=2.0), blur_radius=4.0)
    assert shadow.spread == 2.0
    assert shadow.blur_radius == 4.0


def test_color_validation():
    with pytest.raises(ValueError):
        Color(256, 0, 0)
    with pytest.raises(TypeError):
        Color(1.5, 0, 0)


def test_transparent_differs_from_black_only_in_alpha():
    assert Color.TRANSPARENT.with_alpha(Color.BLACK.a) == Color.BLACK


def test_weight_ordering_and_validation():
    assert Weight.NORMAL < Weight.BOLD
    with pytest.raises(ValueError):
        Weight(-1)


def test_line_height_constructors():
    assert LineHeight.normal(1.5) == LineHeight(1.5, is_px=False)
    assert LineHeight.px(20).is_px


def test_gap_size_zero():
    zero = LengthPercentage(LengthUnit.POINTS, 0.0)
    gap = GapSize.zero()
    assert gap.width == zero
    assert gap.height == zero
    assert gap == GapSize()