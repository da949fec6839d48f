# bloomstyle

Building blocks for describing how user-interface views look and respond:
length units, layered styles with override semantics, responsive screen-size
breakpoints, pointer events and menus.

## Installation

```
pip install bloomstyle
```

## Units

`bloomstyle.unit` has pixel (`Px`), percent (`Pct`) and `Auto` values, and
the combined lengths `PxPct` and `PxPctAuto`. Plain numbers count as pixels.

```python
from bloomstyle.unit import px, pct, to_px_pct_auto, PxPctAuto

px(10)                                  # Px(value=10.0)
pct(50)                                 # Pct(value=50.0)
to_px_pct_auto(pct(50))                 # PxPctAuto(value=50.0, percent=True)
PxPctAuto(50.0, percent=True).to_dimension()   # Dimension(PERCENT, 0.5)
PxPctAuto().to_dimension()              # Dimension(AUTO, 0.0)
```

Conversions to the layout values `Dimension`, `LengthPercentage` and
`LengthPercentageAuto` turn percentages into fractions and round to single
precision.

## Styles

`bloomstyle.style.Style` holds a `StyleValue` for every property. A value is
either set (`StyleValue.val(x)`), `StyleValue.UNSET` (fall back to the
computed style underneath) or `StyleValue.BASE` (keep whatever the style
below says). `Style.BASE` has every property at base, `Style.UNSET` every
property unset.

```python
from bloomstyle.style import Style, ComputedStyle
from bloomstyle.styletypes import StyleValue

base = Style.BASE.padding_left(32.0).padding_bottom(45.0)
hover = Style.BASE.padding_left(64.0)

merged = base.apply(hover)          # padding_left is 64, padding_bottom stays 45
merged["padding_left"]              # StyleValue holding PxPct(64.0)

cleared = base.set_value("padding_bottom", StyleValue.UNSET)
computed = merged.compute(ComputedStyle())
layout = computed.to_layout_style()
```

Styles are immutable; every builder returns a new style, so they chain:

```python
card = (
    Style.BASE
    .flex_col()
    .width_full()
    .padding(10.0)
    .border(1.0)
    .apply_if(True, lambda s: s.font_bold())
    .apply_opt(None, Style.margin)   # skipped
)
```

Several overriding styles can be layered at once with
`apply_overriding_styles`; later styles take precedence.

The value types used by styles — `Color`, `BoxShadow`, `Weight`,
`LineHeight`, `GapSize` and enums such as `Display`, `FlexDirection`,
`AlignItems`, `JustifyContent`, `CursorStyle`, `TextOverflow` and
`StyleSelector` — live in `bloomstyle.styletypes`.

## Responsive sizes

```python
from bloomstyle.responsive import ScreenSize, GridBreakpoints, screen_range, not_size

small = screen_range(ScreenSize.XS, ScreenSize.LG, inclusive=False)  # XS, SM, MD
large = not_size(small)                                              # LG, XL, XXL
both = ScreenSize.XS | ScreenSize.XL
large.breakpoints()                  # [ScreenSizeBp.LG, ScreenSizeBp.XL, ScreenSizeBp.XXL]
GridBreakpoints().get_width_bp(800.0)                                # ScreenSizeBp.MD
```

The default breakpoints are below 576, 576–768, 768–992, 992–1200,
1200–1400 and from 1400 pixels up. A width that matches none (such as NaN)
raises `ValueError`.

## Menus

```python
from bloomstyle.menu import Menu, MenuItem

menu = (
    Menu("File")
    .entry(MenuItem("Open").with_action(lambda: print("open")))
    .separator()
    .entry(MenuItem("Quit").with_enabled(False))
)
```

Each `MenuItem` gets a unique `id`. A `Menu` can be nested as an entry of
another menu, marked as a popup with `as_popup()`, and iterated over.

## Pointer events

`PointerButton`, `PointerInputEvent`, `PointerMoveEvent` and
`PointerWheelEvent` in `bloomstyle.pointer` describe mouse input together with
the active keyboard `Modifiers`. `PointerButton.from_mouse_button("left")`
maps mouse button names to buttons.

## What this package does not do

It only describes styles, sizes, events and menus. It opens no windows,
draws nothing, computes no layout from a `LayoutStyle`, dispatches no events
and shows no menus on screen; those are left to the program that uses it.

## Running the tests

```
pip install -e ".[test]"
pytest
```