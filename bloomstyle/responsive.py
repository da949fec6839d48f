"""Screen size flags and width breakpoints for responsive styles."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum, IntFlag

__all__ = [
    "SizeFlags",
    "ScreenSizeBp",
    "GridBreakpoints",
    "ScreenSize",
    "screen_range",
    "not_size",
]


class SizeFlags(IntFlag):
    XS = 1
    SM = 2
    MD = 4
    LG = 8
    XL = 16
    XXL = 32


_ALL_BITS = 63


def _members(flags: int) -> list[SizeFlags]:
    """The single flags set in ``flags``, lowest first."""
    return [member for member in SizeFlags if member & flags]


class ScreenSizeBp(Enum):
    XS = "xs"
    SM = "sm"
    MD = "md"
    LG = "lg"
    XL = "xl"
    XXL = "xxl"


_BREAKPOINT_OF_FLAG = {
    SizeFlags.XS: ScreenSizeBp.XS,
    SizeFlags.SM: ScreenSizeBp.SM,
    SizeFlags.MD: ScreenSizeBp.MD,
    SizeFlags.LG: ScreenSizeBp.LG,
    SizeFlags.XL: ScreenSizeBp.XL,
    SizeFlags.XXL: ScreenSizeBp.XXL,
}


@dataclass(frozen=True)
class GridBreakpoints:
    """Width breakpoints in pixels; ranges are half-open."""

    xs_end: float = 576.0
    sm: tuple[float, float] = (576.0, 768.0)
    md: tuple[float, float] = (768.0, 992.0)
    lg: tuple[float, float] = (992.0, 1200.0)
    xl: tuple[float, float] = (1200.0, 1400.0)
    xxl_start: float = 1400.0

    def get_width_bp(self, width: float) -> ScreenSizeBp:
        """Return the breakpoint that ``width`` falls in."""
        if not math.isnan(width):
            if width < self.xs_end:
                return ScreenSizeBp.XS
            for (low, high), bp in (
                (self.sm, ScreenSizeBp.SM),
                (self.md, ScreenSizeBp.MD),
                (self.lg, ScreenSizeBp.LG),
                (self.xl, ScreenSizeBp.XL),
            ):
                if low <= width < high:
                    return bp
            if width >= self.xxl_start:
                return ScreenSizeBp.XXL
        raise ValueError(f"Width {width} did not match any breakpoint")


@dataclass(frozen=True)
class ScreenSize:
    """A set of screen size classes."""

    flags: SizeFlags

    XS = None  # type: ScreenSize
    SM = None  # type: ScreenSize
    MD = None  # type: ScreenSize
    LG = None  # type: ScreenSize
    XL = None  # type: ScreenSize
    XXL = None  # type: ScreenSize

    def __post_init__(self) -> None:
        bits = int(self.flags)
        if bits & ~_ALL_BITS:
            raise ValueError(f"invalid size flags: {bits}")
        object.__setattr__(self, "flags", SizeFlags(bits))

    def __or__(self, other: ScreenSize) -> ScreenSize:
        if not isinstance(other, ScreenSize):
            return NotImplemented
        return ScreenSize(SizeFlags(int(self.flags) | int(other.flags)))

    def contains(self, flag: SizeFlags | ScreenSize) -> bool:
        """True if every flag in ``flag`` is set here."""
        bits = int(flag.flags) if isinstance(flag, ScreenSize) else int(flag)
        return int(self.flags) & bits == bits

    def breakpoints(self) -> list[ScreenSizeBp]:
        """The breakpoints covered by this size, smallest first."""
        return [_BREAKPOINT_OF_FLAG[member] for member in _members(self.flags)]


ScreenSize.XS = ScreenSize(SizeFlags.XS)
ScreenSize.SM = ScreenSize(SizeFlags.SM)
ScreenSize.MD = ScreenSize(SizeFlags.MD)
ScreenSize.LG = ScreenSize(SizeFlags.LG)
ScreenSize.XL = ScreenSize(SizeFlags.XL)
ScreenSize.XXL = ScreenSize(SizeFlags.XXL)


def not_size(size: ScreenSize) -> ScreenSize:
    """Every size class that ``size`` does not contain."""
    return ScreenSize(SizeFlags(_ALL_BITS & ~int(size.flags)))


def screen_range(
    start: ScreenSize | None = None,
    end: ScreenSize | None = None,
    inclusive: bool = False,
) -> ScreenSize:
    """All size classes from ``start`` up to ``end``.

    ``None`` leaves a side unbounded. The end is excluded unless ``inclusive``.
    The lowest class of ``start`` and the highest of ``end`` bound the result.
    """
    if start is None:
        start = ScreenSize.XS
    if end is None:
        end = ScreenSize.XXL
    elif not inclusive:
        end = ScreenSize(SizeFlags(int(end.flags) // 2))

    start_members = _members(start.flags)
    end_members = _members(end.flags)
    if not start_members or not end_members:
        raise ValueError("range bound has no size class")
    lowest = int(start_members[0])
    highest = int(end_members[-1])
    if highest < lowest:
        raise ValueError("range end is below range start")
    mask = highest - lowest
    return ScreenSize(SizeFlags(highest | mask | lowest))