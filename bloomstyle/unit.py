"""Length units used by styles and the layout values they convert to."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Px",
    "Pct",
    "Auto",
    "PxPct",
    "PxPctAuto",
    "LengthUnit",
    "Dimension",
    "LengthPercentage",
    "LengthPercentageAuto",
    "px",
    "pct",
    "to_px",
    "to_px_pct",
    "to_px_pct_auto",
]


def _f32(value: float) -> float:
    """Round a float to single precision, saturating to infinity on overflow."""
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _number(value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"expected a number, got {type(value).__name__}")
    return float(value)


@dataclass(frozen=True)
class Px:
    """A pixel value."""

    value: float


@dataclass(frozen=True)
class Pct:
    """A percent value."""

    value: float


@dataclass(frozen=True)
class Auto:
    """Marks a value that is computed automatically."""


class LengthUnit(Enum):
    """The unit of a layout length."""

    POINTS = "points"
    PERCENT = "percent"
    AUTO = "auto"


@dataclass(frozen=True)
class Dimension:
    """A layout size: points, a fraction of the parent, or auto."""

    unit: LengthUnit
    value: float = 0.0


@dataclass(frozen=True)
class LengthPercentage:
    """A layout length in points or as a fraction of the parent."""

    unit: LengthUnit
    value: float = 0.0

    def __post_init__(self) -> None:
        if self.unit is LengthUnit.AUTO:
            raise ValueError("LengthPercentage cannot be auto")


@dataclass(frozen=True)
class LengthPercentageAuto:
    """A layout length in points, as a fraction of the parent, or auto."""

    unit: LengthUnit
    value: float = 0.0


@dataclass(frozen=True)
class PxPct:
    """A length in pixels, or in percent when ``percent`` is true."""

    value: float
    percent: bool = False

    def to_length_percentage(self) -> LengthPercentage:
        if self.percent:
            return LengthPercentage(LengthUnit.PERCENT, _f32(_f32(self.value) / 100.0))
        return LengthPercentage(LengthUnit.POINTS, _f32(self.value))


@dataclass(frozen=True)
class PxPctAuto:
    """A length in pixels, in percent, or auto when ``value`` is None."""

    value: float | None = None
    percent: bool = False

    def __post_init__(self) -> None:
        if self.value is None and self.percent:
            raise ValueError("an auto length cannot be a percentage")

    @property
    def is_auto(self) -> bool:
        return self.value is None

    def to_dimension(self) -> Dimension:
        if self.value is None:
            return Dimension(LengthUnit.AUTO)
        if self.percent:
            return Dimension(LengthUnit.PERCENT, _f32(_f32(self.value) / 100.0))
        return Dimension(LengthUnit.POINTS, _f32(self.value))

    def to_length_percentage_auto(self) -> LengthPercentageAuto:
        if self.value is None:
            return LengthPercentageAuto(LengthUnit.AUTO)
        if self.percent:
            return LengthPercentageAuto(
                LengthUnit.PERCENT, _f32(_f32(self.value) / 100.0)
            )
        return LengthPercentageAuto(LengthUnit.POINTS, _f32(self.value))


def px(value: float) -> Px:
    """Make a pixel value from a number."""
    return Px(_number(value))


def pct(value: float) -> Pct:
    """Make a percent value from a number."""
    return Pct(_number(value))


def to_px(value: Px | float) -> Px:
    """Convert a number or a Px into a Px."""
    if isinstance(value, Px):
        return value
    return Px(_number(value))


def to_px_pct(value: PxPct | Pct | Px | float) -> PxPct:
    """Convert a percent, a pixel value or a number into a PxPct."""
    if isinstance(value, PxPct):
        return value
    if isinstance(value, Pct):
        return PxPct(value.value, percent=True)
    return PxPct(to_px(value).value)


def to_px_pct_auto(value: PxPctAuto | Pct | Auto | Px | float) -> PxPctAuto:
    """Convert a percent, auto, a pixel value or a number into a PxPctAuto."""
    if isinstance(value, PxPctAuto):
        return value
    if isinstance(value, Pct):
        return PxPctAuto(value.value, percent=True)
    if isinstance(value, Auto):
        return PxPctAuto()
    return PxPctAuto(to_px(value).value)