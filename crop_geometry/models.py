"""
Crop record and geometry primitives.

``Crop`` is the single value type shared by every algorithm in the package.
Fields are optional so that callers can pass partial descriptions while a
crop is being edited; each algorithm materializes a complete working copy
with ``with_defaults()`` before doing any arithmetic.

"Set" in this package means not None, not zero and not NaN.  Several
branches deliberately treat those three the same way.
"""

import math
from dataclasses import asdict, dataclass, fields, replace
from numbers import Real

from crop_geometry.config import UNIT_PX, UNITS


# =============================================================================
# Data classes
# =============================================================================
@dataclass
class Crop:
    """Crop rectangle in pixel or percentage units."""
    x: float | None = None
    y: float | None = None
    width: float | None = None
    height: float | None = None
    unit: str | None = None
    aspect: float | None = None  # width / height; locks the ratio when set

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "Crop":
        """Build a Crop from a plain mapping, ignoring unknown keys."""
        names = {f.name for f in fields(cls)}
        values = {k: v for k, v in data.items() if k in names}
        unit = values.get("unit")
        if unit is not None and unit not in UNITS:
            raise ValueError(f"unit must be one of {UNITS}, got {unit!r}")
        return cls(**values)


DEFAULT_CROP = Crop(x=0, y=0, width=0, height=0, unit=UNIT_PX)


# =============================================================================
# Primitives
# =============================================================================
def is_set(value) -> bool:
    """True for a number that is not None, zero or NaN."""
    if value is None:
        return False
    if isinstance(value, float) and math.isnan(value):
        return False
    return bool(value)


def or_zero(value) -> float:
    return value if is_set(value) else 0


def divide(a: float, b: float) -> float:
    """Float division with IEEE-754 results for a zero divisor."""
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def nan_min(a: float, b: float) -> float:
    """Smaller of two floats, NaN if either is NaN."""
    if math.isnan(a) or math.isnan(b):
        return math.nan
    return min(a, b)


def with_defaults(crop: Crop, **overrides) -> Crop:
    """Merge ``crop`` over DEFAULT_CROP; None fields take the default."""
    merged = replace(DEFAULT_CROP)
    for f in fields(Crop):
        value = getattr(crop, f.name)
        if value is not None:
            setattr(merged, f.name, value)
    return replace(merged, **overrides)


def clamp(value: float, minimum: float, maximum: float) -> float:
    return min(max(value, minimum), maximum)


def is_crop_valid(crop: Crop | None) -> bool:
    """True when width and height are both present, numeric and non-zero.

    A zero-sized crop is never valid.
    """
    if crop is None:
        return False
    for value in (crop.width, crop.height):
        if not isinstance(value, Real) or not is_set(value):
            return False
    return True


def are_crops_equal(crop_a: Crop, crop_b: Crop) -> bool:
    """Exact comparison of size, position, aspect and unit."""
    return (
        crop_a.width == crop_b.width
        and crop_a.height == crop_b.height
        and crop_a.x == crop_b.x
        and crop_a.y == crop_b.y
        and crop_a.aspect == crop_b.aspect
        and crop_a.unit == crop_b.unit
    )
