"""
Conversion between pixel and percentage crops.

Percentages are relative to the image width for ``x``/``width`` and to the
image height for ``y``/``height``.  Unset (or zero) fields convert to 0
without dividing, so a partial crop always comes back complete.
"""

from crop_geometry.config import UNIT_PERCENT, UNIT_PX
from crop_geometry.models import Crop, divide, is_set, with_defaults


def _to_percent(value, dimension: float) -> float:
    return divide(value, dimension) * 100 if is_set(value) else 0


def _to_pixel(value, dimension: float) -> float:
    return value * dimension / 100 if is_set(value) else 0


def convert_to_percent_crop(crop: Crop, image_width: float, image_height: float) -> Crop:
    """Return ``crop`` in percentage units."""
    if crop.unit == UNIT_PERCENT:
        return with_defaults(crop)

    return Crop(
        unit=UNIT_PERCENT,
        aspect=crop.aspect,
        x=_to_percent(crop.x, image_width),
        y=_to_percent(crop.y, image_height),
        width=_to_percent(crop.width, image_width),
        height=_to_percent(crop.height, image_height),
    )


def convert_to_pixel_crop(crop: Crop, image_width: float, image_height: float) -> Crop:
    """Return ``crop`` in pixel units.  A crop with no unit is taken as pixels."""
    if not crop.unit:
        return with_defaults(crop, unit=UNIT_PX)

    if crop.unit == UNIT_PX:
        return with_defaults(crop)

    return Crop(
        unit=UNIT_PX,
        aspect=crop.aspect,
        x=_to_pixel(crop.x, image_width),
        y=_to_pixel(crop.y, image_height),
        width=_to_pixel(crop.width, image_width),
        height=_to_pixel(crop.height, image_height),
    )
