"""
Aspect-ratio resolution.

``make_aspect_crop`` completes an aspect-locked crop that only has one
dimension set, fitting it to the image (vertical overflow first, then
horizontal).  The ratio helpers turn user-facing strings such as ``"16:9"``
into the float ``Crop.aspect`` expects.
"""

import logging
import math
import re

from crop_geometry.config import ASPECT_PRESETS, UNIT_PX
from crop_geometry.models import Crop, is_set, or_zero, with_defaults

logger = logging.getLogger(__name__)

_RATIO_RE = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*[:x/]\s*(\d+(?:\.\d+)?)\s*$", re.IGNORECASE)


# =============================================================================
# Aspect-ratio helpers
# =============================================================================
def parse_aspect(value) -> float:
    """
    Parse an aspect ratio into a positive float.

    Accepts numbers, ``"16:9"``, ``"16x9"``, ``"16/9"``, decimal strings such
    as ``"1.5"`` and the names in ASPECT_PRESETS.  Raises ValueError for
    anything else.
    """
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        aspect = float(value)
    elif isinstance(value, str):
        text = value.strip().lower()
        match = _RATIO_RE.match(text)
        if text in ASPECT_PRESETS:
            aspect = ASPECT_PRESETS[text]
        elif match:
            w, h = float(match.group(1)), float(match.group(2))
            if h == 0:
                raise ValueError(f"aspect ratio {value!r} has a zero height")
            aspect = w / h
        else:
            try:
                aspect = float(text)
            except ValueError:
                raise ValueError(f"cannot parse aspect ratio {value!r}") from None
    else:
        raise ValueError(f"cannot parse aspect ratio {value!r}")

    if not math.isfinite(aspect) or aspect <= 0:
        raise ValueError(f"aspect ratio must be a positive number, got {value!r}")
    return aspect


# =============================================================================
# Aspect resolution
# =============================================================================
def make_aspect_crop(crop: Crop, image_width: float, image_height: float) -> Crop:
    """
    Derive the missing dimension of an aspect-locked crop.

    The width drives the height when set, otherwise the height drives the
    width.  The result is then shrunk to fit the image: bottom overflow is
    resolved first, right overflow second.  Negative ``x``/``y`` are left
    alone.

    A crop without a usable ``aspect`` is logged as an error and returned
    merged over the defaults, with no ratio applied.
    """
    if not is_set(crop.aspect):
        logger.error("`crop.aspect` should be a number: %r", crop)
        return with_defaults(crop)

    aspect = crop.aspect
    complete = Crop(
        unit=UNIT_PX,
        x=or_zero(crop.x),
        y=or_zero(crop.y),
        width=or_zero(crop.width),
        height=or_zero(crop.height),
        aspect=aspect,
    )

    # Both checks read the caller's fields, not the working copy.
    if is_set(crop.width):
        complete.height = complete.width / aspect

    if is_set(crop.height):
        complete.width = complete.height * aspect

    if complete.y + complete.height > image_height:
        complete.height = image_height - complete.y
        complete.width = complete.height * aspect

    if complete.x + complete.width > image_width:
        complete.width = image_width - complete.x
        complete.height = complete.width / aspect

    return complete


def resolve_crop(pixel_crop: Crop, image_width: float, image_height: float) -> Crop:
    """Complete an aspect-locked crop that is missing a dimension."""
    if is_set(pixel_crop.aspect) and (not is_set(pixel_crop.width) or not is_set(pixel_crop.height)):
        return make_aspect_crop(pixel_crop, image_width, image_height)

    return pixel_crop
