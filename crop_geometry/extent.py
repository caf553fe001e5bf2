"""
Largest reachable crops.

``get_max_crop`` answers "how big can this crop get if the user keeps
dragging this handle?", anchoring the opposite edge or corner.  The
placement helpers below compute the largest aspect-locked crop for a whole
image and centre crops inside it.
"""

import logging

from crop_geometry.config import ORDINALS, UNIT_PERCENT, UNIT_PX
from crop_geometry.models import Crop, divide, is_set, nan_min, with_defaults
from crop_geometry.units import convert_to_percent_crop, convert_to_pixel_crop

logger = logging.getLogger(__name__)


# =============================================================================
# Max extent from a handle
# =============================================================================
def get_max_crop(pixel_crop: Crop, ordinal: str, container_width: float, container_height: float) -> Crop:
    """
    Return the largest crop reachable by dragging handle ``ordinal``.

    Without an aspect every ordinal is supported.  With an aspect only the
    corner handles are: the crop grows from the opposite corner until the
    first container edge is hit.  Edge handles under an aspect lock give a
    zero-sized crop.
    """
    if ordinal not in ORDINALS:
        raise ValueError(f"ordinal must be one of {ORDINALS}, got {ordinal!r}")

    original = with_defaults(pixel_crop)
    max_crop = with_defaults(pixel_crop)

    if not is_set(max_crop.aspect):
        if ordinal == "n":
            max_crop.height = max_crop.y + max_crop.height
            max_crop.y = 0
        elif ordinal == "ne":
            max_crop.height = max_crop.y + max_crop.height
            max_crop.width = container_width - max_crop.x
            max_crop.y = 0
        elif ordinal == "e":
            max_crop.width = container_width - max_crop.x
        elif ordinal == "se":
            max_crop.width = container_width - max_crop.x
            max_crop.height = container_height - max_crop.y
        elif ordinal == "s":
            max_crop.height = container_height - max_crop.y
        elif ordinal == "sw":
            max_crop.width = max_crop.x + max_crop.width
            max_crop.height = max_crop.y + max_crop.height
            max_crop.x = 0
        elif ordinal == "w":
            max_crop.width = max_crop.x + max_crop.width
            max_crop.x = 0
        elif ordinal == "nw":
            max_crop.width = max_crop.x + max_crop.width
            max_crop.height = max_crop.y + max_crop.height
            max_crop.x = 0
            max_crop.y = 0
        return max_crop

    longest_width = 0
    longest_height = 0

    if ordinal == "ne":
        # Furthest corner is SW.
        longest_width = container_width - max_crop.x
        longest_height = max_crop.y + max_crop.height
    elif ordinal == "se":
        # Furthest corner is NW.
        longest_width = container_width - max_crop.x
        longest_height = container_height - max_crop.y
    elif ordinal == "sw":
        # Furthest corner is NE.
        longest_width = max_crop.x + max_crop.width
        longest_height = container_height - max_crop.y
    elif ordinal == "nw":
        # Furthest corner is SE.
        longest_width = max_crop.x + max_crop.width
        longest_height = max_crop.y + max_crop.height
    else:
        # TODO: grow along a single axis for edge handles once an aspect-locked
        # edge drag has agreed semantics.
        logger.warning("Edge handle %r has no max extent under an aspect lock", ordinal)

    ratio_x = divide(longest_width, max_crop.width)
    ratio_y = divide(longest_height, max_crop.height)
    ratio = nan_min(ratio_x, ratio_y)
    width = max_crop.width * ratio
    height = divide(width, max_crop.aspect)

    if ordinal == "ne":
        max_crop.y = max_crop.y + (original.height - height)
    elif ordinal == "sw":
        max_crop.x = max_crop.x + (original.width - width)
    elif ordinal == "nw":
        max_crop.x = max_crop.x + (original.width - width)
        max_crop.y = max_crop.y + (original.height - height)

    max_crop.width = width
    max_crop.height = height

    return max_crop


# =============================================================================
# Placement helpers
# =============================================================================
def calculate_max_crop(image_width: float, image_height: float, aspect: float) -> tuple[float, float]:
    """Calculate the largest crop size for ``aspect`` that fits within an image."""
    # Try full width
    crop_w = image_width
    crop_h = crop_w / aspect
    if crop_h <= image_height:
        return crop_w, crop_h
    # Full height
    crop_h = image_height
    crop_w = crop_h * aspect
    return min(crop_w, image_width), crop_h


def center_crop(crop: Crop, image_width: float, image_height: float) -> Crop:
    """Return ``crop`` centred in the image, in its own unit."""
    percent_crop = convert_to_percent_crop(crop, image_width, image_height)
    percent_crop.x = (100 - percent_crop.width) / 2
    percent_crop.y = (100 - percent_crop.height) / 2

    if crop.unit == UNIT_PERCENT:
        return percent_crop
    return convert_to_pixel_crop(percent_crop, image_width, image_height)


def centered_aspect_crop(aspect: float, image_width: float, image_height: float, unit: str = UNIT_PX) -> Crop:
    """Maximum crop for ``aspect``, centred."""
    cw, ch = calculate_max_crop(image_width, image_height, aspect)
    crop = Crop(
        x=(image_width - cw) / 2,
        y=(image_height - ch) / 2,
        width=cw,
        height=ch,
        unit=UNIT_PX,
        aspect=aspect,
    )
    if unit == UNIT_PERCENT:
        return convert_to_percent_crop(crop, image_width, image_height)
    return crop
