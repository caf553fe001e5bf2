"""
Keeping a crop inside the image.

``contain_crop`` takes the crop from before and after a drag step so that it
can tell which way the user is resizing.  When an aspect-locked crop is
pinned against one side, the position on the other axis is frozen instead of
letting the box slide.
"""

from dataclasses import replace

from crop_geometry.config import UNIT_PX
from crop_geometry.models import Crop, clamp, is_set
from crop_geometry.units import convert_to_percent_crop, convert_to_pixel_crop


def contain_crop(prev_crop: Crop, crop: Crop, image_width: float, image_height: float) -> Crop:
    """Return ``crop`` in pixels, shrunk so that it does not overflow the image."""
    pixel_crop = convert_to_pixel_crop(crop, image_width, image_height)
    prev_pixel_crop = convert_to_pixel_crop(prev_crop, image_width, image_height)

    # Without an aspect each axis is clipped on its own.
    if not is_set(pixel_crop.aspect):
        if pixel_crop.x < 0:
            pixel_crop.width += pixel_crop.x
            pixel_crop.x = 0
        elif pixel_crop.x + pixel_crop.width > image_width:
            pixel_crop.width = image_width - pixel_crop.x

        if pixel_crop.y + pixel_crop.height > image_height:
            pixel_crop.height = image_height - pixel_crop.y

        return pixel_crop

    aspect = pixel_crop.aspect

    # Overflowing on X
    if pixel_crop.x < 0:
        pixel_crop.width = pixel_crop.x + pixel_crop.width
        pixel_crop.x = 0
        pixel_crop.height = pixel_crop.width / aspect
    elif pixel_crop.x + pixel_crop.width > image_width:
        pixel_crop.width = image_width - pixel_crop.x
        pixel_crop.height = pixel_crop.width / aspect

    # Sizing upwards against the left or right border: keep Y where it was.
    if prev_pixel_crop.y > pixel_crop.y:
        if pixel_crop.x + pixel_crop.width >= image_width or pixel_crop.x <= 0:
            pixel_crop.height += prev_pixel_crop.height - pixel_crop.height
            pixel_crop.y = prev_pixel_crop.y

    # Overflowing on Y
    if pixel_crop.y < 0:
        pixel_crop.height = pixel_crop.y + pixel_crop.height
        pixel_crop.y = 0
        pixel_crop.width = pixel_crop.height * aspect
    elif pixel_crop.y + pixel_crop.height > image_height:
        pixel_crop.height = image_height - pixel_crop.y
        pixel_crop.width = pixel_crop.height * aspect

    # Sizing leftwards against the bottom border: keep X where it was.
    if pixel_crop.x < prev_pixel_crop.x and pixel_crop.y + pixel_crop.height >= image_height:
        pixel_crop.width += prev_pixel_crop.width - pixel_crop.width
        pixel_crop.x = prev_pixel_crop.x

    return pixel_crop


def nudge_crop(crop: Crop, dx: float, dy: float, image_width: float, image_height: float) -> Crop:
    """
    Move a crop by ``(dx, dy)`` image pixels without resizing it.

    The new position is clamped so the box stays inside the image.  The
    result is in the same unit as the input.
    """
    pixel_crop = convert_to_pixel_crop(crop, image_width, image_height)
    moved = replace(
        pixel_crop,
        x=clamp(pixel_crop.x + dx, 0, max(0, image_width - pixel_crop.width)),
        y=clamp(pixel_crop.y + dy, 0, max(0, image_height - pixel_crop.height)),
    )
    if crop.unit and crop.unit != UNIT_PX:
        return convert_to_percent_crop(moved, image_width, image_height)
    return moved

