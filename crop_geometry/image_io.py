"""
Image I/O and crop application.

Opens images (PSD via psd-tools, everything else via Pillow), reads their
dimensions without full loading, and applies a Crop to a PIL image.  The
geometry modules never import this one.
"""

import logging
from pathlib import Path

from PIL import Image
from psd_tools import PSDImage

from crop_geometry.aspect import resolve_crop
from crop_geometry.containment import contain_crop
from crop_geometry.models import Crop
from crop_geometry.units import convert_to_pixel_crop

logger = logging.getLogger(__name__)

# Allow very large images (Pillow's default limit is ~178MP)
Image.MAX_IMAGE_PIXELS = None


def open_image(path: Path) -> Image.Image:
    """Open an image file, using psd-tools for PSD and Pillow for the rest."""
    if path.suffix.lower() == ".psd":
        psd = PSDImage.open(str(path))
        return psd.composite()
    return Image.open(path)


def get_image_size(path: Path) -> tuple[int, int]:
    """Get image dimensions without fully loading/compositing."""
    if path.suffix.lower() == ".psd":
        psd = PSDImage.open(str(path))
        return psd.width, psd.height
    with Image.open(path) as img:
        return img.size


def pixel_box(crop: Crop, img_w: int, img_h: int) -> tuple[int, int, int, int]:
    """
    Resolve, contain and round ``crop`` to a Pillow ``(left, top, right, bottom)`` box.

    Raises ValueError if nothing of the crop is left inside the image.
    """
    pixel_crop = resolve_crop(convert_to_pixel_crop(crop, img_w, img_h), img_w, img_h)
    pixel_crop = contain_crop(pixel_crop, pixel_crop, img_w, img_h)

    left = max(0, round(pixel_crop.x))
    top = max(0, round(pixel_crop.y))
    right = min(img_w, round(pixel_crop.x + pixel_crop.width))
    bottom = min(img_h, round(pixel_crop.y + pixel_crop.height))

    if right <= left or bottom <= top:
        raise ValueError(f"crop {crop!r} is empty inside a {img_w}x{img_h} image")
    return left, top, right, bottom


def crop_image(img: Image.Image, crop: Crop) -> Image.Image:
    """Return the region of ``img`` covered by ``crop`` (any unit)."""
    box = pixel_box(crop, img.width, img.height)
    logger.debug("Cropping %dx%d image to box %s", img.width, img.height, box)
    return img.crop(box)


def unique_path(out_path: Path) -> Path:
    """Return a unique path by appending -01, -02, etc. if file already exists."""
    if not out_path.exists():
        return out_path
    stem = out_path.stem
    suffix = out_path.suffix
    parent = out_path.parent
    counter = 1
    while True:
        candidate = parent / f"{stem}-{counter:02d}{suffix}"
        if not candidate.exists():
            return candidate
        counter += 1
