"""Crop-box geometry for interactive image cropping."""

from crop_geometry.aspect import make_aspect_crop, parse_aspect, resolve_crop
from crop_geometry.containment import contain_crop, nudge_crop
from crop_geometry.extent import calculate_max_crop, center_crop, centered_aspect_crop, get_max_crop
from crop_geometry.models import DEFAULT_CROP, Crop, are_crops_equal, clamp, is_crop_valid
from crop_geometry.units import convert_to_percent_crop, convert_to_pixel_crop

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Crop",
    "DEFAULT_CROP",
    "clamp",
    "is_crop_valid",
    "are_crops_equal",
    "convert_to_percent_crop",
    "convert_to_pixel_crop",
    "make_aspect_crop",
    "resolve_crop",
    "contain_crop",
    "get_max_crop",
    "nudge_crop",
    "calculate_max_crop",
    "center_crop",
    "centered_aspect_crop",
    "parse_aspect",
]
