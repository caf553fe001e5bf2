"""
Engine constants.

Units and handle ordinals are the closed vocabularies the geometry modules
branch on.  ASPECT_PRESETS provides named ratios for the CLI; the image I/O
constants control how ``crop-geometry crop`` writes its output.
"""

# =============================================================================
# APP IDENTITY
# =============================================================================
APP_NAME = "crop-geometry"

# =============================================================================
# UNITS
# =============================================================================
UNIT_PX = "px"
UNIT_PERCENT = "%"
UNITS = (UNIT_PX, UNIT_PERCENT)

# =============================================================================
# HANDLE ORDINALS: compass codes for the resize handles
# =============================================================================
ORDINALS = ("n", "ne", "e", "se", "s", "sw", "w", "nw")


# =============================================================================
# ASPECT PRESETS: names accepted wherever an aspect string is parsed
# =============================================================================
ASPECT_PRESETS = {
    "square": 1.0,
    "landscape": 4 / 3,
    "portrait": 3 / 4,
    "widescreen": 16 / 9,
    "ultrawide": 21 / 9,
}

# =============================================================================
# IMAGE I/O
# =============================================================================
# PNG compression level (0-9, 9 = maximum compression)
PNG_COMPRESS_LEVEL = 9

# JPEG export defaults
JPEG_QUALITY_DEFAULT = 95
