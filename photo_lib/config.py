"""
Configuration constants for photo_lib.
"""

# --- Default Extensions ---
# Bare suffixes (no dot) appended directly to the photo name.
# Defaults match Fujifilm cameras and Darktable sidecars.
DEFAULT_RAW_EXT = "RAF"
DEFAULT_IMG_EXT = "JPG"
DEFAULT_OTHER_EXT = "xmp"

# --- Camera Presets ---
# brand -> (raw, developed, other)
CAMERA_EXTS = {
    'fujifilm': ("RAF", "JPG", "xmp"),
    'nikon': ("NEF", "JPG", "xmp"),
    'canon': ("CR3", "JPG", "xmp"),
    'sony': ("ARW", "JPG", "xmp"),
    'olympus': ("ORF", "JPG", "xmp"),
    'panasonic': ("RW2", "JPG", "xmp"),
    'leica': ("DNG", "JPG", "xmp"),
}
