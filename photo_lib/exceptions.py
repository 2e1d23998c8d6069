"""
Custom exception hierarchy for photo_lib.

Errors coming from the filesystem itself (PermissionError, FileNotFoundError,
...) are never wrapped; only the checks done by photo_lib get their own types.
"""
import errno


class PhotoLibError(Exception):
    """Base exception for all photo_lib errors."""
    pass


class VariantNotFoundError(PhotoLibError, FileNotFoundError):
    """
    Raised when a file variant is not recorded as present for a photo.

    It is a FileNotFoundError, so callers handling "not found" treat it the
    same as a missing file on disk.
    """

    def __init__(self, photo_type, filename):
        super().__init__(
            errno.ENOENT,
            f"No {photo_type.value} file recorded for this photo",
            filename,
        )
        self.photo_type = photo_type


class UnknownCameraError(PhotoLibError, KeyError):
    """Raised when no extension preset exists for a camera brand."""
    pass
