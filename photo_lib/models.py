import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from . import config
from .exceptions import UnknownCameraError, VariantNotFoundError


class PhotoType(Enum):
    """The kinds of file that can be linked to a photo."""
    RAW = 'raw'
    DEVELOPED = 'developed'
    OTHER = 'other'


@dataclass
class FilesFound:
    """
    Groups whether a photo has a raw file, a developed file or extra files
    linked to it.
    """
    raw: bool = False
    developed: bool = False
    other: bool = False


class PhotoFile:
    """
    Models a photo in a directory and the files sharing its name.

    A folder with pictures might contain:
      - raw files with the extension used by the camera's manufacturer.
      - developed files, usually JPG.
      - other files, such as descriptors written by Darktable.

    The flags are set by the caller after looking at the directory; they are
    not checked against the disk.
    """

    def __init__(self,
                 name: str,
                 raw_ext: Optional[str] = None,
                 img_ext: Optional[str] = None,
                 other_ext: Optional[str] = None):
        """
        Args:
            name: Name of the photo without extension. For DSCF10992.RAF
                  pass "DSCF10992".
            raw_ext: Raw file suffix (default: RAF).
            img_ext: Developed file suffix (default: JPG).
            other_ext: Sidecar file suffix (default: xmp).

        Suffixes are appended to the name as they are, so include the dot
        if the files on disk have one.
        """
        self._name = name
        self._raw_ext = raw_ext if raw_ext is not None else config.DEFAULT_RAW_EXT
        self._img_ext = img_ext if img_ext is not None else config.DEFAULT_IMG_EXT
        self._other_ext = other_ext if other_ext is not None else config.DEFAULT_OTHER_EXT
        self._found = FilesFound()

    @classmethod
    def for_camera(cls, name: str, camera: str) -> "PhotoFile":
        """Creates a PhotoFile using the extension preset of a camera brand."""
        try:
            raw_ext, img_ext, other_ext = config.CAMERA_EXTS[camera.lower()]
        except KeyError:
            raise UnknownCameraError(camera) from None
        return cls(name, raw_ext, img_ext, other_ext)

    @property
    def name(self) -> str:
        return self._name

    @property
    def raw_ext(self) -> str:
        return self._raw_ext

    @property
    def img_ext(self) -> str:
        return self._img_ext

    @property
    def other_ext(self) -> str:
        return self._other_ext

    def has_raw(self, raw_exists: Optional[bool] = None) -> bool:
        """Returns whether a raw file was found, optionally updating it first."""
        if raw_exists is not None:
            self._found.raw = raw_exists
        return self._found.raw

    def has_developed(self, img_exists: Optional[bool] = None) -> bool:
        """Returns whether a developed file was found, optionally updating it first."""
        if img_exists is not None:
            self._found.developed = img_exists
        return self._found.developed

    def has_other(self, other_exists: Optional[bool] = None) -> bool:
        """Returns whether a sidecar file was found, optionally updating it first."""
        if other_exists is not None:
            self._found.other = other_exists
        return self._found.other

    def is_developed(self) -> bool:
        # Only presence of both files, no timestamp check
        return self._found.raw and self._found.developed

    def path_for(self, photo_type: PhotoType) -> Path:
        ext, _ = self._lookup(photo_type)
        return Path(self._name + ext)

    def clear(self, photo_type: PhotoType) -> None:
        """
        Deletes the file of the given type linked to this photo.

        The path is resolved against the current working directory.

        Raises:
            VariantNotFoundError: The flag for photo_type is False. The disk
                                  is not touched.
            OSError: Removing the file failed (missing, no permission, ...).

        The flag is left as it was after a successful delete; call the
        matching has_* accessor to update it.
        """
        ext, exists = self._lookup(photo_type)
        path = Path(self._name + ext)

        if not exists:
            logging.debug(f"Not deleting {path}: no {photo_type.value} file recorded")
            raise VariantNotFoundError(photo_type, str(path))

        path.unlink()
        logging.info(f"Deleted {photo_type.value} file {path}")

    def _lookup(self, photo_type: PhotoType) -> tuple[str, bool]:
        if photo_type is PhotoType.RAW:
            return self._raw_ext, self._found.raw
        if photo_type is PhotoType.DEVELOPED:
            return self._img_ext, self._found.developed
        if photo_type is PhotoType.OTHER:
            return self._other_ext, self._found.other
        raise ValueError(f"Unknown photo type: {photo_type!r}")

    def __repr__(self) -> str:
        return (f"PhotoFile(name={self._name!r}, raw_ext={self._raw_ext!r}, "
                f"img_ext={self._img_ext!r}, other_ext={self._other_ext!r}, "
                f"found={self._found!r})")
