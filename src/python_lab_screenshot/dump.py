"""
┌────────────────────────────────────────┐
│ Screenshot file output                 │
└────────────────────────────────────────┘

 October 2026
"""

import logging
import time

from io      import BytesIO
from pathlib import Path

from PIL     import Image, UnidentifiedImageError

from .errors import File_Write_Failed

DATE_TIME_FORMAT = "%Y-%m-%d_%H:%M:%S"


def date_time(t=None) -> str:
    """
    Local time formatted as YYYY-MM-DD_HH:MM:SS. t is a time.struct_time,
    defaults to now.
    """

    if t is None:
        t = time.localtime()

    return time.strftime(DATE_TIME_FORMAT, t)


def image_format_guess(data: bytes, fallback: str) -> str:
    """
    Asks Pillow what kind of image data holds ("bmp", "png", ...).
    Returns fallback if Pillow doesn't recognize it.
    """

    try:
        with Image.open(BytesIO(data)) as img:
            fmt = img.format
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError):
        return fallback

    return fmt.lower() if fmt else fallback


class Screenshot_Dump:
    def __init__(self, address, filename=None):
        self.address  = address
        self.filename = filename
        self.log      = logging.getLogger("Screenshot dump")

    def path_get(self, format_tag: str) -> Path:
        if self.filename:
            return Path(self.filename)

        return Path(f"screenshot_{self.address}_{date_time()}.{format_tag}")

    def write(self, data: bytes, format_tag: str) -> Path:
        path = self.path_get(format_tag)

        try:
            path.write_bytes(data)
        except OSError as exc:
            raise File_Write_Failed(path, exc.strerror or exc) from exc

        self.log.info(f"Saved screenshot image to {str(path)}")
        return path
