"""
Builds an ImageRecord from a single image file.

Field policy:
  - Gating: capture date and GPS coordinates. Without both the record is
    useless for mapping, so extraction fails and the file is left out.
  - Best-effort: camera model, pixel dimensions, altitude. A missing tag
    leaves the field as "" and the record is kept.
"""
import os
from pathlib import Path
from typing import Union

from .. import config
from ..models import ImageRecord
from .exif import ExifBlock


class MetadataExtractor:

    def extract(self, path: Union[str, Path]) -> ImageRecord:
        """
        Reads the EXIF block of `path` and maps it onto an ImageRecord.

        Raises:
            OSError: the file cannot be opened or read.
            MetadataDecodeError: no decodable EXIF block.
            MissingTagError: capture date or coordinates missing.
        """
        path = str(path)

        with open(path, 'rb') as f:
            block = ExifBlock.decode(f)

        # None means "tag absent"; the record stores "" instead
        camera = block.get(config.MODEL_TAG) or ""
        width = block.get(config.WIDTH_TAG) or ""
        height = block.get(config.HEIGHT_TAG) or ""
        altitude = block.get(config.ALTITUDE_TAG) or ""

        capture_dt = block.timestamp()
        lat, lon = block.coordinates()

        return ImageRecord(
            path=path,
            filename=os.path.basename(path),
            latitude=lat,
            longitude=lon,
            capture_date=capture_dt,
            altitude=altitude,
            camera_model=camera,
            pixel_width=width,
            pixel_height=height,
        )
