import logging
from datetime import datetime
from typing import Any, BinaryIO, Dict, Optional, Tuple

import exifread

from .. import config
from ..exceptions import MetadataDecodeError, MissingTagError


def ratio_to_float(value: Any) -> float:
    """Converts an exifread Ratio (or plain int) to float."""
    num = getattr(value, 'num', value)
    den = getattr(value, 'den', 1)
    if not den:
        raise MissingTagError(f"Zero denominator in rational {value!r}")
    return float(num) / float(den)


def dms_to_decimal(values, reference: str) -> float:
    """
    Converts (degrees, minutes, seconds) rationals to signed decimal degrees.
    South and West references are negative.
    """
    if len(values) != 3:
        raise MissingTagError(f"Expected 3 GPS components, got {len(values)}")

    degrees, minutes, seconds = (ratio_to_float(v) for v in values)
    decimal = degrees + minutes / 60.0 + seconds / 3600.0
    if reference in ('S', 'W'):
        decimal = -decimal
    return decimal


class ExifBlock:
    """
    Decoded EXIF block of one image.

    Thin adapter over the tag dictionary returned by `exifread`, exposing
    lookups by tag name plus the two composite fields (timestamp and
    coordinates) that need parsing.
    """

    def __init__(self, tags: Dict[str, Any]):
        self.tags = tags

    @classmethod
    def decode(cls, stream: BinaryIO) -> "ExifBlock":
        """Reads the EXIF block from an open binary stream."""
        try:
            # details=False skips MakerNotes, which we never read
            tags = exifread.process_file(stream, details=False)
        except Exception as e:
            raise MetadataDecodeError(f"Unable to decode EXIF block: {e}") from e

        # exifread returns an empty dict for non-images and files without EXIF
        if not tags:
            raise MetadataDecodeError("No EXIF block found")
        return cls(tags)

    def get(self, name: str) -> Optional[str]:
        """Printable value of a tag, or None if absent or blank."""
        tag = self.tags.get(name)
        if tag is None:
            return None
        text = str(tag).strip()
        return text or None

    def timestamp(self) -> datetime:
        """
        Capture time from the first parseable date tag.

        If the file records its UTC offset, it is attached to the result;
        otherwise the datetime is naive (camera local time).
        """
        for name in config.DATE_TAGS:
            raw = self.get(name)
            if not raw:
                continue
            try:
                # Sub-second precision is stored separately, but some writers append it
                dt = datetime.strptime(raw.split('.')[0], config.EXIF_DATE_FORMAT)
            except ValueError:
                logging.debug(f"Unparseable date in {name}: {raw!r}")
                continue
            return self._apply_offset(dt)

        raise MissingTagError("No valid capture date")

    def coordinates(self) -> Tuple[float, float]:
        """(latitude, longitude) in signed decimal degrees."""
        lat_tag = self.tags.get(config.LATITUDE_TAG)
        lon_tag = self.tags.get(config.LONGITUDE_TAG)
        lat_ref = self.get(config.LATITUDE_REF_TAG)
        lon_ref = self.get(config.LONGITUDE_REF_TAG)

        if lat_tag is None or lon_tag is None or not lat_ref or not lon_ref:
            raise MissingTagError("GPS coordinates not present")

        lat = dms_to_decimal(lat_tag.values, lat_ref.upper())
        lon = dms_to_decimal(lon_tag.values, lon_ref.upper())

        if not -90.0 <= lat <= 90.0 or not -180.0 <= lon <= 180.0:
            raise MissingTagError(f"GPS coordinates out of range: {lat}, {lon}")
        return lat, lon

    def _apply_offset(self, dt: datetime) -> datetime:
        for name in config.OFFSET_TAGS:
            raw = self.get(name)
            if not raw:
                continue
            try:
                return dt.replace(tzinfo=datetime.strptime(raw, "%z").tzinfo)
            except ValueError:
                continue
        return dt
