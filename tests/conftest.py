import os
import pytest
import exifread
from PIL import Image
from PIL.TiffImagePlugin import IFDRational


class FakeRatio:
    """Mimics exifread's Ratio (num / den)."""
    def __init__(self, num, den=1):
        self.num = num
        self.den = den

    def __str__(self):
        return f"{self.num}/{self.den}" if self.den != 1 else str(self.num)


class FakeTag:
    """Mimics exifread's IfdTag: `.values` plus a printable str()."""
    def __init__(self, values, printable=None):
        self.values = values
        self.printable = printable if printable is not None else str(values)

    def __str__(self):
        return self.printable


def dms(deg, minutes, seconds):
    """GPS component tag from whole numbers (seconds may be a (num, den) pair)."""
    if isinstance(seconds, tuple):
        sec = FakeRatio(*seconds)
    else:
        sec = FakeRatio(seconds)
    values = [FakeRatio(deg), FakeRatio(minutes), sec]
    return FakeTag(values, "[" + ", ".join(str(v) for v in values) + "]")


def make_tags(model="Canon EOS 5D",
              width="4000",
              height="3000",
              altitude="1234/10",
              date="2021:06:15 10:30:00",
              lat=(40, 26, 46), lat_ref="N",
              lon=(79, 58, 56), lon_ref="W"):
    """Builds a complete exifread-style tag dict; pass None to drop a tag."""
    tags = {}
    if model is not None:
        tags['Image Model'] = FakeTag(model)
    if width is not None:
        tags['EXIF ExifImageWidth'] = FakeTag([int(width)], width)
    if height is not None:
        tags['EXIF ExifImageLength'] = FakeTag([int(height)], height)
    if altitude is not None:
        tags['GPS GPSAltitude'] = FakeTag([FakeRatio(*map(int, altitude.split('/')))], altitude)
    if date is not None:
        tags['EXIF DateTimeOriginal'] = FakeTag(date)
    if lat is not None:
        tags['GPS GPSLatitude'] = dms(*lat)
        tags['GPS GPSLatitudeRef'] = FakeTag(lat_ref)
    if lon is not None:
        tags['GPS GPSLongitude'] = dms(*lon)
        tags['GPS GPSLongitudeRef'] = FakeTag(lon_ref)
    return tags


@pytest.fixture
def fake_exif(monkeypatch):
    """
    Replaces exifread.process_file with a lookup by file name.
    Register tags with `fake_exif["name.jpg"] = make_tags(...)`.
    Unregistered files decode to {} like a non-image would.
    """
    registry = {}

    def process_file(fh, details=True, **kwargs):
        return registry.get(os.path.basename(fh.name), {})

    monkeypatch.setattr(exifread, "process_file", process_file)
    return registry


def _rationals(*pairs):
    return tuple(IFDRational(*p) if isinstance(p, tuple) else IFDRational(p, 1) for p in pairs)


def write_geotagged_jpeg(path,
                         model="Pixel Test",
                         date="2021:06:15 10:30:00",
                         lat=(33, 52, (1234, 100)), lat_ref="S",
                         lon=(151, 12, 30), lon_ref="E",
                         altitude=(617, 5),
                         gps=True):
    """Writes a real JPEG with IFD0, Exif and (optionally) GPS blocks."""
    img = Image.new("RGB", (64, 48), color="blue")

    exif = Image.Exif()
    exif[0x0110] = model                 # Model
    exif[0x8769] = {                     # Exif IFD
        0x9003: date,                    # DateTimeOriginal
        0xA002: 64,                      # ExifImageWidth
        0xA003: 48,                      # ExifImageLength
    }
    if gps:
        exif[0x8825] = {                 # GPS IFD
            1: lat_ref,
            2: _rationals(*lat),
            3: lon_ref,
            4: _rationals(*lon),
            6: IFDRational(*altitude),
        }

    img.save(path, "JPEG", exif=exif)
    return path
