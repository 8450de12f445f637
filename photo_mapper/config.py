"""
Configuration constants for the photo mapper.
"""

# --- Scanning ---
TARGET_EXT = '.jpg'

# --- Output ---
OUTPUT_FILENAME = "outdata.json"

# --- Metadata Parsing ---
# Tag names as exposed by exifread ("<IFD> <TagName>")
MODEL_TAG = 'Image Model'
WIDTH_TAG = 'EXIF ExifImageWidth'    # PixelXDimension
HEIGHT_TAG = 'EXIF ExifImageLength'  # PixelYDimension
ALTITUDE_TAG = 'GPS GPSAltitude'

LATITUDE_TAG = 'GPS GPSLatitude'
LATITUDE_REF_TAG = 'GPS GPSLatitudeRef'
LONGITUDE_TAG = 'GPS GPSLongitude'
LONGITUDE_REF_TAG = 'GPS GPSLongitudeRef'

# Priority order: first parseable wins
DATE_TAGS = [
    'EXIF DateTimeOriginal',
    'Image DateTime',
]

# Offsets are "+HH:MM" / "-HH:MM"
OFFSET_TAGS = [
    'EXIF OffsetTimeOriginal',
    'EXIF OffsetTime',
]

EXIF_DATE_FORMAT = "%Y:%m:%d %H:%M:%S"
