"""
Custom exception hierarchy for the photo mapper.

Per-file failures derive from MetadataExtractionError so the walker can
skip them; ExportError is the only failure that ends a run.
"""


class PhotoMapperError(Exception):
    """Base exception for all photo mapper errors."""
    pass


class MetadataExtractionError(PhotoMapperError):
    """Raised when a file cannot produce an ImageRecord."""
    pass


class MetadataDecodeError(MetadataExtractionError):
    """Raised when the EXIF block is missing or cannot be decoded."""
    pass


class MissingTagError(MetadataExtractionError):
    """Raised when a required tag (date, coordinates) is absent or invalid."""
    pass


class ExportError(PhotoMapperError):
    """Raised when the output file cannot be serialized or written."""
    pass
