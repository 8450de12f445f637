from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

@dataclass(frozen=True)
class ImageRecord:
    """
    One geotagged image found during a walk.
    """
    path: str
    filename: str

    # Gating fields: a record is only built once both are known
    latitude: float = 0.0
    longitude: float = 0.0
    capture_date: Optional[datetime] = None

    # Best-effort fields: raw decoder text, "" when absent
    altitude: str = ""
    camera_model: str = ""
    pixel_width: str = ""
    pixel_height: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready mapping with a fixed key order."""
        return {
            'path': self.path,
            'filename': self.filename,
            'latitude': self.latitude,
            'longitude': self.longitude,
            'altitude': self.altitude,
            'capture_date': self.capture_date.isoformat() if self.capture_date else None,
            'camera_model': self.camera_model,
            'pixel_width': self.pixel_width,
            'pixel_height': self.pixel_height,
        }
