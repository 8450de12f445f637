import json
import logging
from pathlib import Path
from typing import Iterable, Union

from .exceptions import ExportError
from .models import ImageRecord


def serialize_records(records: Iterable[ImageRecord]) -> str:
    """
    Renders records as a compact JSON array.
    Key order is fixed by ImageRecord.to_dict, so equal input gives equal text.
    """
    try:
        return json.dumps([r.to_dict() for r in records], ensure_ascii=False, allow_nan=False,
                          separators=(',', ':'))
    except (TypeError, ValueError) as e:
        raise ExportError(f"Failed to encode records as JSON: {e}") from e


def write_records(records: Iterable[ImageRecord], output_path: Union[str, Path]) -> Path:
    """Serializes records and overwrites output_path with the result."""
    output_path = Path(output_path)
    payload = serialize_records(records)

    try:
        with output_path.open('w', encoding='utf-8') as f:
            f.write(payload)
    except OSError as e:
        raise ExportError(f"Failed to write {output_path}: {e}") from e

    logging.info(f"Wrote {output_path}")
    return output_path
