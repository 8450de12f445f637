import argparse
import logging
import sys
import time
from pathlib import Path

from tqdm import tqdm

from . import config
from .exceptions import ExportError
from .export import write_records
from .metadata.extract import MetadataExtractor
from .scanning.filesystem import iter_walk

def setup_logging(verbose: bool):
    """Sets up console logging."""
    log_level = logging.DEBUG if verbose else logging.INFO

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)]
    )

    # Silence chatty libraries
    logging.getLogger("exifread").setLevel(logging.ERROR)

def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Photo Mapper: export EXIF location data of JPEGs to JSON")

    p.add_argument("root", type=Path, help="Directory to scan")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    return p.parse_args(argv)

def run(root: Path, output_path: Path) -> int:
    """Walks root, prints the timing line and writes the JSON output. Returns the record count."""
    extractor = MetadataExtractor()

    start = time.perf_counter()
    records = list(tqdm(
        iter_walk(root, config.TARGET_EXT, extractor.extract),
        desc="Scanning",
        unit="img",
        disable=None,
    ))
    elapsed = time.perf_counter() - start

    print(f"Processed {len(records)} files in {elapsed:f} seconds.")

    write_records(records, output_path)
    return len(records)

def main(argv=None):
    args = parse_args(argv)
    setup_logging(args.verbose)

    logging.debug(f"Root: {args.root}")

    try:
        run(args.root, Path(config.OUTPUT_FILENAME))
    except ExportError as e:
        logging.error(f"Fatal: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        logging.warning("Operation cancelled by user.")
        sys.exit(1)

if __name__ == "__main__":
    main()
