import os
import logging
from pathlib import Path
from typing import Callable, Iterator, List, TypeVar, Union

T = TypeVar('T')

ExtractFn = Callable[[str], T]


def iter_walk(root: Union[str, Path],
              extension: str,
              extract: ExtractFn[T]) -> Iterator[T]:
    """
    Generator that yields extract(path) for every file under root whose
    extension matches (case-insensitive).

    A root that is itself a file is visited on its own.

    Traversal is depth-first; entries in each directory are visited in
    sorted name order, so results are stable across runs and platforms.

    Failures:
      - extract raises: the file is skipped (debug log only).
      - a directory cannot be listed: warning logged, that subtree is
        skipped, the rest of the walk continues.
    """
    target = extension.lower()
    root = str(root)
    paths = [root] if os.path.isfile(root) else _iter_files(root)
    for path in paths:
        if os.path.splitext(path)[1].lower() != target:
            continue
        try:
            value = extract(path)
        except Exception as e:
            logging.debug(f"Skipping {path}: {e}")
            continue
        yield value


def walk(root: Union[str, Path], extension: str, extract: ExtractFn[T]) -> List[T]:
    """Collects iter_walk results into a list, preserving visit order."""
    return list(iter_walk(root, extension, extract))


def _iter_files(directory: str) -> Iterator[str]:
    """Pre-order walker using os.scandir. Symlinks are never descended into."""
    try:
        with os.scandir(directory) as it:
            entries = list(it)
    except OSError as e:
        logging.warning(f"Cannot access {directory}: {e}")
        return

    entries.sort(key=lambda e: e.name)

    for e in entries:
        try:
            is_dir = e.is_dir(follow_symlinks=False)
        except OSError:
            is_dir = False

        if is_dir:
            yield from _iter_files(e.path)
        else:
            yield e.path
