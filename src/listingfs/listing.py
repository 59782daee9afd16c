"""
Builds the namespace tree from a listing: one absolute path per line.
"""
from typing import Iterable, Optional
import logging

from .errors import ListingIOError
from .fs_tree import FSTree

logger = logging.getLogger(__name__)


def _strip_terminator(line: str) -> str:
    """Remove exactly one trailing line terminator, if present."""
    if line.endswith('\r\n'):
        return line[:-2]
    if line.endswith('\n') or line.endswith('\r'):
        return line[:-1]
    return line


def load(lines: Iterable[str], tree: Optional[FSTree] = None) -> FSTree:
    """
    Insert every line of a listing into a tree.

    Args:
        lines: Listing records, with or without line terminators
        tree: Tree to insert into. A new one is created if omitted.

    Returns:
        The populated tree
    """
    if tree is None:
        tree = FSTree()

    count = 0
    for line in lines:
        path = _strip_terminator(line)
        logger.debug("Listing record %d: %r", count, path)
        tree.insert_path(path)
        count += 1

    logger.info(f"Loaded {count} listing records into {len(tree)} nodes")
    return tree


def load_file(listing_file: str) -> FSTree:
    """
    Build a tree from a listing file.

    Raises:
        ListingIOError: if the file cannot be opened or read
    """
    try:
        with open(listing_file, 'r', encoding='utf-8', newline='') as f:
            return load(f)
    except (OSError, UnicodeDecodeError) as e:
        raise ListingIOError(f"Cannot read listing file {listing_file}: {e}") from e
