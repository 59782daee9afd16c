"""
Read-only filesystem operations on top of the namespace tree.
This provides a clean interface for the FUSE layer to use.

The command line never reloads the listing. Programs that embed
`FSOperations` can call `reload` to pick up a changed listing file
while the filesystem stays mounted.
"""
from typing import Any, Dict, List, Optional, Tuple
from enum import Enum
import logging
import os
import stat
import time

from .errors import NotDirectoryError, NotFoundError
from .fs_tree import FSTree
from .listing import load_file

logger = logging.getLogger(__name__)

CONTENT_SEPARATOR = " is in "
DIRECTORY_MODE = stat.S_IFDIR | 0o755
FILE_MODE = stat.S_IFREG | 0o444


class EntryKind(Enum):
    DIRECTORY = "directory"
    FILE = "file"
    NOT_FOUND = "not_found"


class FSOperations:
    """
    Answers namespace queries: classify a path, list a directory, and
    synthesize file content. File content is `<path> is in <content_label>`.

    The tree is never mutated once built. `reload` publishes a freshly built
    tree by swapping the reference, and every query reads that reference once.
    """
    def __init__(self, listing_file: str, content_label: Optional[str] = None,
                 tree: Optional[FSTree] = None):
        self.listing_file = listing_file
        self.content_label = listing_file if content_label is None else content_label
        self.tree = load_file(listing_file) if tree is None else tree
        self.uid = os.getuid()
        self.gid = os.getgid()
        self.mounted_at = time.time()

    def reload(self) -> FSTree:
        """
        Rebuild the tree from the listing file and publish it.

        Raises:
            ListingIOError: if the listing cannot be read; the current tree is kept
        """
        tree = load_file(self.listing_file)
        self.tree = tree
        logger.info(f"Reloaded listing {self.listing_file}")
        return tree

    def _lookup(self, path: str) -> Tuple[FSTree, EntryKind, Any]:
        tree = self.tree
        node = tree.resolve(path)
        if node is None:
            return tree, EntryKind.NOT_FOUND, None
        if tree.is_directory(node):
            return tree, EntryKind.DIRECTORY, node
        return tree, EntryKind.FILE, node

    def classify(self, path: str) -> EntryKind:
        """Tell whether a path is a directory, a file, or does not exist."""
        return self._lookup(path)[1]

    def list_children(self, path: str) -> List[str]:
        """
        List the names of a directory's entries in insertion order.

        Raises:
            NotDirectoryError: if the path is a file or does not exist
        """
        tree, kind, node = self._lookup(path)
        if kind is not EntryKind.DIRECTORY:
            raise NotDirectoryError(path)
        return [child.name for child in tree.children_of(node)]

    def _content(self, path: str) -> bytes:
        return f"{path}{CONTENT_SEPARATOR}{self.content_label}".encode('utf-8')

    def content_size(self, path: str) -> int:
        """Length in bytes of the content synthesized for a path."""
        return len(self._content(path))

    def synthesize_content(self, path: str, offset: int = 0, size: Optional[int] = None) -> bytes:
        """
        Produce the content of a file.

        Args:
            path: Path to the file
            offset: Offset from which to read
            size: Maximum number of bytes to return, everything if None

        Returns:
            The requested portion of the content, empty if offset is past the end

        Raises:
            NotFoundError: if the path is not a file
        """
        if offset < 0 or (size is not None and size < 0):
            raise ValueError(f"Invalid read range offset={offset} size={size}")
        if self.classify(path) is not EntryKind.FILE:
            raise NotFoundError(path)

        data = self._content(path)
        if size is None:
            return data[offset:]
        return data[offset:offset + size]

    def getattr(self, path: str) -> Dict[str, Any]:
        """
        Get attributes of a file or directory.

        Raises:
            NotFoundError: if the path does not exist
        """
        kind = self.classify(path)
        if kind is EntryKind.NOT_FOUND:
            raise NotFoundError(path)
        return self._attrs(path, kind is EntryKind.DIRECTORY)

    def _attrs(self, path: str, is_directory: bool) -> Dict[str, Any]:
        attrs = {
            'st_nlink': 1,
            'st_uid': self.uid,
            'st_gid': self.gid,
            'st_atime': self.mounted_at,
            'st_mtime': self.mounted_at,
            'st_ctime': self.mounted_at,
        }
        if is_directory:
            attrs['st_mode'] = DIRECTORY_MODE
            attrs['st_size'] = 0
        else:
            attrs['st_mode'] = FILE_MODE
            attrs['st_size'] = self.content_size(path)
        return attrs

    def readdir(self, path: str) -> List[Any]:
        """
        List a directory for the FUSE layer: `.` and `..`, then each child
        with its attributes.

        Raises:
            NotDirectoryError: if the path is not a directory
        """
        tree, kind, node = self._lookup(path)
        if kind is not EntryKind.DIRECTORY:
            raise NotDirectoryError(path)

        entries: List[Any] = ['.', '..']
        base = path.rstrip('/')
        for child in tree.children_of(node):
            attrs = self._attrs(f"{base}/{child.name}", tree.is_directory(child))
            entries.append((child.name, attrs, 0))
        return entries

    def read(self, path: str, size: int, offset: int) -> bytes:
        """Read `size` bytes of a file's content starting at `offset`."""
        return self.synthesize_content(path, offset, size)
