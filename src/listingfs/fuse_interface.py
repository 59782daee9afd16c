"""
FUSE interface exposing the namespace as a read-only filesystem.
"""
import os
from typing import Any, Dict
import errno
import logging

from fuse import FUSE, FuseOSError, Operations, LoggingMixIn

from .errors import NamespaceError
from .fs_operations import FSOperations

logger = logging.getLogger(__name__)

# The kernel cannot be told that entries never expire, so use a large value
NO_TIMEOUT = 500000


class FuseInterface(LoggingMixIn, Operations):
    """
    FUSE interface that translates FUSE operations to namespace queries.
    Anything that would modify the filesystem is refused with EROFS.
    """
    def __init__(self, fs: FSOperations):
        self.fs = fs

    def getattr(self, path: str, fh: Any = None) -> Dict[str, Any]:
        """Get file attributes."""
        try:
            return self.fs.getattr(path)
        except NamespaceError as e:
            raise FuseOSError(e.errno) from e

    def readdir(self, path: str, fh: Any) -> list:
        """Read directory entries."""
        try:
            return self.fs.readdir(path)
        except NamespaceError as e:
            raise FuseOSError(e.errno) from e

    def access(self, path: str, amode: int) -> int:
        """Check access; nothing is writable."""
        self.getattr(path)
        if amode & os.W_OK:
            raise FuseOSError(errno.EROFS)
        return 0

    def open(self, path: str, flags: int) -> int:
        """Open a file for reading."""
        self.getattr(path)
        if flags & (os.O_WRONLY | os.O_RDWR):
            raise FuseOSError(errno.EROFS)
        return 0

    def read(self, path: str, size: int, offset: int, fh: Any) -> bytes:
        """Read from a file."""
        try:
            return self.fs.read(path, size, offset)
        except NamespaceError as e:
            raise FuseOSError(e.errno) from e
        except ValueError as e:
            raise FuseOSError(errno.EINVAL) from e


def mount(mountpoint: str, fs: FSOperations, **kwargs: Any) -> None:
    """
    Mount the filesystem at the specified mountpoint. Blocks until unmounted.

    Args:
        mountpoint: Directory to mount the filesystem at
        fs: Namespace operations to serve
        **kwargs: Additional arguments to pass to FUSE
    """
    logger.info(f"Mounting {fs.listing_file} at {mountpoint}")
    FUSE(
        FuseInterface(fs),
        mountpoint,
        ro=True,
        fsname="listingfs",
        entry_timeout=NO_TIMEOUT,
        attr_timeout=NO_TIMEOUT,
        negative_timeout=0,
        **kwargs
    )
