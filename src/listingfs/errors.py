"""
Exceptions raised by the namespace and its query operations.
"""
from errno import EIO, ENOENT, ENOTDIR


class NamespaceError(Exception):
    """Base class for namespace errors. `errno` is what the FUSE layer reports."""
    errno = EIO


class ListingIOError(NamespaceError):
    """The listing file could not be opened or read."""
    errno = EIO


class NotFoundError(NamespaceError):
    """The path does not resolve to an entry of the expected kind."""
    errno = ENOENT


class NotDirectoryError(NamespaceError):
    """A directory listing was requested for something that is not a directory."""
    errno = ENOTDIR


class ConfigError(Exception):
    """The configuration file could not be read or parsed."""
