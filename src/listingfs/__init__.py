"""
Read-only filesystem synthesized from a listing of paths.
This module provides the namespace tree, listing ingestion and the query
operations served over FUSE.
"""

from .fs_tree import FSNode, FSTree
from .listing import load, load_file
from .fs_operations import EntryKind, FSOperations
from .config import Config, load_config
from .errors import (
    ConfigError,
    ListingIOError,
    NamespaceError,
    NotDirectoryError,
    NotFoundError,
)

__all__ = [
    'FSNode', 'FSTree', 'load', 'load_file', 'EntryKind', 'FSOperations',
    'Config', 'load_config', 'ConfigError', 'ListingIOError', 'NamespaceError',
    'NotDirectoryError', 'NotFoundError',
]
