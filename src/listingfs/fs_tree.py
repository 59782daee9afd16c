"""
In-memory namespace tree built from slash-delimited paths.
A node with children is a directory, a node without children is a file.
"""
from typing import Dict, Iterator, List, Optional
from dataclasses import dataclass

ROOT_NAME = "/"


def split_path(path: str) -> List[str]:
    """Split a path into its non-empty segments."""
    return [p for p in path.split('/') if p]


@dataclass
class FSNode:
    """Represents one path segment in the namespace tree."""
    name: str
    children: Dict[str, 'FSNode'] = None  # Segment name -> child, in insertion order

    def __post_init__(self):
        if self.children is None:
            self.children = {}

    @property
    def is_directory(self) -> bool:
        return bool(self.children)

    def get_child(self, name: str) -> Optional['FSNode']:
        return self.children.get(name)

    def add_child(self, name: str) -> 'FSNode':
        node = FSNode(name=name)
        self.children[name] = node
        return node


class FSTree:
    """
    Namespace tree. The root represents `/` and is always reported as a
    directory. Nodes are only ever added, never removed.
    """
    def __init__(self):
        self.root = FSNode(name=ROOT_NAME)

    def insert_path(self, path: str) -> None:
        """
        Insert a path, creating any missing segments along the way.

        Args:
            path: Slash-delimited path. Empty segments are ignored, so a
                path without any segments is a no-op.
        """
        current = self.root
        for part in split_path(path):
            child = current.get_child(part)
            if child is None:
                child = current.add_child(part)
            current = child

    def resolve(self, path: str) -> Optional[FSNode]:
        """
        Resolve a path to its node.

        Args:
            path: Slash-delimited path

        Returns:
            The node if found, None otherwise. `/` resolves to the root.
        """
        current = self.root
        for part in split_path(path):
            current = current.get_child(part)
            if current is None:
                return None
        return current

    def children_of(self, node: FSNode) -> List[FSNode]:
        """List the direct children of a node in insertion order."""
        return list(node.children.values())

    def is_directory(self, node: FSNode) -> bool:
        return node is self.root or node.is_directory

    def walk(self) -> Iterator[str]:
        """Yield the full path of every node below the root, depth first."""
        stack = [('', child) for child in reversed(self.children_of(self.root))]
        while stack:
            prefix, node = stack.pop()
            path = f"{prefix}/{node.name}"
            yield path
            stack.extend((path, child) for child in reversed(self.children_of(node)))

    def __len__(self) -> int:
        return sum(1 for _ in self.walk())
