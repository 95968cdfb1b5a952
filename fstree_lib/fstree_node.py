# -*- coding: utf-8 -*-
"""
Node model for fstree: one in-memory entry (file or directory) of a scanned subtree.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List


class NodeKind(Enum):
    """The two kinds of entries a tree can hold."""
    FILE = "file"
    DIRECTORY = "directory"


@dataclass
class Node:
    """
    A filesystem entry in the tree.

    Directory sizes are never stored: `size` stays 0 on a directory node and the
    total is always derived from its descendants (see fstree_ops.aggregate_size).
    """
    name: str
    kind: NodeKind
    path: Path
    size: int = 0
    children: List["Node"] = field(default_factory=list)

    def __post_init__(self):
        if self.kind is NodeKind.FILE:
            if self.children:
                raise ValueError(f"File node '{self.path}' cannot have children")
            if self.size < 0:
                raise ValueError(f"File node '{self.path}' has negative size: {self.size}")
        elif self.size:
            raise ValueError(f"Directory node '{self.path}' cannot store a size")

    @classmethod
    def file(cls, name: str, path: Path, size: int) -> "Node":
        return cls(name=name, kind=NodeKind.FILE, path=Path(path), size=size)

    @classmethod
    def directory(cls, name: str, path: Path, children: List["Node"] = None) -> "Node":
        return cls(name=name, kind=NodeKind.DIRECTORY, path=Path(path), children=list(children or []))

    @property
    def is_file(self) -> bool:
        return self.kind is NodeKind.FILE

    @property
    def is_dir(self) -> bool:
        return self.kind is NodeKind.DIRECTORY
