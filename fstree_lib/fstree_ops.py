# -*- coding: utf-8 -*-
"""
Read-only queries over a built tree: aggregates and searches.

Every function walks the tree with an explicit stack in depth-first pre-order
and returns its result instead of filling a caller-owned accumulator, so the
same tree can be queried any number of times.
"""

from pathlib import Path, PurePath
from typing import Iterator, List, Optional, Set, Tuple

from .fstree_config import DENSEST_COUNT_SENTINEL, LARGEST_SIZE_SENTINEL
from .fstree_node import Node


# --- Traversal ---
def iter_preorder(node: Node, seen: Optional[Set[Path]] = None) -> Iterator[Node]:
    """
    Yields `node` and its descendants in depth-first pre-order.

    When `seen` is given, nodes whose path is already in it are skipped together
    with their subtrees, and every yielded path is added to it.
    """
    stack = [node]
    while stack:
        current = stack.pop()
        if seen is not None:
            if current.path in seen:
                continue
            seen.add(current.path)
        yield current
        stack.extend(reversed(current.children))


# --- Aggregates ---
def aggregate_size(node: Node) -> int:
    """Total bytes of every file at or below `node`. Recomputed on each call."""
    return sum(n.size for n in iter_preorder(node) if n.is_file)

def direct_child_count(node: Node) -> int:
    return len(node.children)

def direct_file_count(node: Node) -> int:
    return sum(1 for child in node.children if child.is_file)


# --- Searches ---
def find_largest_files(node: Node) -> Tuple[int, List[Path]]:
    """
    Returns (max_size, paths) for the largest file(s).

    Ties are all kept, in traversal order. With no files at all the result is
    (LARGEST_SIZE_SENTINEL, []).
    """
    max_size = LARGEST_SIZE_SENTINEL
    paths: List[Path] = []
    for current in iter_preorder(node):
        if not current.is_file:
            continue
        if current.size > max_size:
            max_size = current.size
            paths = [current.path]
        elif current.size == max_size:
            paths.append(current.path)
    return max_size, paths

def file_extension(name: str) -> str:
    """Extension of a file name: from the last dot, empty if none (or a leading-dot-only name)."""
    return PurePath(name).suffix

def find_by_extension(node: Node, ext: str) -> List[Path]:
    """
    Paths of files whose extension equals `ext` exactly.

    No case folding and no dot normalization: pass ".txt", not "txt" or ".TXT".
    Carries its own visited-path guard so a tree with repeated paths is
    still reported once per path.
    """
    seen: Set[Path] = set()
    return [
        current.path for current in iter_preorder(node, seen)
        if current.is_file and file_extension(current.name) == ext
    ]

def find_empty_directories(node: Node) -> List[Path]:
    """Paths of directories below `node` with no children at all, at any depth."""
    return [
        current.path for current in iter_preorder(node)
        if current is not node and current.is_dir and not current.children
    ]

def find_files_larger_than(node: Node, threshold: int) -> List[Tuple[Path, int]]:
    """(path, size) of every file strictly larger than `threshold` bytes."""
    return [
        (current.path, current.size) for current in iter_preorder(node)
        if current.is_file and current.size > threshold
    ]

def find_directory_with_most_direct_files(node: Node) -> Tuple[Optional[Path], int]:
    """
    The directory with the most immediate file children, and that count.

    The first directory in traversal order wins ties. When no directory has a
    direct file the result is (None, DENSEST_COUNT_SENTINEL).
    """
    best_path: Optional[Path] = None
    best_count = DENSEST_COUNT_SENTINEL
    for current in iter_preorder(node):
        if not current.is_dir:
            continue
        count = direct_file_count(current)
        if count > max(best_count, 0):
            best_path, best_count = current.path, count
    return best_path, best_count
