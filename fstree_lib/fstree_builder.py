# -*- coding: utf-8 -*-
"""
Tree construction for fstree. Walks a starting directory and produces an
in-memory Node tree, tolerating unreadable entries, special files and
symbolic-link cycles.
"""

import os
from pathlib import Path
from typing import Callable, List, Optional, Set, Tuple, Union

from .fstree_node import Node
from .fstree_utils import null_log, report_fs_error

PathLike = Union[str, "os.PathLike[str]"]


def _sort_key(name: str) -> Tuple[str, str]:
    return (name.lower(), name)


def _display_name(given: Path, resolved: Path) -> str:
    """Base name of the starting path, falling back to the resolved path for '.', '..' or '/'."""
    if given.name not in ("", ".", ".."):
        return given.name
    return resolved.name or str(resolved)


class TreeBuilder:
    """
    Builds Node trees from the filesystem.

    Every path appears at most once in a built tree. One instance may run
    several builds; the set of paths already in the tree and the statistics are
    reset at the start of each `build` call.
    """

    def __init__(self, follow_symlinks: bool = False, log_func: Optional[Callable] = None):
        self.follow_symlinks = follow_symlinks
        self._log = log_func or null_log

        # --- Statistics (per build) ---
        self.total_items_scanned = 0
        self.files_found = 0
        self.dirs_found = 0
        self.skipped_items: List[Tuple[str, str]] = []
        self._seen_paths_build: Set[Path] = set()

    def _reset(self) -> None:
        self.total_items_scanned = 0
        self.files_found = 0
        self.dirs_found = 0
        self.skipped_items = []
        self._seen_paths_build = set()

    # --- Public API ---
    def build(self, root_path: PathLike) -> Node:
        """
        Builds the tree rooted at `root_path`.

        Never raises for filesystem conditions: an unusable root yields an empty
        directory node, unreadable entries are skipped with a diagnostic.
        """
        self._reset()
        given = Path(root_path)
        self._log(f"Starting tree build for: '{given}'", "info")

        try:
            real_root = given.resolve()
        except (OSError, RuntimeError) as e:
            reason = report_fs_error(given, e, self._log, phase="resolving starting path")
            self.skipped_items.append((str(given), reason))
            return Node.directory(_display_name(given, given.absolute()), given.absolute())

        root_node = Node.directory(_display_name(given, real_root), real_root)
        self.dirs_found += 1

        try:
            root_is_dir = real_root.is_dir()
        except OSError as e:
            reason = report_fs_error(real_root, e, self._log, phase="checking starting path")
            self.skipped_items.append((str(real_root), reason))
            return root_node
        if not root_is_dir:
            self._log(f"Starting path '{given}' is not an accessible directory; returning an empty tree.", "warning")
            self.skipped_items.append((str(real_root), "not an accessible directory"))
            return root_node

        # Real entries are built first. With follow_symlinks, links are set aside and
        # attached afterwards, so a link can never take the place of the entry it aliases.
        self._seen_paths_build.add(real_root)
        stack: List[Node] = [root_node]
        pending_links: List[Tuple[Node, str, str]] = []
        while True:
            while stack:
                subdirs = self._expand(stack.pop(), pending_links)
                stack.extend(reversed(subdirs))
            if not pending_links:
                break
            links, pending_links = pending_links, []
            for parent, name, link_path in links:
                child = self._attach_link(parent, name, link_path)
                if child is not None and child.is_dir:
                    stack.append(child)
            stack.reverse()

        self._log(
            f"Tree build complete. Scanned: {self.total_items_scanned}, Files: {self.files_found}, "
            f"Directories: {self.dirs_found}, Skipped: {len(self.skipped_items)}", "info"
        )
        return root_node

    # --- Internals ---
    def _claim(self, parent: Node, child: Node) -> bool:
        """Adds `child` under `parent` unless its path is already in the tree."""
        if child.path in self._seen_paths_build:
            self._log(f"'{child.path}' is already in the tree, not adding it again.", "debug")
            return False
        self._seen_paths_build.add(child.path)
        parent.children.append(child)
        if child.is_dir:
            self.dirs_found += 1
        else:
            self.files_found += 1
        return True

    def _expand(self, dir_node: Node, pending_links: List[Tuple[Node, str, str]]) -> List[Node]:
        """
        Populates `dir_node.children` with its real entries; returns the child
        directories still to expand. Links to follow are queued on `pending_links`.
        """
        try:
            with os.scandir(dir_node.path) as it:
                entries = sorted(it, key=lambda e: _sort_key(e.name))
        except OSError as e:
            reason = report_fs_error(dir_node.path, e, self._log, phase="listing directory")
            self.skipped_items.append((str(dir_node.path), f"Error listing directory: {reason}"))
            return []

        subdirs: List[Node] = []
        for entry in entries:
            self.total_items_scanned += 1
            try:
                if entry.is_symlink():
                    if self.follow_symlinks:
                        pending_links.append((dir_node, entry.name, entry.path))
                    else:
                        self._log(f"Skipping symbolic link '{entry.path}'.", "debug")
                    continue
                child = self._entry_to_node(entry, dir_node.path)
            except (OSError, RuntimeError) as e:
                reason = report_fs_error(entry.path, e, self._log, phase="reading entry")
                self.skipped_items.append((entry.path, reason))
                continue
            if child is not None and self._claim(dir_node, child) and child.is_dir:
                subdirs.append(child)
        return subdirs

    def _entry_to_node(self, entry: "os.DirEntry[str]", parent_path: Path) -> Optional[Node]:
        """Turns a non-link directory entry into a Node, or None if the entry is skipped."""
        # A real entry under a canonical parent is already canonical.
        if entry.is_dir(follow_symlinks=False):
            return Node.directory(entry.name, parent_path / entry.name)
        if entry.is_file(follow_symlinks=False):
            size = entry.stat(follow_symlinks=False).st_size
            return Node.file(entry.name, parent_path / entry.name, size)

        self._log(f"Skipping special entry '{entry.path}'.", "debug")
        return None

    def _attach_link(self, parent: Node, name: str, link_path: str) -> Optional[Node]:
        """
        Adds a followed symbolic link under `parent` as a node for its canonical
        target. Returns the node, or None when the link is dangling, special, or
        points at something already in the tree (ancestors included).
        """
        try:
            target = Path(link_path).resolve(strict=True)
            if target.is_dir():
                child = Node.directory(name, target)
            elif target.is_file():
                child = Node.file(name, target, target.stat().st_size)
            else:
                self._log(f"Skipping link to special entry '{link_path}'.", "debug")
                return None
        except FileNotFoundError:
            self._log(f"Skipping dangling symbolic link '{link_path}'.", "debug")
            return None
        except (OSError, RuntimeError) as e:
            reason = report_fs_error(link_path, e, self._log, phase="following link")
            self.skipped_items.append((link_path, reason))
            return None

        if not self._claim(parent, child):
            return None
        parent.children.sort(key=lambda n: _sort_key(n.name))
        return child


def build_tree(root_path: PathLike, follow_symlinks: bool = False, log_func: Optional[Callable] = None) -> Node:
    """Builds a tree with a one-shot TreeBuilder."""
    return TreeBuilder(follow_symlinks=follow_symlinks, log_func=log_func).build(root_path)
