# -*- coding: utf-8 -*-
"""
Interactive menu for fstree, using the 'pick' library for selections when a
terminal is attached and a numbered text menu otherwise.
"""

import sys
from pathlib import Path
from typing import Callable, List, Optional, Tuple

import pick

from . import __version__
from .fstree_builder import TreeBuilder
from .fstree_config import DEFAULT_HTML_FILENAME
from .fstree_node import Node
from .fstree_ops import (
    find_by_extension, find_directory_with_most_direct_files, find_empty_directories,
    find_files_larger_than, find_largest_files,
)
from .fstree_render import export_html, render_text
from .fstree_styling import Colors
from .fstree_utils import format_bytes, null_log, parse_size_string

MAIN_OPTIONS = [
    "Display file tree",
    "Export to HTML",
    "Search options",
    "Exit",
]

SEARCH_OPTIONS = [
    "Largest file(s)",
    "Files by extension",
    "Empty directories",
    "Files larger than N bytes",
    "Directory with the most direct files",
    "Back",
]


# --- Result Formatting ---
def format_largest(result: Tuple[int, List[Path]]) -> List[str]:
    size, paths = result
    if not paths:
        return ["No files found."]
    lines = [f"Largest file size: {size} bytes ({format_bytes(size)}), {len(paths)} file(s):"]
    lines.extend(f"  {path}" for path in paths)
    return lines

def format_by_extension(ext: str, paths: List[Path]) -> List[str]:
    if not paths:
        return [f"No files with extension '{ext}' found."]
    return [f"{len(paths)} file(s) with extension '{ext}':"] + [f"  {path}" for path in paths]

def format_empty_directories(paths: List[Path]) -> List[str]:
    if not paths:
        return ["No empty directories found."]
    return [f"{len(paths)} empty director{'y' if len(paths) == 1 else 'ies'}:"] + [f"  {path}" for path in paths]

def format_larger_than(threshold: int, results: List[Tuple[Path, int]]) -> List[str]:
    if not results:
        return [f"No files larger than {threshold} bytes found."]
    lines = [f"{len(results)} file(s) larger than {threshold} bytes:"]
    lines.extend(f"  {path} ({size} bytes)" for path, size in results)
    return lines

def format_densest(result: Tuple[Optional[Path], int]) -> List[str]:
    path, count = result
    if path is None:
        return ["No directory has direct files."]
    return [f"Directory with the most direct files: {path} ({count} file{'' if count == 1 else 's'})"]

def format_summary(builder: TreeBuilder) -> List[str]:
    """Post-build summary, listing skipped items when there were any."""
    lines = [f"{builder.files_found} files, {builder.dirs_found} directories "
             f"(scanned {builder.total_items_scanned} entries)."]
    if builder.skipped_items:
        lines.append(f"{len(builder.skipped_items)} item(s) skipped due to errors:")
        lines.extend(f"  - {path}: {reason}" for path, reason in builder.skipped_items)
    return lines


# --- Menu ---
class TreeMenu:
    """Menu loop dispatching user choices to the tree operations."""

    def __init__(
            self,
            tree: Node,
            builder: Optional[TreeBuilder] = None,
            style: str = "unicode",
            colorize: bool = False,
            log_func: Optional[Callable] = None,
            input_func: Callable[[str], str] = input,
            print_func: Callable[..., None] = print,
            use_pick: Optional[bool] = None
    ):
        self.tree = tree
        self.builder = builder
        self.style = style
        self.colorize = colorize
        self._log = log_func or null_log
        self._input = input_func
        self._print = print_func
        if use_pick is None:
            use_pick = sys.stdin.isatty() and sys.stdout.isatty()
        self.use_pick = use_pick

    def _emit(self, lines: List[str]) -> None:
        for line in lines:
            self._print(line)

    def _highlight(self, text: str) -> str:
        return f"{Colors.BOLD}{text}{Colors.RESET}" if self.colorize else text

    def choose(self, title: str, options: List[str]) -> Optional[int]:
        """Returns the chosen option index, or None for an invalid choice."""
        if self.use_pick:
            _, index = pick.Picker(options, title, indicator="=>").start()
            return index if isinstance(index, int) and index >= 0 else None

        self._print(title)
        for i, option in enumerate(options, start=1):
            self._print(f"{i}. {option}")
        raw = self._input("Enter your option: ").strip()
        if raw.isdigit() and 1 <= int(raw) <= len(options):
            return int(raw) - 1
        self._print("Invalid option! Please try again.")
        return None

    def run(self) -> None:
        self._print(self._highlight(f"fstree v{__version__} - File System Tree Viewer"))
        self._print(f"Starting directory: {self.tree.path}\n")

        actions = [self.show_tree, self.export_html, self.search_menu]
        try:
            while True:
                choice = self.choose("Available options:", MAIN_OPTIONS)
                if choice is None:
                    continue
                if choice == len(MAIN_OPTIONS) - 1:
                    self._print("Exiting.")
                    break
                actions[choice]()
        except EOFError:
            self._print("\nInput closed, exiting.")

    # --- Actions ---
    def show_tree(self) -> None:
        self._print("\nDirectory structure:")
        self._print("-" * 80)
        self._emit(render_text(self.tree, self.style, self.colorize))
        self._print("-" * 80)
        if self.builder is not None:
            self._emit(format_summary(self.builder))

    def export_html(self) -> Optional[Path]:
        name = self._input(f"Output file name [{DEFAULT_HTML_FILENAME}]: ").strip() or DEFAULT_HTML_FILENAME
        written = export_html(self.tree, name, self._log)
        if written is None:
            self._print(f"Could not write HTML export to '{name}'.")
        else:
            self._print(f"HTML export created: {written}")
        return written

    def search_menu(self) -> None:
        searches = [
            self.search_largest,
            self.search_by_extension,
            self.search_empty_directories,
            self.search_larger_than,
            self.search_densest,
        ]
        while True:
            choice = self.choose("\nSearch options:", SEARCH_OPTIONS)
            if choice is None:
                continue
            if choice == len(SEARCH_OPTIONS) - 1:
                return
            searches[choice]()

    def search_largest(self) -> None:
        self._emit(format_largest(find_largest_files(self.tree)))

    def search_by_extension(self) -> None:
        ext = self._input("Extension (including the dot, e.g. .txt): ").strip()
        self._emit(format_by_extension(ext, find_by_extension(self.tree, ext)))

    def search_empty_directories(self) -> None:
        self._emit(format_empty_directories(find_empty_directories(self.tree)))

    def search_larger_than(self) -> None:
        raw = self._input("Size threshold in bytes (e.g. 1024, 50k, 1m): ")
        try:
            threshold = parse_size_string(raw)
        except ValueError as e:
            self._print(f"Invalid size: {e}")
            return
        self._emit(format_larger_than(threshold, find_files_larger_than(self.tree, threshold)))

    def search_densest(self) -> None:
        self._emit(format_densest(find_directory_with_most_direct_files(self.tree)))
