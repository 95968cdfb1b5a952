# -*- coding: utf-8 -*-
"""
Styling definitions (colors, tree connector styles) for fstree.
"""

from typing import Dict

# --- Styling ---

class Colors:
    """ANSI color codes for terminal output."""
    RESET = "\033[0m"
    BOLD = "\033[1m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    MAGENTA = "\033[35m"
    CYAN = "\033[36m"
    WHITE = "\033[37m"
    GRAY = "\033[90m"

class TreeStyle:
    """Definitions for different tree drawing styles."""
    ASCII: Dict[str, str] = {"branch": "|   ", "tee": "|-- ", "last_tee": "`-- ", "empty": "    "}
    UNICODE: Dict[str, str] = {"branch": "│   ", "tee": "├── ", "last_tee": "└── ", "empty": "    "}
    BOLD: Dict[str, str] = {"branch": "┃   ", "tee": "┣━━ ", "last_tee": "┗━━ ", "empty": "    "}
    ROUNDED: Dict[str, str] = {"branch": "│   ", "tee": "├── ", "last_tee": "╰── ", "empty": "    "}
    MINIMAL: Dict[str, str] = {"branch": "  ", "tee": "- ", "last_tee": "- ", "empty": "  "}

    AVAILABLE: Dict[str, Dict[str, str]] = {
        "unicode": UNICODE,
        "ascii": ASCII,
        "bold": BOLD,
        "rounded": ROUNDED,
        "minimal": MINIMAL,
    }

    @staticmethod
    def get_style(style_name: str) -> Dict[str, str]:
        """Gets the style config, defaulting to unicode."""
        return dict(TreeStyle.AVAILABLE.get(style_name.lower(), TreeStyle.UNICODE))

# --- Default Colors ---

DIRECTORY_COLOR = Colors.BLUE + Colors.BOLD

DEFAULT_FILETYPE_COLORS: Dict[str, str] = {
    "py": Colors.GREEN,
    "js": Colors.YELLOW,
    "ts": Colors.BLUE,
    "html": Colors.MAGENTA,
    "htm": Colors.MAGENTA,
    "css": Colors.CYAN,
    "c": Colors.BLUE,
    "h": Colors.BLUE,
    "cpp": Colors.BLUE,
    "hpp": Colors.BLUE,
    "java": Colors.RED,
    "rs": Colors.YELLOW,
    "go": Colors.CYAN,
    "sh": Colors.GREEN,
    "json": Colors.YELLOW,
    "yaml": Colors.YELLOW,
    "yml": Colors.YELLOW,
    "toml": Colors.YELLOW,
    "xml": Colors.MAGENTA,
    "csv": Colors.CYAN,
    "md": Colors.YELLOW,
    "txt": Colors.WHITE,
    "log": Colors.GRAY,
    "zip": Colors.RED,
    "tar": Colors.RED,
    "gz": Colors.RED,
    "png": Colors.MAGENTA,
    "jpg": Colors.MAGENTA,
    "jpeg": Colors.MAGENTA,
    "gif": Colors.MAGENTA,
    "pdf": Colors.RED,
}
