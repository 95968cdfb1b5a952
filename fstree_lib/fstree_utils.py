# -*- coding: utf-8 -*-
"""
Utility functions for fstree, including formatting, logging, and error reporting.
"""

import sys
from pathlib import Path
from datetime import datetime
from typing import Callable, Union

from .fstree_styling import Colors

# --- Formatting ---
def format_bytes(size_bytes: int) -> str:
    """Helper function to format bytes into KB, MB, GB."""
    if not isinstance(size_bytes, (int, float)) or size_bytes < 0: return "N/A"
    if size_bytes < 1024: return f"{size_bytes} B"
    elif size_bytes < 1024**2: return f"{size_bytes / 1024:.1f} KB"
    elif size_bytes < 1024**3: return f"{size_bytes / 1024**2:.1f} MB"
    else: return f"{size_bytes / 1024**3:.2f} GB"

def parse_size_string(size_str: str) -> int:
    """
    Parses size strings like '512', '-1', '50k', '1.5m', '2g' into bytes.

    Raises ValueError for empty or unparseable input.
    """
    size_str_orig = size_str # Keep original for error message
    size_str = size_str.strip().lower()
    if not size_str:
        raise ValueError("Empty size string")

    multiplier = 1
    if size_str.endswith('k') or size_str.endswith('kb'):
        multiplier = 1024
        size_str = size_str[:-1] if size_str.endswith('k') else size_str[:-2]
    elif size_str.endswith('m') or size_str.endswith('mb'):
        multiplier = 1024 * 1024
        size_str = size_str[:-1] if size_str.endswith('m') else size_str[:-2]
    elif size_str.endswith('g') or size_str.endswith('gb'):
        multiplier = 1024 * 1024 * 1024
        size_str = size_str[:-1] if size_str.endswith('g') else size_str[:-2]
    elif size_str.endswith('b'): # Explicit bytes
        size_str = size_str[:-1]

    try:
        return int(float(size_str) * multiplier)
    except ValueError:
        raise ValueError(f"Invalid size string '{size_str_orig}'")


# --- Logging ---
def log_message(message: str, level: str = "info", verbose: bool = False, colorize: bool = False):
    """Logs a message to stderr. info/debug are only shown when verbose is enabled."""
    if not verbose and level in ("info", "debug"):
        return

    color_map = {
        "error": Colors.RED, "warning": Colors.YELLOW, "success": Colors.GREEN,
        "info": Colors.CYAN, "debug": Colors.GRAY
    }
    color = color_map.get(level.lower(), Colors.RESET) if colorize else ""
    reset = Colors.RESET if colorize else ""
    timestamp = datetime.now().strftime("%H:%M:%S.%f")[:-3] # Milliseconds

    lines = str(message).splitlines()
    if not lines: return

    log_prefix = f"[{timestamp}] {color}[{level.upper():<7}] {reset}" # Padded level
    print(f"{log_prefix}{lines[0]}", file=sys.stderr)
    indent = " " * (len(log_prefix) - len(color) - len(reset))
    for line in lines[1:]:
        print(f"{indent}{line}", file=sys.stderr) # Align subsequent lines

def make_logger(verbose: bool = False, colorize: bool = False) -> Callable[..., None]:
    """Binds verbosity and color settings into a log_func(message, level) callable."""
    return lambda msg, level="info": log_message(msg, level, verbose, colorize)

def null_log(message: str, level: str = "info") -> None:
    """Discards a diagnostic."""


# --- Error Reporting ---
def report_fs_error(
    path: Union[str, Path],
    error: BaseException,
    log_func: Callable,
    phase: str = "processing",
    level: str = "warning"
) -> str:
    """
    Logs a filesystem error with a hint about its likely cause.

    Returns the one-line reason, suitable for a skipped-items summary.
    """
    reason = f"{error.__class__.__name__}: {error}"
    message = f"Error {phase} '{path}': {reason}"

    if isinstance(error, PermissionError):
        message += "\n  This is a permission error. Try running with sufficient privileges if appropriate."
    elif isinstance(error, FileNotFoundError):
        message += "\n  The file or directory may have been moved or deleted during the scan."

    log_func(message, level)
    return reason
