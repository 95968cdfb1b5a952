# -*- coding: utf-8 -*-
"""
Command-line interface (CLI) for fstree.
Handles argument parsing, builds the tree, then runs one-shot queries or the
interactive menu.
"""

import sys
import argparse
import traceback
from pathlib import Path
from typing import Callable, List, Optional

from . import __version__
from .fstree_builder import TreeBuilder
from .fstree_config import get_default_dir, get_saved_config, save_config, set_default_dir
from .fstree_menu import (
    TreeMenu, format_by_extension, format_densest, format_empty_directories,
    format_larger_than, format_largest, format_summary,
)
from .fstree_node import Node
from .fstree_ops import (
    find_by_extension, find_directory_with_most_direct_files, find_empty_directories,
    find_files_larger_than, find_largest_files,
)
from .fstree_render import export_html, render_text
from .fstree_styling import Colors, TreeStyle
from .fstree_utils import make_logger, parse_size_string

# --- Argument Parsing ---
def _size_argument(value: str) -> int:
    try:
        return parse_size_string(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parses command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="fstree",
        description=f"fstree v{__version__} - Build a directory tree, display it, export it to HTML and query it.",
        formatter_class=argparse.RawTextHelpFormatter # Preserve formatting in help
    )

    # --- Positional Argument ---
    parser.add_argument(
        'directory',
        nargs='?',
        default=None, # Resolved in main(): saved default, then current directory
        help="The root directory to build the tree from.\nIf omitted, uses the saved default directory or the current directory."
    )

    # --- Display Group ---
    display_group = parser.add_argument_group('Display Options')
    display_group.add_argument(
        '-s', '--style',
        default=None,
        choices=list(TreeStyle.AVAILABLE.keys()),
        help=f"Tree drawing style (Default: unicode).\nAvailable: {', '.join(TreeStyle.AVAILABLE.keys())}"
    )
    color_parser = display_group.add_mutually_exclusive_group()
    color_parser.add_argument(
        '--color',
        action='store_true',
        dest='colorize',
        default=None,
        help="Force colorized output (Default: auto-detect based on TTY)."
    )
    color_parser.add_argument(
        '--no-color',
        action='store_false',
        dest='colorize',
        help="Disable colorized output."
    )

    # --- Scan Group ---
    scan_group = parser.add_argument_group('Scan Options')
    scan_group.add_argument(
        '-L', '--follow-symlinks',
        action='store_true',
        default=None,
        help="Descend into symbolic links (loops are detected and cut)."
    )

    # --- One-shot Actions ---
    action_group = parser.add_argument_group('Actions (skip the interactive menu)')
    action_group.add_argument('-p', '--print', action='store_true', dest='print_tree', help="Print the tree.")
    action_group.add_argument('--html', metavar='FILE', default=None, help="Export the tree as an HTML document to FILE.")
    action_group.add_argument('--largest', action='store_true', help="Show the largest file(s).")
    action_group.add_argument('--ext', metavar='EXT', default=None,
                              help="Show files with extension EXT, matched exactly (e.g. .txt).")
    action_group.add_argument('--empty', action='store_true', help="Show empty directories.")
    action_group.add_argument('--larger-than', metavar='SIZE', type=_size_argument, default=None,
                              help="Show files strictly larger than SIZE (e.g. 512, 50k, 1.5m).")
    action_group.add_argument('--densest', action='store_true', help="Show the directory with the most direct files.")

    # --- Behavior Group ---
    behavior_group = parser.add_argument_group('Behavior Options')
    behavior_group.add_argument(
        '-v', '--verbose',
        action='store_true',
        default=None,
        help="Show verbose logging messages during processing."
    )
    behavior_group.add_argument(
        '--set-default',
        action='store_true',
        help="Save the chosen directory as the default for future runs."
    )
    behavior_group.add_argument(
        '--save-settings',
        action='store_true',
        help="Save style, color, symlink and verbosity settings as defaults."
    )
    parser.add_argument(
        '--version',
        action='version',
        version=f'fstree v{__version__}'
    )

    return parser.parse_args(argv)

def has_one_shot_action(args: argparse.Namespace) -> bool:
    return any([
        args.print_tree, args.html is not None, args.largest, args.ext is not None,
        args.empty, args.larger_than is not None, args.densest,
    ])

# --- One-shot Execution ---
def run_actions(
    args: argparse.Namespace,
    tree: Node,
    builder: TreeBuilder,
    style: str,
    colorize: bool,
    log_func: Callable
) -> int:
    """Runs every requested one-shot action in a fixed order; returns the exit code."""
    output: List[str] = []
    if args.print_tree:
        output.extend(render_text(tree, style, colorize))
        output.extend(format_summary(builder))
    if args.largest:
        output.extend(format_largest(find_largest_files(tree)))
    if args.ext is not None:
        output.extend(format_by_extension(args.ext, find_by_extension(tree, args.ext)))
    if args.empty:
        output.extend(format_empty_directories(find_empty_directories(tree)))
    if args.larger_than is not None:
        output.extend(format_larger_than(args.larger_than, find_files_larger_than(tree, args.larger_than)))
    if args.densest:
        output.extend(format_densest(find_directory_with_most_direct_files(tree)))
    for line in output:
        print(line)

    if args.html is not None:
        written = export_html(tree, args.html, log_func)
        if written is None:
            print(f"{Colors.RED if colorize else ''}Error: could not write HTML export to '{args.html}'."
                  f"{Colors.RESET if colorize else ''}", file=sys.stderr)
            return 1
        print(f"HTML export created: {written}")
    return 0

# --- Main Execution Logic ---
def main(argv: Optional[List[str]] = None) -> int:
    """Main function: parses arguments, builds the tree and dispatches."""
    try:
        args = parse_args(argv)
        saved = get_saved_config()

        # Command-line flags win over saved settings, which win over built-in defaults.
        style = args.style or saved.get('style', 'unicode')
        if style not in TreeStyle.AVAILABLE:
            style = 'unicode'
        colorize = args.colorize if args.colorize is not None else bool(saved.get('colorize', sys.stdout.isatty()))
        follow_symlinks = args.follow_symlinks if args.follow_symlinks is not None else bool(saved.get('follow_symlinks', False))
        verbose = args.verbose if args.verbose is not None else bool(saved.get('verbose', False))
        log_func = make_logger(verbose, colorize)

        directory = args.directory or get_default_dir() or str(Path.cwd())

        if args.set_default and set_default_dir(directory):
            print(f"Default directory saved: {Path(directory).resolve()}")
        if args.save_settings and save_config({
            'style': style, 'colorize': colorize, 'follow_symlinks': follow_symlinks, 'verbose': verbose,
        }):
            print("Settings saved.")

        builder = TreeBuilder(follow_symlinks=follow_symlinks, log_func=log_func)
        tree = builder.build(directory)

        if has_one_shot_action(args):
            return run_actions(args, tree, builder, style, colorize, log_func)

        TreeMenu(tree, builder=builder, style=style, colorize=colorize, log_func=log_func).run()
        return 0

    except KeyboardInterrupt:
        print("\nOperation cancelled by user.")
        return 130  # Standard exit code for SIGINT
    except Exception:
        print(f"\n{Colors.RED}An unexpected error occurred during execution:{Colors.RESET}", file=sys.stderr)
        print(traceback.format_exc(), file=sys.stderr)
        return 1

if __name__ == '__main__':
    sys.exit(main())
