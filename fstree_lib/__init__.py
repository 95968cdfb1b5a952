# -*- coding: utf-8 -*-
"""
fstree Package - Directory Tree Builder, Renderer and Query Tool

This package provides tools for:
- Building an in-memory tree of a directory subtree (permission errors,
  special files and symbolic-link loops are tolerated)
- Rendering the tree as indented text or as a standalone HTML document
- Querying it: largest files, files by extension, empty directories,
  files above a size threshold, directory with the most direct files

Usage:
    from fstree_lib import build_tree, render_text, find_largest_files
    tree = build_tree("path/to/directory")
    print("\\n".join(render_text(tree)))
"""

# Package version
__version__ = "1.0.0"

# Import public classes and functions for direct access
from .fstree_node import Node, NodeKind
from .fstree_builder import TreeBuilder, build_tree
from .fstree_ops import (
    aggregate_size, direct_child_count, find_by_extension, find_directory_with_most_direct_files,
    find_empty_directories, find_files_larger_than, find_largest_files,
)
from .fstree_render import export_html, render_html, render_text
from .fstree_cli import main

# Define what gets imported with 'from fstree_lib import *'
__all__ = [
    'Node', 'NodeKind', 'TreeBuilder', 'build_tree',
    'aggregate_size', 'direct_child_count', 'find_by_extension', 'find_directory_with_most_direct_files',
    'find_empty_directories', 'find_files_larger_than', 'find_largest_files',
    'export_html', 'render_html', 'render_text', 'main',
]
