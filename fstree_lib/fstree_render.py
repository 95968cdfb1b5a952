# -*- coding: utf-8 -*-
"""
Display of a built tree: indented text lines and a standalone HTML document.
"""

import html
from datetime import datetime
from pathlib import Path
from typing import Callable, Dict, Iterator, List, Optional, Tuple, Union

from .fstree_node import Node, NodeKind
from .fstree_ops import aggregate_size, direct_child_count, file_extension
from .fstree_styling import Colors, TreeStyle, DEFAULT_FILETYPE_COLORS, DIRECTORY_COLOR
from .fstree_utils import null_log

# CSS class per node kind in the HTML export; external stylesheets rely on these names.
HTML_CLASSES: Dict[NodeKind, str] = {
    NodeKind.FILE: "arquivo",
    NodeKind.DIRECTORY: "pasta",
}

HTML_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Directory tree: {root_name}</title>
    <style>
        body {{
            font-family: 'DejaVu Sans Mono', Consolas, Menlo, monospace;
            background: #fafafa;
            color: #222;
            padding: 20px;
        }}
        h1 {{
            font-size: 20px;
            margin-bottom: 4px;
        }}
        .generated {{
            color: #777;
            font-size: 12px;
            margin-bottom: 16px;
        }}
        .tree div {{
            white-space: pre;
            line-height: 1.4;
        }}
        .pasta {{
            color: #1f4e9c;
            font-weight: bold;
        }}
        .arquivo {{
            color: #333;
        }}
    </style>
</head>
<body>
    <h1>Directory tree: {root_name}</h1>
    <div class="generated">{root_path} &middot; generated on {generated}</div>
    <div class="tree">
{tree_lines}
    </div>
</body>
</html>
"""


# --- Labels ---
def node_details(node: Node) -> str:
    """The parenthesised size/children part of a node's label."""
    if node.is_file:
        return f"({node.size} bytes)"
    count = direct_child_count(node)
    noun = "child" if count == 1 else "children"
    return f"({count} {noun}, {aggregate_size(node)} bytes)"

def node_label(node: Node) -> str:
    return f"{node.name} {node_details(node)}"


# --- Traversal ---
def iter_tree_prefixes(node: Node, pointers: Dict[str, str]) -> Iterator[Tuple[Node, str]]:
    """
    Yields (node, prefix) in depth-first pre-order, where prefix holds the
    ancestors' fillers followed by the node's own connector. The root has none.
    """
    stack: List[Tuple[Node, str, bool]] = []

    def push_children(parent: Node, prefix: str) -> None:
        last_index = len(parent.children) - 1
        for i in range(last_index, -1, -1):
            stack.append((parent.children[i], prefix, i == last_index))

    yield node, ""
    push_children(node, "")
    while stack:
        current, prefix, is_last = stack.pop()
        pointer = pointers["last_tee"] if is_last else pointers["tee"]
        yield current, prefix + pointer
        push_children(current, prefix + (pointers["empty"] if is_last else pointers["branch"]))


# --- Text ---
def _get_color(node: Node) -> str:
    if node.is_dir:
        return DIRECTORY_COLOR
    ext = file_extension(node.name).lower().lstrip(".")
    return DEFAULT_FILETYPE_COLORS.get(ext, Colors.WHITE)

def render_text(node: Node, style: str = "unicode", colorize: bool = False) -> List[str]:
    """Renders the tree as display lines, one per node."""
    pointers = TreeStyle.get_style(style)
    lines = []
    for current, prefix in iter_tree_prefixes(node, pointers):
        if colorize:
            lines.append(f"{prefix}{_get_color(current)}{current.name}{Colors.RESET} "
                         f"{Colors.GRAY}{node_details(current)}{Colors.RESET}")
        else:
            lines.append(f"{prefix}{node_label(current)}")
    return lines


# --- HTML ---
def render_html(node: Node) -> str:
    """Renders the tree as a complete HTML document with embedded styling."""
    pointers = TreeStyle.get_style("unicode")
    tree_lines = [
        f'        <div class="{HTML_CLASSES[current.kind]}">{html.escape(prefix + node_label(current))}</div>'
        for current, prefix in iter_tree_prefixes(node, pointers)
    ]
    return HTML_TEMPLATE.format(
        root_name=html.escape(node.name),
        root_path=html.escape(str(node.path)),
        generated=datetime.now().strftime('%Y-%m-%d %H:%M:%S'),
        tree_lines="\n".join(tree_lines),
    )

def export_html(node: Node, destination: Union[str, Path], log_func: Optional[Callable] = None) -> Optional[Path]:
    """
    Writes the HTML rendering of `node` to `destination`.

    Returns the written path, or None if the destination could not be created
    or written (the failure is logged, not raised).
    """
    log_func = log_func or null_log
    export_filepath = Path(destination)
    try:
        export_filepath.parent.mkdir(parents=True, exist_ok=True)
        with export_filepath.open("w", encoding="utf-8") as f:
            f.write(render_html(node))
    except OSError as e:
        log_func(f"Error writing HTML export '{export_filepath}': {e}", "error")
        return None
    log_func(f"HTML export successfully created: {export_filepath}", "success")
    return export_filepath
