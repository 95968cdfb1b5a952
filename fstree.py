#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
fstree - Directory Tree Builder, Renderer and Query Tool

This script builds a tree of a directory, displays it, exports it to HTML and
answers size/extension/emptiness queries over it, from flags or an interactive menu.
"""

import sys
from pathlib import Path

# Running from a checkout: make the sibling 'fstree_lib' package importable.
script_dir = Path(__file__).resolve().parent
if (script_dir / 'fstree_lib').is_dir() and str(script_dir) not in sys.path:
    sys.path.insert(0, str(script_dir))

from fstree_lib.fstree_cli import main

if __name__ == "__main__":
    sys.exit(main())
