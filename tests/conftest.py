# tests/conftest.py
import pytest
import sys
from pathlib import Path
from typing import Any, Dict, List, Tuple

# Make sure the main library path is available
package_root = Path(__file__).parent.parent
sys.path.insert(0, str(package_root))

# Now attempt the imports
try:
    from fstree_lib.fstree_builder import build_tree
    from fstree_lib.fstree_node import Node
except ImportError as e:
    pytest.fail(f"Failed to import fstree_lib components: {e}\n"
                f"Ensure the package is installed correctly (e.g., 'pip install -e .') "
                f"or PYTHONPATH is set up.\n"
                f"Current sys.path: {sys.path}")


def create_test_structure(base_path: Path, structure: Dict[str, Any]):
    """
    Recursively creates a directory structure from a dictionary.

    dict -> directory, str -> text file, int -> file of that many bytes, None -> empty file.
    """
    base_path.mkdir(parents=True, exist_ok=True)

    for name, content in structure.items():
        path = base_path / name
        if isinstance(content, dict):
            path.mkdir(parents=True, exist_ok=True)
            create_test_structure(path, content)
        elif isinstance(content, str):
            path.write_text(content, encoding='utf-8')
        elif isinstance(content, int):
            path.write_bytes(b"x" * content)
        elif content is None:
            path.touch()
        else:
            raise TypeError(f"Unsupported structure type for {name}: {type(content)}")


class LogCollector:
    """log_func stand-in that records (level, message) pairs."""

    def __init__(self):
        self.records: List[Tuple[str, str]] = []

    def __call__(self, message: str, level: str = "info") -> None:
        self.records.append((level, message))

    def messages(self, level: str) -> List[str]:
        return [msg for lvl, msg in self.records if lvl == level]


@pytest.fixture
def log_collector():
    return LogCollector()

@pytest.fixture
def scenario_root(tmp_path):
    """R: a.txt (100 B), b.log (100 B), empty S/, T/c.txt (50 B)."""
    root = tmp_path / "R"
    create_test_structure(root, {
        "a.txt": 100,
        "b.log": 100,
        "S": {},
        "T": {"c.txt": 50},
    })
    return root

@pytest.fixture
def scenario_tree(scenario_root) -> Node:
    return build_tree(scenario_root)

@pytest.fixture
def isolated_home(tmp_path, monkeypatch):
    """Points Path.home() at an empty temporary directory so saved config never leaks in."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setattr(Path, "home", lambda: home)
    return home
