# tests/test_menu.py
import pytest
from pathlib import Path

from fstree_lib import fstree_menu
from fstree_lib.fstree_builder import TreeBuilder
from fstree_lib.fstree_menu import (
    TreeMenu, format_by_extension, format_densest, format_empty_directories,
    format_larger_than, format_largest, format_summary,
)


def scripted_input(answers):
    """input() replacement that replays answers, then behaves like a closed stdin."""
    remaining = iter(answers)
    def _input(prompt=""):
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError
    return _input

def run_menu(tree, answers, **kwargs):
    output = []
    menu = TreeMenu(
        tree,
        input_func=scripted_input(answers),
        print_func=lambda *args, **_: output.append(" ".join(str(a) for a in args)),
        use_pick=False,
        **kwargs
    )
    menu.run()
    return "\n".join(output)


# === Main menu ===

def test_menu_display_tree_then_exit(scenario_tree):
    out = run_menu(scenario_tree, ["1", "4"])
    assert "Starting directory:" in out
    assert "R (4 children, 250 bytes)" in out
    assert "    └── c.txt (50 bytes)" in out
    assert out.rstrip().endswith("Exiting.")

def test_menu_display_tree_prints_build_summary(scenario_root):
    builder = TreeBuilder()
    tree = builder.build(scenario_root)
    out = run_menu(tree, ["1", "4"], builder=builder)
    assert "3 files, 3 directories (scanned 5 entries)." in out

def test_menu_invalid_option_loops(scenario_tree):
    out = run_menu(scenario_tree, ["9", "abc", "4"])
    assert out.count("Invalid option! Please try again.") == 2
    assert "Exiting." in out

def test_menu_stops_when_input_closes(scenario_tree):
    out = run_menu(scenario_tree, ["1"])
    assert "Input closed, exiting." in out

def test_menu_export_html(scenario_tree, tmp_path):
    destination = tmp_path / "menu_export.html"
    out = run_menu(scenario_tree, ["2", str(destination), "4"])
    assert f"HTML export created: {destination}" in out
    assert '<div class="pasta">' in destination.read_text(encoding="utf-8")

def test_menu_export_html_default_name(scenario_tree, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    run_menu(scenario_tree, ["2", "", "4"])
    assert (tmp_path / "tree.html").is_file()

def test_menu_export_html_failure_is_reported(scenario_tree, tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("file, not dir")
    out = run_menu(scenario_tree, ["2", str(blocker / "x.html"), "4"])
    assert "Could not write HTML export" in out
    assert "Exiting." in out


# === Search sub-menu ===

def test_search_largest(scenario_root, scenario_tree):
    out = run_menu(scenario_tree, ["3", "1", "6", "4"])
    assert "Largest file size: 100 bytes" in out
    assert str(scenario_root.resolve() / "a.txt") in out
    assert str(scenario_root.resolve() / "b.log") in out

def test_search_by_extension(scenario_root, scenario_tree):
    out = run_menu(scenario_tree, ["3", "2", ".txt", "6", "4"])
    assert "2 file(s) with extension '.txt':" in out
    assert str(scenario_root.resolve() / "T" / "c.txt") in out

def test_search_empty_directories(scenario_root, scenario_tree):
    out = run_menu(scenario_tree, ["3", "3", "6", "4"])
    assert "1 empty directory:" in out
    assert str(scenario_root.resolve() / "S") in out

def test_search_larger_than(scenario_tree):
    out = run_menu(scenario_tree, ["3", "4", "60", "6", "4"])
    assert "2 file(s) larger than 60 bytes:" in out

def test_search_larger_than_invalid_size(scenario_tree):
    out = run_menu(scenario_tree, ["3", "4", "lots", "6", "4"])
    assert "Invalid size:" in out

def test_search_densest(scenario_root, scenario_tree):
    out = run_menu(scenario_tree, ["3", "5", "6", "4"])
    assert f"Directory with the most direct files: {scenario_root.resolve()} (2 files)" in out


# === pick-driven selection ===

def test_menu_uses_pick_when_enabled(scenario_tree, monkeypatch):
    titles = []

    class FakePicker:
        def __init__(self, options, title, indicator="*"):
            titles.append(title)
            self.options = options

        def start(self):
            return self.options[-1], len(self.options) - 1  # always the last option: Exit

    monkeypatch.setattr(fstree_menu.pick, "Picker", FakePicker)
    output = []
    TreeMenu(scenario_tree, print_func=output.append, use_pick=True).run()
    assert titles == ["Available options:"]
    assert "Exiting." in output


# === Result formatting ===

def test_format_helpers_for_empty_results():
    assert format_largest((-1, [])) == ["No files found."]
    assert format_by_extension(".md", []) == ["No files with extension '.md' found."]
    assert format_empty_directories([]) == ["No empty directories found."]
    assert format_larger_than(10, []) == ["No files larger than 10 bytes found."]
    assert format_densest((None, -1)) == ["No directory has direct files."]

def test_format_helpers_for_results():
    assert format_largest((2048, [Path("/x/a")])) == [
        "Largest file size: 2048 bytes (2.0 KB), 1 file(s):", "  /x/a"]
    assert format_empty_directories([Path("/x/a"), Path("/x/b")])[0] == "2 empty directories:"
    assert format_larger_than(1, [(Path("/x/a"), 5)]) == ["1 file(s) larger than 1 bytes:", "  /x/a (5 bytes)"]
    assert format_densest((Path("/x"), 1)) == ["Directory with the most direct files: /x (1 file)"]

def test_format_summary_lists_skipped_items(tmp_path):
    builder = TreeBuilder()
    builder.build(tmp_path / "missing")
    lines = format_summary(builder)
    assert "1 item(s) skipped due to errors:" in lines
