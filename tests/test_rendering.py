# tests/test_rendering.py
import pytest
import re
from pathlib import Path

from fstree_lib.fstree_node import Node
from fstree_lib.fstree_render import HTML_CLASSES, export_html, node_label, render_html, render_text
from fstree_lib.fstree_styling import Colors


def F(name, size, parent="/t"):
    return Node.file(name, Path(parent) / name, size)

def D(name, *children, parent="/t"):
    return Node.directory(name, Path(parent) / name, list(children))


# === Text rendering ===

def test_render_text_scenario(scenario_tree):
    assert render_text(scenario_tree) == [
        "R (4 children, 250 bytes)",
        "├── a.txt (100 bytes)",
        "├── b.log (100 bytes)",
        "├── S (0 children, 0 bytes)",
        "└── T (1 child, 50 bytes)",
        "    └── c.txt (50 bytes)",
    ]

def test_render_text_vertical_bar_under_non_last_sibling():
    root = D("root", D("A", F("x", 1), D("B", F("y", 4))), F("b", 2))
    assert render_text(root) == [
        "root (2 children, 7 bytes)",
        "├── A (2 children, 5 bytes)",
        "│   ├── x (1 bytes)",
        "│   └── B (1 child, 4 bytes)",
        "│       └── y (4 bytes)",
        "└── b (2 bytes)",
    ]

def test_render_text_empty_root_is_single_line():
    assert render_text(D("E")) == ["E (0 children, 0 bytes)"]

def test_render_text_ascii_style():
    root = D("root", D("A", F("x", 1)), F("b", 2))
    assert render_text(root, style="ascii") == [
        "root (2 children, 3 bytes)",
        "|-- A (1 child, 1 bytes)",
        "|   `-- x (1 bytes)",
        "`-- b (2 bytes)",
    ]

def test_render_text_unknown_style_falls_back_to_unicode():
    root = D("root", F("only", 1))
    assert render_text(root, style="no-such-style") == render_text(root)

def test_render_text_colorize_adds_ansi_but_keeps_text():
    root = D("root", F("main.py", 3))
    colored = render_text(root, colorize=True)
    assert Colors.GREEN in colored[1]  # .py color
    ansi = re.compile(r'\033\[[0-9;]*[a-zA-Z]')
    assert [ansi.sub('', line) for line in colored] == render_text(root)

def test_render_text_is_one_line_per_node(scenario_tree):
    lines = render_text(scenario_tree)
    assert len(lines) == 6
    assert render_text(scenario_tree) == lines

def test_node_label_for_file_and_directory():
    assert node_label(F("f.bin", 12)) == "f.bin (12 bytes)"
    assert node_label(D("d", F("a", 1), F("b", 2))) == "d (2 children, 3 bytes)"


# === HTML rendering ===

def test_render_html_is_standalone_utf8_document(scenario_tree):
    document = render_html(scenario_tree)
    assert document.startswith("<!DOCTYPE html>")
    assert '<meta charset="UTF-8">' in document
    assert "<style>" in document and ".pasta" in document and ".arquivo" in document
    assert document.rstrip().endswith("</html>")

def test_render_html_tags_lines_by_kind(scenario_tree):
    document = render_html(scenario_tree)
    assert document.count(f'<div class="{HTML_CLASSES[scenario_tree.kind]}">') == 3  # R, S, T
    assert document.count('<div class="arquivo">') == 3  # a.txt, b.log, c.txt
    assert '<div class="pasta">R (4 children, 250 bytes)</div>' in document
    assert '<div class="arquivo">    └── c.txt (50 bytes)</div>' in document

def test_render_html_uses_same_labels_as_text(scenario_tree):
    document = render_html(scenario_tree)
    for line in render_text(scenario_tree):
        assert f">{line}</div>" in document

def test_render_html_escapes_names():
    root = D("root", F("<b>&co.txt", 1))
    document = render_html(root)
    assert "&lt;b&gt;&amp;co.txt (1 bytes)" in document
    assert "<b>&co.txt" not in document


# === HTML export ===

def test_export_html_writes_document(scenario_tree, tmp_path, log_collector):
    destination = tmp_path / "exports" / "tree.html"
    written = export_html(scenario_tree, destination, log_collector)

    assert written == destination
    content = destination.read_text(encoding="utf-8")
    assert '<div class="pasta">R (4 children, 250 bytes)</div>' in content
    assert log_collector.messages("success")

def test_export_html_accepts_string_destination(scenario_tree, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    written = export_html(scenario_tree, "out.html")
    assert written == Path("out.html")
    assert (tmp_path / "out.html").is_file()

def test_export_html_reports_unwritable_destination(scenario_tree, tmp_path, log_collector):
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("I am a file")
    written = export_html(scenario_tree, blocker / "tree.html", log_collector)

    assert written is None
    assert log_collector.messages("error")

def test_export_html_reports_directory_destination(scenario_tree, tmp_path, log_collector):
    written = export_html(scenario_tree, tmp_path, log_collector)
    assert written is None
    assert any(str(tmp_path) in msg for msg in log_collector.messages("error"))
