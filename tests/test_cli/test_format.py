"""Tests for CLI formatting utilities."""

import json

from netdiagram.cli._format import (
    SCHEMA_VERSION,
    json_envelope,
    print_json,
    print_lines,
    print_table,
)


class TestJsonEnvelope:
    def test_structure(self):
        env = json_envelope("render", {"connections": []})
        assert env["schema_version"] == SCHEMA_VERSION
        assert env["command"] == "render"
        assert env["data"] == {"connections": []}
        assert "generated_at" in env

    def test_print_json_to_file(self, tmp_path, capsys):
        target = tmp_path / "out.json"
        print_json("graph.ls", {"graphs": {}}, str(target))
        assert json.loads(target.read_text())["command"] == "graph.ls"
        assert f"Wrote graph.ls output to {target}" in capsys.readouterr().out


class TestPrintTable:
    def test_aligned_columns(self):
        lines = print_table(["Name", "Source"], [["a", "x.json"], ["longer", "m:g"]])
        assert lines[0] == "  Name    Source"
        assert lines[2] == "  a       x.json"
        assert lines[3] == "  longer  m:g"

    def test_empty_rows(self):
        assert print_table(["A"], []) == []


class TestPrintLines:
    def test_truncates(self, capsys):
        print_lines([str(i) for i in range(5)], max_lines=3)
        out = capsys.readouterr().out
        assert "0\n1\n2\n" in out
        assert "# ... 2 more lines" in out
