"""
Tests for the find_path command line script.
"""

import importlib.util
import json
import sys
from pathlib import Path

import pytest

SCRIPT = Path(__file__).parent.parent / "scripts" / "find_path.py"


@pytest.fixture(scope="module")
def cli():
    """Import scripts/find_path.py as a module."""
    spec = importlib.util.spec_from_file_location("find_path", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def run_cli(cli, monkeypatch, *args) -> int:
    monkeypatch.setattr(sys, "argv", ["find_path.py", *args])
    return cli.main()


class TestFindPathCli:
    """Test exit codes and output."""

    def test_sample_dijkstra(self, cli, monkeypatch, capsys):
        """The demo graph should print the A -> D path and exit 0."""
        code = run_cli(cli, monkeypatch, "--sample", "--start", "A", "--target", "D")
        out = capsys.readouterr().out
        assert code == 0
        assert "A -> B -> C -> D" in out
        assert "Total cost: 8" in out

    def test_no_path_exit_code(self, cli, monkeypatch):
        """An unreachable target should exit 1."""
        assert run_cli(cli, monkeypatch, "--sample", "--start", "D", "--target", "A") == 1

    def test_undirected_flag(self, cli, monkeypatch):
        """--undirected should make D -> A reachable."""
        assert run_cli(cli, monkeypatch, "--sample", "--start", "D", "--target", "A", "--undirected") == 0

    def test_unknown_node_exit_code(self, cli, monkeypatch, capsys):
        """An unknown node should exit 2 with an error message."""
        assert run_cli(cli, monkeypatch, "--sample", "--start", "A", "--target", "Z") == 2
        assert "Error" in capsys.readouterr().err

    def test_graph_file_integer_ids(self, cli, monkeypatch, tmp_path):
        """Integer node ids in a file should be reachable from CLI strings."""
        path = tmp_path / "g.json"
        path.write_text(
            json.dumps({
                "nodes": [{"id": 1}, {"id": 2}],
                "edges": [{"id": "a", "from": 1, "to": 2, "weight": 2}],
            }),
            encoding="utf-8",
        )
        code = run_cli(cli, monkeypatch, "--graph", str(path), "--start", "1", "--target", "2", "--algorithm", "bellman-ford")
        assert code == 0

    def test_negative_cycle_exit_code(self, cli, monkeypatch, tmp_path, capsys):
        """A negative cycle should be reported and exit 1."""
        path = tmp_path / "neg.json"
        path.write_text(
            json.dumps({
                "nodes": [{"id": "A"}, {"id": "B"}],
                "edges": [
                    {"id": "ab", "from": "A", "to": "B", "weight": 1},
                    {"id": "ba", "from": "B", "to": "A", "weight": -2},
                ],
            }),
            encoding="utf-8",
        )
        code = run_cli(cli, monkeypatch, "--graph", str(path), "--start", "A", "--target", "B", "--algorithm", "bellman-ford")
        assert code == 1
        assert "negative-weight cycle" in capsys.readouterr().out

    def test_malformed_file_exit_code(self, cli, monkeypatch, tmp_path, capsys):
        """Undecodable or badly shaped graph files should exit 2, not crash."""
        binary = tmp_path / "bad.json"
        binary.write_bytes(b"\xff\xfe{}")
        assert run_cli(cli, monkeypatch, "--graph", str(binary), "--start", "A", "--target", "B") == 2

        shaped = tmp_path / "shaped.json"
        shaped.write_text(json.dumps({"nodes": None}), encoding="utf-8")
        assert run_cli(cli, monkeypatch, "--graph", str(shaped), "--start", "A", "--target", "B") == 2
        assert "Error" in capsys.readouterr().err
