"""Tests for the CLI entry point."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from rich.console import Console

from healthcheck import main


@pytest.fixture
def console(monkeypatch) -> Console:
    recording = Console(record=True, width=120)
    monkeypatch.setattr(main, "console", recording)
    return recording


class TestShowIntegrations:
    def test_table(self, tmp_path: Path, console: Console) -> None:
        path = tmp_path / "integrations.yaml"
        path.write_text(yaml.dump({
            "integrations": [
                {"name": "bookstore", "kind": "database"},
                {"name": "pokemon", "kind": "api", "optional": True,
                 "config": {"errorPerIntervalToFailState": 1, "errorMinuteInterval": 10}},
            ]
        }))
        main.show_integrations(str(path))
        out = console.export_text()
        assert "bookstore" in out
        assert "database" in out
        assert "pokemon" in out
        assert "yes" in out
        assert "10" in out

    def test_no_integrations(self, tmp_path: Path, console: Console) -> None:
        main.show_integrations(str(tmp_path / "missing.yaml"))
        assert "No integrations declared" in console.export_text()


class TestCli:
    def test_integrations_subcommand(self, tmp_path: Path, console: Console, monkeypatch) -> None:
        path = tmp_path / "integrations.yaml"
        path.write_text(yaml.dump({"integrations": [{"name": "cache", "kind": "database"}]}))
        monkeypatch.setattr("sys.argv", ["healthcheck", "integrations", "--file", str(path)])
        main.main()
        assert "cache" in console.export_text()

    def test_no_command_exits(self, monkeypatch) -> None:
        monkeypatch.setattr("sys.argv", ["healthcheck"])
        with pytest.raises(SystemExit):
            main.main()
