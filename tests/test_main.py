"""Tests for the command-line entrypoint."""

import json

import pytest

from arbscan import main as cli


@pytest.fixture(autouse=True)
def no_log_setup(monkeypatch):
    monkeypatch.setattr(cli, "setup_logging", lambda level: None)


class TestMain:

    def test_json_run(self, tmp_path, capsys):
        snapshot = tmp_path / "bookmakers.json"
        code = cli.main([
            "--bookmakers", "3",
            "--games", "30",
            "--total-bet", "200",
            "--seed", "5",
            "--snapshot", str(snapshot),
            "--reporter", "json",
        ])

        assert code == 0
        assert snapshot.exists()
        for line in capsys.readouterr().out.splitlines():
            assert json.loads(line)["total_bet"] == 200.0

    def test_invalid_configuration(self, tmp_path, capsys):
        code = cli.main(["--total-bet", "0", "--snapshot", str(tmp_path / "b.json")])
        assert code == 2
        assert "Invalid configuration" in capsys.readouterr().err

    def test_persistence_failure(self, tmp_path):
        snapshot = tmp_path / "bookmakers.json"
        snapshot.write_text("corrupt")
        assert cli.main(["--snapshot", str(snapshot), "--reporter", "log"]) == 1
