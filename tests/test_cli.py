"""Tests for the CLI commands."""

import json
from pathlib import Path

from typer.testing import CliRunner

from diffpane.cli import app

runner = CliRunner()

DIFF = "diff --git a/a b/a\n--- a/a\n+++ b/a\n@@ -1,1 +1,1 @@\n-old\n+new\n"


class TestVersion:
    def test_version_flag(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "diffpane" in result.output


class TestShow:
    def test_from_file(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "change.diff").write_text(DIFF)
        result = runner.invoke(app, ["show", "change.diff", "--width", "60"])
        assert result.exit_code == 0
        assert "Changes: +1, -1, ~1 hunks" in result.output
        assert "diff --git" not in result.output

    def test_from_stdin_verbatim(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(app, ["show", "--header-style", "verbatim"], input=DIFF)
        assert result.exit_code == 0
        assert "diff --git a/a b/a" in result.output

    def test_label_and_source(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(
            app, ["show", "--label", "src/a.py", "--source", "git"], input=DIFF
        )
        assert result.exit_code == 0
        assert "src/a.py  [git]" in result.output

    def test_side_by_side(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(
            app, ["show", "--layout", "side_by_side", "--width", "43"], input=DIFF
        )
        assert result.exit_code == 0
        assert "│" in result.output

    def test_bad_option_value_exits_2(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(app, ["show", "--layout", "diagonal"], input=DIFF)
        assert result.exit_code == 2

    def test_zero_chunk_size_exits_2(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".diffpane.toml").write_text("[budget]\nchunk_size = 0\n")
        result = runner.invoke(app, ["show"], input=DIFF)
        assert result.exit_code == 2

    def test_missing_file_exits_2(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(app, ["show", "missing.diff"])
        assert result.exit_code == 2


class TestStats:
    def test_json(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(app, ["stats", "--format", "json"], input=DIFF)
        assert result.exit_code == 0
        assert json.loads(result.output) == {"added": 1, "deleted": 1, "changed": 1}

    def test_terminal(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(app, ["stats"], input=DIFF)
        assert result.exit_code == 0
        assert "~1 hunks" in result.output

    def test_bad_format(self):
        result = runner.invoke(app, ["stats", "--format", "xml"], input=DIFF)
        assert result.exit_code == 2


class TestCompare:
    def test_renders_git_diff(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "old.txt").write_text("alpha\nbeta\n")
        (tmp_path / "new.txt").write_text("alpha\ngamma\n")
        result = runner.invoke(app, ["compare", "old.txt", "new.txt", "--width", "60"])
        assert result.exit_code == 0
        assert "gamma" in result.output
        assert "new.txt  [git]" in result.output

    def test_identical_files(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "a.txt").write_text("same\n")
        (tmp_path / "b.txt").write_text("same\n")
        result = runner.invoke(app, ["compare", "a.txt", "b.txt"])
        assert result.exit_code == 0

    def test_missing_file_exits_2(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(app, ["compare", "a.txt", "b.txt"])
        assert result.exit_code == 2


class TestInit:
    def test_creates_config(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(app, ["init"])
        assert result.exit_code == 0
        assert (tmp_path / ".diffpane.toml").exists()

    def test_created_config_loads(self, tmp_path: Path, monkeypatch):
        from diffpane.config.loader import load_config

        monkeypatch.chdir(tmp_path)
        runner.invoke(app, ["init", "--full"])
        cfg = load_config(tmp_path)
        assert cfg.budget.total_ceiling == 5000

    def test_refuses_overwrite(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".diffpane.toml").write_text("existing")
        result = runner.invoke(app, ["init"])
        assert result.exit_code == 1
