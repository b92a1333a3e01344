"""Tests for the repodeck CLI (generate, stored decks, script, config, cache)."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest
import yaml
from typer.testing import CliRunner

from repodeck.cli import app

runner = CliRunner()

URL = "https://github.com/acme/toeic-study-app"
DECK_ID = "acme-toeic-study-app-f373f793-ted-3m-ja"


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """The CLI callback replaces root handlers; put pytest's back afterwards."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture()
def config_path(tmp_path, monkeypatch) -> Path:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    path = tmp_path / "test-config.yaml"
    path.write_text(
        yaml.safe_dump(
            {
                "cache": {"directory": str(tmp_path / "cache")},
                "storage": {"base_dir": str(tmp_path / "decks")},
            }
        )
    )
    return path


def _invoke(config_path: Path, *args: str):
    return runner.invoke(app, ["--config", str(config_path), *args])


def _generate(config_path: Path, mock_source, *args: str):
    with patch("repodeck.cli.create_source", return_value=mock_source):
        return _invoke(config_path, "generate", URL, *args)


# ---------------------------------------------------------------------------
# repodeck generate
# ---------------------------------------------------------------------------


class TestGenerateCommand:
    def test_generate_saves_presentation(self, config_path, mock_source, tmp_path):
        result = _generate(
            config_path, mock_source, "--mode", "ted", "--duration", "5", "--lang", "en"
        )
        assert result.exit_code == 0, result.output
        assert "Saved" in result.output
        saved = tmp_path / "decks" / "acme-toeic-study-app-f373f793-ted-5m-en.json"
        data = json.loads(saved.read_text())
        assert len(data["slides"]) == 8
        assert data["language"] == "en"

    def test_uses_config_defaults(self, config_path, mock_source, tmp_path):
        result = _generate(config_path, mock_source)
        assert result.exit_code == 0, result.output
        assert (tmp_path / "decks" / f"{DECK_ID}.json").exists()

    def test_dry_run_does_not_save(self, config_path, mock_source, tmp_path):
        result = _generate(config_path, mock_source, "--dry-run")
        assert result.exit_code == 0, result.output
        assert "Dry run" in result.output
        assert not (tmp_path / "decks").exists()

    def test_output_override(self, config_path, mock_source, tmp_path):
        result = _generate(config_path, mock_source, "--output", str(tmp_path / "elsewhere"))
        assert result.exit_code == 0, result.output
        assert list((tmp_path / "elsewhere").glob("*.json"))

    def test_no_cache(self, config_path, mock_source, tmp_path):
        result = _generate(config_path, mock_source, "--no-cache")
        assert result.exit_code == 0, result.output
        assert not (tmp_path / "cache").exists()

    @pytest.mark.parametrize(
        "args, message",
        [
            (("--mode", "keynote"), "mode must be"),
            (("--duration", "10"), "duration must be"),
            (("--duration", "0"), "duration must be"),
            (("--mode", ""), "mode must be"),
            (("--lang", "fr"), "language must be"),
        ],
    )
    def test_invalid_options(self, config_path, mock_source, args, message):
        result = _generate(config_path, mock_source, *args)
        assert result.exit_code == 1
        assert message in result.output
        mock_source.fetch.assert_not_called()

    def test_invalid_url_fails(self, config_path, mock_source):
        with patch("repodeck.cli.create_source", return_value=mock_source):
            result = _invoke(config_path, "generate", "not-a-url")
        assert result.exit_code == 1
        assert "Generation failed" in result.output

    def test_unexpected_error_fails(self, config_path, mock_source):
        mock_source.fetch = AsyncMock(side_effect=RuntimeError("bug"))
        result = _generate(config_path, mock_source)
        assert result.exit_code == 1
        assert "Generation failed" in result.output


# ---------------------------------------------------------------------------
# Stored presentations
# ---------------------------------------------------------------------------


class TestStoredPresentations:
    def test_list_empty(self, config_path):
        result = _invoke(config_path, "list")
        assert result.exit_code == 0
        assert "No presentations" in result.output

    def test_list_after_generate(self, config_path, mock_source):
        _generate(config_path, mock_source)
        result = _invoke(config_path, "list")
        assert result.exit_code == 0
        assert "Presentations (1)" in result.output

    def test_show_json(self, config_path, mock_source):
        _generate(config_path, mock_source)
        result = _invoke(config_path, "show", DECK_ID, "--json")
        assert result.exit_code == 0
        assert '"mode"' in result.output

    def test_show_not_found(self, config_path):
        result = _invoke(config_path, "show", "missing")
        assert result.exit_code == 1
        assert "Not found" in result.output

    def test_search(self, config_path, mock_source):
        _generate(config_path, mock_source)
        assert "Matches" in _invoke(config_path, "search", "toeic").output
        assert "No presentations match" in _invoke(config_path, "search", "zzz").output

    def test_delete(self, config_path, mock_source, tmp_path):
        _generate(config_path, mock_source)
        result = _invoke(config_path, "delete", DECK_ID)
        assert result.exit_code == 0
        assert "Deleted" in result.output
        assert not (tmp_path / "decks" / f"{DECK_ID}.json").exists()

    def test_delete_not_found(self, config_path):
        result = _invoke(config_path, "delete", "missing")
        assert result.exit_code == 1

    def test_script(self, config_path, mock_source):
        _generate(config_path, mock_source)
        result = _invoke(config_path, "script", DECK_ID, "--audience", "technical")
        assert result.exit_code == 0, result.output
        assert "Speaker Script" in result.output
        assert "180s" in result.output

    def test_script_json(self, config_path, mock_source):
        _generate(config_path, mock_source)
        result = _invoke(config_path, "script", DECK_ID, "--json")
        assert result.exit_code == 0
        assert '"difficulty"' in result.output

    def test_script_invalid_audience(self, config_path):
        result = _invoke(config_path, "script", DECK_ID, "--audience", "investors")
        assert result.exit_code == 1
        assert "audience must be" in result.output

    def test_script_not_found(self, config_path):
        result = _invoke(config_path, "script", "missing")
        assert result.exit_code == 1
        assert "Not found" in result.output

    def test_stats(self, config_path, mock_source):
        _generate(config_path, mock_source)
        result = _invoke(config_path, "stats")
        assert result.exit_code == 0
        assert "Total" in result.output
        assert "3 min" in result.output


# ---------------------------------------------------------------------------
# config and cache
# ---------------------------------------------------------------------------


class TestConfigCommands:
    def test_config_show(self, config_path):
        result = _invoke(config_path, "config", "show")
        assert result.exit_code == 0
        assert "token_env" in result.output

    def test_config_init(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("HOME", str(tmp_path))
        result = runner.invoke(app, ["config", "init"])
        assert result.exit_code == 0
        assert (tmp_path / "repodeck.yaml").exists()

        again = runner.invoke(app, ["config", "init"])
        assert again.exit_code == 1
        assert "already exists" in again.output

        forced = runner.invoke(app, ["config", "init", "--force"])
        assert forced.exit_code == 0

    def test_bad_config_exits(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        bad = tmp_path / "bad.yaml"
        bad.write_text("defaults: [unclosed\n")
        result = runner.invoke(app, ["--config", str(bad), "list"])
        assert result.exit_code == 1
        assert "Error" in result.output


class TestCacheCommands:
    def test_cache_clear(self, config_path, mock_source):
        _generate(config_path, mock_source)
        result = _invoke(config_path, "cache", "clear")
        assert result.exit_code == 0
        assert "Cleared 1 cached entry" in result.output

    def test_cache_prune_keeps_fresh_entries(self, config_path, mock_source):
        _generate(config_path, mock_source)
        result = _invoke(config_path, "cache", "prune")
        assert result.exit_code == 0
        assert "Pruned 0 expired entries" in result.output
        _generate(config_path, mock_source, "--lang", "en")
        assert mock_source.fetch.await_count == 1

    def test_cache_hit_on_second_generate(self, config_path, mock_source):
        _generate(config_path, mock_source)
        _generate(config_path, mock_source, "--lang", "en")
        assert mock_source.fetch.await_count == 1

    def test_cache_disabled(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        path = tmp_path / "c.yaml"
        path.write_text("cache:\n  enabled: false\n")
        result = runner.invoke(app, ["--config", str(path), "cache", "clear"])
        assert result.exit_code == 0
        assert "disabled" in result.output
