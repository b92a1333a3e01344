"""Tests for repodeck.config: models and YAML loader."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from repodeck.config.loader import (
    DEFAULT_CONFIG_TEMPLATE,
    _expand_env_vars,
    config_search_paths,
    load_config,
)
from repodeck.config.models import (
    CacheConfig,
    GenerationDefaults,
    GitHubConfig,
    RepoDeckConfig,
)


# ── RepoDeckConfig defaults ────────────────────────────────────────


class TestRepoDeckConfigDefaults:
    def test_default_log_level(self, sample_config):
        assert sample_config.log_level == "info"

    def test_default_log_format(self, sample_config):
        assert sample_config.log_format == "text"

    def test_default_generation(self, sample_config):
        assert sample_config.defaults.mode == "ted"
        assert sample_config.defaults.language == "ja"
        assert sample_config.defaults.duration == 3

    def test_default_cache(self, sample_config):
        assert sample_config.cache.enabled is True
        assert sample_config.cache.ttl_hours == 24

    def test_default_storage_dir(self, sample_config):
        assert sample_config.storage.base_dir == ".repodeck/presentations"


# ── Individual config model validations ─────────────────────────────


class TestGitHubConfig:
    def test_defaults(self):
        cfg = GitHubConfig()
        assert cfg.token_env == "GITHUB_TOKEN"
        assert cfg.max_files == 100
        assert cfg.max_commits == 50

    def test_zero_caps_rejected(self):
        with pytest.raises(ValidationError):
            GitHubConfig(max_files=0)
        with pytest.raises(ValidationError):
            GitHubConfig(max_commits=0)


class TestGenerationDefaults:
    def test_unknown_mode_rejected(self):
        with pytest.raises(ValidationError):
            GenerationDefaults(mode="keynote")

    def test_unsupported_duration_rejected(self):
        with pytest.raises(ValidationError):
            GenerationDefaults(duration=10)

    def test_unsupported_language_rejected(self):
        with pytest.raises(ValidationError):
            GenerationDefaults(language="fr")


class TestCacheConfig:
    def test_negative_ttl_rejected(self):
        with pytest.raises(ValidationError):
            CacheConfig(ttl_hours=-1)


# ── _expand_env_vars ────────────────────────────────────────────────


class TestExpandEnvVars:
    def test_expands_string(self, monkeypatch):
        monkeypatch.setenv("RD_TEST_DIR", "/tmp/decks")
        assert _expand_env_vars("${RD_TEST_DIR}/out") == "/tmp/decks/out"

    def test_missing_var_becomes_empty(self, monkeypatch):
        monkeypatch.delenv("RD_MISSING", raising=False)
        assert _expand_env_vars("x${RD_MISSING}y") == "xy"

    def test_nested_structures(self, monkeypatch):
        monkeypatch.setenv("RD_MODE", "imrad")
        result = _expand_env_vars({"defaults": {"mode": "${RD_MODE}"}, "list": ["${RD_MODE}", 3]})
        assert result == {"defaults": {"mode": "imrad"}, "list": ["imrad", 3]}

    def test_fallback_used_when_unset(self, monkeypatch):
        monkeypatch.delenv("RD_MISSING", raising=False)
        assert _expand_env_vars("${RD_MISSING:-~/.repodeck}/decks") == "~/.repodeck/decks"

    def test_fallback_ignored_when_set(self, monkeypatch):
        monkeypatch.setenv("RD_MODE", "ted")
        assert _expand_env_vars("${RD_MODE:-imrad}") == "ted"

    def test_non_strings_untouched(self):
        assert _expand_env_vars({"duration": 5, "enabled": True}) == {"duration": 5, "enabled": True}


# ── load_config ─────────────────────────────────────────────────────


class TestLoadConfig:
    def test_explicit_path(self, tmp_path):
        path = tmp_path / "custom.yaml"
        path.write_text("defaults:\n  mode: imrad\n  duration: 5\nlog_level: debug\n")
        cfg = load_config(str(path))
        assert cfg.defaults.mode == "imrad"
        assert cfg.defaults.duration == 5
        assert cfg.log_level == "debug"

    def test_env_expansion_in_file(self, tmp_path, monkeypatch):
        monkeypatch.setenv("RD_STORE", str(tmp_path / "decks"))
        path = tmp_path / "custom.yaml"
        path.write_text("storage:\n  base_dir: ${RD_STORE}\n")
        cfg = load_config(str(path))
        assert cfg.storage.base_dir == str(tmp_path / "decks")

    def test_no_files_returns_defaults(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("HOME", str(tmp_path))
        assert load_config() == RepoDeckConfig()

    def test_empty_file_falls_through(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("HOME", str(tmp_path))
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(str(path)) == RepoDeckConfig()

    def test_invalid_yaml_raises_value_error(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("defaults: [unclosed\n")
        with pytest.raises(ValueError, match="Invalid YAML"):
            load_config(str(path))

    def test_invalid_values_raise_value_error(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("defaults:\n  duration: 7\n")
        with pytest.raises(ValueError, match="Invalid config"):
            load_config(str(path))

    def test_default_template_loads(self, tmp_path):
        path = tmp_path / "repodeck.yaml"
        path.write_text(DEFAULT_CONFIG_TEMPLATE)
        assert load_config(str(path)) == RepoDeckConfig()

    def test_non_mapping_document_raises_value_error(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- defaults\n- cache\n")
        with pytest.raises(ValueError, match="expected a mapping, got list"):
            load_config(str(path))

    def test_scalar_document_raises_value_error(self, tmp_path):
        path = tmp_path / "scalar.yaml"
        path.write_text("just a string\n")
        with pytest.raises(ValueError, match="expected a mapping, got str"):
            load_config(str(path))

    def test_project_file_beats_user_file(self, tmp_path, monkeypatch):
        home = tmp_path / "home"
        (home / ".repodeck").mkdir(parents=True)
        (home / ".repodeck" / "config.yaml").write_text("log_level: error\n")
        monkeypatch.setenv("HOME", str(home))
        monkeypatch.chdir(tmp_path)
        assert load_config().log_level == "error"
        (tmp_path / "repodeck.yaml").write_text("log_level: debug\n")
        assert load_config().log_level == "debug"


# ── config_search_paths ─────────────────────────────────────────────


class TestConfigSearchPaths:
    def test_cli_path_first(self, tmp_path, monkeypatch):
        monkeypatch.setenv("HOME", str(tmp_path))
        assert config_search_paths("custom.yaml") == [
            Path("custom.yaml"),
            Path("repodeck.yaml"),
            tmp_path / ".repodeck" / "config.yaml",
        ]

    def test_without_cli_path(self, tmp_path, monkeypatch):
        monkeypatch.setenv("HOME", str(tmp_path))
        assert config_search_paths() == [
            Path("repodeck.yaml"),
            tmp_path / ".repodeck" / "config.yaml",
        ]
