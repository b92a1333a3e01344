"""YAML config loading with env var expansion."""

import logging
import os
import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import RepoDeckConfig

logger = logging.getLogger(__name__)

# ${VAR} or ${VAR:-fallback}
_ENV_REF = re.compile(r"\$\{(\w+)(?::-([^}]*))?\}")


def config_search_paths(cli_path: str | None = None) -> list[Path]:
    """Candidate files, highest priority first: CLI, project-local, user-global."""
    paths = [Path(cli_path)] if cli_path else []
    return paths + [Path("repodeck.yaml"), Path.home() / ".repodeck" / "config.yaml"]


def load_config(cli_path: str | None = None) -> RepoDeckConfig:
    """Return the first non-empty config file's settings, or the defaults.

    Raises ValueError naming the file when it is not valid YAML, is not a
    mapping, or holds values the config models reject.
    """
    for path in config_search_paths(cli_path):
        if not path.is_file():
            continue
        try:
            raw = yaml.safe_load(path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e
        if raw is None:
            continue
        if not isinstance(raw, dict):
            kind = type(raw).__name__
            raise ValueError(f"Invalid config in {path}: expected a mapping, got {kind}")
        try:
            config = RepoDeckConfig.model_validate(_expand_env_vars(raw))
        except ValidationError as e:
            raise ValueError(f"Invalid config in {path}: {e}") from e
        logger.debug("loaded config from %s", path)
        return config

    return RepoDeckConfig()


def _expand_env(match: re.Match) -> str:
    name, fallback = match.group(1), match.group(2)
    value = os.environ.get(name)
    if value is None:
        logger.debug("config references unset variable %s", name)
        return fallback or ""
    return value


def _expand_env_vars(obj: object) -> object:
    """Expand ${VAR} and ${VAR:-fallback} in every string, recursively."""
    if isinstance(obj, str):
        return _ENV_REF.sub(_expand_env, obj)
    if isinstance(obj, dict):
        return {k: _expand_env_vars(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_expand_env_vars(v) for v in obj]
    return obj


# Default YAML template for `repodeck config init`
DEFAULT_CONFIG_TEMPLATE = """\
# repodeck.yaml

# GitHub metadata source
github:
  token_env: "GITHUB_TOKEN"    # optional; unauthenticated requests work for public repos
  timeout: 30
  max_files: 100
  max_commits: 50

# Metadata cache (keyed by repository URL)
cache:
  enabled: true
  directory: ".repodeck/cache"
  ttl_hours: 24

# Presentation storage
storage:
  base_dir: ".repodeck/presentations"
  create_index: true

# Generation defaults
defaults:
  mode: "ted"                  # ted | imrad
  language: "ja"               # ja | en | zh
  duration: 3                  # 3 | 5 (minutes)

# Logging
log_level: "info"              # debug | info | warn | error
log_format: "text"             # text | json
"""
