"""
Configuration — loads settings from .hunkpatch.yaml, environment variables,
and built-in defaults (in that priority order: CLI args > env > YAML > defaults).
"""

import os

import yaml

from .editing.hunks import DEFAULT_CONTEXT


_DEFAULTS = {
    "context": DEFAULT_CONTEXT,
    "editor": "vim",
    "color": True,
    "ui": "console",
    "log_dir": ".hunkpatch/logs",
    "encoding": "utf-8",
}

_UI_CHOICES = ("console", "textual")

# Config file search locations
_CONFIG_FILENAMES = [".hunkpatch.yaml", ".hunkpatch.yml"]


def _find_config_file(explicit_path: str | None = None) -> str | None:
    """Find the config file. Checks explicit path, CWD, then user home."""
    if explicit_path:
        if os.path.isfile(explicit_path):
            return explicit_path
        return None

    search_dirs = [os.getcwd(), os.path.expanduser("~")]
    for d in search_dirs:
        for name in _CONFIG_FILENAMES:
            path = os.path.join(d, name)
            if os.path.isfile(path):
                return path
    return None


def _load_yaml(path: str) -> dict:
    """Load YAML file, returns empty dict on failure."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return data if isinstance(data, dict) else {}
    except (OSError, yaml.YAMLError):
        return {}


class Config:
    """Application configuration.

    Settings are resolved in priority order:
    1. CLI arguments (handled by caller)
    2. Environment variables
    3. .hunkpatch.yaml config file
    4. Built-in defaults
    """

    def __init__(self, yaml_data: dict | None = None):
        yd = yaml_data or {}

        # Helper: env var > yaml > default
        def _get(env_key: str, yaml_key: str, default, cast=str):
            env_val = os.getenv(env_key)
            if env_val is not None:
                return cast(env_val)
            yaml_val = yd.get(yaml_key)
            if yaml_val is not None:
                return cast(yaml_val)
            return default

        def _get_bool(env_key: str, yaml_key: str, default: bool) -> bool:
            env_val = os.getenv(env_key)
            if env_val is not None:
                return env_val.lower() in ("1", "true", "yes", "on")
            yaml_val = yd.get(yaml_key)
            if yaml_val is not None:
                return bool(yaml_val)
            return default

        self.CONTEXT = _get("HUNKPATCH_CONTEXT", "context",
                            _DEFAULTS["context"], cast=int)
        if self.CONTEXT < 0:
            raise ValueError(f"context must be non-negative, got {self.CONTEXT}")

        # Editor: dedicated var, then the usual VISUAL / EDITOR
        self.EDITOR = (os.getenv("HUNKPATCH_EDITOR") or os.getenv("VISUAL")
                       or os.getenv("EDITOR") or yd.get("editor")
                       or _DEFAULTS["editor"])

        self.COLOR = _get_bool("HUNKPATCH_COLOR", "color", _DEFAULTS["color"])

        self.UI = _get("HUNKPATCH_UI", "ui", _DEFAULTS["ui"]).lower()
        if self.UI not in _UI_CHOICES:
            self.UI = _DEFAULTS["ui"]

        self.LOG_DIR = _get("HUNKPATCH_LOG_DIR", "log_dir", _DEFAULTS["log_dir"])
        self.ENCODING = _get("HUNKPATCH_ENCODING", "encoding",
                             _DEFAULTS["encoding"])

    @classmethod
    def load(cls, config_path: str | None = None) -> "Config":
        """Load config from YAML file (if found) + env vars + defaults."""
        path = _find_config_file(config_path)
        yaml_data = _load_yaml(path) if path else {}
        return cls(yaml_data)
