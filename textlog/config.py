"""Writer configuration: frozen dataclass resolved from options, YAML, and env vars."""

import logging
import os
from dataclasses import dataclass

import yaml

from textlog.template import DEFAULT_ENTRY_FORMAT

logger = logging.getLogger(__name__)

DEFAULT_LOG_DIR = "./logs"
DEFAULT_FILE_NAME = "error.php"

# Option names used by older configurations, mapped to their current names.
OPTION_ALIASES = {
    "text_file": "file_name",
    "text_file_path": "file_path",
    "text_file_no_php": "suppress_guard_header",
    "text_entry_format": "entry_format",
}


def _parse_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() in ("true", "1", "yes")


@dataclass(frozen=True)
class WriterConfig:
    file_name: str = DEFAULT_FILE_NAME
    file_path: str = ""  # empty: resolved from get_default_log_directory()
    suppress_guard_header: bool = False
    entry_format: str = DEFAULT_ENTRY_FORMAT
    auto_flush: bool = False

    @property
    def path(self) -> str:
        return os.path.join(self.file_path, self.file_name)


def load_yaml_config(path: str | None) -> dict:
    """Read the YAML settings file (``log_path`` plus a ``writer`` section).

    Returns an empty dict when no path is given or the file is missing.
    """
    if not path:
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        logger.info("Loaded writer settings from %s", path)
        return data
    except FileNotFoundError:
        logger.warning("Writer settings file %s not found, falling back to option defaults", path)
        return {}


def get_default_log_directory(yaml_data: dict | None = None) -> str:
    """Base log directory: LOG_PATH env var, then YAML ``log_path``, then ./logs."""
    env_dir = os.environ.get("LOG_PATH")
    if env_dir:
        return env_dir
    if yaml_data and yaml_data.get("log_path"):
        return str(yaml_data["log_path"])
    return DEFAULT_LOG_DIR


def _normalize_options(options: dict) -> dict:
    normalized = {}
    for key, value in options.items():
        name = OPTION_ALIASES.get(key, key)
        if name not in WriterConfig.__dataclass_fields__:
            logger.warning("Ignoring unknown writer option '%s'", key)
            continue
        # Empty values fall back to the defaults
        if value in (None, ""):
            continue
        normalized[name] = value
    return normalized


def load_config(options: dict | None = None, yaml_data: dict | None = None) -> WriterConfig:
    """Build a WriterConfig from explicit options layered over the YAML ``writer`` section."""
    yaml_data = yaml_data or {}
    merged = _normalize_options(yaml_data.get("writer") or {})
    merged.update(_normalize_options(options or {}))

    auto_flush = merged.get("auto_flush", os.environ.get("TEXTLOG_AUTO_FLUSH"))

    return WriterConfig(
        file_name=str(merged.get("file_name", DEFAULT_FILE_NAME)),
        file_path=str(merged.get("file_path") or get_default_log_directory(yaml_data)),
        suppress_guard_header=_parse_bool(merged.get("suppress_guard_header", False)),
        entry_format=str(merged.get("entry_format", DEFAULT_ENTRY_FORMAT)),
        auto_flush=_parse_bool(auto_flush),
    )
