"""Load and merge configuration from .diffpane.toml, overrides, and env vars."""

from __future__ import annotations

import dataclasses
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from diffpane.config.schema import (
    DIFF_ALGORITHMS,
    DIFF_LAYOUTS,
    HEADER_STYLE_ALIASES,
    HEADER_STYLES,
    HIGHLIGHT_STYLES,
    DiffOptions,
    DiffPaneConfig,
    RenderBudget,
    RenderConfig,
)

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".diffpane.toml"

_CHOICES: Dict[str, tuple] = {
    "header_style": HEADER_STYLES,
    "highlight_style": HIGHLIGHT_STYLES,
    "layout": DIFF_LAYOUTS,
    "algorithm": DIFF_ALGORITHMS,
}

# Smallest accepted value for each integer key
_INT_MINIMUMS: Dict[str, int] = {
    "instant_ceiling": 0,
    "deferred_ceiling": 0,
    "total_ceiling": 0,
    "defer_delay_ms": 0,
    "chunk_size": 1,
    "chunk_delay_ms": 0,
    "context_lines": 0,
}

_BOOL_KEYS = ("wrap", "show_no_newline")


class ConfigError(Exception):
    """Raised when config is malformed or unreadable."""


def find_config_file(root: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    candidate = root / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def deep_merge(base: Mapping[str, Any], overrides: Mapping[str, Any]) -> Dict[str, Any]:
    """Return *base* with *overrides* applied; nested tables merge key by key."""
    merged: Dict[str, Any] = dict(base)
    for key, value in overrides.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged


def _check_value(key: str, value: Any) -> Any:
    """Validate a single config value; raises ConfigError on anything unknown."""
    if key in _BOOL_KEYS and not isinstance(value, bool):
        raise ConfigError(f"Invalid value for {key}: {value!r} (expected true or false)")
    if key in _INT_MINIMUMS:
        minimum = _INT_MINIMUMS[key]
        # bool is an int subclass; reject it explicitly
        if isinstance(value, bool) or not isinstance(value, int) or value < minimum:
            raise ConfigError(
                f"Invalid value for {key}: {value!r} (expected an integer >= {minimum})"
            )
    if key == "header_style" and isinstance(value, str):
        value = HEADER_STYLE_ALIASES.get(value, value)
    choices = _CHOICES.get(key)
    if choices is not None and value not in choices:
        raise ConfigError(
            f"Invalid value for {key}: {value!r} (expected one of {', '.join(choices)})"
        )
    return value


def _build_section(data: Mapping[str, Any], cls: type):
    """Build a dataclass from a section dict, ignoring unknown keys."""
    if not isinstance(data, Mapping):
        raise ConfigError(f"Expected a table for {cls.__name__}, got {type(data).__name__}")
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    filtered = {k: _check_value(k, v) for k, v in data.items() if k in valid_fields}
    return cls(**filtered)


def build_config(raw: Mapping[str, Any]) -> DiffPaneConfig:
    """Build a DiffPaneConfig from a (possibly partial) nested mapping."""
    data = deep_merge(dataclasses.asdict(DiffPaneConfig()), raw)
    return DiffPaneConfig(
        version=str(data.get("version", "1.0")),
        preview=_build_section(data["preview"], RenderConfig),
        budget=_build_section(data["budget"], RenderBudget),
        diff=_build_section(data["diff"], DiffOptions),
    )


def _env_overrides() -> Dict[str, Any]:
    """Collect DIFFPANE_* environment variable overrides for [preview]."""
    preview: Dict[str, Any] = {}
    if val := os.environ.get("DIFFPANE_HEADER_STYLE"):
        val = HEADER_STYLE_ALIASES.get(val, val)
        if val in HEADER_STYLES:
            preview["header_style"] = val
    if val := os.environ.get("DIFFPANE_HIGHLIGHT_STYLE"):
        if val in HIGHLIGHT_STYLES:
            preview["highlight_style"] = val
    if val := os.environ.get("DIFFPANE_LAYOUT"):
        if val in DIFF_LAYOUTS:
            preview["layout"] = val
    if val := os.environ.get("DIFFPANE_WRAP"):
        if val in ("0", "1"):
            preview["wrap"] = val == "1"
    return {"preview": preview} if preview else {}


def load_config(
    root: Path,
    config_override: Optional[str] = None,
    overrides: Optional[Mapping[str, Any]] = None,
) -> DiffPaneConfig:
    """Load, validate, and return a DiffPaneConfig.

    Precedence, lowest first: defaults, config file, environment, *overrides*.
    """
    config_path = find_config_file(root, config_override)

    raw: Dict[str, Any] = {}
    if config_path is not None:
        logger.debug("Loading config from %s", config_path)
        raw = _parse_toml(config_path)
    raw = deep_merge(raw, _env_overrides())
    if overrides:
        raw = deep_merge(raw, overrides)
    return build_config(raw)


def setup(overrides: Optional[Mapping[str, Any]] = None) -> RenderConfig:
    """Merge preview *overrides* over the defaults and return the result.

    The returned value is immutable; reconfigure by calling again and
    passing the new value to ``render_diff``.
    """
    return build_config({"preview": dict(overrides or {})}).preview
