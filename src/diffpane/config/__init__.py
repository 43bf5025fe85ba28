"""Configuration loading, schema, and defaults."""

from diffpane.config.loader import ConfigError, deep_merge, load_config, setup
from diffpane.config.schema import (
    DEFAULT_BUDGET,
    DiffOptions,
    DiffPaneConfig,
    RenderBudget,
    RenderConfig,
)

__all__ = [
    "ConfigError",
    "DEFAULT_BUDGET",
    "DiffOptions",
    "DiffPaneConfig",
    "RenderBudget",
    "RenderConfig",
    "deep_merge",
    "load_config",
    "setup",
]
