"""Configuration management with TOML loading and defaults."""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

CONFIG_DIR = Path("~/.config/funnel").expanduser()
CONFIG_PATH = CONFIG_DIR / "config.toml"

DEFAULT_CONFIG_TOML = """\
[prompts]
template = "bullet-summary"   # "bullet-summary", "edited-transcript", or a custom template name

[output]
format = "text"               # "text" or "json"

# Custom templates (optional):
# [templates.action-items]
# prompt = "List every action item in this transcript:\\n{transcript}"
#
# A custom template with a built-in name replaces that built-in.
"""


@dataclass
class PromptsConfig:
    template: str = "bullet-summary"


@dataclass
class OutputConfig:
    format: str = "text"


@dataclass
class TemplateConfig:
    prompt: str = ""


@dataclass
class Config:
    prompts: PromptsConfig = field(default_factory=PromptsConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    templates: dict[str, TemplateConfig] = field(default_factory=dict)

    @classmethod
    def load(cls) -> Config:
        """Load config from TOML file, falling back to defaults."""
        config = cls()

        if CONFIG_PATH.exists():
            logging.getLogger(__name__).debug("Loading config from %s", CONFIG_PATH)
            with open(CONFIG_PATH, "rb") as f:
                data = tomllib.load(f)
            config = _merge_toml(config, data)

        # Env var overrides
        if template := os.environ.get("FUNNEL_TEMPLATE"):
            config.prompts.template = template

        return config


def _merge_toml(config: Config, data: dict) -> Config:
    """Merge TOML data into config dataclass."""
    if "prompts" in data:
        for k, v in data["prompts"].items():
            if hasattr(config.prompts, k):
                setattr(config.prompts, k, v)

    if "output" in data:
        for k, v in data["output"].items():
            if hasattr(config.output, k):
                setattr(config.output, k, v)

    if isinstance(data.get("templates"), dict):
        for name, t_data in data["templates"].items():
            if not isinstance(t_data, dict):
                logging.getLogger(__name__).warning("Ignoring template %r: expected a table", name)
                continue
            config.templates[name] = TemplateConfig(prompt=t_data.get("prompt", ""))

    return config


def ensure_config_file() -> Path:
    """Create default config file if it doesn't exist. Returns the path."""
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    if not CONFIG_PATH.exists():
        CONFIG_PATH.write_text(DEFAULT_CONFIG_TOML)
    return CONFIG_PATH
