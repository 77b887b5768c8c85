"""Process-wide settings, read once from defaults, an optional YAML file and env."""
from __future__ import annotations
import os
from dataclasses import dataclass, fields, replace
from functools import lru_cache
from typing import Any

import yaml

DEFAULT_BASE_URL = "https://api.openai.com"
DEFAULT_MODEL = "gpt-3.5-turbo"
DEFAULT_TIMEOUT = 60.0
DEFAULT_TEMPLATE_PATH = "configs/usecase_prompt.txt"

# Sampling parameters are part of the prompt contract, not configuration.
TEMPERATURE = 0.7
MAX_TOKENS = 600

_ENV_KEYS = {
    "api_key": "OPENAI_API_KEY",
    "base_url": "OPENAI_BASE_URL",
    "model": "OPENAI_MODEL",
    "timeout": "UPSTREAM_TIMEOUT",
    "template_path": "PROMPT_TEMPLATE_PATH",
    "log_level": "LOG_LEVEL",
}


@dataclass(frozen=True)
class Settings:
    api_key: str = ""
    base_url: str = DEFAULT_BASE_URL
    model: str = DEFAULT_MODEL
    timeout: float = DEFAULT_TIMEOUT
    template_path: str = DEFAULT_TEMPLATE_PATH
    log_level: str = "INFO"


def load_cfg(path: str) -> dict[str, Any]:
    """
    Read a YAML settings file.

    Args:
        path: YAML file path.

    Raises:
        ValueError: If the document is not a mapping.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Settings file {path} must contain a mapping")
    return data


def _coerce(settings: Settings, values: dict[str, Any]) -> Settings:
    known = {f.name for f in fields(Settings)}
    updates: dict[str, Any] = {}
    for key, value in values.items():
        if key not in known or value is None:
            continue
        updates[key] = float(value) if key == "timeout" else str(value)
    return replace(settings, **updates)


def load_settings(
    config_path: str | None = None,
    environ: dict[str, str] | None = None,
) -> Settings:
    """
    Build settings from defaults, then the YAML file, then environment variables.

    Args:
        config_path: YAML file; defaults to $USECASE_CONFIG when set.
        environ: Environment mapping, os.environ by default.
    """
    env = os.environ if environ is None else environ
    settings = Settings()
    path = config_path or env.get("USECASE_CONFIG")
    if path:
        settings = _coerce(settings, load_cfg(path))
    from_env = {name: env[var] for name, var in _ENV_KEYS.items() if env.get(var)}
    settings = _coerce(settings, from_env)
    return replace(settings, base_url=settings.base_url.rstrip("/"))


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Settings for this process, loaded on first use."""
    return load_settings()
