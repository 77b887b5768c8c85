from __future__ import annotations

import pytest

from usecase_generator.common.config import (
    DEFAULT_BASE_URL,
    DEFAULT_MODEL,
    Settings,
    load_cfg,
    load_settings,
)


def test_defaults_without_sources() -> None:
    s = load_settings(environ={})
    assert s == Settings()
    assert s.base_url == DEFAULT_BASE_URL
    assert s.model == DEFAULT_MODEL


def test_env_overrides_yaml(tmp_path) -> None:
    cfg = tmp_path / "usecase.yaml"
    cfg.write_text("model: yaml-model\ntimeout: 12\nbase_url: http://yaml.test/\nunknown: 1\n", encoding="utf-8")
    env = {"USECASE_CONFIG": str(cfg), "OPENAI_MODEL": "env-model", "OPENAI_API_KEY": "sk-env"}
    s = load_settings(environ=env)
    assert s.model == "env-model"
    assert s.api_key == "sk-env"
    assert s.timeout == 12.0
    assert s.base_url == "http://yaml.test"


def test_explicit_path_and_timeout_from_env(tmp_path) -> None:
    cfg = tmp_path / "usecase.yaml"
    cfg.write_text("log_level: DEBUG\n", encoding="utf-8")
    s = load_settings(str(cfg), environ={"UPSTREAM_TIMEOUT": "2.5"})
    assert s.log_level == "DEBUG"
    assert s.timeout == 2.5


def test_empty_yaml_is_allowed(tmp_path) -> None:
    cfg = tmp_path / "empty.yaml"
    cfg.write_text("", encoding="utf-8")
    assert load_cfg(str(cfg)) == {}


def test_non_mapping_yaml_is_rejected(tmp_path) -> None:
    cfg = tmp_path / "list.yaml"
    cfg.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_settings(str(cfg), environ={})


def test_settings_are_read_only() -> None:
    s = Settings()
    with pytest.raises(AttributeError):
        s.model = "other"  # type: ignore[misc]
