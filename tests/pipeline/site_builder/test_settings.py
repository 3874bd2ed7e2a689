"""Tests for build settings resolution (arguments, environment, .env, defaults)."""

from pathlib import Path

import pytest

import src.config as config
from src.pipeline.site_builder.settings import BuildSettings

ENV_NAMES = ("BASE_PATH", "SITE_ORIGIN", "SITE_DATA_DIR", "SITE_OUTPUT_DIR")


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> pytest.MonkeyPatch:
    for name in ENV_NAMES:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config, "ENV_FILE", tmp_path / "missing.env")
    return monkeypatch


def test_defaults(clean_env) -> None:
    settings = BuildSettings()
    assert settings.base_path == ""
    assert settings.site_origin == ""
    assert settings.data_dir == config.DATA_DIR
    assert settings.output_dir == config.OUTPUT_DIR


def test_environment_overrides_defaults(clean_env, tmp_path: Path) -> None:
    clean_env.setenv("BASE_PATH", "directory-site")
    clean_env.setenv("SITE_ORIGIN", "https://example.org/")
    clean_env.setenv("SITE_OUTPUT_DIR", str(tmp_path / "public"))
    settings = BuildSettings()
    assert settings.base_path == "directory-site"
    assert settings.site_origin == "https://example.org"
    assert settings.output_dir == tmp_path / "public"


def test_arguments_override_environment(clean_env, tmp_path: Path) -> None:
    clean_env.setenv("BASE_PATH", "from-env")
    settings = BuildSettings(base_path="", data_dir=tmp_path)
    assert settings.base_path == ""
    assert settings.data_dir == tmp_path


def test_env_file_is_loaded(clean_env, tmp_path: Path) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("BASE_PATH=from-dotenv\n", encoding="utf-8")
    clean_env.setattr(config, "ENV_FILE", env_file)
    # registered so the value written by the .env loader is removed afterwards
    clean_env.setenv("BASE_PATH", "from-shell")
    assert BuildSettings().base_path == "from-dotenv"


def test_repr_mentions_values(clean_env) -> None:
    text = repr(BuildSettings(base_path="x"))
    assert "base_path='x'" in text
