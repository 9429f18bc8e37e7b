"""Tests for reelsort.utils.config."""

import json
from pathlib import Path

import pytest

from reelsort.errors import ConfigError
from reelsort.metadata.models import DEFAULT_TIMEOUT
from reelsort.utils.config import AppConfig, load_config


@pytest.fixture(autouse=True)
def clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in AppConfig.model_fields:
        monkeypatch.delenv(f"REELSORT_{key.upper()}", raising=False)


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "config.json"
    path.write_text(content, encoding="utf-8")
    return path


def test_load_valid_config(tmp_path: Path) -> None:
    """Both keys are read; the timeout falls back to its default."""
    path = _write(tmp_path, json.dumps({"tmdb_api_key": "a", "tvdb_api_key": "b"}))

    config = load_config(path)

    assert config.tmdb_api_key == "a"
    assert config.tvdb_api_key == "b"
    assert config.timeout == DEFAULT_TIMEOUT


def test_unknown_keys_are_ignored(tmp_path: Path) -> None:
    path = _write(tmp_path, json.dumps({"tmdb_api_key": "a", "extra": 1}))
    assert load_config(path).tmdb_api_key == "a"


def test_provider_context(tmp_path: Path) -> None:
    """The provider context carries the keys and timeout, without a token."""
    path = _write(
        tmp_path, json.dumps({"tmdb_api_key": "a", "tvdb_api_key": "b", "timeout": 3})
    )

    context = load_config(path).provider_context()

    assert context.tmdb_api_key == "a"
    assert context.tvdb_api_key == "b"
    assert context.timeout == 3
    assert context.tvdb_token is None


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_config(tmp_path / "missing.json")


def test_invalid_json(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_config(_write(tmp_path, "{not json"))


def test_not_an_object(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_config(_write(tmp_path, "[1, 2]"))


@pytest.mark.parametrize(
    "payload",
    [{"tmdb_api_key": 123}, {"timeout": 0}, {"timeout": "soon"}],
)
def test_wrong_types(tmp_path: Path, payload: dict) -> None:
    """Values of the wrong type or range are a ConfigError."""
    with pytest.raises(ConfigError):
        load_config(_write(tmp_path, json.dumps(payload)))


def test_env_overrides_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """REELSORT_* variables take precedence over the file."""
    monkeypatch.setenv("REELSORT_TVDB_API_KEY", "from-env")
    monkeypatch.setenv("REELSORT_TIMEOUT", "2.5")
    path = _write(tmp_path, json.dumps({"tmdb_api_key": "a", "tvdb_api_key": "b"}))

    config = load_config(path)

    assert config.tmdb_api_key == "a"
    assert config.tvdb_api_key == "from-env"
    assert config.timeout == 2.5
