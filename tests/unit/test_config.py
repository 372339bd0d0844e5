"""Unit tests for config.py"""

import pytest
from pydantic import ValidationError

from docdiff.config import Settings, load_config


@pytest.fixture(autouse=True)
def clean_env(tmp_path, monkeypatch):
    """Run each test in an empty directory with no DOCDIFF_* variables set."""
    monkeypatch.chdir(tmp_path)
    for name in Settings.model_fields:
        monkeypatch.delenv(f"DOCDIFF_{name.upper()}", raising=False)


def test_load_config_defaults():
    """Settings defaults apply when no config.yaml, env var, or CLI override exists."""
    settings = load_config()
    assert settings.db_url == "sqlite:///docdiff.db"
    assert (settings.context_lines, settings.view, settings.width) == (3, "unified", 60)
    assert settings.color is False


def test_load_config_uses_env_db_url(monkeypatch):
    monkeypatch.setenv("DOCDIFF_DB_URL", "sqlite:///env.db")
    assert load_config().db_url == "sqlite:///env.db"


def test_load_config_env_is_coerced(monkeypatch):
    """DOCDIFF_CONTEXT_LINES and DOCDIFF_COLOR are coerced to their field types."""
    monkeypatch.setenv("DOCDIFF_CONTEXT_LINES", "5")
    monkeypatch.setenv("DOCDIFF_COLOR", "true")
    settings = load_config()
    assert settings.context_lines == 5
    assert settings.color is True


def test_load_config_reads_config_yaml(tmp_path):
    (tmp_path / "config.yaml").write_text("view: split\nwidth: 40\n")
    settings = load_config()
    assert (settings.view, settings.width) == ("split", 40)


def test_load_config_env_overrides_config_yaml(tmp_path, monkeypatch):
    """DOCDIFF_VIEW takes precedence over config.yaml view."""
    (tmp_path / "config.yaml").write_text("view: split\n")
    monkeypatch.setenv("DOCDIFF_VIEW", "html")
    assert load_config().view == "html"


def test_load_config_cli_overrides_env(monkeypatch):
    """A non-None CLI override beats the env var; None overrides are ignored."""
    monkeypatch.setenv("DOCDIFF_CONTEXT_LINES", "5")
    assert load_config(overrides={"context_lines": 1}).context_lines == 1
    assert load_config(overrides={"context_lines": None}).context_lines == 5


def test_load_config_invalid_yaml(tmp_path):
    (tmp_path / "config.yaml").write_text("key: [unclosed\n")
    with pytest.raises(ValueError, match="Invalid config.yaml"):
        load_config()


def test_load_config_non_mapping_yaml(tmp_path):
    (tmp_path / "config.yaml").write_text("- just\n- a list\n")
    with pytest.raises(ValueError, match="expected a mapping"):
        load_config()


@pytest.mark.parametrize("overrides", [
    {"view": "table"},
    {"context_lines": -1},
    {"width": 5},
])
def test_load_config_rejects_invalid_values(overrides):
    with pytest.raises(ValidationError):
        load_config(overrides=overrides)
