"""Unit tests for settings resolution."""

from pathlib import Path

import pytest

from componentry.contexts.templating.config_resolver import (
    components_root,
    default_view_paths,
    load_settings,
)
from componentry.contexts.templating.defaults import DEFAULT_TEMPLATE_EXTENSIONS


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    monkeypatch.delenv("COMPONENTS_CONFIG_PATH", raising=False)
    monkeypatch.delenv("COMPONENTS_ROOT", raising=False)


@pytest.mark.unit
def test_load_settings_defaults():
    """Test that settings fall back to built-in defaults."""
    settings = load_settings()

    assert settings["view_paths"] == []
    assert settings["template_extensions"] == DEFAULT_TEMPLATE_EXTENSIONS
    assert settings["environment"]["strict_undefined"] is True


@pytest.mark.unit
def test_load_settings_merges_yaml(tmp_path):
    """Test that a config file overrides only the keys it names."""
    config = tmp_path / "components.yaml"
    config.write_text(
        "view_paths:\n"
        "  - vendor/plugins/scaffolding/components\n"
        "environment:\n"
        "  autoescape: true\n"
    )

    settings = load_settings(config)

    assert settings["view_paths"] == ["vendor/plugins/scaffolding/components"]
    assert settings["environment"]["autoescape"] is True
    assert settings["environment"]["keep_trailing_newline"] is True
    assert settings["template_extensions"] == DEFAULT_TEMPLATE_EXTENSIONS


@pytest.mark.unit
def test_load_settings_from_environment(tmp_path, monkeypatch):
    """Test that COMPONENTS_CONFIG_PATH selects the config file."""
    config = tmp_path / "components.yaml"
    config.write_text("template_extensions: ['.txt']\n")
    monkeypatch.setenv("COMPONENTS_CONFIG_PATH", str(config))

    assert load_settings()["template_extensions"] == [".txt"]


@pytest.mark.unit
def test_load_settings_rejects_unknown_keys(tmp_path):
    """Test that typos in the config file are reported."""
    config = tmp_path / "components.yaml"
    config.write_text("view_path: [oops]\n")

    with pytest.raises(ValueError, match="view_path"):
        load_settings(config)


@pytest.mark.unit
def test_components_root(tmp_path, monkeypatch):
    """Test the conventional root and its environment override."""
    assert components_root() == Path.cwd() / "app" / "components"

    monkeypatch.setenv("COMPONENTS_ROOT", str(tmp_path))
    assert components_root() == tmp_path


@pytest.mark.unit
def test_default_view_paths(tmp_path, monkeypatch):
    """Test that configured roots follow the conventional root, without duplicates."""
    monkeypatch.setenv("COMPONENTS_ROOT", str(tmp_path))
    settings = {"view_paths": [str(tmp_path), "vendor/components"]}

    assert default_view_paths(settings) == [tmp_path, Path("vendor/components")]
