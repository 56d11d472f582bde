import pytest

import artscope.config.loader as loader_mod
from artscope.config.loader import DEFAULT_IMAGE_URL, Settings, load_config, load_settings
from artscope.errors import ConfigError


def test_load_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.yaml")


def test_load_config_requires_version(tmp_path):
    path = tmp_path / "artscope.yaml"
    path.write_text("api:\n  timeout_seconds: 5\n")

    with pytest.raises(ValueError, match="version"):
        load_config(path)


def test_load_config_rejects_non_mapping_section(tmp_path):
    path = tmp_path / "artscope.yaml"
    path.write_text("version: 1\napi: [1, 2]\n")

    with pytest.raises(ValueError, match="api"):
        load_config(path)


def test_load_settings_merges_with_defaults(tmp_path):
    path = tmp_path / "artscope.yaml"
    path.write_text(
        "version: 1\n"
        "api:\n"
        "  base_url: http://localhost:9000/api/v1\n"
        "  min_interval_seconds: 1.5\n"
        "hydration:\n"
        "  max_concurrency: 1\n"
    )

    settings = load_settings(path)

    assert settings.api.base_url == "http://localhost:9000/api/v1"
    assert settings.api.min_interval_seconds == 1.5
    assert settings.api.timeout_seconds == 20
    assert settings.hydration.max_concurrency == 1
    assert settings.images.width == 843
    assert settings.images.placeholder_url == DEFAULT_IMAGE_URL
    assert settings.browse.random_artist_max_page == 1700


def test_load_settings_validates_values(tmp_path):
    path = tmp_path / "artscope.yaml"
    path.write_text("version: 1\nhydration:\n  max_concurrency: 0\n")

    with pytest.raises(ValueError):
        load_settings(path)


def test_load_settings_defaults_when_default_file_absent(tmp_path, monkeypatch):
    monkeypatch.setattr(loader_mod, "DEFAULT_CONFIG_PATH", tmp_path / "nope.yaml")

    assert load_settings() == Settings()


def test_shipped_config_is_valid():
    settings = load_settings(loader_mod.Path(__file__).resolve().parent.parent / "config" / "artscope.yaml")

    assert settings == Settings()


def test_load_settings_wraps_validation_errors(tmp_path):
    path = tmp_path / "artscope.yaml"
    path.write_text("version: 1\napi:\n  timeout_seconds: -1\n")

    with pytest.raises(ConfigError, match="Invalid config values"):
        load_settings(path)


def test_load_config_wraps_yaml_errors(tmp_path):
    path = tmp_path / "artscope.yaml"
    path.write_text("version: 1\napi: [unclosed\n")

    with pytest.raises(ConfigError, match="not valid YAML"):
        load_config(path)
