from __future__ import annotations

import json
from pathlib import Path

import pytest

from gem_lookup.config.loader import ConfigLocator, ConfigRepository
from gem_lookup.config.models import LookupConfig


def test_config_locator_uses_env(isolated_home: Path) -> None:
    locator = ConfigLocator()
    assert locator.home == isolated_home.resolve()
    assert locator.config_path() == isolated_home.resolve() / "config.yaml"
    assert locator.logs_dir == isolated_home.resolve() / "logs"


def test_config_locator_explicit_home_wins(tmp_path: Path) -> None:
    locator = ConfigLocator(home=tmp_path / "custom")
    assert locator.home == (tmp_path / "custom").resolve()


def test_missing_default_file_yields_defaults() -> None:
    repo = ConfigRepository()
    config = repo.load_config()
    assert config == LookupConfig()
    assert repo.load_config() is config


def test_config_repository_yaml_roundtrip(tmp_path: Path) -> None:
    repo = ConfigRepository(ConfigLocator(home=tmp_path))
    config = LookupConfig(timeout=3.5, pacing_delay=2.0, output_format="json")
    path = repo.save_config(config)
    assert path == tmp_path.resolve() / "config.yaml"
    fresh = ConfigRepository(ConfigLocator(home=tmp_path))
    assert fresh.load_config() == config


def test_explicit_json_path(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"catalog_host": "gems.example.test", "timeout": 1}), encoding="utf-8")
    config = ConfigRepository().load_config(path)
    assert config.catalog_host == "gems.example.test"
    assert config.timeout == 1.0


def test_explicit_missing_path_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        ConfigRepository().load_config(tmp_path / "absent.yaml")


def test_non_mapping_file_rejected(tmp_path: Path) -> None:
    path = tmp_path / "list.yaml"
    path.write_text("- rails\n- rspec\n", encoding="utf-8")
    with pytest.raises(ValueError):
        ConfigRepository().load_config(path)


def test_unsupported_extension_rejected(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text("timeout = 1\n", encoding="utf-8")
    with pytest.raises(ValueError):
        ConfigRepository().load_config(path)


def test_malformed_yaml_rejected_as_value_error(tmp_path: Path) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text("timeout: [1, 2\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Invalid YAML"):
        ConfigRepository().load_config(path)


def test_malformed_default_file_rejected(isolated_home: Path) -> None:
    isolated_home.mkdir(parents=True, exist_ok=True)
    (isolated_home / "config.yaml").write_text("timeout: [1, 2\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Invalid YAML"):
        ConfigRepository().load_config()
