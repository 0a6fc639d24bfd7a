"""Configuration loading helpers for gem_lookup."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path

import yaml

from .models import LookupConfig

CONFIG_EXTENSIONS = (".yaml", ".yml", ".json")
CONFIG_FILENAME = "config.yaml"
HOME_ENV_VAR = "GEM_LOOKUP_HOME"


def _read_file(path: Path) -> dict:
    text = path.read_text(encoding="utf-8")
    if path.suffix in (".yaml", ".yml"):
        try:
            data = yaml.safe_load(text) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    else:
        data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError(f"Configuration file must contain a mapping: {path}")
    return data


def _write_file(path: Path, payload: dict) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as stream:
        if path.suffix in (".yaml", ".yml"):
            yaml.safe_dump(payload, stream, allow_unicode=True, sort_keys=False)
        else:
            json.dump(payload, stream, indent=2, ensure_ascii=False)


@dataclass(slots=True)
class ConfigLocator:
    """Resolve the home directory holding configuration and logs."""

    home: Path | None = None
    logs_dir: Path | None = None

    def __post_init__(self) -> None:
        env_root = os.environ.get(HOME_ENV_VAR)
        if self.home is not None:
            root = Path(self.home).expanduser()
        elif env_root:
            root = Path(env_root).expanduser()
        else:
            root = Path.home() / ".gem_lookup"
        self.home = root.resolve()
        self.logs_dir = (self.home / "logs").resolve()

    def config_path(self) -> Path:
        return self.home / CONFIG_FILENAME


class ConfigRepository:
    """Read and write the lookup configuration file."""

    def __init__(self, locator: ConfigLocator | None = None) -> None:
        self.locator = locator or ConfigLocator()
        self._cache: LookupConfig | None = None

    def load_config(self, path: Path | None = None) -> LookupConfig:
        """Load configuration from ``path`` or the located default file.

        A missing default file yields the built-in defaults; a missing
        explicit path is an error.
        """

        if path is not None:
            path = Path(path).expanduser()
            if not path.exists():
                raise FileNotFoundError(f"Configuration file not found: {path}")
            if path.suffix not in CONFIG_EXTENSIONS:
                raise ValueError(f"Unsupported configuration format: {path.suffix}")
            return LookupConfig.model_validate(_read_file(path))

        if self._cache is not None:
            return self._cache
        default_path = self.locator.config_path()
        if default_path.exists():
            config = LookupConfig.model_validate(_read_file(default_path))
        else:
            config = LookupConfig()
        self._cache = config
        return config

    def save_config(self, config: LookupConfig, path: Path | None = None) -> Path:
        target = Path(path) if path is not None else self.locator.config_path()
        _write_file(target, config.model_dump(mode="json"))
        if path is None:
            self._cache = config
        return target


__all__ = ["CONFIG_EXTENSIONS", "ConfigLocator", "ConfigRepository"]
