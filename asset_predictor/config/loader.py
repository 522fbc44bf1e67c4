"""Configuration loader: defaults, then predictor.yaml, then per-call overrides."""

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from .defaults import DefaultConfig, get_default_config

CONFIG_FILENAME = "predictor.yaml"


def default_config_dir() -> Path:
    """
    Locate the config directory used when none is given.

    ./config under the current working directory wins when it holds
    predictor.yaml; otherwise the config/ directory of a source checkout.
    An installed package has no such directory, so only the built-in
    defaults apply there.
    """
    cwd_config = Path.cwd() / "config"
    if (cwd_config / CONFIG_FILENAME).exists():
        return cwd_config

    return Path(__file__).parent.parent.parent / "config"


@dataclass(frozen=True)
class ConfigLoader:
    """Reads predictor settings from a config directory."""

    config_dir: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_dir: Optional[Union[str, Path]] = None) -> "ConfigLoader":
        """Create a loader for config_dir, or the default directory when omitted."""
        if config_dir is None:
            config_dir = default_config_dir()

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    @property
    def config_file(self) -> Path:
        return self.config_dir / CONFIG_FILENAME

    def load_file_config(self) -> dict[str, Any]:
        """
        Load overrides from predictor.yaml.

        Returns:
            Parsed mapping, or an empty dict when the file is missing or empty

        Raises:
            ValueError: If the file does not hold a mapping at the top level
        """
        if not self.config_file.exists():
            return {}

        with open(self.config_file, encoding="utf-8") as f:
            file_config = yaml.safe_load(f)

        if file_config is None:
            return {}
        if not isinstance(file_config, dict):
            raise ValueError(f"{self.config_file} must contain a mapping, got {type(file_config).__name__}")

        return file_config

    def merge_config(self, overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Merge configuration sources.

        Priority order:
        1. Per-call overrides (highest priority)
        2. predictor.yaml in the config directory
        3. Built-in defaults (lowest priority)
        """
        config = asdict(self.defaults)

        for layer in (self.load_file_config(), overrides or {}):
            config = _deep_merge(config, layer)

        return config


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge override into a copy of base, recursing into nested sections."""
    merged = dict(base)

    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = _deep_merge(current, value)
        else:
            merged[key] = value

    return merged
