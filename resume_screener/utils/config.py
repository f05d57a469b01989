"""
Configuration management for Resume Screener.
"""

from pathlib import Path
from typing import Optional
import copy
import json
import os

from resume_screener.core.errors import ConfigurationError
from resume_screener.core.models import CriteriaWeights


class Config:
    """Manages scoring weights, batch pacing and export settings."""

    DEFAULT_CONFIG = {
        "weights": {
            "skills": 0.4,
            "experience": 0.3,
            "education": 0.2,
            "keywords": 0.1,
        },
        "batch": {
            "throttle_seconds": 0.1,
        },
        "export": {
            "output_dir": ".",
            "format": "csv",
        },
    }

    ENV_PREFIX = "SCREENER_WEIGHT_"

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_path: Path to config file (default: ~/.resume_screener/config.json)
        """
        if config_path:
            self.config_path = Path(config_path)
        else:
            self.config_path = Path.home() / ".resume_screener" / "config.json"

        self.config = self._load_config()

    def _load_config(self) -> dict:
        """Load configuration from file or fall back to defaults."""
        defaults = copy.deepcopy(self.DEFAULT_CONFIG)

        if self.config_path.exists():
            try:
                with open(self.config_path, 'r') as f:
                    user_config = json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigurationError(f"Invalid config file {self.config_path}: {e}") from e

            return self._deep_merge(defaults, user_config)

        return defaults

    def _deep_merge(self, base: dict, override: dict) -> dict:
        """Deep merge two dictionaries."""
        result = base.copy()
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value
        return result

    def save(self) -> None:
        """Save current configuration to file."""
        self.config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(self.config_path, 'w') as f:
            json.dump(self.config, f, indent=2)

    def get(self, key: str, default=None):
        """
        Get a configuration value using dot notation.

        Args:
            key: Configuration key (e.g., "weights.skills")
            default: Default value if key not found

        Returns:
            Configuration value
        """
        keys = key.split('.')
        value = self.config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def set(self, key: str, value) -> None:
        """
        Set a configuration value using dot notation.

        Args:
            key: Configuration key (e.g., "weights.skills")
            value: Value to set
        """
        keys = key.split('.')
        config = self.config

        for k in keys[:-1]:
            if k not in config:
                config[k] = {}
            config = config[k]

        config[keys[-1]] = value

    def get_weights(self) -> CriteriaWeights:
        """
        Build the scoring weights.

        Environment variables (SCREENER_WEIGHT_SKILLS etc.) take precedence
        over the config file.
        """
        weights = dict(self.get("weights", {}))

        for name in CriteriaWeights.KEYS:
            env_value = os.environ.get(f"{self.ENV_PREFIX}{name.upper()}")
            if env_value:
                try:
                    weights[name] = float(env_value)
                except ValueError as e:
                    raise ConfigurationError(
                        f"{self.ENV_PREFIX}{name.upper()} must be a number, got {env_value!r}"
                    ) from e

        return CriteriaWeights.from_dict(weights)

    def set_weight(self, name: str, value: float) -> None:
        """Set one weight after validating the resulting vector."""
        if name not in CriteriaWeights.KEYS:
            raise ConfigurationError(f"Unknown weight: {name}")

        weights = dict(self.get("weights", {}))
        weights[name] = value
        CriteriaWeights.from_dict(weights)
        self.set(f"weights.{name}", value)

    def get_throttle_seconds(self) -> float:
        return float(self.get("batch.throttle_seconds", 0.1))

    def get_output_dir(self) -> str:
        return self.get("export.output_dir", ".")

    def get_export_format(self) -> str:
        return self.get("export.format", "csv")

    def print_config(self) -> None:
        """Print current configuration."""
        print(json.dumps(self.config, indent=2))

    @classmethod
    def create_default_config(cls, path: str = None) -> 'Config':
        """Create a new config file with default values."""
        config = cls(path)
        config.save()
        return config
