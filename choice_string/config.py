"""
Configuration handling for the choice-string command line
"""
import os
import yaml
from typing import Dict, Any, Optional

from .errors import ConfigError


class Config:
    """Holds defaults, YAML file values and CLI overrides"""

    DEFAULT_CONFIG = {
        'selection': 'all',
        'normalize': True,
        'upper': None,
        'logging': {
            'level': 'WARNING',
            'format': '%(levelname)s %(name)s: %(message)s',
        },
    }

    def __init__(self, config_file: Optional[str] = None):
        """
        Args:
            config_file: Path to a YAML configuration file (optional)
        """
        import copy
        self.config = copy.deepcopy(self.DEFAULT_CONFIG)

        if config_file and os.path.exists(config_file):
            self.load_from_file(config_file)

    def load_from_file(self, config_file: str) -> None:
        """
        Load values from a YAML file on top of the current ones

        Args:
            config_file: Path to the configuration file
        """
        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                file_config = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Cannot load configuration file {config_file}: {e}") from e

        if file_config is None:
            return
        if not isinstance(file_config, dict):
            raise ConfigError(f"Configuration file {config_file} must contain a mapping")

        for key, value in file_config.items():
            if key == 'logging' and isinstance(value, dict):
                self._deep_merge(self.config.setdefault(key, {}), value)
            else:
                self.config[key] = value

    def _deep_merge(self, base: dict, update: dict) -> None:
        for key, value in update.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._deep_merge(base[key], value)
            else:
                base[key] = value

    def update_from_args(self, args: Dict[str, Any]) -> None:
        """
        Apply CLI arguments; they take precedence over the file.
        ``None`` values are skipped.

        Args:
            args: Mapping of CLI argument names to values
        """
        for key, value in args.items():
            if value is not None:
                self.config[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        return self.config.get(key, default)

    def get_all(self) -> Dict[str, Any]:
        return self.config.copy()
