"""
Configuration manager implementation with validation.
"""

import json
import os
from pathlib import Path
from typing import Dict, Any, Optional

from institution_lab.domain.exceptions import ConfigurationError
from institution_lab.domain.interfaces.base import ILogger
from institution_lab.domain.models.configuration import LabConfiguration

CONFIG_FILE_ENV = 'LAB_CONFIG_FILE'


class ConfigurationManager:
    """Configuration manager backed by an optional JSON file.

    The file is read once and never written; when it is missing the defaults
    apply. Environment overrides are applied on top by ``LabConfiguration.from_dict``.
    """

    def __init__(self, config_file_path: Optional[str], logger: ILogger):
        self.config_file_path = Path(config_file_path) if config_file_path else None
        self.logger = logger
        self._config_data: Dict[str, Any] = {}
        self._lab_config: Optional[LabConfiguration] = None

        self._load_configuration()

    @classmethod
    def from_environment(cls, logger: ILogger) -> 'ConfigurationManager':
        """Build a manager for the file named by ``LAB_CONFIG_FILE``, if any."""
        return cls(os.getenv(CONFIG_FILE_ENV), logger)

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by key."""
        return self._config_data.get(key, default)

    def get_all(self) -> Dict[str, Any]:
        """Get all configuration data."""
        return self._config_data.copy()

    def validate(self) -> bool:
        """Check the loaded values against the current environment."""
        try:
            LabConfiguration.from_dict(self._config_data)
            return True
        except (TypeError, ValueError) as e:
            self.logger.error(f"Configuration validation failed: {e}", component='configuration')
            return False

    def get_lab_config(self) -> LabConfiguration:
        """Get typed lab configuration object."""
        return self._lab_config

    def _load_configuration(self) -> None:
        """Load configuration from file or fall back to defaults."""
        if self.config_file_path is not None and self.config_file_path.exists():
            self._config_data = self._read_file()
            self.logger.info("Configuration loaded", component='configuration',
                             path=str(self.config_file_path))
        else:
            self.logger.info("Configuration file not found, using defaults",
                             component='configuration', path=str(self.config_file_path))
            self._config_data = LabConfiguration().to_dict()

        try:
            self._lab_config = LabConfiguration.from_dict(self._config_data)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

    def _read_file(self) -> Dict[str, Any]:
        try:
            with open(self.config_file_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(
                f"Cannot read configuration file: {e}",
                context={'path': str(self.config_file_path)},
            ) from e

        if not isinstance(data, dict):
            raise ConfigurationError("Configuration file must hold a JSON object",
                                     context={'path': str(self.config_file_path)})
        return data
