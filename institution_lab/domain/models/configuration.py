"""
Configuration models and validation schemas.
"""

from dataclasses import dataclass
from typing import Dict, Any, Optional
import os

from institution_lab.domain.interfaces.base import ValueObject

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


def _parse_bool(value: str) -> bool:
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ValueError(f"Cannot interpret {value!r} as a boolean")


@dataclass(frozen=True)
class LabConfiguration(ValueObject):
    """Configuration for the institution lab run."""

    # Logging configuration
    log_level: str = "WARNING"
    log_file: Optional[str] = None
    log_dir: Optional[str] = None

    # Sorting discipline: False returns a fresh list, True reorders the caller's list
    sort_in_place: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_logging()
        self._validate_sorting()

    def _validate_logging(self) -> None:
        """Validate logging configuration."""
        if not isinstance(self.log_level, str) or self.log_level.upper() not in VALID_LOG_LEVELS:
            raise ValueError(f"log_level must be one of {list(VALID_LOG_LEVELS)}")

        if self.log_file is not None and (not isinstance(self.log_file, str) or not self.log_file.strip()):
            raise ValueError("log_file must be a non-empty string if provided")

        if self.log_dir is not None and (not isinstance(self.log_dir, str) or not self.log_dir.strip()):
            raise ValueError("log_dir must be a non-empty string if provided")

    def _validate_sorting(self) -> None:
        if not isinstance(self.sort_in_place, bool):
            raise ValueError("sort_in_place must be a boolean")

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'LabConfiguration':
        """Create configuration from dictionary with environment variable support."""
        config_dict = dict(config_dict)

        env_overrides = {
            'log_level': os.getenv('LAB_LOG_LEVEL'),
            'log_file': os.getenv('LAB_LOG_FILE'),
            'sort_in_place': os.getenv('LAB_SORT_IN_PLACE'),
        }

        for key, env_value in env_overrides.items():
            if env_value is not None:
                if key == 'sort_in_place':
                    config_dict[key] = _parse_bool(env_value)
                else:
                    config_dict[key] = env_value

        unknown = set(config_dict) - set(cls.__dataclass_fields__)
        if unknown:
            raise ValueError(f"Unknown configuration keys: {sorted(unknown)}")

        return cls(**config_dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            'log_level': self.log_level,
            'log_file': self.log_file,
            'log_dir': self.log_dir,
            'sort_in_place': self.sort_in_place,
        }
