"""
Configuration management for C++ prop generation.

Handles loading and merging configuration from JSON files, providing
defaults and validation for the native type names and include paths.
"""

import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ..logging_config import get_logger
from .errors import ConfigError

logger = get_logger(__name__)

IMAGE_CONVERSIONS_INCLUDE = "#include <react/components/image/conversions.h>"


@dataclass(frozen=True)
class CppTypeConfig:
    """Native type names and include paths used by the C++ mapping."""

    # Scalar type names
    bool_type: str = "bool"
    string_type: str = "std::string"
    int_type: str = "int"
    double_type: str = "double"
    float_type: str = "Float"

    # Header pulled in by ImageSourcePrimitive props
    image_source_include: str = IMAGE_CONVERSIONS_INCLUDE


class ConfigManager:
    """Manages configuration loading and merging."""

    def __init__(self, defaults: Optional[CppTypeConfig] = None):
        """Initialize with base defaults."""
        self._defaults = defaults or CppTypeConfig()

    def get_config(
        self,
        custom_config: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
    ) -> CppTypeConfig:
        """
        Get complete configuration.

        Args:
            custom_config: Custom configuration overrides
            config_file: Path to JSON configuration file

        Returns:
            Defaults, then the file, then the overrides merged in that order
        """
        base_config = asdict(self._defaults)

        if config_file:
            base_config.update(self._load_config_file(config_file))

        if custom_config:
            base_config.update(custom_config)

        return self._dict_to_config(base_config)

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if not path.suffix.lower() == ".json":
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {e}") from e

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        logger.debug("Loaded configuration file %s", path)
        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> CppTypeConfig:
        """Convert dictionary to CppTypeConfig instance."""
        known_fields = {f.name for f in fields(CppTypeConfig)}

        unknown = sorted(set(config_dict) - known_fields)
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")

        for key, value in config_dict.items():
            if not isinstance(value, str) or not value.strip():
                raise ConfigError(f"Configuration value for '{key}' must be a non-empty string")

        return CppTypeConfig(**config_dict)

    def save_config(self, config: CppTypeConfig, output_path: Union[str, Path]):
        """Save configuration to JSON file."""
        path = Path(output_path)

        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(asdict(config), f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise ConfigError(f"Failed to save configuration to {path}: {e}") from e


# Global configuration manager instance
_config_manager = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(
    custom_config: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> CppTypeConfig:
    """
    Convenience function to load configuration.

    Args:
        custom_config: Custom configuration overrides
        config_file: Path to JSON configuration file

    Returns:
        Merged configuration
    """
    return get_config_manager().get_config(custom_config, config_file)
