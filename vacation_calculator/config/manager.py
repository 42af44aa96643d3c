"""
Configuration manager for loading and validating settings.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from vacation_calculator.data.schemas import Config
from vacation_calculator.i18n import get_translator

logger = logging.getLogger(__name__)


class ConfigManager:
    """Manages configuration loading from YAML files and environment variables."""

    ENV_MAPPINGS = {
        "VACATION_CALC_LANGUAGE": "language",
        "VACATION_CALC_HOLIDAYS_FILE": "holidays_file",
        "VACATION_CALC_MAX_WALK_DAYS": ("max_walk_days", int),
        "VACATION_CALC_OUTPUT_FORMAT": "output_format",
        "VACATION_CALC_OUTPUT_DIRECTORY": "output_directory",
        "VACATION_CALC_API_HOST": "api_host",
        "VACATION_CALC_API_PORT": ("api_port", int),
    }

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the config manager.

        Args:
            config_path: Optional path to config file. If not provided, uses default.
        """
        self.config_path = config_path or self._get_default_config_path()

    def _get_default_config_path(self) -> str:
        """Get the default configuration file path."""
        return str(Path(__file__).parent / "settings.yaml")

    def load_config(self) -> Config:
        """
        Load configuration from YAML file with environment variable overrides.

        Without an explicit language the LANG environment variable decides.

        Returns:
            Config: Validated configuration object.

        Raises:
            ValueError: If config is invalid.
        """
        config_dict = self._load_yaml()
        config_dict = self._apply_env_overrides(config_dict)

        if not config_dict.get("language"):
            # Neither file nor VACATION_CALC_LANGUAGE set it: follow LANG
            config_dict["language"] = get_translator().get_language()

        try:
            return Config(**config_dict)
        except ValidationError as e:
            raise ValueError(f"Invalid configuration: {e}")

    def _load_yaml(self) -> Dict[str, Any]:
        """Load configuration from YAML file."""
        config_path = Path(self.config_path)

        if not config_path.exists():
            logger.debug(f"Config file not found: {config_path}, using defaults")
            return {}

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Error parsing YAML config file: {e}")

        logger.debug(f"Loaded config from: {config_path}")
        return self._flatten_config(config) if config else {}

    def _flatten_config(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Flatten nested YAML config to match Config model fields.

        Args:
            config: Nested configuration dictionary.

        Returns:
            Flattened configuration dictionary.
        """
        result = {}

        if "i18n" in config:
            if config["i18n"].get("language"):
                result["language"] = config["i18n"]["language"]

        if "calculation" in config:
            calc = config["calculation"]
            if "max_walk_days" in calc:
                result["max_walk_days"] = calc["max_walk_days"]

        if "holidays" in config:
            hol = config["holidays"]
            if hol.get("file"):
                result["holidays_file"] = hol["file"]

        if "output" in config:
            out = config["output"]
            if "format" in out:
                result["output_format"] = out["format"]
            if "directory" in out:
                result["output_directory"] = out["directory"]

        if "api" in config:
            api = config["api"]
            if "host" in api:
                result["api_host"] = api["host"]
            if "port" in api:
                result["api_port"] = api["port"]

        return result

    def _apply_env_overrides(self, config_dict: Dict[str, Any]) -> Dict[str, Any]:
        """
        Apply VACATION_CALC_* environment variable overrides.

        Values that fail type conversion are ignored.

        Args:
            config_dict: Configuration dictionary from YAML.

        Returns:
            Updated configuration dictionary.
        """
        for env_var, mapping in self.ENV_MAPPINGS.items():
            env_value = os.environ.get(env_var)
            if env_value is None:
                continue
            if isinstance(mapping, tuple):
                config_key, type_converter = mapping
                try:
                    config_dict[config_key] = type_converter(env_value)
                except ValueError:
                    logger.warning(f"Ignoring invalid value for {env_var}: {env_value!r}")
            else:
                config_dict[mapping] = env_value

        return config_dict

    def save_config(self, config: Config, output_path: Optional[str] = None) -> None:
        """
        Save configuration to YAML file.

        Args:
            config: Configuration object to save.
            output_path: Optional output path. If not provided, uses default.
        """
        output_path = output_path or self.config_path

        config_dict = {
            "i18n": {
                "language": config.language,
            },
            "calculation": {
                "max_walk_days": config.max_walk_days,
            },
            "holidays": {
                "file": config.holidays_file,
            },
            "output": {
                "format": config.output_format,
                "directory": config.output_directory,
            },
            "api": {
                "host": config.api_host,
                "port": config.api_port,
            },
        }

        Path(output_path).parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, "w", encoding="utf-8") as f:
            yaml.dump(config_dict, f, default_flow_style=False, sort_keys=False, allow_unicode=True)
