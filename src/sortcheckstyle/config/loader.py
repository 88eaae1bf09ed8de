import copy
import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic import ValidationError

from .models import AppSettings

logger = logging.getLogger(__name__)


class ConfigManager:
    """Loads settings from a TOML file and layers overrides on top of it.

    Precedence, lowest first: built-in defaults, the file, ``--set`` style
    overrides, explicit command-line values.
    """

    def __init__(self, config_file_path: Union[str, Path], required: bool = False):
        self.config_file_path = Path(config_file_path)
        self.required = required
        self._raw_config: Dict[str, Any] = self._load_raw_config()

    def _load_raw_config(self) -> Dict[str, Any]:
        if not self.config_file_path.exists():
            if self.required:
                raise ValueError(f"Configuration file '{self.config_file_path}' not found.")
            logger.debug("Configuration file '%s' not found. Using defaults.", self.config_file_path)
            return {}
        try:
            with open(self.config_file_path, "rb") as f:
                raw = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Error decoding TOML file '{self.config_file_path}': {e}") from e
        logger.debug("Loaded configuration from %s", self.config_file_path)
        return raw

    @property
    def raw_config(self) -> Dict[str, Any]:
        return copy.deepcopy(self._raw_config)

    def _deep_merge_dicts(self, base: Dict[str, Any], update: Dict[str, Any]) -> Dict[str, Any]:
        merged = copy.deepcopy(base)
        for key, value in update.items():
            if isinstance(value, dict) and key in merged and isinstance(merged[key], dict):
                merged[key] = self._deep_merge_dicts(merged[key], value)
            else:
                merged[key] = value
        return merged

    @staticmethod
    def _coerce_value(value_str: str) -> Any:
        if value_str.lower() == "true":
            return True
        if value_str.lower() == "false":
            return False
        try:
            return int(value_str)
        except ValueError:
            pass
        try:
            return float(value_str)
        except ValueError:
            pass
        if value_str.startswith("["):
            # Arrays use TOML syntax, e.g. ["name", "key"]
            try:
                return tomllib.loads(f"value = {value_str}")["value"]
            except tomllib.TOMLDecodeError as e:
                raise ValueError(f"Invalid array value '{value_str}': {e}") from e
        return value_str

    def _set_nested_value(self, data_dict: Dict[str, Any], path_str: str, value_str: str) -> None:
        keys = path_str.strip().split('.')
        if any(not key for key in keys):
            raise ValueError(f"Invalid configuration path '{path_str}'.")
        current_level = data_dict
        for key in keys[:-1]:
            current_level = current_level.setdefault(key, {})
            if not isinstance(current_level, dict):
                raise ValueError(f"Cannot set nested value: '{key}' in path '{path_str}' is not a dictionary.")
        current_level[keys[-1]] = self._coerce_value(value_str.strip())

    def _apply_cli_overrides(self, config_dict: Dict[str, Any], overrides: Optional[List[str]]) -> Dict[str, Any]:
        if not overrides:
            return config_dict

        modified_config_dict = copy.deepcopy(config_dict)
        for override_entry in overrides:
            if '=' not in override_entry:
                logger.warning(
                    "Invalid override format '%s'. Skipping. Expected 'path.to.key=value'.",
                    override_entry,
                )
                continue

            path_str, value_str = override_entry.split('=', 1)
            try:
                self._set_nested_value(modified_config_dict, path_str, value_str)
            except ValueError as e:
                logger.warning("Could not apply override '%s': %s. Skipping.", override_entry, e)

        return modified_config_dict

    def get_settings(self,
                     overrides: Optional[List[str]] = None,
                     explicit: Optional[Dict[str, Any]] = None) -> AppSettings:
        """
        Resolve the effective settings.

        Args:
            overrides: ``path.to.key=value`` strings, as given with ``--set``
            explicit: Nested dict of values given as dedicated command-line options

        Returns:
            The validated settings

        Raises:
            ValueError: If the merged configuration does not validate
        """
        merged = self._apply_cli_overrides(self._raw_config, overrides)
        if explicit:
            merged = self._deep_merge_dicts(merged, explicit)
        try:
            return AppSettings(**merged)
        except ValidationError as e:
            raise ValueError(f"Invalid configuration (file '{self.config_file_path}'): {e}") from e
