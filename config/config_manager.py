"""Configuration manager for the Overboard Q&A Board.

This module handles loading, validating, and persisting application configuration.
"""

import os
import yaml
from pathlib import Path
from typing import Any, Dict, Optional
from dataclasses import dataclass

from core.error_handler import ConfigError


SWITCH_POLICIES = ("move", "reject")


@dataclass
class BoardConfig:
    """Board configuration settings."""
    default_name: str = "Unit Testing"


@dataclass(frozen=True)
class ReputationRules:
    """Points awarded per vote or acceptance received."""
    question_up_vote: int = 5
    question_down_vote: int = 0
    answer_up_vote: int = 10
    answer_down_vote: int = -1
    accepted_answer: int = 15


@dataclass
class VotingConfig:
    """Voting configuration settings.

    ``switch_policy`` decides what happens when a user who already voted one
    way votes the other way on the same post: ``move`` transfers the vote,
    ``reject`` raises a VotingError.
    """
    switch_policy: str = "move"


@dataclass
class LoggingConfig:
    """Logging configuration settings."""
    level: str = "INFO"
    log_path: str = ""
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


# Section name -> dataclass describing its fields
SECTION_SCHEMAS = {
    'board': BoardConfig,
    'reputation': ReputationRules,
    'voting': VotingConfig,
    'logging': LoggingConfig,
}


class ConfigManager:
    """Manages application configuration with validation and persistence."""

    DEFAULT_CONFIG_PATH = Path.home() / ".overboard" / "settings.yaml"
    BUNDLED_CONFIG_PATH = Path(__file__).parent / "settings.yaml"
    ENV_PREFIX = "OVERBOARD_"

    def __init__(self, config_path: Optional[Path] = None):
        """Initialize configuration manager.

        Args:
            config_path: Optional custom path to configuration file.
                        If None, uses default user config path.
        """
        self.config_path = Path(config_path) if config_path else self.DEFAULT_CONFIG_PATH
        self._config: Dict[str, Any] = {}
        self._load_config()

    def _load_config(self) -> None:
        """Load configuration from file with fallback to defaults."""
        default_config = self._load_yaml(self.BUNDLED_CONFIG_PATH)

        if self.config_path.exists():
            user_config = self._load_yaml(self.config_path)
            self._config = self._merge_configs(default_config, user_config)
        else:
            self._config = default_config

        self._apply_env_overrides()
        self._validate_config()

    def _load_yaml(self, path: Path) -> Dict[str, Any]:
        """Load YAML configuration file.

        Args:
            path: Path to YAML file

        Returns:
            Dictionary containing configuration
        """
        try:
            with open(path, 'r', encoding='utf-8') as f:
                config = yaml.safe_load(f)
                if config and not isinstance(config, dict):
                    raise ConfigError(
                        f"Config file {path} must contain a mapping of sections, "
                        f"got {type(config).__name__}"
                    )
                return config if config else {}
        except FileNotFoundError:
            return {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in config file {path}: {e}")

    def _merge_configs(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Recursively merge two configuration dictionaries.

        Args:
            base: Base configuration dictionary
            override: Override configuration dictionary

        Returns:
            Merged configuration dictionary
        """
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge_configs(result[key], value)
            else:
                result[key] = value

        return result

    def _apply_env_overrides(self) -> None:
        """Apply environment variable overrides to configuration.

        Environment variables should be prefixed with OVERBOARD_ and use
        double underscores for nested keys. For example:
        OVERBOARD_REPUTATION__ACCEPTED_ANSWER=20
        """
        for env_key, env_value in os.environ.items():
            if not env_key.startswith(self.ENV_PREFIX):
                continue

            config_key = env_key[len(self.ENV_PREFIX):].lower()
            parts = config_key.split("__")

            if len(parts) != 2:
                continue

            section, key = parts

            if section not in SECTION_SCHEMAS or not isinstance(self._config.get(section), dict):
                continue

            if key not in SECTION_SCHEMAS[section].__dataclass_fields__:
                continue

            self._config[section][key] = self._convert_env_value(env_value)

    def _convert_env_value(self, value: str) -> Any:
        """Convert environment variable string to appropriate type.

        Args:
            value: String value from environment variable

        Returns:
            Converted value (int, bool, or str)
        """
        # Integers first so that "-1" and "0" stay numeric point values
        try:
            return int(value)
        except ValueError:
            pass

        if value.lower() in ('true', 'yes'):
            return True
        if value.lower() in ('false', 'no'):
            return False

        return value

    def _validate_config(self) -> None:
        """Validate configuration has all required fields and correct types."""
        for section, schema in SECTION_SCHEMAS.items():
            if section not in self._config or not isinstance(self._config[section], dict):
                raise ConfigError(f"Missing required configuration section: {section}")

            unknown = set(self._config[section]) - set(schema.__dataclass_fields__)
            if unknown:
                raise ConfigError(
                    f"Unknown field(s) in section {section}: {', '.join(sorted(map(str, unknown)))}"
                )

        board = self._config['board']
        self._validate_field(board, 'default_name', str)

        reputation = self._config['reputation']
        for key in ReputationRules.__dataclass_fields__:
            self._validate_field(reputation, key, int, -1000, 1000)

        voting = self._config['voting']
        self._validate_field(voting, 'switch_policy', str)
        if voting['switch_policy'] not in SWITCH_POLICIES:
            raise ConfigError(
                f"Field switch_policy must be one of {', '.join(SWITCH_POLICIES)}, "
                f"got {voting['switch_policy']}"
            )

        logging = self._config['logging']
        self._validate_field(logging, 'level', str)
        self._validate_field(logging, 'log_path', str)
        self._validate_field(logging, 'format', str)

    def _validate_field(self, section: Dict[str, Any], field: str,
                       expected_type: type, min_val: Optional[int] = None,
                       max_val: Optional[int] = None) -> None:
        """Validate a configuration field.

        Args:
            section: Configuration section dictionary
            field: Field name to validate
            expected_type: Expected type of the field
            min_val: Optional minimum value for numeric fields
            max_val: Optional maximum value for numeric fields

        Raises:
            ConfigError: If validation fails
        """
        if field not in section:
            raise ConfigError(f"Missing required field: {field}")

        value = section[field]

        # bool is an int subclass; a point value of True is a typo, not a number
        if not isinstance(value, expected_type) or (expected_type is int and isinstance(value, bool)):
            raise ConfigError(
                f"Field {field} must be of type {expected_type.__name__}, "
                f"got {type(value).__name__}"
            )

        if expected_type in (int, float) and min_val is not None and value < min_val:
            raise ConfigError(f"Field {field} must be >= {min_val}, got {value}")

        if expected_type in (int, float) and max_val is not None and value > max_val:
            raise ConfigError(f"Field {field} must be <= {max_val}, got {value}")

    def save_config(self) -> None:
        """Save current configuration to file."""
        self.config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(self.config_path, 'w', encoding='utf-8') as f:
            yaml.dump(self._config, f, default_flow_style=False, sort_keys=False)

    def get_config(self, section: str, key: Optional[str] = None) -> Any:
        """Get configuration value.

        Args:
            section: Configuration section name
            key: Optional key within section. If None, returns entire section.

        Returns:
            Configuration value

        Raises:
            KeyError: If section or key doesn't exist
        """
        if section not in self._config:
            raise KeyError(f"Configuration section not found: {section}")

        if key is None:
            return self._config[section]

        if key not in self._config[section]:
            raise KeyError(f"Configuration key not found: {section}.{key}")

        return self._config[section][key]

    def set_config(self, section: str, key: str, value: Any) -> None:
        """Set configuration value.

        Args:
            section: Configuration section name
            key: Key within section
            value: Value to set

        Raises:
            KeyError: If section doesn't exist
        """
        if section not in self._config:
            raise KeyError(f"Configuration section not found: {section}")

        self._config[section][key] = value

    def get_board_config(self) -> BoardConfig:
        """Get board configuration as dataclass."""
        return BoardConfig(**self._config['board'])

    def get_reputation_rules(self) -> ReputationRules:
        """Get reputation rules as dataclass."""
        return ReputationRules(**self._config['reputation'])

    def get_voting_config(self) -> VotingConfig:
        """Get voting configuration as dataclass."""
        return VotingConfig(**self._config['voting'])

    def get_logging_config(self) -> LoggingConfig:
        """Get logging configuration as dataclass."""
        return LoggingConfig(**self._config['logging'])

    def expand_path(self, path: str) -> Path:
        """Expand user home directory and environment variables in path.

        Args:
            path: Path string potentially containing ~ or environment variables

        Returns:
            Expanded Path object
        """
        return Path(os.path.expanduser(os.path.expandvars(path)))


# Global configuration manager instance
_config_manager: Optional[ConfigManager] = None


def get_config_manager(config_path: Optional[Path] = None) -> ConfigManager:
    """Get or create global configuration manager instance.

    Args:
        config_path: Optional custom path to configuration file

    Returns:
        ConfigManager instance
    """
    global _config_manager

    if _config_manager is None:
        _config_manager = ConfigManager(config_path)

    return _config_manager
