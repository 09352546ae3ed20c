"""Configuration management module for the Overboard Q&A Board."""

from .config_manager import (
    ConfigManager,
    get_config_manager,
    BoardConfig,
    ReputationRules,
    VotingConfig,
    LoggingConfig,
)

__all__ = [
    'ConfigManager',
    'get_config_manager',
    'BoardConfig',
    'ReputationRules',
    'VotingConfig',
    'LoggingConfig',
]
