"""
Core module for the Overboard Q&A Board.

This module contains the cross-cutting functionality:
- Rule-violation exception hierarchy
- Centralized error handling and logging
"""

__version__ = "0.1.0"

from core.error_handler import (
    ErrorCategory,
    ErrorSeverity,
    ErrorContext,
    ErrorHandler,
    OverboardError,
    VotingError,
    AnswerAcceptanceError,
    ConfigError,
    get_error_handler,
    set_error_handler,
)

__all__ = [
    'ErrorCategory',
    'ErrorSeverity',
    'ErrorContext',
    'ErrorHandler',
    'OverboardError',
    'VotingError',
    'AnswerAcceptanceError',
    'ConfigError',
    'get_error_handler',
    'set_error_handler',
]
