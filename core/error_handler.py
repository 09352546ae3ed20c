"""
Error Handler for the Overboard Q&A Board

Defines the rule-violation exception hierarchy and provides centralized
handling with categorization, logging, and user-friendly notifications.
"""

import logging
import traceback
from enum import Enum
from typing import Optional, Callable
from dataclasses import dataclass


logger = logging.getLogger(__name__)


class ErrorCategory(Enum):
    """Error categories for classification."""
    VOTING = "voting"
    ACCEPTANCE = "acceptance"
    CONFIG = "config"
    UNKNOWN = "unknown"


class ErrorSeverity(Enum):
    """Error severity levels."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


@dataclass
class ErrorContext:
    """Context information for an error."""
    category: ErrorCategory
    severity: ErrorSeverity
    operation: str
    user_message: str
    technical_details: str
    user_name: Optional[str] = None
    board_name: Optional[str] = None


# Custom Exception Classes

class OverboardError(Exception):
    """Base exception for Overboard errors."""

    def __init__(self, message: str, category: ErrorCategory = ErrorCategory.UNKNOWN):
        super().__init__(message)
        self.category = category


class VotingError(OverboardError):
    """A user voted on their own post or switched a vote where that is not allowed."""

    def __init__(self, message: str):
        super().__init__(message, ErrorCategory.VOTING)


class AnswerAcceptanceError(OverboardError):
    """Someone other than the question's author tried to accept an answer."""

    def __init__(self, message: str):
        super().__init__(message, ErrorCategory.ACCEPTANCE)


class ConfigError(OverboardError, ValueError):
    """Configuration is missing or invalid."""

    def __init__(self, message: str):
        super().__init__(message, ErrorCategory.CONFIG)


class ErrorHandler:
    """
    Global error handler for the Overboard application.

    Provides centralized error handling with:
    - Error categorization (voting, acceptance, config)
    - Severity classification
    - User-friendly error messages
    - Detailed logging for debugging
    - Notification callback for embedding applications

    Usage:
        error_handler = ErrorHandler()
        error_handler.set_notification_callback(print_notice)

        try:
            user.up_vote(post)
        except OverboardError as e:
            error_handler.handle_error(e, "up_vote", user_name=user.name)
    """

    def __init__(self):
        """Initialize error handler."""
        self._notification_callback: Optional[Callable] = None
        self._error_count = 0

    def set_notification_callback(self, callback: Callable):
        """
        Set callback for displaying notifications to user.

        Args:
            callback: Function(title: str, content: str, severity: ErrorSeverity)
        """
        self._notification_callback = callback

    def handle_error(
        self,
        error: Exception,
        context: str,
        user_name: Optional[str] = None,
        board_name: Optional[str] = None,
        show_notification: bool = True
    ) -> ErrorContext:
        """
        Handle an error with appropriate categorization and response.

        Args:
            error: The exception that occurred
            context: Description of the operation that failed
            user_name: Optional name of the acting user
            board_name: Optional name of the board involved
            show_notification: Whether to notify the callback (default: True)

        Returns:
            ErrorContext with categorized error information
        """
        self._error_count += 1

        if isinstance(error, OverboardError):
            category = error.category
        else:
            category = self._categorize_error(error)

        severity = self._determine_severity(error, category)
        user_message = self._generate_user_message(error, category, context)
        technical_details = self._get_technical_details(error)

        error_context = ErrorContext(
            category=category,
            severity=severity,
            operation=context,
            user_message=user_message,
            technical_details=technical_details,
            user_name=user_name,
            board_name=board_name
        )

        self._log_error(error_context)

        if show_notification and self._notification_callback:
            self._show_notification(error_context)

        return error_context

    def _categorize_error(self, error: Exception) -> ErrorCategory:
        """
        Categorize a foreign error based on its type and message.

        Args:
            error: The exception to categorize

        Returns:
            ErrorCategory
        """
        error_type = type(error).__name__.lower()
        error_msg = str(error).lower()

        if any(keyword in error_type or keyword in error_msg for keyword in [
            'vote', 'voting'
        ]):
            return ErrorCategory.VOTING

        if any(keyword in error_type or keyword in error_msg for keyword in [
            'accept'
        ]):
            return ErrorCategory.ACCEPTANCE

        if any(keyword in error_type or keyword in error_msg for keyword in [
            'config', 'yaml', 'setting'
        ]):
            return ErrorCategory.CONFIG

        return ErrorCategory.UNKNOWN

    def _determine_severity(
        self,
        error: Exception,
        category: ErrorCategory
    ) -> ErrorSeverity:
        """
        Determine the severity of an error.

        Business rule violations are warnings: the model is unchanged and the
        caller may carry on. Broken configuration stops the application.
        """
        if category in (ErrorCategory.VOTING, ErrorCategory.ACCEPTANCE):
            return ErrorSeverity.WARNING

        if category == ErrorCategory.CONFIG:
            return ErrorSeverity.CRITICAL

        return ErrorSeverity.ERROR

    def _generate_user_message(
        self,
        error: Exception,
        category: ErrorCategory,
        context: str
    ) -> str:
        """
        Generate a user-friendly error message.

        Rule violations already carry a readable message, so it is passed
        through unchanged.
        """
        if category in (ErrorCategory.VOTING, ErrorCategory.ACCEPTANCE):
            return str(error)
        elif category == ErrorCategory.CONFIG:
            return f"Invalid configuration: {error}"
        else:
            return f"An error occurred during {context}. Please try again."

    def _get_technical_details(self, error: Exception) -> str:
        """Get technical details for logging."""
        details = [
            f"Exception Type: {type(error).__name__}",
            f"Message: {str(error)}",
            f"Traceback:",
            "".join(traceback.format_exception(type(error), error, error.__traceback__))
        ]
        return "\n".join(details)

    def _log_error(self, error_context: ErrorContext):
        """
        Log error with appropriate level.

        Args:
            error_context: Error context information
        """
        log_message = (
            f"[{error_context.category.value.upper()}] "
            f"{error_context.operation}: {error_context.user_message}"
        )

        extra_info = []
        if error_context.user_name:
            extra_info.append(f"user={error_context.user_name}")
        if error_context.board_name:
            extra_info.append(f"board={error_context.board_name}")

        if extra_info:
            log_message += f" ({', '.join(extra_info)})"

        if error_context.severity == ErrorSeverity.CRITICAL:
            logger.critical(log_message)
            logger.critical(f"Technical details:\n{error_context.technical_details}")
        elif error_context.severity == ErrorSeverity.ERROR:
            logger.error(log_message)
            logger.debug(f"Technical details:\n{error_context.technical_details}")
        elif error_context.severity == ErrorSeverity.WARNING:
            logger.warning(log_message)
            logger.debug(f"Technical details:\n{error_context.technical_details}")
        else:
            logger.info(log_message)

    def _show_notification(self, error_context: ErrorContext):
        """Pass the error on to the notification callback."""
        if not self._notification_callback:
            return

        try:
            title_map = {
                ErrorCategory.VOTING: "Vote Rejected",
                ErrorCategory.ACCEPTANCE: "Acceptance Rejected",
                ErrorCategory.CONFIG: "Configuration Error",
                ErrorCategory.UNKNOWN: "Error"
            }

            title = title_map.get(error_context.category, "Error")

            self._notification_callback(
                title,
                error_context.user_message,
                error_context.severity
            )

        except Exception as e:
            logger.error(f"Failed to show notification: {e}")

    def get_error_count(self) -> int:
        """
        Get total number of errors handled.

        Returns:
            Error count
        """
        return self._error_count

    def reset_error_count(self):
        """Reset error counter."""
        self._error_count = 0


# Global error handler instance
_global_error_handler: Optional[ErrorHandler] = None


def get_error_handler() -> ErrorHandler:
    """
    Get the global error handler instance.

    Returns:
        Global ErrorHandler instance
    """
    global _global_error_handler
    if _global_error_handler is None:
        _global_error_handler = ErrorHandler()
    return _global_error_handler


def set_error_handler(handler: ErrorHandler):
    """
    Set the global error handler instance.

    Args:
        handler: ErrorHandler instance to use globally
    """
    global _global_error_handler
    _global_error_handler = handler
