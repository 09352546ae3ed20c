"""
Tests for the error hierarchy and ErrorHandler.
"""

import logging
from unittest.mock import Mock

import pytest

from core.error_handler import (
    AnswerAcceptanceError,
    ConfigError,
    ErrorCategory,
    ErrorHandler,
    ErrorSeverity,
    OverboardError,
    VotingError,
    get_error_handler,
    set_error_handler,
)
from models.board import Board


@pytest.fixture
def error_handler():
    """Create a fresh ErrorHandler."""
    return ErrorHandler()


class TestExceptions:
    """Tests for the exception classes."""

    def test_categories(self):
        assert VotingError("x").category == ErrorCategory.VOTING
        assert AnswerAcceptanceError("x").category == ErrorCategory.ACCEPTANCE
        assert ConfigError("x").category == ErrorCategory.CONFIG

    def test_hierarchy(self):
        assert issubclass(VotingError, OverboardError)
        assert issubclass(AnswerAcceptanceError, OverboardError)
        assert issubclass(ConfigError, ValueError)


class TestErrorHandler:
    """Tests for ErrorHandler."""

    def test_handle_voting_error(self, error_handler, caplog):
        """Test a self-vote is reported as a warning with its own message."""
        board = Board("Unit Testing")
        user = board.create_user("Anelle")
        question = user.ask_question("What is a unit?")

        with caplog.at_level(logging.WARNING, logger="core.error_handler"):
            try:
                user.up_vote(question)
            except VotingError as e:
                context = error_handler.handle_error(
                    e, "up_vote", user_name=user.name, board_name=board.name
                )

        assert context.category == ErrorCategory.VOTING
        assert context.severity == ErrorSeverity.WARNING
        assert context.user_message == "You cannot vote for yourself!"
        assert "user=Anelle" in caplog.text
        assert error_handler.get_error_count() == 1

    def test_handle_acceptance_error(self, error_handler):
        """Test acceptance errors keep the rightful acceptor's name."""
        error = AnswerAcceptanceError(
            "Only Anelle can accept this answer as it is their question"
        )

        context = error_handler.handle_error(error, "accept_answer")

        assert context.category == ErrorCategory.ACCEPTANCE
        assert "Anelle" in context.user_message

    def test_config_error_is_critical(self, error_handler):
        context = error_handler.handle_error(ConfigError("bad"), "load configuration")

        assert context.severity == ErrorSeverity.CRITICAL
        assert context.user_message == "Invalid configuration: bad"

    def test_categorize_foreign_error(self, error_handler):
        """Test errors from outside the hierarchy are categorized by message."""
        context = error_handler.handle_error(RuntimeError("vote failed"), "up_vote")
        assert context.category == ErrorCategory.VOTING

        context = error_handler.handle_error(KeyError("missing"), "lookup")
        assert context.category == ErrorCategory.UNKNOWN
        assert context.severity == ErrorSeverity.ERROR
        assert context.user_message == "An error occurred during lookup. Please try again."

    def test_notification_callback(self, error_handler):
        """Test the notification callback receives title, message and severity."""
        callback = Mock()
        error_handler.set_notification_callback(callback)

        error_handler.handle_error(VotingError("You cannot vote for yourself!"), "down_vote")

        callback.assert_called_once_with(
            "Vote Rejected", "You cannot vote for yourself!", ErrorSeverity.WARNING
        )

    def test_notification_suppressed(self, error_handler):
        callback = Mock()
        error_handler.set_notification_callback(callback)

        error_handler.handle_error(VotingError("x"), "up_vote", show_notification=False)

        callback.assert_not_called()

    def test_failing_callback_is_logged(self, error_handler, caplog):
        """Test a broken callback does not break error handling."""
        error_handler.set_notification_callback(Mock(side_effect=RuntimeError("boom")))

        with caplog.at_level(logging.ERROR, logger="core.error_handler"):
            error_handler.handle_error(VotingError("x"), "up_vote")

        assert "Failed to show notification" in caplog.text

    def test_reset_error_count(self, error_handler):
        error_handler.handle_error(VotingError("x"), "up_vote")
        error_handler.reset_error_count()

        assert error_handler.get_error_count() == 0

    def test_global_handler(self):
        """Test the global handler can be replaced."""
        original = get_error_handler()
        replacement = ErrorHandler()
        try:
            set_error_handler(replacement)
            assert get_error_handler() is replacement
        finally:
            set_error_handler(original)
