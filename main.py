"""Overboard Application Entry Point.

Command-line entry point for the Overboard Q&A board. It loads
configuration, sets up logging, replays a short question-and-answer
session on a fresh board and prints each user's reputation.
"""

import sys
import argparse
import logging
from pathlib import Path
from typing import Dict, List, Optional

from config.config_manager import ConfigManager
from core.error_handler import ErrorHandler, OverboardError, get_error_handler
from models.board import Board


def setup_logging(log_level: str, log_path: Optional[Path] = None,
                  log_format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'):
    """
    Configure application logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_path: Optional path to log file; console only when None
        log_format: Log record format
    """
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_path:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding='utf-8'))

    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.INFO),
        format=log_format,
        handlers=handlers,
        force=True
    )

    logger = logging.getLogger(__name__)
    logger.info(f"Logging initialized at level {log_level}")
    if log_path:
        logger.info(f"Log file: {log_path}")


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        description='Overboard - Question and Answer Board',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Replay the demo session with bundled settings
  python main.py

  # Use a custom board name and verbose logging
  python main.py --board "Python Help" --log-level DEBUG

  # Specify custom config file
  python main.py --config /path/to/settings.yaml
        """
    )

    parser.add_argument(
        '--config',
        type=str,
        default=None,
        metavar='PATH',
        help='Path to configuration file'
    )

    parser.add_argument(
        '--board',
        type=str,
        default=None,
        metavar='NAME',
        help='Board name (default: from config)'
    )

    parser.add_argument(
        '--log-level',
        type=str,
        default=None,
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        help='Override logging level from config'
    )

    return parser.parse_args(argv)


def run_demo_session(board: Board, error_handler: ErrorHandler) -> Dict[str, int]:
    """
    Replay a short session on the board.

    Anelle asks a question, Sally answers it, they vote on each other's
    posts, Anelle accepts the answer and finally tries to up-vote her own
    question, which the error handler reports.

    Returns:
        Reputation per user name
    """
    questioner = board.create_user("Anelle")
    answerer = board.create_user("Sally")

    question = questioner.ask_question("What is a unit?")
    answer = answerer.answer_question(
        question,
        "A unit is a portion of code that does exactly one task, "
        "so it's the smallest testable part of an application."
    )

    answerer.up_vote(question)
    questioner.up_vote(answer)
    questioner.accept_answer(answer)

    try:
        questioner.up_vote(question)
    except OverboardError as e:
        error_handler.handle_error(e, "up_vote", user_name=questioner.name, board_name=board.name)

    return {user.name: user.get_reputation() for user in board.get_users()}


def print_summary(board: Board, reputations: Dict[str, int]) -> None:
    """Print the reputation table for a board."""
    print(f"Board: {board.name}")
    print(f"  Questions: {len(board.get_questions())}")
    print(f"  Answers: {len(board.get_answers())}")
    for name, reputation in reputations.items():
        print(f"  {name}: {reputation}")


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main application entry point.

    Returns:
        Process exit code
    """
    args = parse_arguments(argv)

    config_path = Path(args.config) if args.config else None

    try:
        config_manager = ConfigManager(config_path)
    except OverboardError as e:
        setup_logging('ERROR')
        get_error_handler().handle_error(e, "load configuration")
        return 1

    logging_config = config_manager.get_logging_config()

    if args.log_level:
        logging_config.level = args.log_level

    log_path = config_manager.expand_path(logging_config.log_path) if logging_config.log_path else None
    setup_logging(logging_config.level, log_path, logging_config.format)

    logger = logging.getLogger(__name__)
    logger.info("Overboard session starting")

    board = Board.from_config(config_manager, args.board)
    reputations = run_demo_session(board, get_error_handler())
    print_summary(board, reputations)

    logger.info("Overboard session complete")
    return 0


if __name__ == '__main__':
    sys.exit(main())
