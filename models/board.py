"""
Board: the aggregate root of the Q&A model.

A board creates its users and keeps the authoritative, creation-ordered
registry of every question and answer posted through them.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Set, Tuple

from config.config_manager import ConfigManager, ReputationRules, SWITCH_POLICIES
from logic.reputation import ReputationCalculator
from models.answer import Answer
from models.question import Question
from models.user import User


logger = logging.getLogger(__name__)


class Board:
    """
    A question-and-answer space.

    Responsibilities:
    - Create users bound to this board
    - Register questions and answers exactly once, in creation order
    - Expose read-only views of users, questions and answers
    - Carry the reputation rules and vote switch policy for its users
    """

    def __init__(
        self,
        name: str,
        reputation_rules: Optional[ReputationRules] = None,
        switch_policy: str = "move"
    ):
        """
        Initialize a Board.

        Args:
            name: Board label
            reputation_rules: Points per vote/acceptance (defaults to 5/10/-1/15)
            switch_policy: "move" to let users change their vote direction,
                "reject" to refuse it

        Raises:
            ValueError: If switch_policy is unknown
        """
        if switch_policy not in SWITCH_POLICIES:
            raise ValueError(
                f"switch_policy must be one of {', '.join(SWITCH_POLICIES)}, got {switch_policy!r}"
            )

        self._name = name
        self.switch_policy = switch_policy
        self.reputation_calculator = ReputationCalculator(reputation_rules)

        self._users: List[User] = []
        self._questions: List[Question] = []
        self._answers: List[Answer] = []
        self._registered_ids: Set[str] = set()

    @classmethod
    def from_config(cls, config_manager: ConfigManager, name: Optional[str] = None) -> "Board":
        """
        Create a board using configured reputation rules and voting policy.

        Args:
            config_manager: Loaded configuration
            name: Board label; defaults to board.default_name

        Returns:
            Board: Configured board
        """
        board_name = name or config_manager.get_board_config().default_name
        return cls(
            board_name,
            reputation_rules=config_manager.get_reputation_rules(),
            switch_policy=config_manager.get_voting_config().switch_policy,
        )

    @property
    def name(self) -> str:
        return self._name

    def create_user(self, name: str) -> User:
        """
        Create a user bound to this board. Duplicate names are allowed.

        Args:
            name: Display name

        Returns:
            User: New user
        """
        user = User(self, name)
        self._users.append(user)
        logger.info(f"Created user '{name}' on board '{self._name}'")
        return user

    def add_question(self, question: Question) -> None:
        """Register a question. Called by User.ask_question()."""
        if self._register(question.id):
            self._questions.append(question)

    def add_answer(self, answer: Answer) -> None:
        """Register an answer. Called by User.answer_question()."""
        if self._register(answer.id):
            self._answers.append(answer)

    def _register(self, post_id: str) -> bool:
        if post_id in self._registered_ids:
            logger.debug(f"Post {post_id[:8]} already registered on '{self._name}'")
            return False
        self._registered_ids.add(post_id)
        return True

    def get_users(self) -> Tuple[User, ...]:
        return tuple(self._users)

    def get_questions(self) -> Tuple[Question, ...]:
        return tuple(self._questions)

    def get_answers(self) -> Tuple[Answer, ...]:
        return tuple(self._answers)

    def __repr__(self):
        return (
            f"<Board(name={self._name}, users={len(self._users)}, "
            f"questions={len(self._questions)}, answers={len(self._answers)})>"
        )
