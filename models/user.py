"""
User of a board.

Users are the only actors in the model: they ask and answer questions,
vote on posts, and accept answers to their own questions.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Tuple

from core.error_handler import AnswerAcceptanceError, VotingError
from logic.reputation import ReputationBreakdown
from models.answer import Answer
from models.post import Post, new_id
from models.question import Question

if TYPE_CHECKING:
    from models.board import Board


logger = logging.getLogger(__name__)

SELF_VOTE_MESSAGE = "You cannot vote for yourself!"
VOTE_SWITCH_MESSAGE = "You have already voted on this post"


class User:
    """
    A named member of exactly one board.

    Users compare by identity: two users with the same name on the same
    board are different users. Create them with Board.create_user().
    """

    def __init__(self, board: Board, name: str):
        self.id = new_id()
        self._board = board
        self._name = name

    @property
    def board(self) -> Board:
        return self._board

    @property
    def name(self) -> str:
        return self._name

    def ask_question(self, text: str) -> Question:
        """
        Post a new question on this user's board.

        Args:
            text: Question text (not validated)

        Returns:
            Question: The registered question
        """
        question = Question(self, text)
        self._board.add_question(question)
        logger.info(f"{self._name} asked question {question.id[:8]} on '{self._board.name}'")
        return question

    def answer_question(self, question: Question, text: str) -> Answer:
        """
        Post an answer to a question and register it on this user's board.

        Args:
            question: Question being answered
            text: Answer text (not validated)

        Returns:
            Answer: The registered answer
        """
        if question.author.board is not self._board:
            logger.warning(
                f"{self._name} is answering question {question.id[:8]} "
                f"from board '{question.author.board.name}'"
            )

        answer = Answer(question, self, text)
        self._board.add_answer(answer)
        logger.info(f"{self._name} answered question {question.id[:8]} with {answer.id[:8]}")
        return answer

    def accept_answer(self, answer: Answer) -> None:
        """
        Accept an answer to one of this user's questions.

        Accepting an already accepted answer does nothing. Several answers to
        the same question may be accepted.

        Raises:
            AnswerAcceptanceError: If this user did not ask the question
        """
        questioner = answer.question.author
        if questioner is not self:
            message = (
                f"Only {questioner.name} can accept this answer as it is their question"
            )
            logger.warning(f"{self._name} tried to accept answer {answer.id[:8]}: {message}")
            raise AnswerAcceptanceError(message)

        if answer.mark_accepted():
            logger.info(f"{self._name} accepted answer {answer.id[:8]} by {answer.author.name}")

    def up_vote(self, post: Post) -> bool:
        """
        Up-vote a question or answer.

        Returns:
            True if a new up-vote was recorded, False if it already existed

        Raises:
            VotingError: On the user's own post, or when switching a
                down-vote while the board rejects vote switching
        """
        self._check_vote(post, switching=post.votes.has_down_voted(self))
        added = post.add_up_voter(self)
        logger.debug(f"{self._name} up-voted {post.id[:8]} (new={added})")
        return added

    def down_vote(self, post: Post) -> bool:
        """
        Down-vote a question or answer.

        Returns:
            True if a new down-vote was recorded, False if it already existed

        Raises:
            VotingError: On the user's own post, or when switching an
                up-vote while the board rejects vote switching
        """
        self._check_vote(post, switching=post.votes.has_up_voted(self))
        added = post.add_down_voter(self)
        logger.debug(f"{self._name} down-voted {post.id[:8]} (new={added})")
        return added

    def _check_vote(self, post: Post, switching: bool) -> None:
        if post.author is self:
            logger.warning(f"{self._name} tried to vote on own post {post.id[:8]}")
            raise VotingError(SELF_VOTE_MESSAGE)

        if switching and self._board.switch_policy == "reject":
            logger.warning(f"{self._name} tried to switch vote on {post.id[:8]}")
            raise VotingError(VOTE_SWITCH_MESSAGE)

    def get_reputation(self) -> int:
        """Recompute reputation from every question and answer this user wrote."""
        return self._board.reputation_calculator.calculate(
            self.get_questions(), self.get_answers()
        )

    def get_reputation_breakdown(self) -> ReputationBreakdown:
        return self._board.reputation_calculator.breakdown(
            self.get_questions(), self.get_answers()
        )

    def get_questions(self) -> Tuple[Question, ...]:
        """Questions on the board authored by this user, in creation order."""
        return tuple(q for q in self._board.get_questions() if q.author is self)

    def get_answers(self) -> Tuple[Answer, ...]:
        """Answers on the board authored by this user, in creation order."""
        return tuple(a for a in self._board.get_answers() if a.author is self)

    def __repr__(self):
        return f"<User(name={self._name}, board={self._board.name})>"
