"""
Question posted on a board.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING, List, Tuple

from models.post import VoteTally, new_id

if TYPE_CHECKING:
    from models.answer import Answer
    from models.user import User


class Question:
    """
    A question asked by a user.

    Holds the question text, its vote tally, and the answers submitted to it
    in submission order. Author and text never change after creation.
    """

    def __init__(self, author: User, text: str):
        self.id = new_id()
        self.created_at = datetime.now(timezone.utc)
        self._author = author
        self._text = text
        self._votes = VoteTally()
        self._answers: List[Answer] = []

    @property
    def author(self) -> User:
        return self._author

    @property
    def text(self) -> str:
        return self._text

    @property
    def votes(self) -> VoteTally:
        return self._votes

    @property
    def up_votes(self) -> int:
        return self._votes.up_votes

    @property
    def down_votes(self) -> int:
        return self._votes.down_votes

    def add_up_voter(self, voter: User) -> bool:
        return self._votes.add_up_voter(voter)

    def add_down_voter(self, voter: User) -> bool:
        return self._votes.add_down_voter(voter)

    def add_answer(self, answer: Answer) -> None:
        """Attach an answer; called when the answer is created."""
        if answer not in self._answers:
            self._answers.append(answer)

    def get_answers(self) -> Tuple[Answer, ...]:
        return tuple(self._answers)

    def accepted_answers(self) -> Tuple[Answer, ...]:
        """Answers the author has accepted; more than one is allowed."""
        return tuple(answer for answer in self._answers if answer.is_accepted())

    def __str__(self):
        return self._text

    def __repr__(self):
        return f"<Question(id={self.id[:8]}, author={self._author.name})>"
