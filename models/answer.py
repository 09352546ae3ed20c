"""
Answer submitted to a question.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING

from models.post import VoteTally, new_id

if TYPE_CHECKING:
    from models.question import Question
    from models.user import User


class Answer:
    """
    An answer to a specific question.

    The answer registers itself with its question on creation. The accepted
    flag starts out False and can only ever be switched on.
    """

    def __init__(self, question: Question, author: User, text: str):
        self.id = new_id()
        self.created_at = datetime.now(timezone.utc)
        self._question = question
        self._author = author
        self._text = text
        self._votes = VoteTally()
        self._accepted = False
        question.add_answer(self)

    @property
    def question(self) -> Question:
        return self._question

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

    def is_accepted(self) -> bool:
        return self._accepted

    def mark_accepted(self) -> bool:
        """
        Flag this answer as accepted.

        Permission is checked by User.accept_answer, not here.

        Returns:
            True if the flag changed, False if it was already set
        """
        if self._accepted:
            return False
        self._accepted = True
        return True

    def __str__(self):
        return self._text

    def __repr__(self):
        return (
            f"<Answer(id={self.id[:8]}, author={self._author.name}, "
            f"accepted={self._accepted})>"
        )
